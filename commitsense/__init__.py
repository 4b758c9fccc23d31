"""
CommitSense

Proposes a commit message from staged git changes using a text-completion API.
"""

__version__ = "0.1.0"
