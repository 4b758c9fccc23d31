"""Command-line host for the requester."""
