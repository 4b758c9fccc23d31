"""Prompt Building Package"""

from commitsense.prompts.builder import INSTRUCTION, build_prompt

__all__ = ["INSTRUCTION", "build_prompt"]
