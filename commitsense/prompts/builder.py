"""Prompt Builder - Wrap a staged diff in the generation instruction."""

INSTRUCTION = "Write a concise commit message based on the following code changes: "


def build_prompt(diff: str) -> str:
    """Embed the raw diff after the instruction line.

    The diff is passed through untouched: no truncation, no token budgeting.
    """
    if not diff:
        raise ValueError("Cannot build a prompt from an empty diff")
    return f"{INSTRUCTION}\n{diff}"
