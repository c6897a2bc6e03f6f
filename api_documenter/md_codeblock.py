"""Utility for generating Markdown code blocks and spans."""

import re

_BACKTICK_RUN_RE = re.compile(r"`+")


def _longest_backtick_run(code: str) -> int:
    return max((len(m) for m in _BACKTICK_RUN_RE.findall(code)), default=0)


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced code block whose fence outlasts any backticks inside."""
    fence = "`" * max(3, _longest_backtick_run(code) + 1)
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"


def md_code_span(code: str) -> str:
    """Generate an inline code span."""
    ticks = "`" * (_longest_backtick_run(code) + 1)
    pad = " " if code.startswith("`") or code.endswith("`") else ""
    return f"{ticks}{pad}{code}{pad}{ticks}"
