"""Utility for generating Markdown tables."""


def _cell(text: str) -> str:
    # A raw pipe or newline would split the row.
    return text.replace("|", "\\|").replace("\n", "<br/>").strip()


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; no rows means no table."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(_cell(h) for h in headers) + " |",
        "|" + "|".join(" --- " for _ in headers) + "|",
    ]
    out.extend("| " + " | ".join(_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)
