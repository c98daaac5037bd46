"""Utility for generating Markdown tables."""


def md_cell(text: str) -> str:
    """Make a fragment safe inside a table cell (one line, no bare pipes)."""
    return " ".join(text.split()).replace("|", "&#124;")


def md_table(headers: list[str], rows: list[list[str]]) -> list[str]:
    """Generate a Markdown table as a list of lines."""
    if not rows:
        return []
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(md_cell(c) for c in r) + " |" for r in rows)
    return out
