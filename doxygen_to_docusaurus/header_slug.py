"""Utility for generating slugs for Markdown headers."""

import re

_EXPLICIT_ID_RE = re.compile(r"\{#([\w-]+)\}\s*$")


def header_slug(title: str) -> str:
    """Return the anchor Docusaurus gives a heading.

    An explicit ``{#id}`` suffix wins; otherwise tags are dropped and runs
    of other characters collapse to single hyphens.
    """
    explicit = _EXPLICIT_ID_RE.search(title)
    if explicit:
        return explicit.group(1)
    slug = re.sub(r"<[^>]*>", "", title).strip().lower()
    slug = re.sub(r"[^\w]+", "-", slug, flags=re.ASCII)
    return slug.strip("-") or "section"
