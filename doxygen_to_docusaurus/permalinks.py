"""Utility functions for building permalink paths and splitting member ids."""

import re

_ESCAPES = {
    "*": "2a",
    "&": "26",
    "<": "3c",
    ">": "3e",
    "(": "28",
    ")": "29",
}

MEMBER_SEPARATOR = "_1"


def sanitize_hierarchical_path(path: str) -> str:
    """Make a path URL-safe: lower case, escape ``<>&()*``, keep ``/``."""
    s = path.lower().replace(" ", "")
    for char, escape in _ESCAPES.items():
        s = s.replace(char, escape)
    return re.sub(r"[^a-z0-9/-]", "-", s)


def sanitize_anonymous_namespace(name: str) -> str:
    """Shorten Doxygen's ``anonymous_namespace{file}`` marker."""
    return name.replace("anonymous_namespace{", "anonymous{")


def member_anchor(refid: str, prefix: str) -> str:
    """Return the in-page anchor of ``refid`` once ``prefix`` is removed.

    Every leading ``_1`` separator is dropped, so ``classA_1_1methodB``
    with prefix ``classA`` gives ``methodB``.
    """
    remainder = refid[len(prefix) :]
    while remainder.startswith(MEMBER_SEPARATOR):
        remainder = remainder[len(MEMBER_SEPARATOR) :]
    return remainder


def candidate_prefixes(refid: str) -> list[str]:
    """Return every ``_1``-delimited prefix of ``refid``, longest first."""
    prefixes = []
    pos = refid.rfind(MEMBER_SEPARATOR)
    while pos > 0:
        prefixes.append(refid[:pos])
        pos = refid.rfind(MEMBER_SEPARATOR, 0, pos)
    return prefixes
