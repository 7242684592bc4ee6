"""
Slug derivation

Turns a title into the URL-safe key posts and articles are addressed by.
"""
import re

# Anything that is neither a word character nor a plain space.
# Python's \w is Unicode-aware, so "Café" keeps its "é".
_STRIP_RE = re.compile(r"[^\w ]+")
_SPACES_RE = re.compile(r" +")


def derive_slug(title: str) -> str:
    """
    Derive a slug from a title.

    Lower-cases the title, drops every character that is not a word character
    or a space, then joins the remaining words with single hyphens.

    Examples:
    - "Hello, World!"  -> "hello-world"
    - "  Go   Fast  "  -> "go-fast"
    - "!!!"            -> ""   (callers must reject empty slugs)

    Distinct titles can collide ("Go!" and "Go" both give "go"); uniqueness
    is checked by the content manager, not here.
    """
    cleaned = _STRIP_RE.sub("", title.lower())
    return _SPACES_RE.sub("-", cleaned).strip("-")
