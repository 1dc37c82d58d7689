"""Text helpers shared across layers.

User text is stored and displayed as entered. Only byte-order marks, which
sneak in from pasted files, and surrounding whitespace are removed.
"""

BOM = "\ufeff"


def strip_bom(text: str | None) -> str:
    """Remove every BOM marker from text."""
    if not text:
        return ""
    return text.replace(BOM, "")


def normalize_text(text: str | None) -> str:
    """Strip BOM markers and surrounding whitespace."""
    return strip_bom(text).strip()


def preview(text: str, limit: int = 120) -> str:
    """Collapse whitespace and truncate text for list displays."""
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 1].rstrip() + "…"
