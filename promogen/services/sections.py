# =============================================================================
# promogen/services/sections.py — Ordered section extraction from model text
# =============================================================================
# The model is asked to answer as
#
#     NAME_A:
#     [answer a]
#     NAME_B:
#     [answer b]
#
# Scanning walks the section list in order with a cursor. A section's content
# runs from the end of its delimiter to the next later delimiter found in the
# text, or to the end of the text. Sections whose delimiter is missing map to
# None and leave the cursor where it was.
# =============================================================================

from promogen.core.errors import ExtractionError


def _is_boundary(text: str, pos: int) -> bool:
    if pos == 0:
        return True
    prev = text[pos - 1]
    return not (prev.isalnum() or prev == "_")


def find_delimiter(text: str, name: str, start: int = 0) -> int:
    """Index of ``NAME:`` at a word boundary at or after ``start``, or -1."""
    delimiter = f"{name}:"
    pos = text.find(delimiter, start)
    while pos != -1 and not _is_boundary(text, pos):
        pos = text.find(delimiter, pos + 1)
    return pos


def strip_brackets(value: str) -> str:
    """Trim, then drop one enclosing ``[...]`` layer if present."""
    value = value.strip()
    if len(value) >= 2 and value.startswith("[") and value.endswith("]"):
        value = value[1:-1].strip()
    return value


def extract_sections(text: str, names: list[str]) -> dict[str, str | None]:
    result: dict[str, str | None] = {name: None for name in names}
    cursor = 0
    for i, name in enumerate(names):
        pos = find_delimiter(text, name, cursor)
        if pos == -1:
            continue
        content_start = pos + len(name) + 1
        content_end = len(text)
        for later in names[i + 1:]:
            nxt = find_delimiter(text, later, content_start)
            if nxt != -1 and nxt < content_end:
                content_end = nxt
        result[name] = strip_brackets(text[content_start:content_end])
        cursor = content_end
    if all(value is None for value in result.values()):
        raise ExtractionError(
            "Text generation failed, none of the sections were found: " + ", ".join(names)
        )
    return result
