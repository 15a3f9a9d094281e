"""Tag name normalization."""

from typing import Iterable, Optional

MAX_TAG_LENGTH = 50


def normalize_tag(raw: Optional[str]) -> str:
    """Lower-case, trim and truncate a single tag name. May return ''."""
    if not raw:
        return ""
    return raw.strip().lower()[:MAX_TAG_LENGTH].strip()


def normalize_tags(raw_tags: Optional[Iterable[str]]) -> list[str]:
    """
    Normalize a list of tag names.

    Drops empty names and duplicates, keeping first-seen order. The result
    is a fixed point: normalize_tags(normalize_tags(x)) == normalize_tags(x).
    """
    seen: set[str] = set()
    result: list[str] = []
    for raw in raw_tags or []:
        name = normalize_tag(raw)
        if name and name not in seen:
            seen.add(name)
            result.append(name)
    return result
