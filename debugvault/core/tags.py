"""Tag Parsing: turns form input and legacy stored values into a typed tag list.

Invariants:
    - Output is always list[str], stripped, non-empty, first-occurrence order, no duplicates
    - Tags are case-sensitive: "Auth" and "auth" are distinct
    - coerce_tags accepts a list, a JSON array string, a comma string or None
"""

import json


def _dedupe(tags: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for tag in tags:
        if tag and tag not in seen:
            seen.add(tag)
            result.append(tag)
    return result


def parse_tag_input(text: str) -> list[str]:
    """Split a comma-separated tag field, e.g. "auth, jwt,,api"."""
    return _dedupe([part.strip() for part in text.split(",")])


def coerce_tags(value: object) -> list[str]:
    """Normalize any stored tag representation to list[str].

    Older records serialize tags as a JSON array string; anything that is not
    a JSON array is treated as comma-separated input.
    """
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError:
                decoded = None
            if isinstance(decoded, list):
                return _dedupe([str(t).strip() for t in decoded])
        return parse_tag_input(text)
    if isinstance(value, (list, tuple, set, frozenset)):
        return _dedupe([str(t).strip() for t in value])
    raise ValueError(f"tags must be a list or string, got {type(value).__name__}")
