"""Topic grammar: "/" segment *("/" segment), with "+" and "#" wildcard segments."""

from typing import Any, List, Optional

DELIMITER = "/"
SINGLE_LEVEL = "+"
MULTI_LEVEL = "#"
WILDCARDS = (SINGLE_LEVEL, MULTI_LEVEL)


def split_topic(topic: str) -> List[str]:
    """Strip the leading delimiter and return the segments. Does not validate."""
    return topic[len(DELIMITER):].split(DELIMITER)


def validate(pattern: Any, max_levels: Optional[int] = None) -> bool:
    """
    Return True if pattern is a well-formed subscription filter.

    Every segment must be non-empty; "+" and "#" may only appear as a whole
    segment; "#" may appear once and only as the last segment.
    """
    if not isinstance(pattern, str) or not pattern.startswith(DELIMITER):
        return False
    segments = split_topic(pattern)
    if max_levels is not None and len(segments) > max_levels:
        return False
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if not segment:
            return False
        if segment in WILDCARDS:
            if segment == MULTI_LEVEL and index != last:
                return False
            continue
        if SINGLE_LEVEL in segment or MULTI_LEVEL in segment:
            return False
    return True


def validate_topic(topic: Any, max_levels: Optional[int] = None) -> bool:
    """Return True if topic is valid for publishing: a filter with no wildcard segments."""
    if not validate(topic, max_levels):
        return False
    return not any(segment in WILDCARDS for segment in split_topic(topic))
