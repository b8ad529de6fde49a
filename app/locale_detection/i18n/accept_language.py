"""Accept-Language header parsing.

Parsing is kept separate from validation: the parser only orders the raw
language tags by preference, callers decide which of them are acceptable.
"""

from typing import List, Optional, Tuple


def _parse_weight(params: List[str]) -> Optional[float]:
    """Return the q-value from an entry's parameters, or None if malformed."""
    weight = 1.0
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            weight = float(value.strip())
        except ValueError:
            return None
        # float() accepts "nan" and "inf"; neither is a valid weight
        if not 0.0 <= weight <= 1.0:
            return None
    return weight


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into tags ordered by preference.

    "en-us,en-gb;q=0.8,en;q=0.6" -> ["en-us", "en-gb", "en"]

    Entries are ordered by descending q-value; entries with equal weight keep
    their order from the header. Entries with an empty tag or an unparseable
    weight are dropped.

    Args:
        header: Raw header value, possibly None.

    Returns:
        Raw language tags, most preferred first. Empty for a missing header.
    """
    if not header:
        return []

    weighted: List[Tuple[float, str]] = []
    for part in header.split(","):
        tag, *params = part.split(";")
        tag = tag.strip()
        if not tag:
            continue
        weight = _parse_weight(params)
        if weight is None:
            continue
        weighted.append((weight, tag))

    # sorted() is stable, so equal weights keep header order
    return [tag for _, tag in sorted(weighted, key=lambda x: x[0], reverse=True)]


def primary_tag(tag: str) -> str:
    """Return the primary language subtag (e.g., "en" from "en-US")."""
    return tag.replace("_", "-").split("-")[0].strip()
