"""Utility helpers for alias strings and filename candidates."""

from __future__ import annotations

import re
from typing import Iterable, List

URL_PATTERN = re.compile(r"^(?:\w+:)?//")
CSS_SUFFIX_PATTERN = re.compile(r"(?:\.min)?\.css$")


def is_url(value: str) -> bool:
    """Return True for ``scheme://...`` and protocol-relative ``//...`` values."""
    return bool(URL_PATTERN.match(value))


def strip_css_suffix(value: str) -> str:
    """Drop a trailing ``.min.css`` or ``.css``."""
    return CSS_SUFFIX_PATTERN.sub("", value)


def candidate_filenames(base: str, prefer_min: bool = True) -> List[str]:
    """Filenames to probe for ``base``, highest priority first.

    A base that already names a ``.css`` or ``.min.css`` file is tried as
    written before the suffix search.
    """
    stem = strip_css_suffix(base)
    minified = f"{stem}.min.css"
    full = f"{stem}.css"
    ordered = [base] if stem != base else []
    ordered += [minified, full] if prefer_min else [full, minified]
    ordered.append(base)
    return unique(ordered)


def unique(values: Iterable[str]) -> List[str]:
    """Collapse duplicates, keeping the first occurrence order."""
    seen = set()
    result = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result
