"""Fuzzy feature-name matching.

Feature names arrive in every spelling imaginable ("user-management",
"User Management", "user_management"). Matching normalizes both sides and
then accepts an exact match, or a containment match whose character
similarity clears SIMILARITY_THRESHOLD.
"""

from __future__ import annotations

from typing import Iterable

SIMILARITY_THRESHOLD = 80.0


def normalize_feature(feature: str) -> str:
    """Lowercase, trim, and turn '_' / '-' separators into spaces."""
    return feature.replace("_", " ").replace("-", " ").strip().lower()


def normalize_features(features: Iterable[str]) -> list[str]:
    return [normalize_feature(f) for f in features]


def _similar_chars(first: str, second: str) -> int:
    """Count matching characters the classic way.

    Find the longest common substring (the first one wins on ties), then
    recurse into the pieces left and right of it.
    """
    if not first or not second:
        return 0

    best = 0
    pos1 = pos2 = 0
    for i in range(len(first)):
        for j in range(len(second)):
            k = 0
            while i + k < len(first) and j + k < len(second) and first[i + k] == second[j + k]:
                k += 1
            if k > best:
                best, pos1, pos2 = k, i, j

    if best == 0:
        return 0

    total = best
    if pos1 and pos2:
        total += _similar_chars(first[:pos1], second[:pos2])
    if pos1 + best < len(first) and pos2 + best < len(second):
        total += _similar_chars(first[pos1 + best:], second[pos2 + best:])
    return total


def similar_text_percent(first: str, second: str) -> float:
    """Similarity as a percentage: matched chars * 2 * 100 / total length."""
    total_length = len(first) + len(second)
    if total_length == 0:
        return 0.0
    return _similar_chars(first, second) * 2 * 100 / total_length


def has_feature(target: str, features: Iterable[str]) -> bool:
    """Whether ``target`` is present in ``features`` after normalization.

    >>> has_feature("User Management", ["user-management"])
    True
    >>> has_feature("AI", ["Automation"])
    False
    """
    normalized_target = normalize_feature(target)

    for feature in features:
        normalized = normalize_feature(feature)

        if normalized == normalized_target:
            return True

        if normalized_target in normalized or normalized in normalized_target:
            if similar_text_percent(normalized, normalized_target) > SIMILARITY_THRESHOLD:
                return True

    return False
