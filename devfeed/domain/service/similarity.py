"""Near-duplicate detection for generated titles and poll questions.

Two strings are near-duplicates when, compared case-insensitively, either

- one contains the other and their lengths differ by less than
  ``length_slack`` characters, or
- ``1 - levenshtein / max(len)`` reaches the similarity threshold.

Whitespace and punctuation are ordinary characters; no tokenization.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from rapidfuzz.distance import Levenshtein

T = TypeVar("T")

DEFAULT_THRESHOLD = 0.7
DEFAULT_LENGTH_SLACK = 10


def levenshtein_distance(first: str, second: str) -> int:
    """Case-insensitive edit distance (insert, delete, substitute all cost 1)."""
    return Levenshtein.distance(first.lower(), second.lower())


def similarity_ratio(first: str, second: str) -> float:
    """Normalized similarity in [0, 1]; two empty strings score 0."""
    longest = max(len(first.lower()), len(second.lower()))
    if longest == 0:
        return 0.0
    return 1 - levenshtein_distance(first, second) / longest


def is_similar_to_existing(
    candidate: str,
    existing: Sequence[str],
    threshold: float = DEFAULT_THRESHOLD,
    *,
    length_slack: int = DEFAULT_LENGTH_SLACK,
) -> bool:
    """Whether a candidate is a near-duplicate of any existing string.

    Args:
        candidate: New post title or poll question
        existing: Strings already present
        threshold: Minimum similarity ratio that counts as a duplicate
        length_slack: Containment only counts below this length difference

    Returns:
        True on the first existing string that matches, False otherwise
    """
    candidate_lower = candidate.lower()

    for other in existing:
        other_lower = other.lower()

        # An empty pair would be contained both ways; it never matches
        if not candidate_lower and not other_lower:
            continue

        contained = candidate_lower in other_lower or other_lower in candidate_lower
        if contained and abs(len(candidate_lower) - len(other_lower)) < length_slack:
            return True

        if similarity_ratio(candidate_lower, other_lower) >= threshold:
            return True

    return False


def filter_near_duplicates(
    candidates: Iterable[T],
    existing: Sequence[str],
    key: Callable[[T], str],
    threshold: float = DEFAULT_THRESHOLD,
    *,
    length_slack: int = DEFAULT_LENGTH_SLACK,
) -> tuple[list[T], list[T]]:
    """Split candidates into (accepted, rejected), keeping input order.

    Each candidate is compared against ``existing`` plus every candidate
    accepted before it, so a batch cannot contain two near-duplicates.
    """
    seen = list(existing)
    accepted: list[T] = []
    rejected: list[T] = []

    for candidate in candidates:
        text = key(candidate)
        if is_similar_to_existing(text, seen, threshold, length_slack=length_slack):
            rejected.append(candidate)
        else:
            accepted.append(candidate)
            seen.append(text)

    return accepted, rejected
