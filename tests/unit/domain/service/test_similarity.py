"""Unit tests for near-duplicate title detection."""

import pytest

from devfeed.domain.service.similarity import (
    filter_near_duplicates,
    is_similar_to_existing,
    levenshtein_distance,
    similarity_ratio,
)


class TestLevenshteinDistance:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize(
        "first,second,expected",
        [
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("", "abc", 3),
            ("abc", "", 3),
            ("", "", 0),
            ("same", "same", 0),
        ],
    )
    def test_known_distances(self, first, second, expected):
        assert levenshtein_distance(first, second) == expected

    def test_case_insensitive(self):
        assert levenshtein_distance("React", "rEACT") == 0

    def test_punctuation_counts_as_characters(self):
        assert levenshtein_distance("hooks guide", "hooks guide!") == 1


class TestSimilarityRatio:
    """Tests for similarity_ratio."""

    def test_identical_strings_score_one(self):
        assert similarity_ratio("Python Tips", "python tips") == 1.0

    def test_normalized_by_longest(self):
        assert similarity_ratio("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_two_empty_strings_score_zero(self):
        assert similarity_ratio("", "") == 0.0


class TestIsSimilarToExisting:
    """Tests for is_similar_to_existing."""

    def test_case_insensitive_exact_match(self):
        assert is_similar_to_existing("React Hooks Guide", ["react hooks guide"], 0.7)

    def test_different_titles_sharing_a_prefix_are_not_similar(self):
        """Only the 'Using use' prefix is shared; the ratio stays well under 0.7."""
        candidate = "Using useEffect for Data Fetching"
        other = "Using useMemo for Performance"

        assert levenshtein_distance(candidate, other) == 17
        assert similarity_ratio(candidate, other) == pytest.approx(1 - 17 / 33)
        assert not is_similar_to_existing(candidate, [other], 0.7)

    def test_empty_existing_list_is_never_similar(self):
        assert not is_similar_to_existing(
            "Totally Unrelated Title About Cooking", [], 0.7
        )

    def test_containment_with_small_length_difference(self):
        assert is_similar_to_existing("React Hooks", ["React Hooks Guide"])
        assert is_similar_to_existing("React Hooks Guide", ["React Hooks"])

    def test_containment_needs_length_difference_below_slack(self):
        # Length difference 9: contained and close enough
        assert is_similar_to_existing("abc", ["abcdefghijkl"])
        # Length difference 10: containment no longer counts, ratio is low
        assert not is_similar_to_existing("abc", ["abcdefghijklm"])

    def test_length_slack_is_configurable(self):
        assert is_similar_to_existing("abc", ["abcdefghijklm"], length_slack=11)

    def test_ratio_at_threshold_is_similar(self):
        # Distance 2 over length 10 gives exactly 0.8
        assert is_similar_to_existing("abcdefghij", ["abcdefghXY"], 0.8)
        assert not is_similar_to_existing("abcdefghij", ["abcdefghXY"], 0.81)

    def test_matches_any_existing_entry(self):
        existing = ["Vue Composition API", "Svelte Stores", "React Hooks Guide"]

        assert is_similar_to_existing("react hooks guide", existing)

    def test_two_empty_strings_are_not_similar(self):
        """Documented edge case: an empty pair is skipped rather than blocking."""
        assert not is_similar_to_existing("", [""], 0.7)

    def test_empty_candidate_is_contained_in_short_text(self):
        assert is_similar_to_existing("", ["abc"], 0.7)
        assert is_similar_to_existing("abc", [""], 0.7)

    def test_empty_candidate_against_long_text_is_not_similar(self):
        assert not is_similar_to_existing("", ["Prefer pathlib over os.path"], 0.7)


class TestFilterNearDuplicates:
    """Tests for filter_near_duplicates."""

    def test_rejects_candidates_similar_to_existing(self):
        accepted, rejected = filter_near_duplicates(
            ["React Hooks Guide", "Rust Ownership Basics"],
            ["react hooks guide"],
            key=lambda title: title,
        )

        assert accepted == ["Rust Ownership Basics"]
        assert rejected == ["React Hooks Guide"]

    def test_rejects_duplicates_within_the_batch(self):
        """Later candidates are compared with earlier accepted ones."""
        accepted, rejected = filter_near_duplicates(
            ["React Hooks Guide", "react hooks guide!", "Vue Composition API"],
            [],
            key=lambda title: title,
        )

        assert accepted == ["React Hooks Guide", "Vue Composition API"]
        assert rejected == ["react hooks guide!"]

    def test_uses_key_and_keeps_items(self):
        candidates = [{"title": "Go Generics"}, {"title": "go generics"}]

        accepted, rejected = filter_near_duplicates(
            candidates, [], key=lambda item: item["title"]
        )

        assert accepted == [candidates[0]]
        assert rejected == [candidates[1]]
