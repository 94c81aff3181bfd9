"""
Tests for the word pool and the built-in word lists.
"""
import random

import pytest
from code_invaders.gameplay.words import WordPool, build_word_pool, unique_codes, pick_fast_speeds
from code_invaders.gameplay.languages import (
    LANGUAGE_WORDS, UnknownLanguageError, available_languages, get_words
)
from code_invaders.gameplay.constants import (
    DEFAULT_SPEED, FAST_LANE_COUNT, FAST_SPEED_MIN, FAST_SPEED_RANGE
)


class TestCatalog:
    """Tests for building the de-duplicated catalog."""

    def test_union_drops_duplicates(self):
        """Words present in both lists appear once."""
        codes = unique_codes(["if", "for", "int"], ["int", "bool"])
        assert codes == ("if", "for", "int", "bool")

    def test_case_sensitive(self):
        """'None' and 'none' are different tokens."""
        codes = unique_codes(["None"], ["none"])
        assert len(codes) == 2

    def test_pool_contains(self):
        pool = build_word_pool(["if"], ["int"], random.Random(0))
        assert "if" in pool
        assert "else" not in pool
        assert len(pool) == 2

    def test_empty_catalog_is_legal(self):
        """An empty catalog builds without error."""
        pool = build_word_pool([], [], random.Random(0))
        assert pool.is_empty
        assert pool.fast_speeds == {}


class TestFastLane:
    """Tests for the fast-lane speed assignment."""

    def test_samples_fixed_count(self):
        words = [f"word{i}" for i in range(30)]
        pool = build_word_pool(words, [], random.Random(7))
        assert len(pool.fast_speeds) == FAST_LANE_COUNT
        assert set(pool.fast_speeds) <= set(pool.codes)

    def test_small_catalog_all_fast(self):
        """A catalog smaller than the lane count puts every word in it."""
        pool = build_word_pool(["for", "while"], [], random.Random(7))
        assert set(pool.fast_speeds) == {"for", "while"}

    def test_speeds_in_range(self):
        words = [f"word{i}" for i in range(50)]
        speeds = pick_fast_speeds(words, random.Random(3), count=50)
        for speed in speeds.values():
            assert FAST_SPEED_MIN <= speed < FAST_SPEED_MIN + FAST_SPEED_RANGE

    def test_default_speed_for_others(self):
        pool = WordPool(codes=("for", "while"), fast_speeds={"for": 5.0})
        assert pool.speed_for("for") == 5.0
        assert pool.speed_for("while") == DEFAULT_SPEED

    def test_seeded_rng_is_deterministic(self):
        """Same seed, same catalog and speeds."""
        words = get_words("Java")
        pool1 = build_word_pool(words.keywords, words.primitives, random.Random(99))
        pool2 = build_word_pool(words.keywords, words.primitives, random.Random(99))
        assert pool1.codes == pool2.codes
        assert pool1.fast_speeds == pool2.fast_speeds


class TestLanguages:
    """Tests for the built-in word source."""

    def test_five_languages(self):
        assert available_languages() == ["C++", "C#", "Java", "Javascript", "Python"]

    @pytest.mark.parametrize("language", list(LANGUAGE_WORDS))
    def test_lists_not_empty(self, language):
        words = get_words(language)
        assert words.keywords
        assert words.primitives

    def test_unknown_language(self):
        with pytest.raises(UnknownLanguageError):
            get_words("COBOL")

    def test_unknown_language_is_key_error(self):
        with pytest.raises(KeyError):
            get_words("python")
