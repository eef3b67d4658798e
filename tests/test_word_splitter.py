"""Tests for WordSplitter module."""

import re

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.word_splitter import WordSplitter, InvalidTextError, split_words


class TestDelimiters:
    """Test which characters separate words."""

    def test_spaces(self):
        """Single spaces separate words."""
        splitter = WordSplitter()
        assert splitter.split("a b a c a b d") == ["a", "b", "a", "c", "a", "b", "d"]

    def test_full_stop(self):
        """A full stop separates words even without a space."""
        splitter = WordSplitter()
        assert splitter.split("hello.world hello") == ["hello", "world", "hello"]

    def test_delimiter_runs(self):
        """Runs of mixed delimiters count as one separator."""
        splitter = WordSplitter()
        assert splitter.split("one. .  two...three") == ["one", "two", "three"]

    def test_other_punctuation_is_part_of_word(self):
        """Commas, newlines and tabs stay inside words."""
        splitter = WordSplitter()
        assert splitter.split("a,b c!") == ["a,b", "c!"]
        assert splitter.split("line\nbreak\there") == ["line\nbreak\there"]

    def test_case_preserved(self):
        """Words are not lowercased."""
        splitter = WordSplitter()
        assert splitter.split("Quid quid") == ["Quid", "quid"]

    def test_custom_pattern(self):
        """A custom separator pattern can be supplied."""
        splitter = WordSplitter(re.compile(r",+"))
        assert splitter.split("a,,b c") == ["a", "b c"]


class TestEdgeCases:
    """Test edge cases."""

    def test_empty_string(self):
        """Empty string gives one empty word."""
        splitter = WordSplitter()
        assert splitter.split("") == [""]

    def test_leading_delimiters(self):
        """Leading delimiters give an initial empty word."""
        splitter = WordSplitter()
        assert splitter.split(" a b") == ["", "a", "b"]
        assert splitter.split("..a") == ["", "a"]

    def test_trailing_delimiters(self):
        """Trailing delimiters are dropped."""
        splitter = WordSplitter()
        assert splitter.split("a b. ") == ["a", "b"]

    def test_only_delimiters(self):
        """Text made only of delimiters has no words."""
        splitter = WordSplitter()
        assert splitter.split(" . ") == []

    def test_no_delimiters(self):
        """Text without delimiters is a single word."""
        splitter = WordSplitter()
        assert splitter.split("lorem") == ["lorem"]

    def test_none_rejected(self):
        """None is not valid text."""
        splitter = WordSplitter()
        with pytest.raises(InvalidTextError):
            splitter.split(None)

    def test_bytes_rejected(self):
        """Bytes are not valid text, and the error is a TypeError."""
        with pytest.raises(TypeError, match="bytes"):
            WordSplitter().split(b"a b")


class TestConvenienceFunction:
    """Test the split_words convenience function."""

    def test_split_words(self):
        """split_words matches WordSplitter.split."""
        assert split_words("x y.z") == ["x", "y", "z"]

    def test_split_words_empty(self):
        assert split_words("") == [""]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
