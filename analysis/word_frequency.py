"""Word frequency analysis: counts, top words and occurrence percentages."""

from dataclasses import dataclass, asdict
from typing import Optional

from core.word_splitter import WordSplitter


class InvalidArgumentError(TypeError):
    """Raised when a numeric argument is not an int.

    Out-of-range values are not errors (n <= 0 gives [], unmatched k gives 0).
    """

    def __init__(self, name: str, value, context: str = ""):
        self.name = name
        self.value = value
        self.context = context
        message = f"'{name}' must be int, got {type(value).__name__}"
        if context:
            message += f" in {context}"
        super().__init__(message)


def _require_int(name: str, value, context: str) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, value, context)
    return value


def build_tally(words: list[str]) -> dict[str, int]:
    """
    Count occurrences of each word.

    Keys keep first-seen order, which is what ties are broken on.

    Args:
        words: Words in order of appearance (duplicates included)

    Returns:
        Dict mapping word -> count (every count >= 1, counts sum to len(words))
    """
    counts = {}
    for word in words:
        counts[word] = counts.get(word, 0) + 1
    return counts


@dataclass(frozen=True)
class TextStats:
    """Answers to the three questions for one text."""
    word_count: int
    distinct_count: int
    top_words: list[str]
    occurrences: int
    percentage: int

    def to_dict(self) -> dict:
        return asdict(self)


class TextAnalyzer:
    """Answers word statistics questions about a text.

    Holds no state between calls: every query splits and counts again.
    """

    def __init__(self, splitter: Optional[WordSplitter] = None):
        """
        Initialize analyzer.

        Args:
            splitter: Word splitter to use (default: spaces and full stops)
        """
        self.splitter = splitter or WordSplitter()

    def tally(self, text: str) -> dict[str, int]:
        """Split text and count its words."""
        return build_tally(self.splitter.split(text))

    def word_count(self, text: str) -> int:
        """
        Count words in text, duplicates included.

        Empty text counts as one (empty) word.
        """
        return len(self.splitter.split(text))

    def distinct_count(self, text: str) -> int:
        """Count distinct words in text."""
        return len(self.tally(text))

    def most_frequent_words(self, n: int, text: str) -> list[str]:
        """
        Get the n most frequent words.

        Sorted by count, highest first. Words with equal counts keep the
        order in which they first appear in text.

        Args:
            n: Number of words to return (<= 0 returns [])
            text: Input text

        Returns:
            Up to n distinct words
        """
        n = _require_int("n", n, "most_frequent_words")
        counts = self.tally(text)
        if n <= 0:
            return []

        # sorted() is stable, so first-seen order survives among equal counts
        ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)
        return [word for word, _ in ranked[:n]]

    def frequency_percentage(self, k: int, text: str) -> int:
        """
        Get the percentage of distinct words that occur exactly k times.

        Truncated to an int, so 82.4% is 82.

        Args:
            k: Required number of occurrences
            text: Input text

        Returns:
            Percentage in range 0-100
        """
        k = _require_int("k", k, "frequency_percentage")
        counts = self.tally(text)

        # Text made only of delimiters has no words at all
        if not counts:
            return 0

        matching = sum(1 for count in counts.values() if count == k)
        return matching * 100 // len(counts)

    def summarize(self, text: str, top_n: int = 6, occurrences: int = 1) -> TextStats:
        """
        Answer all three questions at once.

        Args:
            text: Input text
            top_n: How many most frequent words to list
            occurrences: Occurrence count for the percentage

        Returns:
            TextStats for text
        """
        return TextStats(
            word_count=self.word_count(text),
            distinct_count=self.distinct_count(text),
            top_words=self.most_frequent_words(top_n, text),
            occurrences=occurrences,
            percentage=self.frequency_percentage(occurrences, text),
        )


def word_count(text: str) -> int:
    """Convenience function to count words in text."""
    return TextAnalyzer().word_count(text)


def most_frequent_words(n: int, text: str) -> list[str]:
    """Convenience function to get the n most frequent words in text."""
    return TextAnalyzer().most_frequent_words(n, text)


def frequency_percentage(k: int, text: str) -> int:
    """Convenience function to get the percentage of words occurring k times."""
    return TextAnalyzer().frequency_percentage(k, text)
