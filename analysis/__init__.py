"""Analysis modules for word frequency statistics."""

from .word_frequency import (
    TextAnalyzer,
    TextStats,
    InvalidArgumentError,
    build_tally,
    word_count,
    most_frequent_words,
    frequency_percentage,
)

__all__ = [
    "TextAnalyzer",
    "TextStats",
    "InvalidArgumentError",
    "build_tally",
    "word_count",
    "most_frequent_words",
    "frequency_percentage",
]
