"""Core modules for textstats."""

from .word_splitter import WordSplitter, InvalidTextError, split_words

__all__ = ["WordSplitter", "InvalidTextError", "split_words"]
