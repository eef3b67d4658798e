"""Word splitting module for text statistics.

Words are separated by runs of spaces and full stops only. Everything else
(digits, commas, newlines, tabs, other punctuation) belongs to the word.
"""

import re

# Any run of one or more delimiters is a single separator
DELIMITERS = " ."
WORD_SEPARATOR_PATTERN = re.compile(r"[ .]+")


class InvalidTextError(TypeError):
    """Raised when the text to analyze is not a string.

    Text may be empty, but never None.
    """

    def __init__(self, value, context: str = ""):
        self.value = value
        self.context = context
        message = f"Text must be str, got {type(value).__name__}"
        if context:
            message += f" in {context}"
        super().__init__(message)


class WordSplitter:
    """Splits text into words, keeping order and duplicates."""

    def __init__(self, pattern: re.Pattern = WORD_SEPARATOR_PATTERN):
        """
        Initialize splitter.

        Args:
            pattern: Compiled separator pattern (default: runs of ' ' and '.')
        """
        self.pattern = pattern

    def split(self, text: str) -> list[str]:
        """
        Split text into words.

        Leading delimiters produce an initial empty word, trailing
        delimiters are dropped. Empty text gives a single empty word.

        Args:
            text: Input text

        Returns:
            List of words in order of appearance

        Raises:
            InvalidTextError: If text is not a str
        """
        if not isinstance(text, str):
            raise InvalidTextError(text, "WordSplitter")

        if not text:
            return [""]

        words = self.pattern.split(text)

        # Drop trailing empty words (text ending with delimiters)
        while words and words[-1] == "":
            words.pop()

        return words


def split_words(text: str) -> list[str]:
    """
    Convenience function to split text into words.

    Args:
        text: Input text

    Returns:
        List of words

    Raises:
        InvalidTextError: If text is not a str
    """
    splitter = WordSplitter()
    return splitter.split(text)
