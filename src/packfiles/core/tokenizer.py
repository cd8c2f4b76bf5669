"""
Token counting functionality for packfiles.

Tokens are approximated as words: maximal runs of characters that are neither
whitespace nor Unicode punctuation. This is a rough size measure, not a model
tokenizer, so contractions, numbers and code syntax get no special handling.
"""

import unicodedata
from functools import lru_cache

# str.isspace() accepts the information separators; they are not word breaks.
NON_BREAKING_CONTROLS = frozenset("\x1c\x1d\x1e\x1f")


@lru_cache(maxsize=4096)
def is_delimiter(char: str) -> bool:
    """Whitespace and every Unicode punctuation category (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    if char in NON_BREAKING_CONTROLS:
        return False
    return char.isspace() or unicodedata.category(char).startswith('P')


class TokenCounter:
    """
    Handles token counting for text content.

    The counter is stateless; the same text always yields the same count.
    """

    def count(self, text: str) -> int:
        """
        Count tokens in the given text.

        Args:
            text: The text to count tokens for.

        Returns:
            Number of non-empty runs between delimiters.
        """
        if not text:
            return 0

        tokens = 0
        in_token = False
        for char in text:
            if is_delimiter(char):
                in_token = False
            elif not in_token:
                tokens += 1
                in_token = True
        return tokens

