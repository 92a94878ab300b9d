# src/catai/utils/tokenizer.py
import math

from catai.config import CHARS_PER_TOKEN


class Tokenizer:
    """
    Character-based token estimate. Not a real tokenizer: roughly 3.5
    characters per token, rounded up, so the same text always gives the
    same count.
    """

    @staticmethod
    def count(text: str) -> int:
        return math.ceil(len(text) / CHARS_PER_TOKEN)


def estimate_tokens(text: str) -> int:
    return Tokenizer.count(text)
