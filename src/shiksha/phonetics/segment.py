"""Segmentation: raw transliterated text → phonetic units.

Greedy longest match: at each position try the 3-, 2- and 1-character
windows in that order and take the first one the table knows. Longer
matches always win and earlier choices are never revisited. A character
that starts no match becomes an UnmatchedCharacter token.
"""

import logging
from typing import Iterator

from shiksha.phonetics.table import MAX_KEY_LENGTH, PhonemeTable
from shiksha.types import Token, UnmatchedCharacter

logger = logging.getLogger(__name__)


def match_at(text: str, pos: int, table: PhonemeTable) -> tuple[Token, int]:
    """Match the token starting at pos.

    Returns the token and the number of characters it consumed.
    """
    for length in range(MAX_KEY_LENGTH, 0, -1):
        # Windows running past the end of input are skipped
        if pos + length > len(text):
            continue
        unit = table.lookup(text[pos:pos + length])
        if unit is not None:
            return unit, length
    return UnmatchedCharacter(text[pos]), 1


def iter_tokens(text: str, table: PhonemeTable) -> Iterator[Token]:
    """Yield tokens for text, left to right."""
    pos = 0
    while pos < len(text):
        token, consumed = match_at(text, pos, table)
        if isinstance(token, UnmatchedCharacter):
            logger.debug(f"No table entry at {pos}: {token.char!r}")
        yield token
        pos += consumed


class Segmentation:
    """A restartable token sequence over one input string.

    Every iteration re-runs the segmenter, so the sequence can be walked
    any number of times and always yields the same tokens.
    """

    def __init__(self, text: str, table: PhonemeTable):
        self.text = text
        self.table = table

    def __iter__(self) -> Iterator[Token]:
        return iter_tokens(self.text, self.table)

    def __repr__(self) -> str:
        return f"Segmentation({self.text!r})"


def segment(text: str, table: PhonemeTable) -> Segmentation:
    """Segment text against table."""
    return Segmentation(text, table)
