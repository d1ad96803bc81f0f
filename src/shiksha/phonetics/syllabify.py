"""Syllable assembly: phonetic unit tokens → syllables.

Units accumulate until a vowel arrives; the vowel closes the syllable.
An unmatched character flushes whatever is pending and passes through
unchanged. Consonants left over at the end form a final syllable of
their own.
"""

import logging
from typing import Iterable, Iterator, Union

from shiksha.types import PhoneticUnit, Syllable, Token, UnmatchedCharacter

logger = logging.getLogger(__name__)

AssembledToken = Union[Syllable, UnmatchedCharacter]


def assemble(tokens: Iterable[Token]) -> Iterator[AssembledToken]:
    """Group a token stream into syllables.

    Raises:
        InconsistentSyllable: if a pending group's units disagree on
            pitch, note or duration. Nothing is coerced.
    """
    pending: list[PhoneticUnit] = []

    for token in tokens:
        if isinstance(token, UnmatchedCharacter):
            if pending:
                yield Syllable(tuple(pending))
                pending = []
            yield token
            continue

        pending.append(token)
        if token.is_vowel:
            yield Syllable(tuple(pending))
            pending = []

    if pending:
        logger.debug(f"Trailing consonant cluster: {''.join(u.key for u in pending)}")
        yield Syllable(tuple(pending))


def split_syllables(tokens: Iterable[Token]) -> list[Syllable]:
    """Assemble tokens and keep only the syllables."""
    return [t for t in assemble(tokens) if isinstance(t, Syllable)]
