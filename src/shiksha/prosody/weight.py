"""Syllable weight: laghu / guru / pluta classification.

Rules, first match wins:

1. Long vowel → HEAVY; prolonged vowel → EXTENDED.
2. Short vowel followed by more than one consonant before the next
   vowel (counting into the following syllables) → HEAVY.
3. Short vowel followed by anusvara or visarga → HEAVY.
4. Anything else → LIGHT.

Prolonged vowels are kept as a third class rather than collapsed into
HEAVY, so verse containing pluta counts three kaala for it.
"""

from typing import Iterable

from shiksha.types import (
    Category,
    MetricalUnit,
    PhoneticUnit,
    Syllable,
    VowelDuration,
)

_MARKS = (Category.ANUSVARA, Category.VISARGA)


def _after_vowel(syllable: Syllable, following: Iterable[Syllable]) -> list[PhoneticUnit]:
    """Units between this syllable's vowel and the next vowel.

    Vowel-less syllables (a word-final consonant flushed at a space) are
    walked through, so the count runs on into the next word.
    """
    units = list(syllable.units)
    vowel_at = next(i for i, u in enumerate(units) if u.is_vowel)
    tail = units[vowel_at + 1:]
    for syl in following:
        for unit in syl:
            if unit.is_vowel:
                return tail
            tail.append(unit)
    return tail


def classify(
    syllable: Syllable,
    following: Syllable | Iterable[Syllable] | None = None,
) -> MetricalUnit:
    """Classify syllable's weight.

    Args:
        syllable: The syllable to classify.
        following: The syllable after it, or the rest of the run in
            order. Consonants up to the next vowel close this
            syllable's vowel.
    """
    vowel = syllable.vowel
    if vowel is None:
        return MetricalUnit.LIGHT

    if vowel.duration is VowelDuration.PROLONGED:
        return MetricalUnit.EXTENDED
    if vowel.duration is VowelDuration.LONG:
        return MetricalUnit.HEAVY

    if following is None:
        following = ()
    elif isinstance(following, Syllable):
        following = (following,)

    tail = _after_vowel(syllable, following)
    if len(tail) > 1:
        return MetricalUnit.HEAVY
    if tail and tail[0].category in _MARKS:
        return MetricalUnit.HEAVY
    return MetricalUnit.LIGHT


def classify_all(syllables: list[Syllable]) -> list[MetricalUnit]:
    """Classify a run of syllables, each in the context of the rest."""
    return [classify(syl, syllables[i + 1:]) for i, syl in enumerate(syllables)]
