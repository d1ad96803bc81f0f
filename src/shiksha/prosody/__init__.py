"""Prosody pipeline: transliterated text → measured verse."""

import logging

from shiksha.phonetics.segment import segment
from shiksha.phonetics.syllabify import assemble
from shiksha.phonetics.table import PhonemeTable
from shiksha.types import GroupKind, MetricalGroup, Syllable

logger = logging.getLogger(__name__)


def scan_line(line: str, table: PhonemeTable) -> MetricalGroup:
    """Scan one line into a vaakya of pada groups.

    Whitespace separates words. Any other unmatched character
    (punctuation, dandas, digits) is left out of the group.

    Raises:
        InconsistentSyllable: from the assembler.
    """
    vaakya = MetricalGroup(GroupKind.VAAKYA)
    pada = MetricalGroup(GroupKind.PADA)

    for token in assemble(segment(line, table)):
        if isinstance(token, Syllable):
            pada.append(token)
            continue
        if token.char.isspace():
            if len(pada):
                vaakya.append(pada)
                pada = MetricalGroup(GroupKind.PADA)
        else:
            logger.debug(f"Skipping unmatched character {token.char!r}")

    if len(pada):
        vaakya.append(pada)
    return vaakya


def scan(text: str, table: PhonemeTable) -> MetricalGroup:
    """Scan text into a verse group, one vaakya per non-empty line.

    Weight context crosses word boundaries within a line but not line
    boundaries; measure lines separately to keep them independent.
    """
    verse = MetricalGroup(GroupKind.VERSE)
    for line in text.splitlines():
        vaakya = scan_line(line, table)
        if len(vaakya):
            verse.append(vaakya)
    logger.debug(f"Scanned {len(verse)} line(s)")
    return verse
