"""Phonetics pipeline: text → phonetic units → syllables."""

import logging
import os
from pathlib import Path

from shiksha.phonetics.harvard_kyoto import harvard_kyoto
from shiksha.phonetics.segment import segment
from shiksha.phonetics.syllabify import AssembledToken, assemble
from shiksha.phonetics.table import PhonemeTable
from shiksha.phonetics.transliterate import to_harvard_kyoto

logger = logging.getLogger(__name__)

TABLE_ENV = "SHIKSHA_TABLE"


def load_table(path: str | Path | None = None) -> PhonemeTable:
    """Return the phoneme table to use.

    An explicit path wins, then $SHIKSHA_TABLE, then the built-in
    Harvard-Kyoto table.
    """
    from shiksha.serialization import load_table as _load_json_table

    if path is None:
        path = os.environ.get(TABLE_ENV) or None
    if path is None:
        return harvard_kyoto()
    logger.info(f"Loading phoneme table from {path}")
    return _load_json_table(Path(path).expanduser())


def syllabify_text(
    text: str,
    table: PhonemeTable | None = None,
    scheme: str = "hk",
) -> list[AssembledToken]:
    """Segment and assemble text in one step.

    Args:
        text: Input text.
        table: Phoneme table; the built-in one if omitted.
        scheme: Input transliteration scheme; converted to Harvard-Kyoto
            first unless it already is.
    """
    if table is None:
        table = harvard_kyoto()
    return list(assemble(segment(to_harvard_kyoto(text, scheme), table)))
