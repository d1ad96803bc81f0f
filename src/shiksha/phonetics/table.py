"""Read-only phoneme table: transliteration key → PhoneticUnit."""

from types import MappingProxyType
from typing import Iterable, Iterator

from shiksha.types import PhoneticUnit

# Longest key the segmenter ever tries
MAX_KEY_LENGTH = 3


class PhonemeTable:
    """Exact-match, case-sensitive lookup of phonetic units.

    Built once from an iterable of units and never mutated afterwards,
    so one table can be shared between threads without locking.
    """

    def __init__(self, units: Iterable[PhoneticUnit]):
        entries: dict[str, PhoneticUnit] = {}
        for unit in units:
            if not unit.key:
                raise ValueError("phoneme table keys must not be empty")
            if len(unit.key) > MAX_KEY_LENGTH:
                raise ValueError(
                    f"key '{unit.key}' is longer than {MAX_KEY_LENGTH} characters"
                )
            if unit.key in entries:
                raise ValueError(f"duplicate phoneme table key '{unit.key}'")
            entries[unit.key] = unit
        self._entries = MappingProxyType(entries)

    def lookup(self, key: str) -> PhoneticUnit | None:
        """Return the unit stored under key, or None."""
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PhoneticUnit]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"PhonemeTable({len(self)} entries)"
