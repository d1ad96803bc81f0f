"""Built-in Harvard-Kyoto phoneme table."""

from functools import lru_cache

from shiksha.phonetics.table import MAX_KEY_LENGTH, PhonemeTable
from shiksha.types import (
    Category,
    Effort,
    Pitch,
    Place,
    PhoneticUnit,
    VowelDuration,
)

# Vowels: (key, Devanagari, codepoint, duration, place)
# Unaccented text carries no pitch marks; vowels are read as udatta.
_VOWELS = [
    ("a",   "अ", 0x0905, VowelDuration.SHORT, Place.THROAT),
    ("A",   "आ", 0x0906, VowelDuration.LONG,  Place.THROAT),
    ("i",   "इ", 0x0907, VowelDuration.SHORT, Place.PALATE),
    ("I",   "ई", 0x0908, VowelDuration.LONG,  Place.PALATE),
    ("u",   "उ", 0x0909, VowelDuration.SHORT, Place.LIPS),
    ("U",   "ऊ", 0x090A, VowelDuration.LONG,  Place.LIPS),
    ("R",   "ऋ", 0x090B, VowelDuration.SHORT, Place.HEAD),
    ("RR",  "ॠ", 0x0960, VowelDuration.LONG,  Place.HEAD),
    ("lR",  "ऌ", 0x090C, VowelDuration.SHORT, Place.TEETH),
    ("lRR", "ॡ", 0x0961, VowelDuration.LONG,  Place.TEETH),
    ("e",   "ए", 0x090F, VowelDuration.LONG,  Place.PALATE),
    ("ai",  "ऐ", 0x0910, VowelDuration.LONG,  Place.PALATE),
    ("o",   "ओ", 0x0913, VowelDuration.LONG,  Place.LIPS),
    ("au",  "औ", 0x0914, VowelDuration.LONG,  Place.LIPS),
]

# Prolonged vowels are written with a trailing "3" (Devanagari ३)
_PROLONGED = ["a", "A", "i", "I", "u", "U", "e", "ai", "o", "au"]

# Accent markers written after a vowel: q = anudatta, # = svarita
ACCENT_MARKERS = {
    "q": (Pitch.LOW, "\u0952"),
    "#": (Pitch.MIXED, "\u0951"),
}

# Stops, five per row: unaspirated, aspirated, voiced, voiced aspirated, nasal
_STOP_ROWS = [
    (Place.THROAT, [("k", "क"), ("kh", "ख"), ("g", "ग"), ("gh", "घ"), ("G", "ङ")]),
    (Place.PALATE, [("c", "च"), ("ch", "छ"), ("j", "ज"), ("jh", "झ"), ("J", "ञ")]),
    (Place.HEAD,   [("T", "ट"), ("Th", "ठ"), ("D", "ड"), ("Dh", "ढ"), ("N", "ण")]),
    (Place.TEETH,  [("t", "त"), ("th", "थ"), ("d", "द"), ("dh", "ध"), ("n", "न")]),
    (Place.LIPS,   [("p", "प"), ("ph", "फ"), ("b", "ब"), ("bh", "भ"), ("m", "म")]),
]
_STOP_EFFORTS = [
    Effort.LIGHT_ASPIRATION,
    Effort.STRONG_ASPIRATION,
    Effort.LIGHT_ASPIRATION,
    Effort.STRONG_ASPIRATION,
    Effort.NASAL,
]

_OTHERS = [
    ("y", "य", Place.PALATE, Effort.SLIGHT_CONTACT, Category.SEMIVOWEL),
    ("r", "र", Place.HEAD,   Effort.SLIGHT_CONTACT, Category.SEMIVOWEL),
    ("l", "ल", Place.TEETH,  Effort.SLIGHT_CONTACT, Category.SEMIVOWEL),
    ("v", "व", Place.LIPS,   Effort.SLIGHT_CONTACT, Category.SEMIVOWEL),
    ("z", "श", Place.PALATE, Effort.SEMI_CLOSED,    Category.SIBILANT),
    ("S", "ष", Place.HEAD,   Effort.SEMI_CLOSED,    Category.SIBILANT),
    ("s", "स", Place.TEETH,  Effort.SEMI_CLOSED,    Category.SIBILANT),
    ("h", "ह", Place.THROAT, Effort.SEMI_CLOSED,    Category.SIBILANT),
    ("M", "ं", Place.NOSE,   Effort.SEMI_NASAL,     Category.ANUSVARA),
    ("H", "ः", Place.THROAT, Effort.STRONG_ASPIRATION, Category.VISARGA),
]


def _codepoints(text: str) -> str:
    return " ".join(f"U+{ord(ch):04X}" for ch in text)


def harvard_kyoto_units() -> list[PhoneticUnit]:
    """Return every unit of the built-in table, vowels first."""
    units = []
    for key, script, code, duration, place in _VOWELS:
        units.append(PhoneticUnit(
            key=key,
            script=script,
            codepoint=f"U+{code:04X}",
            pitch=Pitch.HIGH,
            duration=duration,
            place=place,
            effort=Effort.OPEN,
            category=Category.VOWEL,
        ))

    by_key = {u.key: u for u in units}
    for key in _PROLONGED:
        base = by_key[key]
        script = base.script + "३"
        units.append(PhoneticUnit(
            key=key + "3",
            script=script,
            codepoint=_codepoints(script),
            pitch=base.pitch,
            duration=VowelDuration.PROLONGED,
            place=base.place,
            effort=base.effort,
            category=Category.VOWEL,
        ))

    # Accented variants of every vowel whose marked key still fits a window
    for base in [u for u in units if u.category is Category.VOWEL]:
        for marker, (pitch, sign) in ACCENT_MARKERS.items():
            key = base.key + marker
            if len(key) > MAX_KEY_LENGTH:
                continue
            script = base.script + sign
            units.append(PhoneticUnit(
                key=key,
                script=script,
                codepoint=_codepoints(script),
                pitch=pitch,
                duration=base.duration,
                place=base.place,
                effort=base.effort,
                category=Category.VOWEL,
            ))

    for place, row in _STOP_ROWS:
        for (key, script), effort in zip(row, _STOP_EFFORTS):
            units.append(PhoneticUnit(
                key=key,
                script=script,
                codepoint=_codepoints(script),
                place=place,
                effort=effort,
                category=Category.STOP,
            ))

    for key, script, place, effort, category in _OTHERS:
        units.append(PhoneticUnit(
            key=key,
            script=script,
            codepoint=_codepoints(script),
            place=place,
            effort=effort,
            category=category,
        ))
    return units


@lru_cache(maxsize=1)
def harvard_kyoto() -> PhonemeTable:
    """The built-in table, built once and shared."""
    return PhonemeTable(harvard_kyoto_units())
