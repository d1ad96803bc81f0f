"""Scheme conversion and rendering via indic_transliteration.

The built-in table is keyed in Harvard-Kyoto, so text in any other
scheme is converted to HK before segmentation, and syllables render
back to Devanagari from their HK keys.
"""

from indic_transliteration import sanscript
from indic_transliteration.sanscript import transliterate

from shiksha.phonetics.harvard_kyoto import ACCENT_MARKERS
from shiksha.types import (
    GroupKind,
    MetricalGroup,
    MetricalUnit,
    PhoneticUnit,
    Syllable,
    UnmatchedCharacter,
)

INPUT_SCHEMES = {
    "hk": sanscript.HK,
    "iast": sanscript.IAST,
    "slp1": sanscript.SLP1,
    "itrans": sanscript.ITRANS,
    "velthuis": sanscript.VELTHUIS,
    "devanagari": sanscript.DEVANAGARI,
}

# Output renderings: table keys, Devanagari script, or codepoints
RENDER_SCHEMES = ("hk", "devanagari", "unicode")

# How the children of each group kind are joined when rendered
_JOINERS = {
    GroupKind.PADA: "",
    GroupKind.SUTRA: "",
    GroupKind.GANA: "",
    GroupKind.VAAKYA: " ",
    GroupKind.VERSE: "\n",
}

# Devanagari accent sign per pitch; udatta is left unmarked
_ACCENT_SIGNS = {pitch: sign for pitch, sign in ACCENT_MARKERS.values()}


def to_harvard_kyoto(text: str, scheme: str = "hk") -> str:
    """Convert text written in scheme to Harvard-Kyoto."""
    if scheme not in INPUT_SCHEMES:
        raise ValueError(
            f"unknown input scheme '{scheme}' (expected one of {', '.join(INPUT_SCHEMES)})"
        )
    if scheme == "hk":
        return text
    return transliterate(text, INPUT_SCHEMES[scheme], sanscript.HK)


def _keys(item) -> str:
    if isinstance(item, (PhoneticUnit, Syllable, UnmatchedCharacter)):
        return item.key
    if isinstance(item, MetricalUnit):
        return item.symbol
    if isinstance(item, MetricalGroup):
        return _JOINERS[item.kind].join(_keys(child) for child in item)
    raise TypeError(f"cannot render {type(item).__name__}")


def _codepoints(item) -> str:
    if isinstance(item, PhoneticUnit):
        return item.codepoint
    if isinstance(item, Syllable):
        return " ".join(u.codepoint for u in item)
    if isinstance(item, UnmatchedCharacter):
        return f"U+{ord(item.char):04X}"
    if isinstance(item, MetricalUnit):
        return item.symbol
    if isinstance(item, MetricalGroup):
        parts = [_codepoints(child) for child in item]
        return " | ".join(p for p in parts if p)
    raise TypeError(f"cannot render {type(item).__name__}")


def render(item, scheme: str = "hk") -> str:
    """Render a unit, syllable or group in one of RENDER_SCHEMES."""
    if scheme == "hk":
        return _keys(item)
    if scheme == "devanagari":
        if isinstance(item, PhoneticUnit):
            return item.script
        return _devanagari(item)
    if scheme == "unicode":
        return _codepoints(item)
    raise ValueError(f"unknown render scheme '{scheme}'")


def _devanagari(item) -> str:
    # Accent markers are not HK, so each syllable is converted without
    # them and its sign appended after.
    if isinstance(item, Syllable):
        plain = "".join(u.key.rstrip("".join(ACCENT_MARKERS)) for u in item)
        text = transliterate(plain, sanscript.HK, sanscript.DEVANAGARI)
        vowel = item.vowel
        if vowel is not None and vowel.pitch in _ACCENT_SIGNS:
            text += _ACCENT_SIGNS[vowel.pitch]
        return text
    if isinstance(item, UnmatchedCharacter):
        return item.char
    if isinstance(item, MetricalUnit):
        return item.symbol
    if isinstance(item, MetricalGroup):
        return _JOINERS[item.kind].join(_devanagari(child) for child in item)
    raise TypeError(f"cannot render {type(item).__name__}")
