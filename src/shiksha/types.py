"""Core data types for shiksha."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union


class Pitch(Enum):
    """Vowel pitch (swara)."""
    HIGH = "udatta"
    LOW = "anudatta"
    MIXED = "svarita"


class VowelDuration(Enum):
    """Vowel length (matra)."""
    SHORT = "hrasva"
    LONG = "dirgha"
    PROLONGED = "pluta"


class Note(Enum):
    """Samavedic musical note (sama svara)."""
    KRUSHTA = "krushta"
    PRATHAMA = "prathama"
    DVITIYA = "dvitiya"
    TRITIYA = "tritiya"
    CHATURTHA = "chaturtha"
    MANDRA = "mandra"
    ATISVARYA = "atisvarya"


class Place(Enum):
    """Place of articulation (sthana)."""
    CHEST = "uras"
    THROAT = "kantha"
    PALATE = "talu"
    TONGUE_ROOT = "jihvamula"
    TEETH = "danta"
    NOSE = "nasika"
    LIPS = "oshtha"
    HEAD = "murdha"


class Effort(Enum):
    """Articulation effort (prayatna)."""
    FULL_CONTACT = "sprishta"
    SLIGHT_CONTACT = "ishat_sprishta"
    OPEN = "vivrita"
    SEMI_CLOSED = "samvrita"
    LIGHT_ASPIRATION = "alpaprana"
    STRONG_ASPIRATION = "mahaprana"
    NASAL = "nasika"
    SEMI_NASAL = "anunasika"


class Category(Enum):
    """Classical varna class."""
    VOWEL = "svara"
    STOP = "sparsha"
    SEMIVOWEL = "antastha"
    SIBILANT = "ushma"
    ANUSVARA = "anusvara"
    VISARGA = "visarga"
    YAMA = "yama"


class InconsistentSyllable(ValueError):
    """Units grouped into one syllable disagree on a shared attribute."""

    def __init__(self, attribute: str, values: list, units: tuple):
        self.attribute = attribute
        self.values = values
        self.units = units
        keys = "".join(u.key for u in units)
        shown = ", ".join(v.name for v in values)
        super().__init__(f"inconsistent {attribute} in syllable '{keys}': {shown}")

    def __reduce__(self):
        return self.__class__, (self.attribute, self.values, self.units)


class DeserializationError(ValueError):
    """A serialized record cannot be mapped back onto the data model."""


@dataclass(frozen=True)
class PhoneticUnit:
    """An atomic sound (varna) and its phonetic attributes."""
    key: str                              # transliteration key, e.g. "kh"
    script: str                           # Devanagari rendering
    codepoint: str                        # e.g. "U+0916"
    pitch: Pitch | None = None            # vowels only
    duration: VowelDuration | None = None  # vowels only
    place: Place | None = None
    effort: Effort | None = None
    category: Category | None = None
    note: Note | None = None

    @property
    def is_vowel(self) -> bool:
        return self.pitch is not None


@dataclass(frozen=True)
class UnmatchedCharacter:
    """An input character with no entry in the phoneme table."""
    char: str

    @property
    def key(self) -> str:
        return self.char


Token = Union[PhoneticUnit, UnmatchedCharacter]

# Attributes that every unit of a syllable must agree on where present.
_SHARED_ATTRIBUTES = ("pitch", "note", "duration")


@dataclass(frozen=True)
class Syllable:
    """A pronounceable group of phonetic units (akshara).

    Construction fails with InconsistentSyllable when two units carry
    different values for pitch, note or duration. Units without a value
    for an attribute never conflict.
    """
    units: tuple[PhoneticUnit, ...]

    def __post_init__(self):
        if not self.units:
            raise ValueError("a syllable needs at least one phonetic unit")
        # Accept lists from callers but store a tuple
        object.__setattr__(self, "units", tuple(self.units))
        for attribute in _SHARED_ATTRIBUTES:
            values = []
            for unit in self.units:
                value = getattr(unit, attribute)
                if value is not None and value not in values:
                    values.append(value)
            if len(values) > 1:
                raise InconsistentSyllable(attribute, values, self.units)

    def __iter__(self) -> Iterator[PhoneticUnit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def _shared(self, attribute: str):
        for unit in self.units:
            value = getattr(unit, attribute)
            if value is not None:
                return value
        return None

    @property
    def pitch(self) -> Pitch | None:
        return self._shared("pitch")

    @property
    def duration(self) -> VowelDuration | None:
        return self._shared("duration")

    @property
    def note(self) -> Note | None:
        return self._shared("note")

    @property
    def vowel(self) -> PhoneticUnit | None:
        """The vowel nucleus, or None for a bare consonant cluster."""
        for unit in self.units:
            if unit.is_vowel:
                return unit
        return None

    @property
    def key(self) -> str:
        return "".join(u.key for u in self.units)


class MetricalUnit(Enum):
    """Duration class of a syllable, valued in kaala (time units)."""
    LIGHT = 1      # laghu
    HEAVY = 2      # guru
    EXTENDED = 3   # pluta

    @property
    def kaala(self) -> int:
        return self.value

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    MetricalUnit.LIGHT: "L",
    MetricalUnit.HEAVY: "G",
    MetricalUnit.EXTENDED: "P",
}


class GroupKind(Enum):
    """What a MetricalGroup stands for."""
    GANA = "gana"        # group of metrical units
    PADA = "pada"        # word
    VAAKYA = "vaakya"    # sentence / line
    SUTRA = "sutra"      # bare syllable sequence
    VERSE = "verse"      # lines of a text


@dataclass
class MetricalGroup:
    """An ordered container of metrical units, syllables or nested groups.

    Duration is computed on demand so it never goes stale after append().
    """
    kind: GroupKind = GroupKind.SUTRA
    children: list = field(default_factory=list)

    def append(self, child: "MetricalUnit | Syllable | MetricalGroup") -> None:
        if not isinstance(child, (MetricalUnit, Syllable, MetricalGroup)):
            raise TypeError(f"cannot add {type(child).__name__} to a metrical group")
        self.children.append(child)

    def __iter__(self):
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def total_duration(self) -> int:
        # Imported here: the classifier depends on these types.
        from shiksha.prosody.groups import total_duration
        return total_duration(self)
