"""JSON interchange for phonetic units, syllables, groups and tables."""

import json
import logging
import os
import tempfile
from enum import Enum
from pathlib import Path

from shiksha.phonetics.table import PhonemeTable
from shiksha.types import (
    Category,
    DeserializationError,
    Effort,
    GroupKind,
    MetricalGroup,
    MetricalUnit,
    Note,
    PhoneticUnit,
    Pitch,
    Place,
    Syllable,
    VowelDuration,
)

logger = logging.getLogger(__name__)

# Optional enum-valued attributes of PhoneticUnit, by field name
_UNIT_ENUMS: dict[str, type[Enum]] = {
    "pitch": Pitch,
    "duration": VowelDuration,
    "place": Place,
    "effort": Effort,
    "category": Category,
    "note": Note,
}


def _enum_from_name(enum_type: type[Enum], name) -> Enum:
    """Look up an enum member by name; unknown names are errors."""
    try:
        return enum_type[name]
    except (KeyError, TypeError):
        raise DeserializationError(
            f"unknown {enum_type.__name__} variant {name!r}"
        ) from None


def _require(data: dict, key: str, what: str):
    if not isinstance(data, dict):
        raise DeserializationError(f"expected a {what} record, got {type(data).__name__}")
    if key not in data:
        raise DeserializationError(f"{what} record is missing '{key}'")
    return data[key]


# --- Phonetic units ---


def unit_to_dict(unit: PhoneticUnit) -> dict:
    record = {
        "key": unit.key,
        "script": unit.script,
        "codepoint": unit.codepoint,
    }
    for name in _UNIT_ENUMS:
        value = getattr(unit, name)
        record[name] = value.name if value is not None else None
    return record


def unit_from_dict(data: dict) -> PhoneticUnit:
    attrs = {}
    for name, enum_type in _UNIT_ENUMS.items():
        raw = data.get(name) if isinstance(data, dict) else None
        attrs[name] = _enum_from_name(enum_type, raw) if raw is not None else None
    return PhoneticUnit(
        key=_require(data, "key", "unit"),
        script=_require(data, "script", "unit"),
        codepoint=_require(data, "codepoint", "unit"),
        **attrs,
    )


# --- Syllables ---


def syllable_to_dict(syllable: Syllable) -> dict:
    return {"units": [unit_to_dict(u) for u in syllable]}


def syllable_from_dict(data: dict) -> Syllable:
    """Rebuild a syllable; the consistency check runs again.

    Raises:
        DeserializationError: on malformed records.
        InconsistentSyllable: if the stored units disagree.
    """
    units = _require(data, "units", "syllable")
    if not isinstance(units, list) or not units:
        raise DeserializationError("syllable record needs a non-empty 'units' list")
    return Syllable(tuple(unit_from_dict(u) for u in units))


# --- Groups ---


def group_to_dict(group: MetricalGroup) -> dict:
    children = []
    for child in group:
        if isinstance(child, MetricalGroup):
            children.append({"type": "group", **group_to_dict(child)})
        elif isinstance(child, Syllable):
            children.append({"type": "syllable", **syllable_to_dict(child)})
        else:
            children.append({"type": "weight", "weight": child.name})
    return {"kind": group.kind.name, "children": children}


def group_from_dict(data: dict) -> MetricalGroup:
    kind = _enum_from_name(GroupKind, _require(data, "kind", "group"))
    group = MetricalGroup(kind)
    children = _require(data, "children", "group")
    if not isinstance(children, list):
        raise DeserializationError("group 'children' must be a list")
    for child in children:
        child_type = _require(child, "type", "group child")
        if child_type == "group":
            group.append(group_from_dict(child))
        elif child_type == "syllable":
            group.append(syllable_from_dict(child))
        elif child_type == "weight":
            group.append(_enum_from_name(MetricalUnit, _require(child, "weight", "weight")))
        else:
            raise DeserializationError(f"unknown group child type {child_type!r}")
    return group


def dumps(group: MetricalGroup, indent: int | None = 2) -> str:
    return json.dumps(group_to_dict(group), ensure_ascii=False, indent=indent)


def loads(text: str) -> MetricalGroup:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"invalid JSON: {e}") from e
    return group_from_dict(data)


# --- Tables ---


def _atomic_write(target: Path, data: bytes) -> None:
    """Write data to target atomically via temp file + rename."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=target.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, target)
    except Exception:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def dump_table(table: PhonemeTable, path: Path) -> None:
    """Write a phoneme table as {"units": [...]} JSON."""
    payload = {"units": [unit_to_dict(u) for u in table]}
    _atomic_write(Path(path), json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8"))
    logger.debug(f"Wrote {len(table)} table entries to {path}")


def load_table(path: Path) -> PhonemeTable:
    """Read a phoneme table written by dump_table.

    Raises:
        DeserializationError: on malformed JSON, unknown variants or
            duplicate/invalid keys.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DeserializationError(f"invalid JSON in {path}: {e}") from e
    units = _require(data, "units", "table")
    if not isinstance(units, list):
        raise DeserializationError("table 'units' must be a list")
    try:
        table = PhonemeTable(unit_from_dict(u) for u in units)
    except DeserializationError:
        raise
    except ValueError as e:
        raise DeserializationError(str(e)) from e
    logger.debug(f"Loaded {len(table)} table entries from {path}")
    return table
