"""Metrical aggregation over nested groups."""

from typing import Iterable, Iterator, Union

from shiksha.prosody.weight import classify
from shiksha.types import GroupKind, MetricalGroup, MetricalUnit, Syllable

Leaf = Union[MetricalUnit, Syllable]


def leaves(group: MetricalGroup) -> Iterator[Leaf]:
    """Yield the metrical units and syllables of group, depth first."""
    for child in group:
        if isinstance(child, MetricalGroup):
            yield from leaves(child)
        else:
            yield child


def weights(group: MetricalGroup) -> list[MetricalUnit]:
    """Weight of every leaf in order.

    Syllables are classified against the syllables after them, so
    consonants up to the next vowel, across word breaks, close the vowel
    before it. The lines of a verse are measured independently.
    """
    if group.kind is GroupKind.VERSE:
        result = []
        for child in group:
            flat = list(leaves(child)) if isinstance(child, MetricalGroup) else [child]
            result.extend(_classify_run(flat))
        return result
    return _classify_run(list(leaves(group)))


def _classify_run(flat: list[Leaf]) -> list[MetricalUnit]:
    result = []
    for i, leaf in enumerate(flat):
        if isinstance(leaf, MetricalUnit):
            result.append(leaf)
            continue
        following = (x for x in flat[i + 1:] if isinstance(x, Syllable))
        result.append(classify(leaf, following))
    return result


def total_duration(group: MetricalGroup) -> int:
    """Sum of kaala over the whole group. Recomputed on every call."""
    return sum(w.kaala for w in weights(group))


def weight_pattern(group: MetricalGroup) -> str:
    """Laghu/guru/pluta pattern, e.g. 'GLLG'."""
    return "".join(w.symbol for w in weights(group))


def syllables(group: MetricalGroup) -> list[Syllable]:
    return [leaf for leaf in leaves(group) if isinstance(leaf, Syllable)]


def gana(units: Iterable[MetricalUnit]) -> MetricalGroup:
    """Build a gana from bare metrical units."""
    group = MetricalGroup(GroupKind.GANA)
    for unit in units:
        group.append(unit)
    return group
