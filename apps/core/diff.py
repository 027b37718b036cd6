"""Added/removed tracking for set-valued relationships."""

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Hashable, Iterable


@dataclass(frozen=True)
class SetDiff:
    added: FrozenSet[Hashable]
    removed: FrozenSet[Hashable]

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)

    @property
    def symmetric_difference(self) -> FrozenSet[Hashable]:
        return self.added | self.removed


def diff_sets(desired: Iterable[Hashable], current: Iterable[Hashable]) -> SetDiff:
    """
    Compare the desired members of a relationship against the current ones.

    Returns which members would be added and which removed when the
    current set is replaced by the desired one.
    """
    desired_set: AbstractSet = frozenset(desired)
    current_set: AbstractSet = frozenset(current)
    return SetDiff(
        added=frozenset(desired_set - current_set),
        removed=frozenset(current_set - desired_set),
    )
