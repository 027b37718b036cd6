"""
Materialized hierarchy paths for groups.

A path is the parent's path followed by the separator and the group's own
identifier, so a center with id 5 has ``.5`` and a group 12 under it has
``.5.12``. Because the identifier is part of the path, a group moves
through three states: unsaved (no id), identified (saved, path missing or
stale) and hierarchy computed.
"""

import enum

HIERARCHY_SEPARATOR = '.'


class HierarchyState(enum.Enum):
    UNSAVED = 'unsaved'
    IDENTIFIED = 'identified'
    HIERARCHY_COMPUTED = 'hierarchy_computed'


def build_hierarchy(group_id, parent_hierarchy=None) -> str:
    if group_id is None:
        raise ValueError("A hierarchy path needs the group's own identifier")
    return f"{parent_hierarchy or ''}{HIERARCHY_SEPARATOR}{group_id}"


def hierarchy_state(group) -> HierarchyState:
    if group.pk is None:
        return HierarchyState.UNSAVED
    parent = group.parent
    expected = build_hierarchy(group.pk, parent.hierarchy if parent is not None else None)
    if group.hierarchy != expected:
        return HierarchyState.IDENTIFIED
    return HierarchyState.HIERARCHY_COMPUTED


def iter_descendants(group):
    """
    Yield every descendant of ``group`` depth-first, parents before children.

    Each yielded child has its ``parent`` pointing at the in-memory ancestor,
    so regenerating the child's path as it is yielded picks up the ancestor's
    fresh path.
    """
    for child in group.children.all():
        child.parent = group
        yield child
        yield from iter_descendants(child)


def is_same_or_descendant(candidate, ancestor) -> bool:
    """Whether ``candidate`` is ``ancestor`` itself or lies beneath it."""
    if candidate.pk is not None and candidate.pk == ancestor.pk:
        return True
    if not candidate.hierarchy or not ancestor.hierarchy:
        return False
    return candidate.hierarchy.startswith(f"{ancestor.hierarchy}{HIERARCHY_SEPARATOR}")
