"""ORM-backed repositories for groups and group levels."""

from typing import Iterable, Optional

from .models import Group, GroupLevel


class GroupRepository:

    def find(self, group_id) -> Optional[Group]:
        if group_id is None:
            return None
        return (
            Group.objects
            .select_related('office', 'staff', 'parent', 'level')
            .filter(pk=group_id)
            .first()
        )

    def save(self, group: Group) -> Group:
        """Insert or update ``group``. A new group gets its identifier here."""
        group.save()
        return group

    def save_and_flush(self, group: Group, update_fields: Optional[Iterable[str]] = None) -> Group:
        if update_fields is not None:
            group.save(update_fields=list(update_fields))
        else:
            group.save()
        return group

    def delete(self, group: Group) -> None:
        group.delete()


class GroupLevelRepository:

    def find(self, level_id) -> Optional[GroupLevel]:
        return GroupLevel.objects.select_related('parent').filter(pk=level_id).first()
