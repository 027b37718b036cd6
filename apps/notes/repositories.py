"""ORM-backed repository for notes."""

from typing import List

from .models import Note


class NoteRepository:

    def find_by_group_id(self, group_id) -> List[Note]:
        return list(Note.objects.filter(group_id=group_id))

    def delete_in_batch(self, notes) -> int:
        """Delete ``notes`` with a single query. Returns the number removed."""
        note_ids = [note.pk for note in notes]
        if not note_ids:
            return 0
        deleted, _ = Note.objects.filter(pk__in=note_ids).delete()
        return deleted
