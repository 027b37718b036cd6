# ==========================================
# apps/notes/models.py
# ==========================================

from django.db import models


class Note(models.Model):
    """
    Free-text annotation on a group.

    The link to the group carries no database constraint; notes are removed
    by the grouping service before their group is deleted.
    """

    group = models.ForeignKey(
        'groups.Group',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='notes',
    )
    note = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notes'
        ordering = ['-created_at']

    def __str__(self):
        return self.note[:50]
