# ==========================================
# apps/clients/models.py
# ==========================================

from django.db import models


class Client(models.Model):
    """Individual client of an office. Soft-deleted clients are kept for history."""

    office = models.ForeignKey('offices.Office', on_delete=models.PROTECT, related_name='clients')
    display_name = models.CharField(max_length=100)
    external_id = models.CharField(max_length=100, unique=True, null=True, blank=True)
    is_deleted = models.BooleanField(default=False)

    class Meta:
        db_table = 'clients'
        ordering = ['display_name']

    def __str__(self):
        return self.display_name

    def is_office_identified_by(self, office_id):
        return self.office_id == office_id
