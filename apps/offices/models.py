# ==========================================
# apps/offices/models.py
# ==========================================

from django.db import models


class Office(models.Model):
    """Branch office that owns staff, clients and groups."""

    name = models.CharField(max_length=100, unique=True)
    external_id = models.CharField(max_length=100, unique=True, null=True, blank=True)
    parent = models.ForeignKey('self', on_delete=models.PROTECT, null=True, blank=True, related_name='children')
    opening_date = models.DateField(null=True, blank=True)

    class Meta:
        db_table = 'offices'
        ordering = ['name']

    def __str__(self):
        return self.name


class Staff(models.Model):
    """Loan officer or other staff member scoped to a single office."""

    office = models.ForeignKey(Office, on_delete=models.PROTECT, related_name='staff')
    firstname = models.CharField(max_length=50)
    lastname = models.CharField(max_length=50)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'staff'
        ordering = ['lastname', 'firstname']

    def __str__(self):
        return self.display_name

    @property
    def display_name(self):
        return f"{self.lastname}, {self.firstname}"

    def is_office_identified_by(self, office_id):
        return self.office_id == office_id
