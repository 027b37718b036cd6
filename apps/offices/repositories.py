"""ORM-backed repositories for offices and staff."""

from typing import Optional

from .models import Office, Staff


class OfficeRepository:

    def find(self, office_id) -> Optional[Office]:
        if office_id is None:
            return None
        return Office.objects.filter(pk=office_id).first()


class StaffRepository:

    def find_by_office(self, staff_id, office_id) -> Optional[Staff]:
        """Return the staff member only if it belongs to ``office_id``."""
        return (
            Staff.objects
            .select_related('office')
            .filter(pk=staff_id, office_id=office_id)
            .first()
        )
