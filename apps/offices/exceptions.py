"""Domain exceptions for offices and staff."""

from apps.core.exceptions import PlatformDomainError, ResourceNotFoundError


class OfficeNotFoundError(ResourceNotFoundError):
    """Raised when an office identifier does not resolve."""
    default_detail = 'Office does not exist.'
    default_code = 'error.msg.office.id.invalid'

    def __init__(self, office_id):
        super().__init__(
            f"Office with identifier {office_id} does not exist",
            default_message_args=(office_id,),
        )
        self.office_id = office_id


class StaffNotFoundError(ResourceNotFoundError):
    """Raised when a staff identifier does not resolve within an office."""
    default_detail = 'Staff does not exist.'
    default_code = 'error.msg.staff.id.invalid'

    def __init__(self, staff_id):
        super().__init__(
            f"Staff with identifier {staff_id} does not exist",
            default_message_args=(staff_id,),
        )
        self.staff_id = staff_id


class InvalidOfficeError(PlatformDomainError):
    """Raised when related entities belong to different offices."""
    status_code = 403
    default_detail = 'Entities must belong to the same office.'
    default_code = 'error.msg.office.invalid'

    def __init__(self, entity, action, message):
        super().__init__(
            message,
            f"error.msg.{entity}.{action}.invalid.office",
        )
        self.entity = entity
        self.action = action
