"""
Domain-specific exceptions for grouping types.

Each exception carries a global error code (``error.msg.*``) and a
user-facing message. They are raised by the services layer and are meant
to be converted into HTTP responses by whatever calls it.
"""

from apps.core.exceptions import (
    PlatformDataIntegrityError,
    PlatformDomainError,
    ResourceNotFoundError,
)

from ..constants import EXTERNAL_ID, NAME


class GroupNotFoundError(ResourceNotFoundError):
    """Raised when a group or center identifier does not resolve."""
    default_detail = 'Group does not exist.'
    default_code = 'error.msg.group.id.invalid'

    def __init__(self, group_id):
        super().__init__(
            f"Group with identifier {group_id} does not exist",
            default_message_args=(group_id,),
        )
        self.group_id = group_id


class InvalidGroupLevelError(PlatformDomainError):
    """Raised when a parent/child link breaks the level ordering."""
    default_detail = 'Invalid group level.'
    default_code = 'error.msg.group.invalid.level'

    def __init__(self, action, postfix, message):
        super().__init__(message, f"error.msg.group.{action}.{postfix}")


class GroupHasNoStaffError(PlatformDomainError):
    """Raised when unassigning staff from a group that has none."""
    default_detail = 'Group has no staff assigned.'
    default_code = 'error.msg.group.has.no.staff'

    def __init__(self, group_id):
        super().__init__(
            f"Group with identifier {group_id} has no staff",
            default_message_args=(group_id,),
        )
        self.group_id = group_id


class GroupNotPendingError(PlatformDomainError):
    """Raised when deleting a group that is not in PENDING status."""
    status_code = 403
    default_detail = 'Only pending groups can be deleted.'
    default_code = 'error.msg.group.cannot.be.deleted'

    def __init__(self, group_id):
        super().__init__(
            f"Group with identifier {group_id} cannot be deleted as it is not in `Pending` state.",
            default_message_args=(group_id,),
        )
        self.group_id = group_id


class DuplicateExternalIdError(PlatformDataIntegrityError):
    """Raised when another entity of the same level already uses the externalId."""
    default_code = 'error.msg.group.duplicate.externalId'

    def __init__(self, level_name, external_id):
        super().__init__(
            f"{level_name} with externalId `{external_id}` already exists.",
            f"error.msg.{level_name.lower()}.duplicate.externalId",
            parameter_name=EXTERNAL_ID,
            default_message_args=(external_id,),
        )
        self.external_id = external_id


class DuplicateNameError(PlatformDataIntegrityError):
    """Raised when another entity of the same level already uses the name."""
    default_code = 'error.msg.group.duplicate.name'

    def __init__(self, level_name, name):
        super().__init__(
            f"{level_name} with name `{name}` already exists.",
            f"error.msg.{level_name.lower()}.duplicate.name",
            parameter_name=NAME,
            default_message_args=(name,),
        )
        self.name = name


class UnknownDataIntegrityIssueError(PlatformDataIntegrityError):
    """Raised for constraint violations that match no known rule."""
    default_code = 'error.msg.group.unknown.data.integrity.issue'

    def __init__(self):
        super().__init__("Unknown data integrity issue with resource.")
