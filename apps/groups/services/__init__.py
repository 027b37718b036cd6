"""
Groups app services layer.

Services contain the business rules for centers and groups and
orchestrate reads and writes across the office, client, note and group
repositories. All state-changing operations run in a transaction.
"""

from .exceptions import (
    GroupNotFoundError,
    InvalidGroupLevelError,
    GroupHasNoStaffError,
    GroupNotPendingError,
    DuplicateExternalIdError,
    DuplicateNameError,
    UnknownDataIntegrityIssueError,
)

from .grouping_types import (
    GroupingTypesWriteService,
    create_center,
    create_group,
    update_center,
    update_group,
    unassign_staff,
    delete_group,
)

from .membership import (
    assemble_clients,
    assemble_child_groups,
)

from .data_integrity import (
    ConstraintViolation,
    handle_data_integrity_issues,
)


__all__ = [
    # Exceptions
    'GroupNotFoundError',
    'InvalidGroupLevelError',
    'GroupHasNoStaffError',
    'GroupNotPendingError',
    'DuplicateExternalIdError',
    'DuplicateNameError',
    'UnknownDataIntegrityIssueError',

    # Grouping types
    'GroupingTypesWriteService',
    'create_center',
    'create_group',
    'update_center',
    'update_group',
    'unassign_staff',
    'delete_group',

    # Membership
    'assemble_clients',
    'assemble_child_groups',

    # Data integrity
    'ConstraintViolation',
    'handle_data_integrity_issues',
]
