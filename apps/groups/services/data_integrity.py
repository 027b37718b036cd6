"""
Translation of persistence constraint violations into domain errors.

Uniqueness of names and external ids is not pre-checked; the database
enforces it and the resulting IntegrityError is classified here.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..constants import EXTERNAL_ID, NAME
from ..models import GroupTypes
from .exceptions import (
    DuplicateExternalIdError,
    DuplicateNameError,
    UnknownDataIntegrityIssueError,
)

logger = logging.getLogger(__name__)

EXTERNAL_ID_MARKER = 'external_id'
NAME_MARKER = 'name'


def most_specific_cause(exc: BaseException) -> BaseException:
    """Follow the ``__cause__`` chain down to the driver-level error."""
    cause = exc
    seen = {id(cause)}
    while cause.__cause__ is not None and id(cause.__cause__) not in seen:
        cause = cause.__cause__
        seen.add(id(cause))
    return cause


@dataclass(frozen=True)
class ConstraintViolation:
    """
    A constraint failure reported by the database.

    ``constraint_name`` is only known when the driver exposes it
    (psycopg's ``diag``); otherwise classification falls back to the raw
    message text.
    """

    message: str
    constraint_name: Optional[str] = None
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> 'ConstraintViolation':
        cause = most_specific_cause(exc)
        diag = getattr(cause, 'diag', None)
        return cls(
            message=str(cause),
            constraint_name=getattr(diag, 'constraint_name', None),
            cause=exc,
        )

    def mentions(self, marker: str) -> bool:
        if self.constraint_name:
            return marker in self.constraint_name
        return marker in self.message


def handle_data_integrity_issues(grouping_type, command, violation: ConstraintViolation):
    """Always raises. The grouping type only changes the wording of the error."""
    level_name = GroupTypes(grouping_type).label

    if violation.mentions(EXTERNAL_ID_MARKER):
        raise DuplicateExternalIdError(level_name, command.string_value_of_parameter_named(EXTERNAL_ID))

    if violation.mentions(NAME_MARKER):
        raise DuplicateNameError(level_name, command.string_value_of_parameter_named(NAME))

    logger.error(
        "Unknown data integrity issue for %s: %s",
        level_name,
        violation.message,
        exc_info=violation.cause,
    )
    raise UnknownDataIntegrityIssueError()
