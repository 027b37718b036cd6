"""
Tests for the translation of constraint violations into domain errors.
"""

import logging
import pytest
from types import SimpleNamespace

from django.db import IntegrityError

from apps.core.command import JsonCommand
from apps.groups.models import GroupTypes
from apps.groups.services.data_integrity import (
    ConstraintViolation,
    handle_data_integrity_issues,
    most_specific_cause,
)
from apps.groups.services.exceptions import (
    DuplicateExternalIdError,
    DuplicateNameError,
    UnknownDataIntegrityIssueError,
)


class DriverError(Exception):
    """Stand-in for a database driver error."""


def integrity_error(message, constraint_name=None):
    driver_error = DriverError(message)
    if constraint_name is not None:
        driver_error.diag = SimpleNamespace(constraint_name=constraint_name)
    error = IntegrityError('wrapped')
    error.__cause__ = driver_error
    return error


@pytest.fixture
def command():
    return JsonCommand({'name': 'North Center', 'externalId': 'CTR-1'})


class TestConstraintViolation:

    def test_most_specific_cause_follows_chain(self):
        error = integrity_error('UNIQUE constraint failed: groups.name, groups.level_id')

        assert isinstance(most_specific_cause(error), DriverError)

    def test_most_specific_cause_stops_on_cycle(self):
        first = DriverError('first')
        second = DriverError('second')
        first.__cause__ = second
        second.__cause__ = first

        assert most_specific_cause(first) is second

    def test_from_exception_uses_driver_message(self):
        violation = ConstraintViolation.from_exception(
            integrity_error('UNIQUE constraint failed: groups.external_id, groups.level_id')
        )

        assert violation.message == 'UNIQUE constraint failed: groups.external_id, groups.level_id'
        assert violation.constraint_name is None
        assert violation.mentions('external_id')

    def test_constraint_name_takes_precedence(self):
        """The message mentions name but the violated constraint is the external id one."""
        violation = ConstraintViolation.from_exception(
            integrity_error('duplicate key value, name collision', 'unique_group_external_id_per_level')
        )

        assert violation.constraint_name == 'unique_group_external_id_per_level'
        assert violation.mentions('external_id')
        assert not violation.mentions('collision')


class TestHandleDataIntegrityIssues:

    def test_external_id_violation(self, command):
        violation = ConstraintViolation(message='UNIQUE constraint failed: groups.external_id, groups.level_id')

        with pytest.raises(DuplicateExternalIdError) as exc_info:
            handle_data_integrity_issues(GroupTypes.CENTER, command, violation)

        assert exc_info.value.global_error_code == 'error.msg.center.duplicate.externalId'
        assert exc_info.value.message == 'Center with externalId `CTR-1` already exists.'

    def test_external_id_checked_before_name(self, command):
        """A message mentioning both markers is an external id violation."""
        violation = ConstraintViolation(message='name clash on external_id')

        with pytest.raises(DuplicateExternalIdError):
            handle_data_integrity_issues(GroupTypes.GROUP, command, violation)

    def test_name_violation(self, command):
        violation = ConstraintViolation(message='x', constraint_name='unique_group_name_per_level')

        with pytest.raises(DuplicateNameError) as exc_info:
            handle_data_integrity_issues(GroupTypes.GROUP, command, violation)

        assert exc_info.value.global_error_code == 'error.msg.group.duplicate.name'
        assert exc_info.value.message == 'Group with name `North Center` already exists.'
        assert exc_info.value.status_code == 403

    def test_unknown_violation_is_logged(self, command, caplog):
        violation = ConstraintViolation(message='FOREIGN KEY constraint failed')

        with caplog.at_level(logging.ERROR, logger='apps.groups.services.data_integrity'):
            with pytest.raises(UnknownDataIntegrityIssueError) as exc_info:
                handle_data_integrity_issues(GroupTypes.GROUP, command, violation)

        assert exc_info.value.message == 'Unknown data integrity issue with resource.'
        assert 'FOREIGN KEY constraint failed' in caplog.text
