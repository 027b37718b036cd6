"""
Grouping types write service.

Creates, updates, unassigns staff from and deletes centers and groups.
Every public operation runs in a single transaction; any error raised
rolls back all writes made by that operation.
"""

import logging
from typing import Optional

from django.db import IntegrityError, transaction

from apps.clients.repositories import ClientRepository
from apps.core.diff import diff_sets
from apps.core.results import CommandProcessingResult
from apps.notes.repositories import NoteRepository
from apps.offices.exceptions import (
    InvalidOfficeError,
    OfficeNotFoundError,
    StaffNotFoundError,
)
from apps.offices.repositories import OfficeRepository, StaffRepository

from ..constants import (
    ACTIVATION_DATE,
    ACTIVE,
    CENTER_ID,
    CLIENT_MEMBERS,
    EXTERNAL_ID,
    GROUP_MEMBERS,
    NAME,
    OFFICE_ID,
    STAFF_ID,
)
from ..hierarchy import HierarchyState, is_same_or_descendant, iter_descendants
from ..models import Group, GroupTypes
from ..repositories import GroupLevelRepository, GroupRepository
from ..validators import GroupingTypesDataValidator
from .data_integrity import ConstraintViolation, handle_data_integrity_issues
from .exceptions import (
    GroupHasNoStaffError,
    GroupNotFoundError,
    GroupNotPendingError,
    InvalidGroupLevelError,
)
from .membership import assemble_child_groups, assemble_clients

logger = logging.getLogger(__name__)


def _sorted_ids(entities):
    return sorted(entity.pk for entity in entities)


class GroupingTypesWriteService:
    """
    Write operations for centers and groups.

    Repositories and the validator are injected; each defaults to the
    ORM-backed implementation.
    """

    def __init__(
        self,
        *,
        group_repository=None,
        group_level_repository=None,
        office_repository=None,
        staff_repository=None,
        client_repository=None,
        note_repository=None,
        validator=None,
    ):
        self.group_repository = group_repository or GroupRepository()
        self.group_level_repository = group_level_repository or GroupLevelRepository()
        self.office_repository = office_repository or OfficeRepository()
        self.staff_repository = staff_repository or StaffRepository()
        self.client_repository = client_repository or ClientRepository()
        self.note_repository = note_repository or NoteRepository()
        self.validator = validator or GroupingTypesDataValidator()

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    @transaction.atomic
    def create_center(self, command) -> CommandProcessingResult:
        self.validator.validate_for_create_center(command)
        return self.create_grouping_type(command, GroupTypes.CENTER)

    @transaction.atomic
    def create_group(self, command, center_id: Optional[int] = None) -> CommandProcessingResult:
        """
        Create a group, optionally under a center.

        ``center_id`` falls back to the command's ``centerId`` parameter.
        """
        if center_id is None:
            center_id = command.long_value_of_parameter_named(CENTER_ID)

        if center_id is not None:
            self.validator.validate_for_create_center_group(command)
        else:
            self.validator.validate_for_create_group(command)

        return self.create_grouping_type(command, GroupTypes.GROUP, center_id)

    @transaction.atomic
    def create_grouping_type(self, command, grouping_type, parent_id=None) -> CommandProcessingResult:
        """
        Create a center or group from an already validated command.

        The group is saved twice: once to obtain its identifier, then again
        with the hierarchy path that ends in that identifier.

        Raises:
            GroupNotFoundError: If the parent or a member group doesn't exist
            OfficeNotFoundError: If the office doesn't exist
            StaffNotFoundError: If the staff doesn't exist in the office
            ClientNotFoundError: If a member client doesn't exist
            InvalidOfficeError: If a member belongs to another office
            InvalidGroupLevelError: If the level ordering is violated
            DuplicateExternalIdError, DuplicateNameError,
            UnknownDataIntegrityIssueError: On constraint violations
        """
        try:
            name = command.string_value_of_parameter_named(NAME)
            external_id = command.string_value_of_parameter_named(EXTERNAL_ID)

            parent = None
            if parent_id is None:
                office_id = command.long_value_of_parameter_named(OFFICE_ID)
            else:
                parent = self.group_repository.find(parent_id)
                if parent is None:
                    raise GroupNotFoundError(parent_id)
                office_id = parent.office_id

            office = self.office_repository.find(office_id)
            if office is None:
                raise OfficeNotFoundError(office_id)

            staff = None
            staff_id = command.long_value_of_parameter_named(STAFF_ID)
            if staff_id is not None:
                staff = self.staff_repository.find_by_office(staff_id, office_id)
                if staff is None:
                    raise StaffNotFoundError(staff_id)

            client_members = assemble_clients(office_id, command, self.client_repository)
            group_members = assemble_child_groups(office_id, command, self.group_repository)

            active = command.boolean_primitive_value_of_parameter_named(ACTIVE)
            activation_date = command.local_date_value_of_parameter_named(ACTIVATION_DATE)

            level = self._find_level(grouping_type)
            if parent is not None and not level.allows_parent(parent.level):
                raise InvalidGroupLevelError(
                    'add', 'invalid.level',
                    "Parent group's level is not a valid parent level for the new group",
                )
            self._check_can_have_clients(level, client_members)
            for child in group_members:
                self._check_can_adopt(level, child)

            new_group = Group.new_group(
                office=office,
                staff=staff,
                parent=parent,
                level=level,
                name=name,
                external_id=external_id,
                active=active,
                activation_date=activation_date,
            )

            # pre-save to generate id for use in group hierarchy
            self.group_repository.save(new_group)

            new_group.generate_hierarchy()

            self.group_repository.save_and_flush(new_group, update_fields=['hierarchy'])

            if client_members:
                new_group.client_members.set(client_members)
            for child in group_members:
                self._attach_child(new_group, child)

        except IntegrityError as exc:
            handle_data_integrity_issues(grouping_type, command, ConstraintViolation.from_exception(exc))

        logger.info(
            "Created %s %s in office %s with hierarchy %s",
            GroupTypes(grouping_type).label, new_group.pk, office.pk, new_group.hierarchy,
        )

        return CommandProcessingResult(
            command_id=command.command_id,
            office_id=office.pk,
            group_id=new_group.pk,
            entity_id=new_group.pk,
        )

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    @transaction.atomic
    def update_center(self, center_id, command) -> CommandProcessingResult:
        self.validator.validate_for_update_center(command)
        return self.update_grouping_type(center_id, command, GroupTypes.CENTER)

    @transaction.atomic
    def update_group(self, group_id, command) -> CommandProcessingResult:
        self.validator.validate_for_update_group(command)
        return self.update_grouping_type(group_id, command, GroupTypes.GROUP)

    @transaction.atomic
    def update_grouping_type(self, group_id, command, grouping_type) -> CommandProcessingResult:
        """
        Apply the parameters of ``command`` that differ from the stored group.

        Only genuinely changed fields are written and reported, in the order
        they were applied. A command matching the current state changes
        nothing and returns an empty change-set.
        """
        try:
            actual_changes = {}

            group = self.group_repository.find(group_id)
            if group is None:
                raise GroupNotFoundError(group_id)

            office_id = group.office_id

            if command.is_change_in_string_parameter_named(NAME, group.name):
                new_value = command.string_value_of_parameter_named(NAME)
                actual_changes[NAME] = new_value
                group.name = new_value or None

            if command.is_change_in_string_parameter_named(EXTERNAL_ID, group.external_id):
                new_value = command.string_value_of_parameter_named(EXTERNAL_ID)
                actual_changes[EXTERNAL_ID] = new_value
                group.external_id = new_value or None

            if command.is_change_in_long_parameter_named(STAFF_ID, group.staff_id):
                new_value = command.long_value_of_parameter_named(STAFF_ID)
                actual_changes[STAFF_ID] = new_value

                new_staff = None
                if new_value is not None:
                    new_staff = self.staff_repository.find_by_office(new_value, office_id)
                    if new_staff is None:
                        raise StaffNotFoundError(new_value)
                group.staff = new_staff

            hierarchy_changed = False
            level = group.level

            # The parent of a super parent is never touched; centerId is ignored.
            if not level.is_super_parent() and command.is_change_in_long_parameter_named(CENTER_ID, group.parent_id):
                new_value = command.long_value_of_parameter_named(CENTER_ID)
                actual_changes[CENTER_ID] = new_value

                new_parent = None
                if new_value is not None:
                    new_parent = self.group_repository.find(new_value)
                    if new_parent is None:
                        raise GroupNotFoundError(new_value)

                    if not new_parent.is_office_identified_by(office_id):
                        raise InvalidOfficeError(
                            'group', 'attach.to.parent.group',
                            "Group and parent group must have the same office",
                        )

                    if not level.allows_parent(new_parent.level):
                        raise InvalidGroupLevelError(
                            'add', 'invalid.level',
                            "Parent group's level is not equal to child level's parent level",
                        )

                    if is_same_or_descendant(new_parent, group):
                        raise InvalidGroupLevelError(
                            'attach', 'cyclic.hierarchy',
                            "A group cannot be attached beneath itself or one of its descendants",
                        )

                group.parent = new_parent
                # Parent has changed, re-generate the hierarchy
                group.generate_hierarchy()
                hierarchy_changed = True

            # An absent clientMembers array is the empty desired set.
            client_members = assemble_clients(office_id, command, self.client_repository)
            self._check_can_have_clients(level, client_members)
            client_diff = diff_sets(client_members, group.client_members.all())
            if client_diff.changed:
                actual_changes[CLIENT_MEMBERS] = _sorted_ids(client_diff.symmetric_difference)

            child_diff = None
            if command.parameter_exists(GROUP_MEMBERS):
                group_members = assemble_child_groups(office_id, command, self.group_repository)
                child_diff = diff_sets(group_members, group.children.all())
                for child in child_diff.added:
                    self._check_can_adopt(level, child)
                    if is_same_or_descendant(group, child):
                        raise InvalidGroupLevelError(
                            'attach', 'cyclic.hierarchy',
                            "A group cannot adopt itself or one of its ancestors",
                        )
                if child_diff.changed:
                    actual_changes[GROUP_MEMBERS] = _sorted_ids(child_diff.symmetric_difference)

            if actual_changes:
                self.group_repository.save_and_flush(group)

                if client_diff.changed:
                    group.client_members.set(client_members)

                if hierarchy_changed:
                    self._regenerate_descendant_hierarchies(group)

                if child_diff is not None and child_diff.changed:
                    for child in child_diff.removed:
                        self._detach_child(child)
                    for child in child_diff.added:
                        self._attach_child(group, child)

        except IntegrityError as exc:
            handle_data_integrity_issues(grouping_type, command, ConstraintViolation.from_exception(exc))

        result = CommandProcessingResult(
            command_id=command.command_id,
            office_id=group.office_id,
            group_id=group.pk,
            entity_id=group.pk,
            changes=actual_changes,
        )

        if result.has_changes:
            logger.info(
                "Updated %s %s: %s",
                group.level.level_name, group.pk, ', '.join(result.changes),
            )

        return result

    # -------------------------------------------------------------------------
    # Staff
    # -------------------------------------------------------------------------

    @transaction.atomic
    def unassign_staff(self, group_id, command) -> CommandProcessingResult:
        """
        Remove the staff assignment of a group.

        The staff is only cleared when the command's ``staffId`` matches the
        currently assigned staff; the result always reports ``staffId`` as
        null.
        """
        self.validator.validate_for_unassign_staff(command)

        group = self.group_repository.find(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)

        if not group.has_staff():
            raise GroupHasNoStaffError(group_id)

        if not command.is_change_in_long_parameter_named(STAFF_ID, group.staff_id):
            group.unassign_staff()

        self.group_repository.save_and_flush(group)

        return CommandProcessingResult(
            command_id=command.command_id,
            office_id=group.office_id,
            group_id=group.pk,
            entity_id=group.pk,
            changes={STAFF_ID: None},
        )

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    @transaction.atomic
    def delete_group(self, group_id) -> CommandProcessingResult:
        """
        Delete a pending group and its notes.

        Raises:
            GroupNotFoundError: If group doesn't exist
            GroupNotPendingError: If group is not in PENDING status
        """
        group = self.group_repository.find(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)

        if group.is_not_pending():
            raise GroupNotPendingError(group_id)

        office_id = group.office_id

        related_notes = self.note_repository.find_by_group_id(group_id)
        self.note_repository.delete_in_batch(related_notes)

        self.group_repository.delete(group)

        logger.info("Deleted group %s and %d note(s)", group_id, len(related_notes))

        return CommandProcessingResult(
            office_id=office_id,
            group_id=group_id,
            entity_id=group_id,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _find_level(self, grouping_type):
        level = self.group_level_repository.find(GroupTypes(grouping_type).value)
        if level is None:
            raise InvalidGroupLevelError(
                'create', 'level.not.configured',
                f"Group level `{GroupTypes(grouping_type).label}` is not configured",
            )
        return level

    @staticmethod
    def _check_can_adopt(level, child):
        if not child.level.allows_parent(level):
            raise InvalidGroupLevelError(
                'add', 'invalid.child.level',
                "Child group's level does not accept this group's level as its parent",
            )

    @staticmethod
    def _check_can_have_clients(level, client_members):
        if client_members and not level.can_have_clients:
            raise InvalidGroupLevelError(
                'clients', 'not.allowed',
                f"Clients cannot be attached to a `{level.level_name}`",
            )

    def _attach_child(self, parent, child):
        child.parent = parent
        child.generate_hierarchy()
        self.group_repository.save_and_flush(child, update_fields=['parent', 'hierarchy', 'updated_at'])
        self._regenerate_descendant_hierarchies(child)

    def _detach_child(self, child):
        child.parent = None
        child.generate_hierarchy()
        self.group_repository.save_and_flush(child, update_fields=['parent', 'hierarchy', 'updated_at'])
        self._regenerate_descendant_hierarchies(child)

    def _regenerate_descendant_hierarchies(self, group):
        for descendant in iter_descendants(group):
            if descendant.hierarchy_state is HierarchyState.HIERARCHY_COMPUTED:
                continue
            descendant.generate_hierarchy()
            self.group_repository.save_and_flush(descendant, update_fields=['hierarchy', 'updated_at'])


def create_center(*, command) -> CommandProcessingResult:
    """Create a center. See GroupingTypesWriteService.create_grouping_type."""
    return GroupingTypesWriteService().create_center(command)


def create_group(*, command, center_id: Optional[int] = None) -> CommandProcessingResult:
    """Create a group, under ``center_id`` when given."""
    return GroupingTypesWriteService().create_group(command, center_id)


def update_center(*, center_id, command) -> CommandProcessingResult:
    return GroupingTypesWriteService().update_center(center_id, command)


def update_group(*, group_id, command) -> CommandProcessingResult:
    return GroupingTypesWriteService().update_group(group_id, command)


def unassign_staff(*, group_id, command) -> CommandProcessingResult:
    return GroupingTypesWriteService().unassign_staff(group_id, command)


def delete_group(*, group_id) -> CommandProcessingResult:
    return GroupingTypesWriteService().delete_group(group_id)
