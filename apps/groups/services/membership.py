"""
Assembly of member sets from a command.

Members are resolved one by one and must belong to the office of the
group they are attached to. Duplicate identifiers collapse.
"""

from typing import Set

from rest_framework.exceptions import ValidationError

from apps.clients.exceptions import ClientNotFoundError
from apps.clients.models import Client
from apps.offices.exceptions import InvalidOfficeError

from ..constants import CLIENT_MEMBERS, GROUP_MEMBERS
from ..models import Group
from .exceptions import GroupNotFoundError


def _member_id(parameter_name, raw_id) -> int:
    try:
        return int(str(raw_id).strip())
    except ValueError:
        raise ValidationError(
            {parameter_name: [f'`{raw_id}` is not a valid identifier.']},
            code='invalid',
        )


def assemble_clients(office_id, command, client_repository) -> Set[Client]:
    """
    Resolve ``clientMembers`` into clients of ``office_id``.

    Raises:
        ClientNotFoundError: If a client does not exist or is soft-deleted
        InvalidOfficeError: If a client belongs to another office
    """
    client_members = set()
    for raw_id in command.array_value_of_parameter_named(CLIENT_MEMBERS):
        client_id = _member_id(CLIENT_MEMBERS, raw_id)
        client = client_repository.find(client_id)
        if client is None or client.is_deleted:
            raise ClientNotFoundError(client_id)
        if not client.is_office_identified_by(office_id):
            raise InvalidOfficeError('client', 'attach.to.group', "Group and Client must have the same office.")
        client_members.add(client)
    return client_members


def assemble_child_groups(office_id, command, group_repository) -> Set[Group]:
    """
    Resolve ``groupMembers`` into groups of ``office_id``.

    Raises:
        GroupNotFoundError: If a group does not exist
        InvalidOfficeError: If a group belongs to another office
    """
    child_groups = set()
    for raw_id in command.array_value_of_parameter_named(GROUP_MEMBERS):
        group_id = _member_id(GROUP_MEMBERS, raw_id)
        group = group_repository.find(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        if not group.is_office_identified_by(office_id):
            raise InvalidOfficeError('group', 'attach.to.parent.group', "Group and child groups must have the same office.")
        child_groups.add(group)
    return child_groups
