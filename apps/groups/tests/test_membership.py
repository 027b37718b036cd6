"""
Tests for member assembly against in-memory repositories.
"""

import pytest
from rest_framework.exceptions import ValidationError

from apps.clients.exceptions import ClientNotFoundError
from apps.clients.models import Client
from apps.core.command import JsonCommand
from apps.groups.models import Group
from apps.groups.services import GroupNotFoundError, assemble_child_groups, assemble_clients
from apps.offices.exceptions import InvalidOfficeError

HEAD_OFFICE = 1
BRANCH_OFFICE = 2


class InMemoryRepository:

    def __init__(self, *entities):
        self.entities = {entity.pk: entity for entity in entities}

    def find(self, entity_id):
        return self.entities.get(entity_id)


@pytest.fixture
def client_repository():
    return InMemoryRepository(
        Client(pk=1, office_id=HEAD_OFFICE, display_name='Client One'),
        Client(pk=2, office_id=HEAD_OFFICE, display_name='Client Two'),
        Client(pk=3, office_id=HEAD_OFFICE, display_name='Gone', is_deleted=True),
        Client(pk=4, office_id=BRANCH_OFFICE, display_name='Branch Client'),
    )


@pytest.fixture
def group_repository():
    return InMemoryRepository(
        Group(pk=10, office_id=HEAD_OFFICE, name='Weavers Group'),
        Group(pk=11, office_id=BRANCH_OFFICE, name='Branch Group'),
    )


class TestAssembleClients:

    def test_absent_parameter(self, client_repository):
        assert assemble_clients(HEAD_OFFICE, JsonCommand({}), client_repository) == set()

    def test_duplicates_collapse(self, client_repository):
        command = JsonCommand({'clientMembers': [1, '2', 1]})

        clients = assemble_clients(HEAD_OFFICE, command, client_repository)

        assert {client.pk for client in clients} == {1, 2}

    def test_unknown_client(self, client_repository):
        with pytest.raises(ClientNotFoundError):
            assemble_clients(HEAD_OFFICE, JsonCommand({'clientMembers': [99]}), client_repository)

    def test_deleted_client(self, client_repository):
        with pytest.raises(ClientNotFoundError) as exc_info:
            assemble_clients(HEAD_OFFICE, JsonCommand({'clientMembers': [3]}), client_repository)

        assert exc_info.value.client_id == 3

    def test_client_of_other_office(self, client_repository):
        with pytest.raises(InvalidOfficeError) as exc_info:
            assemble_clients(HEAD_OFFICE, JsonCommand({'clientMembers': [1, 4]}), client_repository)

        assert exc_info.value.global_error_code == 'error.msg.client.attach.to.group.invalid.office'

    def test_malformed_identifier(self, client_repository):
        with pytest.raises(ValidationError):
            assemble_clients(HEAD_OFFICE, JsonCommand({'clientMembers': ['abc']}), client_repository)


class TestAssembleChildGroups:

    def test_resolves_groups(self, group_repository):
        groups = assemble_child_groups(HEAD_OFFICE, JsonCommand({'groupMembers': [10]}), group_repository)

        assert [group.pk for group in groups] == [10]

    def test_unknown_group(self, group_repository):
        with pytest.raises(GroupNotFoundError):
            assemble_child_groups(HEAD_OFFICE, JsonCommand({'groupMembers': [12]}), group_repository)

    def test_group_of_other_office(self, group_repository):
        with pytest.raises(InvalidOfficeError) as exc_info:
            assemble_child_groups(HEAD_OFFICE, JsonCommand({'groupMembers': [11]}), group_repository)

        assert exc_info.value.global_error_code == 'error.msg.group.attach.to.parent.group.invalid.office'
