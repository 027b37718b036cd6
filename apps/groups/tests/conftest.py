import pytest
from datetime import date

from apps.clients.models import Client
from apps.core.command import JsonCommand
from apps.groups.models import Group, GroupLevel, GroupStatus, GroupTypes
from apps.notes.models import Note
from apps.offices.models import Office, Staff


def make_group(*, office, level, name, parent=None, staff=None, external_id=None,
               status=GroupStatus.PENDING):
    """Create a group directly through the ORM with a consistent hierarchy."""
    group = Group.objects.create(
        office=office,
        level=level,
        name=name,
        parent=parent,
        staff=staff,
        external_id=external_id,
        status=status,
        activation_date=date(2024, 1, 15) if status == GroupStatus.ACTIVE else None,
    )
    group.generate_hierarchy()
    group.save(update_fields=['hierarchy'])
    return group


@pytest.fixture
def command_factory():
    """Build JsonCommand objects from keyword parameters."""
    def _build(command_id=1, **parameters):
        return JsonCommand(parameters, command_id=command_id)
    return _build


@pytest.fixture
def center_level(db):
    """Seeded Center level (super parent)."""
    return GroupLevel.objects.get(pk=GroupTypes.CENTER)


@pytest.fixture
def group_level(db):
    """Seeded Group level (parent level Center, recursable)."""
    return GroupLevel.objects.get(pk=GroupTypes.GROUP)


@pytest.fixture
def office(db):
    """Create and return the head office."""
    return Office.objects.create(name='Head Office', opening_date=date(2020, 1, 1))


@pytest.fixture
def other_office(db, office):
    """Create and return a branch office under the head office."""
    return Office.objects.create(name='Branch Office', parent=office, opening_date=date(2021, 6, 1))


@pytest.fixture
def staff(office):
    """Staff member of the head office."""
    return Staff.objects.create(office=office, firstname='Amina', lastname='Okafor')


@pytest.fixture
def second_staff(office):
    """Another staff member of the head office."""
    return Staff.objects.create(office=office, firstname='Ravi', lastname='Menon')


@pytest.fixture
def branch_staff(other_office):
    """Staff member of the branch office."""
    return Staff.objects.create(office=other_office, firstname='Lena', lastname='Kovacs')


@pytest.fixture
def client_one(office):
    return Client.objects.create(office=office, display_name='Client One')


@pytest.fixture
def client_two(office):
    return Client.objects.create(office=office, display_name='Client Two')


@pytest.fixture
def deleted_client(office):
    return Client.objects.create(office=office, display_name='Deleted Client', is_deleted=True)


@pytest.fixture
def branch_client(other_office):
    return Client.objects.create(office=other_office, display_name='Branch Client')


@pytest.fixture
def center(office, center_level):
    """Pending center in the head office."""
    return make_group(office=office, level=center_level, name='North Center', external_id='CTR-1')


@pytest.fixture
def other_center(office, center_level):
    """Second pending center in the head office."""
    return make_group(office=office, level=center_level, name='South Center')


@pytest.fixture
def branch_center(other_office, center_level):
    """Pending center in the branch office."""
    return make_group(office=other_office, level=center_level, name='Branch Center')


@pytest.fixture
def group(office, group_level, center):
    """Pending group under the head office center."""
    return make_group(office=office, level=group_level, name='Weavers Group', parent=center, external_id='GRP-1')


@pytest.fixture
def standalone_group(office, group_level):
    """Pending group in the head office without a parent."""
    return make_group(office=office, level=group_level, name='Farmers Group')


@pytest.fixture
def group_with_notes(group):
    """Group with two attached notes."""
    Note.objects.create(group=group, note='First meeting held.')
    Note.objects.create(group=group, note='Second meeting postponed.')
    return group
