# ==========================================
# apps/groups/models.py
# ==========================================

from django.db import models

from .hierarchy import build_hierarchy, hierarchy_state


class GroupTypes(models.IntegerChoices):
    """Grouping kinds. The value is the primary key of the matching GroupLevel."""
    INVALID = 0, 'Invalid'
    CENTER = 1, 'Center'
    GROUP = 2, 'Group'


class GroupStatus(models.IntegerChoices):
    INVALID = 0, 'Invalid'
    PENDING = 100, 'Pending'
    ACTIVE = 300, 'Active'
    CLOSED = 600, 'Closed'


class GroupLevel(models.Model):
    """Fixed rank in the grouping hierarchy. Seeded by migration, never edited."""

    id = models.PositiveSmallIntegerField(primary_key=True)
    parent = models.ForeignKey('self', on_delete=models.PROTECT, null=True, blank=True, related_name='child_levels')
    level_name = models.CharField(max_length=100, unique=True)
    super_parent = models.BooleanField(default=False)
    recursable = models.BooleanField(default=False)
    can_have_clients = models.BooleanField(default=False)

    class Meta:
        db_table = 'group_levels'
        ordering = ['id']

    def __str__(self):
        return self.level_name

    def is_super_parent(self):
        return self.super_parent

    def is_identified_by_parent_id(self, parent_level_id):
        return self.parent_id == parent_level_id

    def allows_parent(self, level):
        """Whether a group of ``level`` may be the immediate parent of this level."""
        if level is None or self.super_parent:
            return False
        if self.is_identified_by_parent_id(level.pk):
            return True
        return self.recursable and level.pk == self.pk


class Group(models.Model):
    """
    Center or group. Both are the same entity at different levels.

    Member child groups are the groups whose ``parent`` is this group.
    """

    office = models.ForeignKey('offices.Office', on_delete=models.PROTECT, related_name='groups')
    staff = models.ForeignKey('offices.Staff', on_delete=models.SET_NULL, null=True, blank=True, related_name='groups')
    parent = models.ForeignKey('self', on_delete=models.PROTECT, null=True, blank=True, related_name='children')
    level = models.ForeignKey(GroupLevel, on_delete=models.PROTECT, related_name='groups')
    name = models.CharField(max_length=100, null=True, blank=True)
    external_id = models.CharField(max_length=100, null=True, blank=True)
    status = models.PositiveSmallIntegerField(choices=GroupStatus.choices, default=GroupStatus.PENDING)
    activation_date = models.DateField(null=True, blank=True)
    hierarchy = models.TextField(null=True, blank=True)
    client_members = models.ManyToManyField('clients.Client', related_name='groups', blank=True, db_table='group_clients')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'groups'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['name', 'level'], name='unique_group_name_per_level'),
            models.UniqueConstraint(fields=['external_id', 'level'], name='unique_group_external_id_per_level'),
        ]
        indexes = [
            models.Index(fields=['hierarchy'], name='groups_hierarchy_idx'),
        ]

    def __str__(self):
        return self.name or f"{self.level} #{self.pk}"

    @classmethod
    def new_group(cls, *, office, staff, parent, level, name, external_id, active, activation_date):
        """Build an unsaved group. Active groups start ACTIVE with their activation date."""
        status = GroupStatus.PENDING
        if active:
            status = GroupStatus.ACTIVE
        return cls(
            office=office,
            staff=staff,
            parent=parent,
            level=level,
            name=name or None,
            external_id=external_id or None,
            status=status,
            activation_date=activation_date if active else None,
        )

    def generate_hierarchy(self):
        if self.pk is None:
            raise ValueError("Group must be saved before its hierarchy can be generated")
        parent = self.parent
        self.hierarchy = build_hierarchy(self.pk, parent.hierarchy if parent is not None else None)
        return self.hierarchy

    @property
    def hierarchy_state(self):
        return hierarchy_state(self)

    def is_office_identified_by(self, office_id):
        return self.office_id == office_id

    def is_pending(self):
        return self.status == GroupStatus.PENDING

    def is_not_pending(self):
        return not self.is_pending()

    def has_staff(self):
        return self.staff_id is not None

    def unassign_staff(self):
        self.staff = None
