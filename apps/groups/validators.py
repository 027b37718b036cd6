"""
Payload validation for grouping-type commands.

Each operation has its own serializer describing the parameters it
accepts. Validation only checks the shape of the payload; business rules
are enforced by the services layer.
"""

from rest_framework import serializers

from .constants import (
    ACTIVATION_DATE,
    DATE_FORMAT,
    EXTERNAL_ID_MAX_LENGTH,
    LOCALE,
    NAME_MAX_LENGTH,
)


class GroupingTypesCommandSerializer(serializers.Serializer):
    """Base serializer that rejects parameters the operation does not support."""

    ignored_parameters = (LOCALE, DATE_FORMAT)

    def validate(self, attrs):
        unsupported = sorted(
            set(self.initial_data) - set(self.fields) - set(self.ignored_parameters)
        )
        if unsupported:
            raise serializers.ValidationError(
                {name: ['Parameter is not supported for this operation.'] for name in unsupported},
                code='unsupported_parameter',
            )
        return attrs


class ActivationMixin:
    """Requires ``activationDate`` whenever ``active`` is true."""

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs.get('active') and not attrs.get(ACTIVATION_DATE):
            raise serializers.ValidationError(
                {ACTIVATION_DATE: ['This field is required when active is true.']},
                code='required',
            )
        return attrs


def _member_ids():
    return serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        required=False,
        allow_empty=True,
    )


class CreateCenterSerializer(ActivationMixin, GroupingTypesCommandSerializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    officeId = serializers.IntegerField(min_value=1)
    staffId = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    externalId = serializers.CharField(max_length=EXTERNAL_ID_MAX_LENGTH, required=False, allow_blank=True, allow_null=True)
    active = serializers.BooleanField()
    activationDate = serializers.DateField(required=False, allow_null=True)
    groupMembers = _member_ids()


class CreateGroupSerializer(ActivationMixin, GroupingTypesCommandSerializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    officeId = serializers.IntegerField(min_value=1)
    staffId = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    externalId = serializers.CharField(max_length=EXTERNAL_ID_MAX_LENGTH, required=False, allow_blank=True, allow_null=True)
    active = serializers.BooleanField()
    activationDate = serializers.DateField(required=False, allow_null=True)
    clientMembers = _member_ids()
    groupMembers = _member_ids()


class CreateCenterGroupSerializer(ActivationMixin, GroupingTypesCommandSerializer):
    """A group created under a center inherits the center's office."""
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    centerId = serializers.IntegerField(min_value=1, required=False)
    staffId = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    externalId = serializers.CharField(max_length=EXTERNAL_ID_MAX_LENGTH, required=False, allow_blank=True, allow_null=True)
    active = serializers.BooleanField()
    activationDate = serializers.DateField(required=False, allow_null=True)
    clientMembers = _member_ids()
    groupMembers = _member_ids()


class UpdateCenterSerializer(GroupingTypesCommandSerializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH, required=False)
    externalId = serializers.CharField(max_length=EXTERNAL_ID_MAX_LENGTH, required=False, allow_blank=True, allow_null=True)
    staffId = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    groupMembers = _member_ids()


class UpdateGroupSerializer(GroupingTypesCommandSerializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH, required=False)
    externalId = serializers.CharField(max_length=EXTERNAL_ID_MAX_LENGTH, required=False, allow_blank=True, allow_null=True)
    staffId = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    centerId = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    clientMembers = _member_ids()
    groupMembers = _member_ids()


class UnassignStaffSerializer(GroupingTypesCommandSerializer):
    staffId = serializers.IntegerField(min_value=1)


class GroupingTypesDataValidator:
    """Validates command payloads before any domain logic runs."""

    def validate_for_create_center(self, command):
        return self._validate(CreateCenterSerializer, command)

    def validate_for_create_group(self, command):
        return self._validate(CreateGroupSerializer, command)

    def validate_for_create_center_group(self, command):
        return self._validate(CreateCenterGroupSerializer, command)

    def validate_for_update_center(self, command):
        return self._validate(UpdateCenterSerializer, command)

    def validate_for_update_group(self, command):
        return self._validate(UpdateGroupSerializer, command)

    def validate_for_unassign_staff(self, command):
        return self._validate(UnassignStaffSerializer, command)

    @staticmethod
    def _validate(serializer_class, command):
        serializer = serializer_class(data=command.parsed_command)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data
