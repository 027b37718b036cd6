"""
Tests for JsonCommand parameter access and change detection.
"""

import pytest
from datetime import date

from rest_framework.exceptions import ValidationError

from apps.core.command import JsonCommand


class TestFromJson:

    def test_parses_object(self):
        command = JsonCommand.from_json('{"name": "East Center"}', command_id=3)

        assert command.command_id == 3
        assert command.string_value_of_parameter_named('name') == 'East Center'

    def test_empty_text_is_empty_command(self):
        assert JsonCommand.from_json('').parsed_command == {}

    @pytest.mark.parametrize('json_text', ['{"name": ', '[1, 2]'])
    def test_rejects_malformed_payload(self, json_text):
        with pytest.raises(ValidationError):
            JsonCommand.from_json(json_text)


class TestTypedValues:

    def test_string_is_stripped(self):
        assert JsonCommand({'name': '  East  '}).string_value_of_parameter_named('name') == 'East'

    def test_missing_string(self):
        assert JsonCommand({}).string_value_of_parameter_named('name') is None

    def test_long_accepts_numeric_string(self):
        assert JsonCommand({'staffId': ' 42 '}).long_value_of_parameter_named('staffId') == 42

    @pytest.mark.parametrize('value', [True, 'abc'])
    def test_long_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError):
            JsonCommand({'staffId': value}).long_value_of_parameter_named('staffId')

    def test_boolean_defaults_to_false(self):
        assert JsonCommand({}).boolean_primitive_value_of_parameter_named('active') is False

    def test_boolean_accepts_strings(self):
        assert JsonCommand({'active': 'TRUE'}).boolean_primitive_value_of_parameter_named('active') is True

    @pytest.mark.parametrize('value', ['2024-03-01', [2024, 3, 1], date(2024, 3, 1)])
    def test_local_date_formats(self, value):
        command = JsonCommand({'activationDate': value})

        assert command.local_date_value_of_parameter_named('activationDate') == date(2024, 3, 1)

    def test_local_date_rejects_garbage(self):
        with pytest.raises(ValidationError):
            JsonCommand({'activationDate': '01/03/2024'}).local_date_value_of_parameter_named('activationDate')

    def test_array_defaults_to_empty(self):
        assert JsonCommand({'clientMembers': None}).array_value_of_parameter_named('clientMembers') == []


class TestChangeDetection:

    def test_absent_parameter_is_never_a_change(self):
        command = JsonCommand({})

        assert not command.is_change_in_string_parameter_named('name', 'East')
        assert not command.is_change_in_long_parameter_named('staffId', 5)

    def test_blank_string_equals_null(self):
        assert not JsonCommand({'externalId': ' '}).is_change_in_string_parameter_named('externalId', None)

    def test_string_change(self):
        assert JsonCommand({'name': 'West'}).is_change_in_string_parameter_named('name', 'East')

    def test_null_long_against_value(self):
        assert JsonCommand({'staffId': None}).is_change_in_long_parameter_named('staffId', 5)

    def test_same_long(self):
        assert not JsonCommand({'staffId': '5'}).is_change_in_long_parameter_named('staffId', 5)
