"""
Command payload wrapper.

A JsonCommand wraps an already-parsed JSON payload and exposes typed
accessors for named parameters. The ``is_change_in_*`` helpers compare a
parameter against a baseline value and only report a change when the
parameter is actually present in the payload.
"""

import json
from datetime import date
from typing import Any, Dict, List, Optional

from django.utils.dateparse import parse_date
from rest_framework.exceptions import ValidationError


class JsonCommand:
    """Typed read access to the fields of a command payload."""

    def __init__(
        self,
        parsed_command: Optional[Dict[str, Any]] = None,
        *,
        command_id: Optional[int] = None,
    ):
        self.parsed_command = dict(parsed_command or {})
        self.command_id = command_id

    @classmethod
    def from_json(cls, json_text: str, *, command_id: Optional[int] = None) -> 'JsonCommand':
        """Parse ``json_text`` into a command."""
        try:
            parsed = json.loads(json_text) if json_text else {}
        except json.JSONDecodeError as exc:
            raise ValidationError(
                {'json': [f'Malformed JSON payload: {exc.msg}']},
                code='invalid_json',
            )
        if not isinstance(parsed, dict):
            raise ValidationError(
                {'json': ['Command payload must be a JSON object.']},
                code='invalid_json',
            )
        return cls(parsed, command_id=command_id)

    def __repr__(self):
        return f'JsonCommand(command_id={self.command_id!r}, parameters={sorted(self.parsed_command)!r})'

    def parameter_exists(self, parameter_name: str) -> bool:
        return parameter_name in self.parsed_command

    def string_value_of_parameter_named(self, parameter_name: str) -> Optional[str]:
        value = self.parsed_command.get(parameter_name)
        if value is None:
            return None
        return str(value).strip()

    def long_value_of_parameter_named(self, parameter_name: str) -> Optional[int]:
        value = self.parsed_command.get(parameter_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, bool):
            raise self._invalid(parameter_name, value, 'a whole number')
        try:
            return int(str(value).strip())
        except ValueError:
            raise self._invalid(parameter_name, value, 'a whole number')

    def boolean_primitive_value_of_parameter_named(self, parameter_name: str) -> bool:
        """Absent or null parameters read as False."""
        value = self.parsed_command.get(parameter_name)
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
            return value.strip().lower() == 'true'
        raise self._invalid(parameter_name, value, 'a boolean')

    def local_date_value_of_parameter_named(self, parameter_name: str) -> Optional[date]:
        """
        Read a date given as an ISO-8601 string, a [year, month, day] array
        or a ``date`` instance.
        """
        value = self.parsed_command.get(parameter_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, date):
            return value
        try:
            if isinstance(value, (list, tuple)) and len(value) == 3:
                return date(*(int(part) for part in value))
            if isinstance(value, str):
                parsed = parse_date(value.strip())
                if parsed is not None:
                    return parsed
        except (TypeError, ValueError):
            pass
        raise self._invalid(parameter_name, value, 'a date in YYYY-MM-DD format')

    def array_value_of_parameter_named(self, parameter_name: str) -> List[Any]:
        """Absent or null arrays read as an empty list."""
        value = self.parsed_command.get(parameter_name)
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise self._invalid(parameter_name, value, 'an array')
        return list(value)

    def is_change_in_string_parameter_named(self, parameter_name: str, existing_value: Optional[str]) -> bool:
        # Blank strings and null are the same "unset" value.
        if not self.parameter_exists(parameter_name):
            return False
        working_value = self.string_value_of_parameter_named(parameter_name) or None
        return (existing_value or None) != working_value

    def is_change_in_long_parameter_named(self, parameter_name: str, existing_value: Optional[int]) -> bool:
        if not self.parameter_exists(parameter_name):
            return False
        return self.long_value_of_parameter_named(parameter_name) != existing_value

    @staticmethod
    def _invalid(parameter_name, value, expected):
        return ValidationError(
            {parameter_name: [f'`{value}` is not {expected}.']},
            code='invalid',
        )
