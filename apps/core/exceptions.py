"""
Platform-wide domain exceptions.

Every domain error carries a machine-readable global error code and a
human-readable message. They subclass DRF's APIException so that callers
can turn them into HTTP responses without a translation table.
"""

from rest_framework.exceptions import APIException


class PlatformDomainError(APIException):
    """Base exception for all domain rule violations."""
    status_code = 400
    default_detail = 'The request violates a platform domain rule.'
    default_code = 'error.msg.platform.domain.rule.violation'

    def __init__(self, message=None, code=None, *, parameter_name=None, default_message_args=()):
        code = code or self.default_code
        super().__init__(detail=message, code=code)
        self.global_error_code = code
        self.parameter_name = parameter_name
        self.default_message_args = tuple(default_message_args)

    @property
    def message(self) -> str:
        return str(self.detail)


class ResourceNotFoundError(PlatformDomainError):
    """Raised when a referenced identifier does not resolve."""
    status_code = 404
    default_detail = 'The requested resource does not exist.'
    default_code = 'error.msg.resource.not.found'


class PlatformDataIntegrityError(PlatformDomainError):
    """Raised when a write conflicts with a persistence-level constraint."""
    status_code = 403
    default_detail = 'The request conflicts with existing data.'
    default_code = 'error.msg.data.integrity.issue'
