"""Domain exceptions for clients."""

from apps.core.exceptions import ResourceNotFoundError


class ClientNotFoundError(ResourceNotFoundError):
    """Raised when a client does not exist or has been soft-deleted."""
    default_detail = 'Client does not exist.'
    default_code = 'error.msg.client.id.invalid'

    def __init__(self, client_id):
        super().__init__(
            f"Client with identifier {client_id} does not exist",
            default_message_args=(client_id,),
        )
        self.client_id = client_id
