"""ORM-backed repository for clients."""

from typing import Optional

from .models import Client


class ClientRepository:

    def find(self, client_id) -> Optional[Client]:
        """Return the client, including soft-deleted ones."""
        if client_id is None:
            return None
        return Client.objects.filter(pk=client_id).first()
