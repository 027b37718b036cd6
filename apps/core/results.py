"""Result returned by every state-changing command."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CommandProcessingResult:
    """
    Identifiers touched by a command plus the ordered change-set.

    ``changes`` maps a parameter name to its new value, in the order the
    changes were applied. It is empty for create and delete.
    """

    command_id: Optional[int] = None
    office_id: Optional[int] = None
    group_id: Optional[int] = None
    entity_id: Optional[int] = None
    changes: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_changes(self) -> bool:
        return bool(self.changes)
