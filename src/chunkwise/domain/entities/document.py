"""Document entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Document:
    """Document owned by a single user; owns its chunks."""

    id: UUID
    title: str
    content: str
    user_id: str
    created_at: datetime
    updated_at: datetime
