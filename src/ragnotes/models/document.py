"""Document data model."""

from uuid import uuid4

from pydantic import BaseModel, Field


class Document(BaseModel):
    """A user's note. Content is a serialized block-structured JSON document."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    owner_id: str
    title: str = "Untitled"
    content: str | None = None
    is_archived: bool = False
    parent_document_id: str | None = None
    icon: str | None = None
    cover_image: str | None = None
    is_published: bool = False
