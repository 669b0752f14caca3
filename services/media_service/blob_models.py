"""Data models returned by the media blob store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from services.media_service.stored_names import parse_stored_name


class BlobDescriptor(BaseModel):
    """Identity of one stored blob, recovered entirely from its stored name."""

    blob_id: str
    filename: str
    stored_name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_stored_name(cls, stored_name: str) -> BlobDescriptor:
        blob_id, filename = parse_stored_name(stored_name)
        return cls(blob_id=blob_id, filename=filename, stored_name=stored_name)


class BlobContent(BaseModel):
    """A blob's descriptor together with its bytes."""

    descriptor: BlobDescriptor
    data: bytes

    model_config = ConfigDict(frozen=True)
