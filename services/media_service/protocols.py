"""
Media Service behavioral contracts and protocols.

This module defines the protocols (interfaces) that Media Service components
must implement, enabling dependency injection and testability.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from services.media_service.blob_models import BlobContent, BlobDescriptor


class BlobStoreProtocol(Protocol):
    """Protocol for blob storage operations."""

    async def initialize(self, correlation_id: UUID) -> None:
        """
        Prepare the storage root; called once before serving traffic.

        Raises:
            EcaError: INITIALIZATION_FAILED if the root is unusable
        """
        ...

    async def save_blob(
        self, content: bytes, original_filename: str | None, correlation_id: UUID
    ) -> BlobDescriptor:
        """
        Store content under a freshly generated id.

        Args:
            content: Raw bytes to store, must be non-empty
            original_filename: Client-supplied filename, sanitized before use
            correlation_id: Request correlation ID for tracing

        Returns:
            Descriptor of the new blob

        Raises:
            EcaError: VALIDATION_ERROR for empty content, STORAGE_ERROR on write failure
        """
        ...

    async def list_blobs(self, correlation_id: UUID) -> list[BlobDescriptor]:
        """
        List every stored blob, in no particular order.

        Raises:
            EcaError: STORAGE_ERROR if the root cannot be read
        """
        ...

    async def get_blob(self, blob_id: str, correlation_id: UUID) -> BlobContent:
        """
        Fetch a blob's bytes and original filename.

        Raises:
            EcaError: RESOURCE_NOT_FOUND if absent, STORAGE_ERROR on read failure
        """
        ...

    async def delete_blob(self, blob_id: str, correlation_id: UUID) -> None:
        """
        Remove a blob.

        Raises:
            EcaError: RESOURCE_NOT_FOUND if absent, STORAGE_ERROR on unlink failure
        """
        ...
