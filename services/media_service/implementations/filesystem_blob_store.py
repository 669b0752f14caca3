"""Filesystem-based blob storage implementation."""

from __future__ import annotations

import contextlib
import time
import uuid
from pathlib import Path
from typing import NoReturn
from uuid import UUID

import aiofiles
import aiofiles.os
from eca_service_libs.error_handling import (
    raise_initialization_failed,
    raise_resource_not_found,
    raise_storage_error,
    raise_validation_error,
)
from eca_service_libs.logging_utils import create_service_logger

from services.media_service.blob_models import BlobContent, BlobDescriptor
from services.media_service.protocols import BlobStoreProtocol
from services.media_service.stored_names import (
    compose_stored_name,
    sanitize_filename,
    stored_name_prefix,
)

logger = create_service_logger("media.store.filesystem")

SERVICE_NAME = "media_service"
RESOURCE_TYPE = "blob"
INCOMING_DIR_NAME = ".incoming"
STAGING_SUFFIX = ".part"
# Younger staging files may belong to another worker's in-flight upload
STALE_STAGING_AGE_SECONDS = 3600


class FileSystemBlobStore(BlobStoreProtocol):
    """
    Flat-directory blob store.

    Every blob is one regular file ``<id>__<filename>`` directly under the
    store root; there is no index. Uploads are staged in ``.incoming`` (a
    subdirectory on the same filesystem, so invisible to listings) and
    renamed into place, which keeps readers from ever seeing a partial file.
    Staging files older than ``STALE_STAGING_AGE_SECONDS`` are cleared at
    startup.
    """

    def __init__(self, store_root: Path) -> None:
        """
        Initialize filesystem blob store.

        Args:
            store_root: Root directory for blob storage
        """
        self.store_root = store_root
        self.incoming_dir = store_root / INCOMING_DIR_NAME

    async def initialize(self, correlation_id: UUID) -> None:
        if await aiofiles.os.path.exists(self.store_root) and not await aiofiles.os.path.isdir(
            self.store_root
        ):
            raise_initialization_failed(
                service=SERVICE_NAME,
                operation="initialize",
                component="blob_store",
                message=f"Storage root {self.store_root} exists but is not a directory",
                correlation_id=correlation_id,
            )

        try:
            await aiofiles.os.makedirs(self.incoming_dir, exist_ok=True)
        except OSError as e:
            logger.critical(
                f"Cannot create storage root {self.store_root}: {e}",
                extra={"correlation_id": str(correlation_id)},
            )
            raise_initialization_failed(
                service=SERVICE_NAME,
                operation="initialize",
                component="blob_store",
                message=f"Cannot create storage root {self.store_root}: {e}",
                correlation_id=correlation_id,
            )

        try:
            removed = await self._remove_stale_staging_files()
        except OSError as e:
            removed = 0
            logger.warning(
                f"Could not clean staging directory {self.incoming_dir}: {e}",
                extra={"correlation_id": str(correlation_id)},
            )
        if removed:
            logger.warning(
                f"Removed {removed} stale staging file(s) from {self.incoming_dir}",
                extra={"correlation_id": str(correlation_id)},
            )

        logger.info(
            f"Blob store ready at {self.store_root}",
            extra={"correlation_id": str(correlation_id)},
        )

    async def save_blob(
        self, content: bytes, original_filename: str | None, correlation_id: UUID
    ) -> BlobDescriptor:
        if not content:
            raise_validation_error(
                service=SERVICE_NAME,
                operation="save_blob",
                field="file",
                message="Uploaded file is empty",
                correlation_id=correlation_id,
            )

        filename = sanitize_filename(original_filename)
        blob_id = str(uuid.uuid4())
        stored_name = compose_stored_name(blob_id, filename)
        target_path = self.store_root / stored_name
        staging_path = self.incoming_dir / f"{blob_id}{STAGING_SUFFIX}"

        try:
            # The root may have been removed externally since startup
            await aiofiles.os.makedirs(self.incoming_dir, exist_ok=True)
            async with aiofiles.open(staging_path, "wb") as f:
                await f.write(content)
            await aiofiles.os.replace(staging_path, target_path)
        except OSError as e:
            with contextlib.suppress(OSError):
                await aiofiles.os.remove(staging_path)
            logger.error(
                f"Failed to store blob {blob_id}: {e}",
                extra={"correlation_id": str(correlation_id)},
                exc_info=True,
            )
            raise_storage_error(
                service=SERVICE_NAME,
                operation="save_blob",
                message=f"Failed to store file: {e}",
                correlation_id=correlation_id,
                blob_id=blob_id,
            )

        logger.info(
            f"Stored blob {blob_id} ({len(content)} bytes) as {stored_name}",
            extra={"correlation_id": str(correlation_id)},
        )
        return BlobDescriptor(blob_id=blob_id, filename=filename, stored_name=stored_name)

    async def list_blobs(self, correlation_id: UUID) -> list[BlobDescriptor]:
        stored_names = await self._scan_stored_names(correlation_id, operation="list_blobs")
        return [BlobDescriptor.from_stored_name(name) for name in stored_names]

    async def get_blob(self, blob_id: str, correlation_id: UUID) -> BlobContent:
        stored_name = await self._find_stored_name(blob_id, correlation_id, operation="get_blob")

        try:
            async with aiofiles.open(self.store_root / stored_name, "rb") as f:
                data = await f.read()
        except FileNotFoundError:
            # Deleted between the scan and the open
            logger.info(
                f"Blob {blob_id} vanished before it could be read",
                extra={"correlation_id": str(correlation_id)},
            )
            self._raise_not_found(blob_id, correlation_id, operation="get_blob")
        except OSError as e:
            logger.error(
                f"Failed to read blob {blob_id}: {e}",
                extra={"correlation_id": str(correlation_id)},
                exc_info=True,
            )
            raise_storage_error(
                service=SERVICE_NAME,
                operation="get_blob",
                message=f"Failed to read file: {e}",
                correlation_id=correlation_id,
                blob_id=blob_id,
            )

        return BlobContent(descriptor=BlobDescriptor.from_stored_name(stored_name), data=data)

    async def delete_blob(self, blob_id: str, correlation_id: UUID) -> None:
        stored_name = await self._find_stored_name(
            blob_id, correlation_id, operation="delete_blob"
        )

        try:
            await aiofiles.os.remove(self.store_root / stored_name)
        except FileNotFoundError:
            self._raise_not_found(blob_id, correlation_id, operation="delete_blob")
        except OSError as e:
            logger.error(
                f"Failed to delete blob {blob_id}: {e}",
                extra={"correlation_id": str(correlation_id)},
                exc_info=True,
            )
            raise_storage_error(
                service=SERVICE_NAME,
                operation="delete_blob",
                message=f"Failed to delete file: {e}",
                correlation_id=correlation_id,
                blob_id=blob_id,
            )

        logger.info(
            f"Deleted blob {blob_id}",
            extra={"correlation_id": str(correlation_id)},
        )

    async def _remove_stale_staging_files(self) -> int:
        """Delete staging files left behind by an interrupted upload."""
        cutoff = time.time() - STALE_STAGING_AGE_SECONDS
        removed = 0
        with await aiofiles.os.scandir(self.incoming_dir) as entries:
            candidates = [
                entry
                for entry in entries
                if entry.name.endswith(STAGING_SUFFIX) and entry.is_file(follow_symlinks=False)
            ]
        for entry in candidates:
            try:
                if entry.stat(follow_symlinks=False).st_mtime < cutoff:
                    await aiofiles.os.remove(entry.path)
                    removed += 1
            except FileNotFoundError:
                continue
        return removed

    async def _scan_stored_names(self, correlation_id: UUID, operation: str) -> list[str]:
        """Names of the regular files directly under the root; [] if the root is gone."""
        try:
            with await aiofiles.os.scandir(self.store_root) as entries:
                return [entry.name for entry in entries if entry.is_file(follow_symlinks=False)]
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(
                f"Failed to scan storage root {self.store_root}: {e}",
                extra={"correlation_id": str(correlation_id)},
                exc_info=True,
            )
            raise_storage_error(
                service=SERVICE_NAME,
                operation=operation,
                message=f"Failed to read storage directory: {e}",
                correlation_id=correlation_id,
            )

    async def _find_stored_name(self, blob_id: str, correlation_id: UUID, operation: str) -> str:
        if blob_id.strip():
            prefix = stored_name_prefix(blob_id)
            for name in await self._scan_stored_names(correlation_id, operation):
                if name.startswith(prefix):
                    return name

        logger.warning(
            f"Blob not found for ID: {blob_id}",
            extra={"correlation_id": str(correlation_id)},
        )
        self._raise_not_found(blob_id, correlation_id, operation)

    @staticmethod
    def _raise_not_found(blob_id: str, correlation_id: UUID, operation: str) -> NoReturn:
        raise_resource_not_found(
            service=SERVICE_NAME,
            operation=operation,
            resource_type=RESOURCE_TYPE,
            resource_id=blob_id,
            correlation_id=correlation_id,
        )
