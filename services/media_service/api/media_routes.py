"""Blob upload, listing, download and deletion routes for Media Service."""

from __future__ import annotations

import unicodedata
from urllib.parse import quote

from dishka import FromDishka
from eca_core.observability_enums import OperationType
from eca_core.status_enums import OperationStatus
from eca_service_libs.error_handling import EcaError, raise_validation_error
from eca_service_libs.logging_utils import create_service_logger
from eca_service_libs.operation_metrics import OperationMetricsProtocol
from eca_service_libs.request_context import correlation_id_from_request
from eca_service_libs.route_errors import RouteErrorResponder
from quart import Blueprint, Response, jsonify, request
from quart_dishka import inject
from werkzeug.exceptions import HTTPException

from services.media_service.blob_models import BlobDescriptor
from services.media_service.config import Settings
from services.media_service.protocols import BlobStoreProtocol

logger = create_service_logger("media.api.files")
media_bp = Blueprint("media_routes", __name__, url_prefix="/files")
errors = RouteErrorResponder("media_service", "Blob", logger)

UPLOAD_FIELD_NAME = "file"
DOWNLOAD_CONTENT_TYPE = "application/octet-stream"


@media_bp.route("", methods=["POST"])
@inject
async def upload_file(
    blob_store: FromDishka[BlobStoreProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
    settings: FromDishka[Settings],
) -> Response | tuple[Response, int]:
    """Store the multipart part named ``file`` under a new id."""
    correlation_id = correlation_id_from_request()

    try:
        files = await request.files
        file_storage = files.get(UPLOAD_FIELD_NAME)
        if file_storage is None:
            raise_validation_error(
                service="media_service",
                operation="upload_file",
                field=UPLOAD_FIELD_NAME,
                message=f"Multipart part '{UPLOAD_FIELD_NAME}' is required",
                correlation_id=correlation_id,
            )

        content = file_storage.read()
        descriptor = await blob_store.save_blob(content, file_storage.filename, correlation_id)
        metrics.record_operation(OperationType.UPLOAD, OperationStatus.SUCCESS)
        return jsonify(_blob_payload(descriptor, settings)), 200
    except EcaError as e:
        return errors.error_response(e, OperationType.UPLOAD, metrics)
    except HTTPException:
        # e.g. 413 when the body exceeds MAX_CONTENT_LENGTH
        raise
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.UPLOAD, metrics)


@media_bp.route("", methods=["GET"])
@inject
async def list_files(
    blob_store: FromDishka[BlobStoreProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
    settings: FromDishka[Settings],
) -> Response | tuple[Response, int]:
    """List every stored blob as ``{id, filename, url}``."""
    correlation_id = correlation_id_from_request()

    try:
        descriptors = await blob_store.list_blobs(correlation_id)
        metrics.record_operation(OperationType.LIST, OperationStatus.SUCCESS)
        return jsonify([_blob_payload(d, settings) for d in descriptors]), 200
    except EcaError as e:
        return errors.error_response(e, OperationType.LIST, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.LIST, metrics)


@media_bp.route("/<string:file_id>", methods=["GET"])
@inject
async def download_file(
    file_id: str,
    blob_store: FromDishka[BlobStoreProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    """Serve a blob's bytes with its original filename."""
    correlation_id = correlation_id_from_request(file_id=file_id)

    try:
        blob = await blob_store.get_blob(file_id, correlation_id)
        metrics.record_operation(OperationType.DOWNLOAD, OperationStatus.SUCCESS)
        return _build_download_response(blob.data, blob.descriptor.filename)
    except EcaError as e:
        return errors.error_response(e, OperationType.DOWNLOAD, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.DOWNLOAD, metrics)


@media_bp.route("/<string:file_id>", methods=["DELETE"])
@inject
async def delete_file(
    file_id: str,
    blob_store: FromDishka[BlobStoreProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    """Delete a blob; 204 on success, 404 if it is already gone."""
    correlation_id = correlation_id_from_request(file_id=file_id)

    try:
        await blob_store.delete_blob(file_id, correlation_id)
        metrics.record_operation(OperationType.DELETE, OperationStatus.SUCCESS)
        return Response(status=204)
    except EcaError as e:
        return errors.error_response(e, OperationType.DELETE, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.DELETE, metrics)


def blob_url(blob_id: str, settings: Settings) -> str:
    """Absolute URL of the route that serves ``blob_id``."""
    base_url = settings.PUBLIC_BASE_URL or request.host_url
    return f"{base_url.rstrip('/')}{media_bp.url_prefix}/{blob_id}"


def _blob_payload(descriptor: BlobDescriptor, settings: Settings) -> dict[str, str]:
    return {
        "id": descriptor.blob_id,
        "filename": descriptor.filename,
        "url": blob_url(descriptor.blob_id, settings),
    }


def _build_download_response(data: bytes, filename: str) -> Response:
    """
    Opaque binary response; the original filename travels in Content-Disposition.

    Non-ASCII names are sent as an RFC 5987 ``filename*`` with an ASCII
    ``filename`` fallback, since header values must stay latin-1.
    """
    try:
        filename.encode("ascii")
    except UnicodeEncodeError:
        simple = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
        quoted = quote(filename, safe="!#$&+-.^_`|~")
        names = {"filename": simple or "file", "filename*": f"UTF-8''{quoted}"}
    else:
        names = {"filename": filename}

    response = Response(response=data, content_type=DOWNLOAD_CONTENT_TYPE)
    response.headers.set("Content-Disposition", "inline", **names)
    return response
