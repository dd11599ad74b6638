"""
Client for the file upload microservice.

Files are sent as base64 data URIs; the service stores them and answers with
``{url, public_id}``. Passing the previous ``public_id`` replaces that asset
instead of creating a new one.

One ``UploadClient`` (and its httpx connection pool) lives for the whole
application: it is opened in the lifespan handler and injected per request.
"""
import base64
from typing import Any, Dict, Optional

import httpx
from fastapi import Request, UploadFile

from app.core.config import settings
from app.core.exceptions import InternalServerException
from app.core.logging import get_logger
from app.schemas.upload import UploadResult

logger = get_logger(__name__)

UPLOAD_PATH = "/api/utils/upload"


def to_data_uri(content: bytes, content_type: Optional[str]) -> str:
    """Encode raw bytes as ``data:<type>;base64,<payload>``."""
    mime = content_type or "application/octet-stream"
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"


async def file_to_buffer(file: UploadFile) -> str:
    """
    Read an uploaded file into a data URI.

    An empty read is a server-side fault, not a client one.
    """
    content = await file.read()
    if not content:
        raise InternalServerException("Failed to create file buffer")
    return to_data_uri(content, file.content_type)


class UploadClient:
    """Async wrapper around the upload service's HTTP API."""

    def __init__(
        self,
        base_url: str = settings.upload_service_url,
        timeout: float = settings.upload_timeout_seconds,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def upload(self, buffer: str, public_id: Optional[str] = None) -> UploadResult:
        """
        Upload a data URI, optionally replacing ``public_id``.

        HTTP and transport errors propagate to the error translator (500).
        """
        payload: Dict[str, Any] = {"buffer": buffer}
        if public_id:
            payload["public_id"] = public_id

        response = await self._client.post(UPLOAD_PATH, json=payload)
        response.raise_for_status()
        result = UploadResult.model_validate(response.json())

        logger.info("file_uploaded", public_id=result.public_id, replaced=public_id is not None)
        return result

    async def aclose(self) -> None:
        await self._client.aclose()


def get_upload_client(request: Request) -> UploadClient:
    """FastAPI dependency: the client opened at startup."""
    return request.app.state.upload_client
