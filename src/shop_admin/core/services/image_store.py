"""Gateways to the external image host.

An image store exposes two operations: ``store`` uploads bytes and returns the
public URL with the host's identifier for the blob, ``remove`` deletes a blob
by that identifier. Failures surface as :class:`UploadFailedError` and
:class:`RemoveFailedError`.
"""

import hashlib
import time
import uuid
from dataclasses import dataclass
from typing import Protocol

import httpx
from loguru import logger
from pydantic import BaseModel

from src.shop_admin.core.errors import RemoveFailedError, UploadFailedError
from src.shop_admin.runtime.config.config_data import ImageStoreConfig


@dataclass(frozen=True)
class UploadedImage:
    """An image file received from a client."""

    filename: str
    content: bytes
    content_type: str | None = None


class ImageUploadResult(BaseModel):
    url: str
    public_id: str


class ImageStore(Protocol):
    def store(self, image: UploadedImage) -> ImageUploadResult: ...

    def remove(self, public_id: str) -> None: ...


class CloudinaryImageStore:
    """Signed uploads and deletions against the Cloudinary REST API."""

    def __init__(self, config: ImageStoreConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._client = client or httpx.Client(timeout=config.timeout_seconds)

    @property
    def _endpoint(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/{self._config.cloud_name}/image"

    def sign(self, params: dict[str, str]) -> str:
        """Cloudinary signature: sha1 of the sorted ``key=value`` pairs followed by the secret."""
        to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params) if params[key])
        return hashlib.sha1(
            f"{to_sign}{self._config.api_secret}".encode("utf-8")
        ).hexdigest()

    def _signed_params(self, params: dict[str, str]) -> dict[str, str]:
        params = {key: value for key, value in params.items() if value}
        params["timestamp"] = str(int(time.time()))
        params["signature"] = self.sign(params)
        params["api_key"] = self._config.api_key
        return params

    def store(self, image: UploadedImage) -> ImageUploadResult:
        data = self._signed_params({"folder": self._config.folder or ""})
        files = {
            "file": (
                image.filename,
                image.content,
                image.content_type or "application/octet-stream",
            )
        }
        try:
            response = self._client.post(f"{self._endpoint}/upload", data=data, files=files)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Image upload of {} failed: {}", image.filename, e)
            raise UploadFailedError(detail=f"Upload of {image.filename} failed") from e

        url = body.get("secure_url") or body.get("url")
        public_id = body.get("public_id")
        if not url or not public_id:
            logger.error("Image upload of {} returned no URL", image.filename)
            raise UploadFailedError(detail=f"Upload of {image.filename} returned no URL")

        logger.debug("Uploaded {} as {}", image.filename, public_id)
        return ImageUploadResult(url=url, public_id=public_id)

    def remove(self, public_id: str) -> None:
        data = self._signed_params({"public_id": public_id})
        try:
            response = self._client.post(f"{self._endpoint}/destroy", data=data)
            response.raise_for_status()
            result = response.json().get("result")
        except (httpx.HTTPError, ValueError) as e:
            raise RemoveFailedError(detail=f"Removal of {public_id} failed") from e

        if result != "ok":
            raise RemoveFailedError(detail=f"Removal of {public_id} answered {result!r}")
        logger.debug("Removed image {}", public_id)

    def close(self) -> None:
        self._client.close()


class InMemoryImageStore:
    """Keeps images in process memory; used for local development and tests."""

    def __init__(self, base_url: str = "memory://images") -> None:
        self._base_url = base_url.rstrip("/")
        self.images: dict[str, UploadedImage] = {}

    def store(self, image: UploadedImage) -> ImageUploadResult:
        if not image.content:
            raise UploadFailedError(detail=f"Upload of {image.filename} is empty")
        public_id = uuid.uuid4().hex
        self.images[public_id] = image
        return ImageUploadResult(url=f"{self._base_url}/{public_id}", public_id=public_id)

    def remove(self, public_id: str) -> None:
        if self.images.pop(public_id, None) is None:
            raise RemoveFailedError(detail=f"Image {public_id} does not exist")

    def close(self) -> None:
        self.images.clear()


def build_image_store(config: ImageStoreConfig) -> ImageStore:
    if config.provider == "cloudinary":
        logger.info("Using Cloudinary image store for cloud {}", config.cloud_name)
        return CloudinaryImageStore(config)
    logger.info("Using in-memory image store")
    return InMemoryImageStore()
