"""Unit tests for the image store gateways."""

import hashlib
from urllib.parse import parse_qs

import httpx
import pytest

from src.shop_admin.core.errors import RemoveFailedError, UploadFailedError
from src.shop_admin.core.services import (
    CloudinaryImageStore,
    InMemoryImageStore,
    UploadedImage,
    build_image_store,
)
from src.shop_admin.runtime.config.config_data import ImageStoreConfig
from tests.fixtures.services import image


@pytest.fixture
def cloudinary_config() -> ImageStoreConfig:
    return ImageStoreConfig(
        provider="cloudinary",
        cloud_name="demo",
        api_key="key-123",
        api_secret="shhh",
        folder="products",
        base_url="https://cloudinary.test/v1_1",
    )


def _store(config: ImageStoreConfig, handler) -> CloudinaryImageStore:
    return CloudinaryImageStore(config, client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestCloudinaryImageStore:
    def test_sign(self, cloudinary_config):
        store = CloudinaryImageStore(cloudinary_config)

        signature = store.sign({"timestamp": "1700000000", "public_id": "abc"})

        expected = hashlib.sha1(b"public_id=abc&timestamp=1700000000shhh").hexdigest()
        assert signature == expected

    def test_store_returns_secure_url(self, cloudinary_config):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={"secure_url": "https://res.test/abc.png", "public_id": "products/abc"},
            )

        result = _store(cloudinary_config, handler).store(image("abc.png"))

        assert result.url == "https://res.test/abc.png"
        assert result.public_id == "products/abc"
        assert str(requests[0].url) == "https://cloudinary.test/v1_1/demo/image/upload"
        body = requests[0].read()
        assert b"key-123" in body
        assert b"abc.png" in body

    def test_store_http_error(self, cloudinary_config):
        store = _store(cloudinary_config, lambda request: httpx.Response(500))

        with pytest.raises(UploadFailedError):
            store.store(image("abc.png"))

    def test_store_without_url(self, cloudinary_config):
        store = _store(cloudinary_config, lambda request: httpx.Response(200, json={}))

        with pytest.raises(UploadFailedError):
            store.store(image("abc.png"))

    def test_store_network_error(self, cloudinary_config):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(UploadFailedError):
            _store(cloudinary_config, handler).store(image("abc.png"))

    def test_remove_sends_signed_request(self, cloudinary_config):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"result": "ok"})

        store = _store(cloudinary_config, handler)
        store.remove("products/abc")

        request = requests[0]
        assert request.url.path == "/v1_1/demo/image/destroy"
        form = {key: values[0] for key, values in parse_qs(request.read().decode()).items()}
        assert form["public_id"] == "products/abc"
        assert form["api_key"] == "key-123"
        assert form["signature"] == store.sign(
            {"public_id": form["public_id"], "timestamp": form["timestamp"]}
        )

    def test_remove_not_found(self, cloudinary_config):
        store = _store(
            cloudinary_config, lambda request: httpx.Response(200, json={"result": "not found"})
        )

        with pytest.raises(RemoveFailedError):
            store.remove("products/abc")


class TestInMemoryImageStore:
    def test_store_and_remove(self):
        store = InMemoryImageStore()

        result = store.store(image("a.png"))

        assert result.url.startswith("memory://images/")
        store.remove(result.public_id)
        assert store.images == {}

    def test_empty_upload_fails(self):
        with pytest.raises(UploadFailedError):
            InMemoryImageStore().store(UploadedImage(filename="empty.png", content=b""))

    def test_remove_unknown(self):
        with pytest.raises(RemoveFailedError):
            InMemoryImageStore().remove("nope")


def test_build_image_store(cloudinary_config):
    assert isinstance(build_image_store(ImageStoreConfig()), InMemoryImageStore)
    assert isinstance(build_image_store(cloudinary_config), CloudinaryImageStore)
