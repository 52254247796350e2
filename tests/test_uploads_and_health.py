"""
Tests for uploads, object storage helpers, health checks and CORS options.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from core import storage_service
from server import _cors_options


@pytest.mark.api
class TestUploads:

    def test_upload(self, client, creator_headers, monkeypatch):
        calls = []

        def fake_upload(file_bytes, original_filename, content_type, folder):
            calls.append((file_bytes, original_filename, content_type, folder))
            return {"url": "https://cdn.example/avatars/me.png", "object_key": "avatars/me.png"}

        monkeypatch.setattr(storage_service, "upload_file", fake_upload)

        response = client.post(
            "/api/uploads",
            files={"file": ("me.png", b"\x89PNG data", "image/png")},
            data={"folder": "avatars"},
            headers=creator_headers,
        )

        assert response.status_code == 201
        assert response.json()["object_key"] == "avatars/me.png"
        assert calls == [(b"\x89PNG data", "me.png", "image/png", "avatars")]

    def test_missing_file(self, client, creator_headers):
        response = client.post("/api/uploads", data={"folder": "avatars"}, headers=creator_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "No file uploaded"

    def test_storage_failure(self, client, creator_headers, monkeypatch):
        def failing_upload(**kwargs):
            raise ClientError({"Error": {"Code": "500", "Message": "boom"}}, "PutObject")

        monkeypatch.setattr(storage_service, "upload_file", failing_upload)

        response = client.post(
            "/api/uploads", files={"file": ("a.png", b"data", "image/png")}, headers=creator_headers
        )

        assert response.status_code == 500
        assert response.json()["error"] == "InternalError"

    def test_requires_auth(self, client):
        response = client.post("/api/uploads", files={"file": ("a.png", b"data", "image/png")})
        assert response.status_code == 401


@pytest.mark.unit
class TestStorageService:

    def test_object_key_layout(self):
        key = storage_service.build_object_key("/logos/", "my logo.png")

        folder, name = key.split("/", 1)
        assert folder == "logos"
        assert name.endswith("-my_logo.png")

    def test_object_key_defaults(self):
        assert storage_service.build_object_key("", None).startswith(storage_service.DEFAULT_FOLDER + "/")

    def test_upload_creates_missing_bucket(self, monkeypatch):
        client = MagicMock()
        client.head_bucket.side_effect = ClientError({"Error": {"Code": "404"}}, "HeadBucket")
        client.generate_presigned_url.return_value = "https://signed.example/x"
        monkeypatch.setattr(storage_service, "_get_client", lambda endpoint=None: client)

        result = storage_service.upload_file(b"bytes", "x.png", "image/png", folder="avatars")

        client.create_bucket.assert_called_once()
        client.put_object.assert_called_once()
        assert result["url"] == "https://signed.example/x"
        assert result["object_key"].startswith("avatars/")


@pytest.mark.api
class TestHealth:

    def test_root(self, client):
        assert client.get("/").json() == {"status": "OK"}

    def test_health(self, client):
        data = client.get("/api/health").json()
        assert data["status"] == "OK"
        assert data["timestamp"]
        assert "environment" in data


@pytest.mark.unit
class TestCorsOptions:

    def test_wildcard_allows_any_origin_without_credentials(self):
        assert _cors_options(["*"]) == {"allow_origins": ["*"], "allow_credentials": False}

    def test_subdomain_patterns(self):
        options = _cors_options(["https://app.example.com", "https://*.netlify.app"])

        assert options["allow_origins"] == ["https://app.example.com"]
        assert options["allow_credentials"] is True
        assert options["allow_origin_regex"] == r"^(https://.*\.netlify\.app)$"
