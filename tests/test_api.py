"""
Tests for the HTTP routes.
Uses TestClient without entering the lifespan, services are mocked (no real DB).
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import make_image
from fastapi.testclient import TestClient

from vision_api.controller.vision_controller import VisionController
from vision_api.core.dependencies import get_app_settings, get_vision_controller
from vision_api.core.exceptions import DocumentNotFoundError
from vision_api.core.settings import AppSettings
from vision_api.main import app
from vision_api.schema.response import (
    DocumentOperationResponse,
    ImageStatus,
    StatusResponse,
    SummaryEntry,
    VideoSummary,
)
from vision_api.service.media_service import MediaService


@pytest.fixture
def image_service():
    return AsyncMock()


@pytest.fixture
def summary_service():
    return AsyncMock()


@pytest.fixture
def media_service(tmp_path):
    return MediaService(media_folder=str(tmp_path))


@pytest.fixture
def app_settings():
    return AppSettings(ADMIN_USERNAME=None, ADMIN_PASSWORD=None)


@pytest.fixture
def client(image_service, summary_service, media_service, app_settings):
    controller = VisionController(
        image_service=image_service,
        summary_service=summary_service,
        media_service=media_service,
    )
    app.dependency_overrides[get_vision_controller] = lambda: controller
    app.dependency_overrides[get_app_settings] = lambda: app_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestVideoSummaryAPI:

    def test_summary(self, client, summary_service):
        summary_service.summarize.return_value = VideoSummary(
            face_detection=[SummaryEntry(occurrences=[{"identity": {"name": "Alice", "score": 0.9}}])],
            image_keywords=[],
        )

        response = client.get("/api/videos/video-1/summary")

        assert response.status_code == 200
        assert response.json() == {
            "face_detection": [{"occurrences": [{"identity": {"name": "Alice", "score": 0.9}}]}],
            "image_keywords": [],
        }
        video_id, url_builder = summary_service.summarize.await_args.args
        assert video_id == "video-1"
        assert url_builder("img-1") == "http://testserver/images/image/img-1.jpg"

    def test_unknown_video_returns_error(self, client, summary_service):
        summary_service.summarize.side_effect = DocumentNotFoundError("videos", "missing")

        response = client.get("/api/videos/missing/summary")

        assert response.status_code == 500
        assert "missing" in response.json()["error"]


class TestImageAPI:

    def test_list_standalone_images(self, client, image_service):
        image_service.list_standalone_images.return_value = [
            make_image("img-1", keywords=[("cat", 0.7)], video_id=None),
        ]

        response = client.get("/api/images")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["id"] == "img-1"
        assert body[0]["analysis"]["image_keywords"][0]["class"] == "cat"

    def test_reset_open_without_admin_configured(self, client, image_service):
        image_service.reset_analysis.return_value = DocumentOperationResponse(id="img-1")
        response = client.get("/api/images/img-1/reset")
        assert response.status_code == 200
        assert response.json() == {"id": "img-1", "ok": True}

    def test_delete_unknown_image_returns_error(self, client, image_service):
        image_service.delete_image.side_effect = DocumentNotFoundError("images", "nope")
        response = client.delete("/api/images/nope")
        assert response.status_code == 500
        assert "error" in response.json()


class TestAdminAuth:

    @pytest.fixture
    def app_settings(self):
        return AppSettings(ADMIN_USERNAME="admin", ADMIN_PASSWORD="secret")

    def test_missing_credentials_rejected(self, client, image_service):
        response = client.delete("/api/images/img-1")
        assert response.status_code == 401
        assert response.headers["www-authenticate"].startswith("Basic")
        image_service.delete_image.assert_not_awaited()

    def test_wrong_credentials_rejected(self, client):
        response = client.get("/api/images/img-1/reset", auth=("admin", "wrong"))
        assert response.status_code == 401

    def test_valid_credentials_accepted(self, client, image_service):
        image_service.delete_image.return_value = DocumentOperationResponse(id="img-1")
        response = client.delete("/api/images/img-1", auth=("admin", "secret"))
        assert response.status_code == 200
        image_service.delete_image.assert_awaited_once_with("img-1")

    def test_listing_stays_public(self, client, image_service):
        image_service.list_standalone_images.return_value = []
        assert client.get("/api/images").status_code == 200


class TestAdminAuthWithoutPassword:

    @pytest.fixture
    def app_settings(self):
        return AppSettings(ADMIN_USERNAME="admin", ADMIN_PASSWORD=None)

    def test_empty_password_rejected(self, client, image_service):
        response = client.delete("/api/images/img-1", auth=("admin", ""))
        assert response.status_code == 401
        image_service.delete_image.assert_not_awaited()

    def test_reset_rejected(self, client, image_service):
        response = client.get("/api/images/img-1/reset", auth=("admin", ""))
        assert response.status_code == 401
        image_service.reset_analysis.assert_not_awaited()


class TestStatusAPI:

    def test_status(self, client, image_service):
        image_service.get_status.return_value = StatusResponse(images=ImageStatus(count=5, to_be_analyzed=2))
        response = client.get("/api/status")
        assert response.status_code == 200
        assert response.json() == {"images": {"count": 5, "to_be_analyzed": 2}}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_status_omits_unknown_counts(self, client, image_service):
        image_service.get_status.return_value = StatusResponse(images=ImageStatus(count=5))
        assert client.get("/api/status").json() == {"images": {"count": 5}}

    def test_health_without_database(self, client):
        app.state.mongo_client = None
        response = client.get("/health")
        assert response.json() == {"status": "degraded", "mongodb": False}

    def test_health_with_database(self, client):
        mongo_client = MagicMock()
        mongo_client.admin.command = AsyncMock(return_value={"ok": 1})
        app.state.mongo_client = mongo_client
        try:
            assert client.get("/health").json() == {"status": "ok", "mongodb": True}
        finally:
            app.state.mongo_client = None


class TestMediaAPI:

    def test_serves_attachment(self, client, tmp_path):
        (tmp_path / "img-1").mkdir()
        (tmp_path / "img-1" / "image.jpg").write_bytes(b"\xff\xd8\xff\xe0jpeg")

        response = client.get("/images/image/img-1.jpg")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/jpeg"
        assert response.content == b"\xff\xd8\xff\xe0jpeg"

    def test_missing_attachment(self, client):
        assert client.get("/images/thumbnail/img-1.jpg").status_code == 404

    def test_unknown_attachment_type(self, client):
        assert client.get("/images/original/img-1.jpg").status_code == 422
