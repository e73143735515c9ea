"""Tests for the file download endpoint."""

from city_info_api.app.core.config import settings
from city_info_api.app.services.file_service import get_download_path


class TestFilesEndpoint:

    def test_download_returns_png_with_filename(self, client):
        response = client.get("/api/files/1")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert "HttpMethods.png" in response.headers["content-disposition"]
        assert response.content == get_download_path().read_bytes()

    def test_file_id_does_not_select_the_file(self, client):
        first = client.get("/api/files/1")
        second = client.get("/api/files/some-other-file")

        assert first.status_code == second.status_code == 200
        assert first.content == second.content

    def test_content_type_is_inferred_from_extension(self, client, tmp_path, monkeypatch):
        target = tmp_path / "notes.txt"
        target.write_text("hello")
        monkeypatch.setattr(settings, "download_file", str(target))

        response = client.get("/api/files/7")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "hello"

    def test_unknown_extension_falls_back_to_octet_stream(self, client, tmp_path, monkeypatch):
        target = tmp_path / "blob.cityinfo"
        target.write_bytes(b"\x00\x01")
        monkeypatch.setattr(settings, "download_file", str(target))

        response = client.get("/api/files/7")

        assert response.headers["content-type"] == "application/octet-stream"

    def test_missing_file_is_not_found(self, client, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "download_file", str(tmp_path / "missing.png"))

        response = client.get("/api/files/1")

        assert response.status_code == 404
