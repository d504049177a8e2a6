import re

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from team_portal.core.exceptions import UploadError
from team_portal.reviews import storage


class TestBuildFileName:
    def test_timestamp_prefix(self):
        assert re.fullmatch(r"\d{13}-my_report.pdf", storage.build_file_name("my report.pdf"))


class TestUploadFile:
    def test_returns_absolute_url(self):
        file = SimpleUploadedFile("report.pdf", b"%PDF-1.4", content_type="application/pdf")

        url = storage.upload_file(file, file_name="123-report.pdf")

        assert url == "http://testserver/media/review_attachments/123-report.pdf"
        assert storage.default_storage.exists("review_attachments/123-report.pdf")

    def test_backend_failure_becomes_upload_error(self, monkeypatch):
        def broken_save(name, content):
            raise OSError("bucket unreachable")

        monkeypatch.setattr(storage.default_storage, "save", broken_save)
        file = SimpleUploadedFile("report.pdf", b"data")

        with pytest.raises(UploadError) as exc:
            storage.upload_file(file, file_name="1-report.pdf")

        assert exc.value.details == {"file_name": "1-report.pdf"}
