"""
Upload of review attachments to the configured storage backend.

Local filesystem in development, S3/MinIO through django-storages when
``USE_S3_STORAGE`` is set. The returned URL is stored as the attachment link.
"""

import logging
import time
from urllib.parse import urljoin

from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile
from django.utils.text import get_valid_filename

from team_portal.core.exceptions import UploadError

logger = logging.getLogger(__name__)

UPLOAD_PREFIX = "review_attachments"


def build_file_name(original_name: str) -> str:
    """Prefix the file name with a millisecond timestamp."""
    return f"{int(time.time() * 1000)}-{get_valid_filename(original_name or 'file')}"


def upload_file(file: UploadedFile, file_name: str | None = None) -> str:
    """
    Store ``file`` and return a publicly reachable URL.

    Raises UploadError when the storage backend fails.
    """
    name = file_name or build_file_name(file.name)
    try:
        stored_name = default_storage.save(f"{UPLOAD_PREFIX}/{name}", file)
        # FileSystemStorage returns a path relative to the site
        url = urljoin(settings.SITE_URL, default_storage.url(stored_name))
    except Exception as e:
        logger.exception("Upload of %s failed", name)
        raise UploadError(details={"file_name": name}) from e

    logger.info("Uploaded %s (%d bytes)", stored_name, file.size or 0)
    return url
