# uploads/services.py
"""
Image storage on top of the default (Google Cloud Storage) backend.

The google-cloud-storage client is created lazily by django-storages the first
time `backend.bucket` is touched and then shared by every request in the
process. The client is safe for concurrent use, so no locking is done here.
"""
import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.conf import settings
from django.core.files.storage import storages
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from .exceptions import DeleteError, ListError, ObjectNotFound, ReadError, UploadError

logger = logging.getLogger(__name__)

PUBLIC_BASE_URL = "https://storage.googleapis.com"

ALLOWED_CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# requests' transport errors subclass OSError
STORAGE_ERRORS = (GoogleAPIError, GoogleAuthError, OSError)


def file_extension(filename):
    return os.path.splitext(filename)[1]


def is_allowed_file_type(filename):
    return file_extension(filename).lower() in ALLOWED_CONTENT_TYPES


def content_type_for(filename):
    return ALLOWED_CONTENT_TYPES.get(file_extension(filename).lower(), DEFAULT_CONTENT_TYPE)


def generate_unique_filename(original_filename):
    """uuid4 name that keeps the original extension as written."""
    return f"{uuid.uuid4()}{file_extension(original_filename)}"


@dataclass(frozen=True)
class StoredObject:
    name: str
    url: str
    size: int = 0
    created: Optional[datetime] = None
    content_type: str = ""

    @property
    def size_kb(self):
        return self.size // 1024


class ImageStore:
    """
    Upload, list, read and delete images under one key prefix of the bucket.
    """

    def __init__(self, backend, prefix=None):
        self.backend = backend
        self.prefix = settings.UPLOAD_PREFIX if prefix is None else prefix

    @property
    def bucket_name(self):
        return self.backend.bucket_name

    def public_url(self, object_name):
        return f"{PUBLIC_BASE_URL}/{self.bucket_name}/{object_name}"

    def upload(self, fileobj, original_filename):
        """
        Stream `fileobj` to a new object named uploads/<uuid><ext>.

        Nothing is cleaned up if the write fails part way.
        """
        object_name = f"{self.prefix}{generate_unique_filename(original_filename)}"
        content_type = content_type_for(object_name)
        logger.info("Uploading to object: %s in bucket: %s (%s)", object_name, self.bucket_name, content_type)

        try:
            blob = self.backend.bucket.blob(object_name)
            fileobj.seek(0)
            blob.upload_from_file(
                fileobj,
                content_type=content_type,
                timeout=settings.UPLOAD_TIMEOUT,
            )
        except STORAGE_ERRORS as e:
            raise UploadError(object_name) from e

        return StoredObject(
            name=object_name,
            url=self.public_url(object_name),
            size=getattr(fileobj, "size", 0) or 0,
            content_type=content_type,
        )

    def list_images(self):
        """
        Every allow-listed object under the prefix. The client iterator
        fetches further pages on its own until the listing is exhausted.
        """
        images = []
        try:
            blobs = self.backend.bucket.list_blobs(
                prefix=self.prefix,
                timeout=settings.STORAGE_TIMEOUT,
            )
            for blob in blobs:
                if not is_allowed_file_type(blob.name):
                    continue
                images.append(StoredObject(
                    name=blob.name,
                    url=self.public_url(blob.name),
                    size=blob.size or 0,
                    created=blob.time_created,
                    content_type=blob.content_type or "",
                ))
        except STORAGE_ERRORS as e:
            raise ListError(self.prefix) from e
        return images

    def delete(self, object_name):
        """Delete without checking existence first."""
        try:
            self.backend.bucket.blob(object_name).delete(timeout=settings.STORAGE_TIMEOUT)
        except STORAGE_ERRORS as e:
            raise DeleteError(object_name) from e
        logger.info("Successfully deleted object: %s", object_name)

    def open(self, object_name):
        """
        Returns:
            (reader, content_type): a binary file-like reader over the object.
        """
        try:
            blob = self.backend.bucket.get_blob(object_name, timeout=settings.STORAGE_TIMEOUT)
        except STORAGE_ERRORS as e:
            raise ReadError(object_name) from e
        if blob is None:
            raise ObjectNotFound(object_name)

        # The reader is lazy; one read forces the first download so a failure
        # surfaces here rather than after the response has started.
        try:
            reader = blob.open("rb")
            reader.read(1)
            reader.seek(0)
        except STORAGE_ERRORS as e:
            raise ReadError(object_name) from e
        return reader, blob.content_type or content_type_for(object_name)


def get_image_store():
    return ImageStore(storages["default"])
