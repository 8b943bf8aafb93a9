from datetime import datetime, timezone
from types import SimpleNamespace
from unittest import mock

from uploads.services import ImageStore

BUCKET = "test-bucket"


def fake_blob(name, size=0, created=None, content_type=""):
    return SimpleNamespace(
        name=name,
        size=size,
        time_created=created or datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc),
        content_type=content_type,
    )


def make_store(blobs=None, bucket_name=BUCKET):
    """
    ImageStore over a mocked storage backend. `backend.bucket` is a Mock,
    so every blob handle is `backend.bucket.blob.return_value`.
    """
    backend = mock.Mock()
    backend.bucket_name = bucket_name
    backend.bucket.list_blobs.return_value = list(blobs or [])
    return ImageStore(backend, prefix="uploads/")
