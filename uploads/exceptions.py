# uploads/exceptions.py
"""
Errors raised by uploads.services. Each one wraps the client library error
that caused it (available as __cause__).
"""


class StorageError(Exception):
    """Base exception for object storage calls"""
    def __init__(self, object_name=None, message="storage operation failed"):
        self.object_name = object_name
        if object_name:
            message = f"{message}: {object_name}"
        super().__init__(message)


class UploadError(StorageError):
    def __init__(self, object_name):
        super().__init__(object_name, "failed to upload object")


class ListError(StorageError):
    def __init__(self, prefix):
        super().__init__(prefix, "failed to list objects under")


class DeleteError(StorageError):
    """
    Deletion failed. A missing object also ends up here; callers cannot
    tell "not found" apart from other failures.
    """
    def __init__(self, object_name):
        super().__init__(object_name, "failed to delete object")


class ReadError(StorageError):
    def __init__(self, object_name):
        super().__init__(object_name, "failed to read object")


class ObjectNotFound(StorageError):
    def __init__(self, object_name):
        super().__init__(object_name, "object not found")
