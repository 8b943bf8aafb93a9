import io
import re
from unittest import mock

from django.test import SimpleTestCase, override_settings
from google.api_core.exceptions import NotFound, ServiceUnavailable
from google.auth.exceptions import DefaultCredentialsError

from uploads.exceptions import DeleteError, ListError, ObjectNotFound, ReadError, UploadError
from uploads.services import (
    content_type_for,
    generate_unique_filename,
    get_image_store,
    is_allowed_file_type,
)

from .helpers import BUCKET, fake_blob, make_store

UUID_RE = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


class FileTypeTests(SimpleTestCase):
    def test_allow_list(self):
        for name in ("a.jpg", "a.jpeg", "a.png", "a.gif", "A.PNG", "photo.JpG"):
            self.assertTrue(is_allowed_file_type(name), name)
        for name in ("a.txt", "a.webp", "a", "png", "a.png.exe", ".bashrc"):
            self.assertFalse(is_allowed_file_type(name), name)

    def test_content_type_from_extension(self):
        self.assertEqual(content_type_for("x.jpg"), "image/jpeg")
        self.assertEqual(content_type_for("x.JPEG"), "image/jpeg")
        self.assertEqual(content_type_for("x.png"), "image/png")
        self.assertEqual(content_type_for("x.gif"), "image/gif")
        self.assertEqual(content_type_for("x.bin"), "application/octet-stream")

    def test_unique_filename_keeps_extension(self):
        first = generate_unique_filename("my cat.PNG")
        second = generate_unique_filename("my cat.PNG")

        self.assertRegex(first, rf"^{UUID_RE}\.PNG$")
        self.assertNotEqual(first, second)


class ImageStoreUploadTests(SimpleTestCase):
    def test_upload_streams_with_content_type(self):
        store = make_store()
        blob = store.backend.bucket.blob.return_value
        fileobj = io.BytesIO(b"GIF89a" + bytes(100))
        fileobj.read(3)

        stored = store.upload(fileobj, "spin.gif")

        object_name = store.backend.bucket.blob.call_args.args[0]
        self.assertRegex(object_name, rf"^uploads/{UUID_RE}\.gif$")
        self.assertEqual(stored.name, object_name)
        self.assertEqual(stored.url, f"https://storage.googleapis.com/{BUCKET}/{object_name}")
        self.assertEqual(stored.content_type, "image/gif")
        blob.upload_from_file.assert_called_once_with(fileobj, content_type="image/gif", timeout=60)
        self.assertEqual(fileobj.tell(), 0)

    def test_upload_failure_is_wrapped(self):
        store = make_store()
        store.backend.bucket.blob.return_value.upload_from_file.side_effect = ServiceUnavailable("down")

        with self.assertRaises(UploadError) as ctx:
            store.upload(io.BytesIO(b"x"), "a.png")

        self.assertIsInstance(ctx.exception.__cause__, ServiceUnavailable)
        self.assertTrue(ctx.exception.object_name.startswith("uploads/"))

    def test_client_initialisation_failure_is_wrapped(self):
        store = make_store()
        type(store.backend).bucket = mock.PropertyMock(side_effect=DefaultCredentialsError("no creds"))

        with self.assertRaises(UploadError):
            store.upload(io.BytesIO(b"x"), "a.png")


class ImageStoreListTests(SimpleTestCase):
    def test_only_allow_listed_objects_are_returned(self):
        store = make_store([
            fake_blob("uploads/a.png", size=4096),
            fake_blob("uploads/notes.txt", size=10),
            fake_blob("uploads/b.JPG", size=1500),
            fake_blob("uploads/", size=0),
        ])

        images = store.list_images()

        self.assertEqual([i.name for i in images], ["uploads/a.png", "uploads/b.JPG"])
        self.assertEqual([i.size_kb for i in images], [4, 1])
        self.assertEqual(images[0].url, f"https://storage.googleapis.com/{BUCKET}/uploads/a.png")
        store.backend.bucket.list_blobs.assert_called_once_with(prefix="uploads/", timeout=30)

    def test_iteration_failure_is_wrapped(self):
        def broken_pages():
            yield fake_blob("uploads/a.png")
            raise ServiceUnavailable("page 2 failed")

        store = make_store()
        store.backend.bucket.list_blobs.return_value = broken_pages()

        with self.assertRaises(ListError):
            store.list_images()


class ImageStoreDeleteAndOpenTests(SimpleTestCase):
    def test_delete(self):
        store = make_store()

        store.delete("uploads/a.png")

        store.backend.bucket.blob.assert_called_once_with("uploads/a.png")
        store.backend.bucket.blob.return_value.delete.assert_called_once_with(timeout=30)

    def test_delete_missing_object_is_a_generic_failure(self):
        store = make_store()
        store.backend.bucket.blob.return_value.delete.side_effect = NotFound("no such object")

        with self.assertRaises(DeleteError) as ctx:
            store.delete("uploads/ghost.png")

        self.assertIsInstance(ctx.exception.__cause__, NotFound)

    def test_open_missing_object(self):
        store = make_store()
        store.backend.bucket.get_blob.return_value = None

        with self.assertRaises(ObjectNotFound):
            store.open("uploads/ghost.png")

    def test_open_returns_reader_and_content_type(self):
        store = make_store()
        blob = store.backend.bucket.get_blob.return_value
        blob.content_type = "image/png"
        blob.open.return_value = io.BytesIO(b"png-bytes")

        reader, content_type = store.open("uploads/a.png")

        self.assertEqual(reader.read(), b"png-bytes")
        self.assertEqual(content_type, "image/png")
        blob.open.assert_called_once_with("rb")

    def test_first_download_failure_is_wrapped(self):
        store = make_store()
        reader = store.backend.bucket.get_blob.return_value.open.return_value
        reader.read.side_effect = ServiceUnavailable("down")

        with self.assertRaises(ReadError) as ctx:
            store.open("uploads/a.png")

        self.assertIsInstance(ctx.exception.__cause__, ServiceUnavailable)

    def test_open_failure_is_wrapped(self):
        store = make_store()
        store.backend.bucket.get_blob.side_effect = ServiceUnavailable("down")

        with self.assertRaises(ReadError):
            store.open("uploads/a.png")


class GetImageStoreTests(SimpleTestCase):
    @override_settings(UPLOAD_PREFIX="uploads/")
    def test_uses_default_storage_backend(self):
        backend = mock.Mock(bucket_name="from-settings")
        with mock.patch("uploads.services.storages", {"default": backend}):
            store = get_image_store()

        self.assertIs(store.backend, backend)
        self.assertEqual(store.prefix, "uploads/")
        self.assertTrue(re.match(r"https://storage\.googleapis\.com/from-settings/x$", store.public_url("x")))
