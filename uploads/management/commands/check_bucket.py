import time

from django.conf import settings
from django.core.files.storage import storages
from django.core.management.base import BaseCommand, CommandError

from uploads.services import STORAGE_ERRORS


class Command(BaseCommand):
    help = "Round-trip a small object through the bucket: write, list, read back, delete."

    def add_arguments(self, parser):
        parser.add_argument('--keep', action='store_true', help='Do not delete the test object afterwards')
        parser.add_argument('--public', action='store_true', help='Try to make the test object publicly readable')

    def handle(self, *args, **kwargs):
        bucket_name = settings.BUCKET_NAME
        backend = storages["default"]
        timeout = settings.STORAGE_TIMEOUT

        try:
            bucket = backend.bucket
            bucket.reload(timeout=timeout)
        except STORAGE_ERRORS as e:
            raise CommandError(f"Failed to get bucket attributes: {e}")
        self.stdout.write(self.style.SUCCESS(f"Connected to bucket: {bucket_name}"))

        content = "Hello from the bucket test command!"
        object_name = f"test-file-{int(time.time())}.txt"
        blob = bucket.blob(object_name)

        try:
            blob.upload_from_string(content, content_type="text/plain", timeout=settings.UPLOAD_TIMEOUT)
        except STORAGE_ERRORS as e:
            raise CommandError(f"Failed to write test file: {e}")
        self.stdout.write(self.style.SUCCESS(f"Uploaded test file: {object_name}"))

        if kwargs.get('public'):
            try:
                blob.make_public(timeout=timeout)
            except STORAGE_ERRORS as e:
                self.stdout.write(self.style.WARNING(f"Failed to make file public: {e}"))

        self.stdout.write("\nListing files in bucket:")
        self.stdout.write("-----------------------")
        count = 0
        try:
            for item in bucket.list_blobs(timeout=timeout):
                count += 1
                created = item.time_created.strftime("%Y-%m-%d %H:%M:%S") if item.time_created else "-"
                self.stdout.write(f"{count}. {item.name} (size: {item.size} bytes, created: {created})")
        except STORAGE_ERRORS as e:
            raise CommandError(f"Error iterating bucket objects: {e}")

        if count == 0:
            self.stdout.write(self.style.WARNING("No files found in bucket (this is unexpected!)"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Found {count} files in bucket"))

        try:
            read_back = blob.download_as_text(timeout=timeout)
        except STORAGE_ERRORS as e:
            raise CommandError(f"Failed to read file: {e}")
        if read_back != content:
            raise CommandError(f"File content doesn't match: got {read_back!r}, want {content!r}")
        self.stdout.write(self.style.SUCCESS(f"Read test file back, content matches: {content!r}"))

        if kwargs.get('keep'):
            self.stdout.write(f"Keeping test file: {object_name}")
            return

        try:
            blob.delete(timeout=timeout)
        except STORAGE_ERRORS as e:
            raise CommandError(f"Failed to delete test file: {e}")
        self.stdout.write(self.style.SUCCESS(f"Deleted test file: {object_name}"))
        self.stdout.write(self.style.SUCCESS("\nAll checks passed. The bucket is working correctly."))
