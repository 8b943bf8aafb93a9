import logging

from django.conf import settings
from django.core.exceptions import RequestDataTooBig
from django.http import (
    FileResponse,
    HttpResponseBadRequest,
    HttpResponseNotFound,
    HttpResponseServerError,
)
from django.http.multipartparser import MultiPartParserError
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_POST

from .exceptions import DeleteError, ListError, ObjectNotFound, ReadError, UploadError
from .services import file_extension, get_image_store, is_allowed_file_type

logger = logging.getLogger(__name__)


def _text(response_class, message):
    return response_class(message, content_type="text/plain; charset=utf-8")


def _declared_length(request):
    try:
        return int(request.META.get("CONTENT_LENGTH") or 0)
    except ValueError:
        return 0


@require_POST
def upload_image(request):
    """
    Upload one image (field "image") to the bucket and return a preview
    fragment. An optional "kanji_char_id" is echoed back as context only.
    """
    logger.info("Upload handler started")

    if _declared_length(request) > settings.MAX_UPLOAD_SIZE:
        logger.warning("Rejected upload: body of %s bytes exceeds limit", request.META.get("CONTENT_LENGTH"))
        return _text(HttpResponseBadRequest, "File too large or invalid form")

    try:
        upload = request.FILES.get("image")
    except (MultiPartParserError, RequestDataTooBig) as e:
        logger.warning("Error parsing multipart form: %s", e)
        return _text(HttpResponseBadRequest, "File too large or invalid form")

    if upload is None:
        logger.warning("Error getting file from form: no 'image' field")
        return _text(HttpResponseBadRequest, "Error retrieving file")

    if upload.size > settings.MAX_UPLOAD_SIZE:
        logger.warning("Rejected upload: %s is %d bytes", upload.name, upload.size)
        return _text(HttpResponseBadRequest, "File too large or invalid form")

    logger.info("Received file: %s (size: %d bytes, type: %s)", upload.name, upload.size, upload.content_type)

    if not is_allowed_file_type(upload.name):
        logger.warning("Invalid file type: %s", file_extension(upload.name))
        return _text(HttpResponseBadRequest, "Invalid file type. Only jpg, jpeg, png, and gif are allowed")

    try:
        stored = get_image_store().upload(upload, upload.name)
    except UploadError as e:
        logger.error("Error uploading file to bucket: %s (cause: %s)", e, e.__cause__)
        return _text(HttpResponseServerError, "Error uploading file")

    logger.info("Upload handler completed: %s", stored.url)
    return render(request, "uploads/_upload_success.html", {
        "file": stored,
        "kanji_id": request.POST.get("kanji_char_id", "").strip(),
    })


@require_GET
def list_files(request):
    """Gallery fragment with one card per image under uploads/."""
    try:
        files = get_image_store().list_images()
    except ListError as e:
        logger.error("Error iterating bucket objects: %s (cause: %s)", e, e.__cause__)
        return _text(HttpResponseServerError, "Error listing files")

    return render(request, "uploads/_file_list.html", {"files": files})


@require_POST
def delete_file(request):
    object_name = request.POST.get("objectName", "").strip()
    if not object_name:
        return _text(HttpResponseBadRequest, "Object name not provided")

    logger.info("Request to delete object: %s", object_name)

    try:
        get_image_store().delete(object_name)
    except DeleteError as e:
        logger.error("Error deleting object %s: %s", object_name, e.__cause__)
        return _text(HttpResponseServerError, "Error deleting file")

    return render(request, "uploads/_delete_success.html")


@require_GET
def serve_file(request, object_name):
    """Stream a stored object back with its stored content type."""
    try:
        reader, content_type = get_image_store().open(object_name)
    except ObjectNotFound:
        return _text(HttpResponseNotFound, "File not found")
    except ReadError as e:
        logger.error("Error creating reader for object %s: %s", object_name, e.__cause__)
        return _text(HttpResponseServerError, "Error serving file")

    return FileResponse(reader, content_type=content_type)
