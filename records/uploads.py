"""Validation of lab-report files sent inline as base64 data URLs."""
import base64
import binascii
import mimetypes
import re

from django.conf import settings

ALLOWED_FILE_TYPES = frozenset({"application/pdf", "image/jpeg", "image/jpg", "image/png"})

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[\w=.-]+)*;base64,(?P<payload>.*)$", re.S)


class UploadRejected(ValueError):
    pass


def _max_bytes():
    return getattr(settings, "LAB_UPLOAD_MAX_BYTES", 10 * 1024 * 1024)


def _canonical(mime):
    return "image/jpeg" if mime == "image/jpg" else mime


def inspect_upload(file_data: str, file_type: str = None, file_name: str = None):
    """
    Return (mime type, decoded size) for a base64 upload.

    The MIME type carried by a data URL wins; a declared type that
    disagrees with it is rejected. Raises UploadRejected for undecodable
    payloads, unsupported types and files over the size limit.
    """
    match = _DATA_URL.match(file_data or "")
    if match:
        mime = (match.group("mime") or "").lower() or None
        payload = match.group("payload")
    else:
        mime = None
        payload = file_data or ""
    payload = re.sub(r"\s+", "", payload)

    declared = (file_type or "").lower() or None
    if mime and declared and _canonical(declared) != _canonical(mime):
        raise UploadRejected("File type does not match file data")

    mime = mime or declared or (mimetypes.guess_type(file_name)[0] if file_name else None) or ""
    mime = mime.lower()
    if mime not in ALLOWED_FILE_TYPES:
        raise UploadRejected("Only PDF, JPEG and PNG files are allowed")

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise UploadRejected("File data is not valid base64")

    if not raw:
        raise UploadRejected("File is empty")
    if len(raw) > _max_bytes():
        raise UploadRejected("File size must be less than 10MB")

    return mime, len(raw)
