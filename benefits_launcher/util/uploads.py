""" Upload checks shared by every multipart endpoint... """

# Python Packages
import os
import uuid

from werkzeug.utils import secure_filename

# Constants
from ..base import constants

# Exceptions
from .exceptions import ValidationException
from .validators import file_extension
from . import messages





def file_size(file) -> int:
    """ Size of an uploaded FileStorage without consuming it... """

    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def validate_upload(file, allowed_extensions, max_size_mb: int = None) -> str:
    """
    Check presence, extension and size of an uploaded file.

    Returns:
        str: the lower-case extension
    """

    if not file:
        raise ValidationException(message = messages.ERROR["FILE_REQUIRED"])

    if not file.filename:
        raise ValidationException(message = messages.ERROR["INVALID_FILE"])

    ext = file_extension(file.filename)

    if ext not in allowed_extensions:
        raise ValidationException(
            message = messages.ERROR["UNSUPPORTED_FILE_FORMAT"].format(
                file_extension = (ext or "none").upper(),
                supported = ", ".join(sorted(e.upper() for e in allowed_extensions))
            )
        )

    limit = max_size_mb or constants.MAX_UPLOAD_SIZE_MB
    if file_size(file) > limit * 1024 * 1024:
        raise ValidationException(message = messages.ERROR["FILE_TOO_LARGE"].format(limit))

    return ext


def unique_filename(filename: str) -> str:
    """ <uuid>_<secured original name>, safe as a storage key segment... """

    safe_name = secure_filename(filename) or "upload"
    return f"{uuid.uuid4().hex}_{safe_name}"
