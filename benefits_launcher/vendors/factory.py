"""
File Storage Factory
====================
Single place that decides where uploaded files live.

How to switch backends
----------------------
In your .env file, set:

    FILE_STORAGE_BACKEND=local   # files under UPLOAD_DIR (default)
    FILE_STORAGE_BACKEND=s3      # files in AWS_S3_BUCKET_NAME

Every backend exposes the same methods:

    upload_file(file_obj, key) -> key
    read_file(key)             -> bytes
    delete_file(key)

Keys are relative ("companies/12/documents/<uuid>_de9c.pdf"), so rows
written with one backend keep working after a migration of the files.
"""

# Python Packages
import logging

# Constants
from ..base import constants

logger = logging.getLogger(__name__)





def get_file_storage():
    """
    Return the storage service selected by FILE_STORAGE_BACKEND.

    Raises:
        ValueError: If FILE_STORAGE_BACKEND is set to an unsupported value.
    """

    backend = constants.FILE_STORAGE_BACKEND.lower().strip()

    if backend == "local":
        from .local.local_storage import LocalFileStorage
        return LocalFileStorage()

    elif backend == "s3":
        from .aws.s3_storage import S3FileStorage
        return S3FileStorage()

    else:
        raise ValueError(
            f"Unsupported FILE_STORAGE_BACKEND='{backend}'. "
            f"Allowed values: 'local', 's3'. "
            f"Check your .env file."
        )
