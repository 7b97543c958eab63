"""
Local File Storage

Handles:
    - Write uploaded files under UPLOAD_DIR
    - Read stored files back
    - Delete a single file
"""

# Python Packages
import logging
import os
import shutil

from flask import current_app, has_app_context

# Constants
from ...base import constants

logger = logging.getLogger(__name__)





class LocalFileStorage:
    """
    Disk-backed storage rooted at UPLOAD_DIR
    """

    def __init__(self, root: str = None):
        if root is None and has_app_context():
            root = current_app.config.get("UPLOAD_DIR")

        self.root = os.path.abspath(root or constants.UPLOAD_DIR)


    def _path(self, key: str) -> str:
        path = os.path.abspath(os.path.join(self.root, key))

        # Keys come from our own services, but never let one escape the root
        if os.path.commonpath([self.root, path]) != self.root:
            raise ValueError(f"Storage key outside upload root: {key}")

        return path


    def upload_file(self, file_obj, key: str) -> str:
        """
        Copy a readable binary stream to <root>/<key>

        Returns:
            str: the storage key
        """

        path = self._path(key)
        os.makedirs(os.path.dirname(path), exist_ok = True)

        with open(path, "wb") as destination:
            shutil.copyfileobj(file_obj, destination)

        logger.info("Stored file", extra = {"component": "storage.local", "path": key})
        return key


    def read_file(self, key: str) -> bytes:
        with open(self._path(key), "rb") as source:
            return source.read()


    def delete_file(self, key: str):
        path = self._path(key)

        if os.path.exists(path):
            os.remove(path)
