"""
vendors/__init__.py
====================
Public surface of the vendors package.

Services import the storage through the factory so the backend can be
switched with FILE_STORAGE_BACKEND in .env:

    from ...vendors import FileStorage
    storage = FileStorage()
    key = storage.upload_file(file_obj, "companies/1/documents/x.pdf")
"""

from .factory import get_file_storage

# Factory function, exposed with a class-like name:
#   storage = FileStorage()
FileStorage = get_file_storage
