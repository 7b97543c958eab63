"""
S3 File Storage

Same interface as LocalFileStorage, composed from the S3 upload, read
and delete services.
"""

# Services
from .s3_uploader import S3Uploader
from .s3_direct_reader import S3DirectReader
from .s3_delete import S3DeleteService





class S3FileStorage:

    def __init__(self):
        self.uploader = S3Uploader()
        self.reader = S3DirectReader()
        self.deleter = S3DeleteService()


    def upload_file(self, file_obj, key: str) -> str:
        content_type = getattr(file_obj, "mimetype", None)
        return self.uploader.upload_file(file_obj, key, content_type = content_type)


    def read_file(self, key: str) -> bytes:
        return self.reader.get_file_bytes_from_s3(self.uploader.object_key(key))


    def delete_file(self, key: str):
        self.deleter.delete_file(self.uploader.object_key(key))
