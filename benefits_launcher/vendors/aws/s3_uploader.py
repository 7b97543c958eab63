""" File: S3 Uploader Service """

# Python Packages
import boto3

# Constants
from ...base import constants





class S3Uploader:

    def __init__(self):
        self.bucket_name = constants.AWS_S3_BUCKET_NAME
        self.key_prefix = constants.AWS_S3_KEY_PREFIX
        self.client = boto3.client(
            's3',
            aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
            aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
            region_name = constants.AWS_REGION
        )

    def object_key(self, key):
        return f"{self.key_prefix}/{key}" if self.key_prefix else key

    def upload_file(self, file_obj, key, content_type = None):
        """
        Upload file object to S3 under the configured key prefix

        Returns the storage key (without bucket or prefix)
        """

        extra_args = {"ContentType": content_type} if content_type else None

        self.client.upload_fileobj(
            Fileobj = file_obj,
            Bucket = self.bucket_name,
            Key = self.object_key(key),
            ExtraArgs = extra_args
        )

        return key
