""" AWS - S3 Bucket read operations... """

# Python Packages
import boto3

# Constants
from ...base import constants





class S3DirectReader:
    """
    Reads stored objects straight into memory, without a temp file.
    Documents, logos and filled PDFs are small enough for that.
    """

    def __init__(self):
        """
        Initialize the S3 client with AWS credentials from environment variables.
        """

        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
            aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
            region_name = constants.AWS_REGION
        )
        self.bucket_name = constants.AWS_S3_BUCKET_NAME


    def get_file_bytes_from_s3(self, s3_key):
        """
        Retrieve raw file bytes from S3.

        Args:
            s3_key (str): Full object key (prefix included)

        Returns:
            bytes
        """

        response = self.s3_client.get_object(
            Bucket = self.bucket_name,
            Key = s3_key
        )

        return response['Body'].read()
