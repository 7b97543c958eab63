"""
S3 Delete Service

Handles:
    - Delete single object (document, logo, template)
"""

# Python Packages
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

# Constants
from ...base import constants

logger = logging.getLogger(__name__)





class S3DeleteService:
    """
    AWS S3 Delete Operations
    """

    def __init__(self):
        """
        Initialize S3 client using environment constants
        """

        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
            aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
            region_name = constants.AWS_REGION
        )

        self.bucket_name = constants.AWS_S3_BUCKET_NAME


    # ---------------------------------------------------------
    # 🔹 Delete Single File
    # ---------------------------------------------------------
    def delete_file(self, s3_key: str):
        """
        Delete a single object from S3

        Args:
            s3_key (str): Full S3 object key
        """

        try:
            self.s3_client.delete_object(
                Bucket = self.bucket_name,
                Key = s3_key
            )

        except (BotoCoreError, ClientError) as e:
            logger.error("S3 delete failed", extra = {"component": "storage.s3", "path": s3_key})
            raise RuntimeError(f"S3 file delete failed: {str(e)}") from e
