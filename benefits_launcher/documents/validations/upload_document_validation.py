"""
Upload Document Validation
"""

# Constants
from ...base import constants

# Helpers
from ...util.uploads import validate_upload

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class UploadDocumentValidation:

    def validate(self, args):
        """
        Validate full arguments
        """

        validate_upload(args.get("file"), constants.DOCUMENT_EXTENSIONS)

        if not args.get("type"):
            raise ValidationException(message = messages.ERROR["DOCUMENT_TYPE_REQUIRED"])

        return True
