""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    # Auth
    "LOGOUT_SUCCESS"            :   "Logged out successfully.",
    "PASSWORD_CHANGE_SUCCESS"   :   "Password changed successfully.",

    # Companies
    "COMPANY_INFO_SAVED"        :   "Company information saved successfully.",
    "COVERAGE_INFO_SAVED"       :   "Coverage information saved successfully.",
    "EMPLOYEE_DELETE_SUCCESS"   :   "Employee deleted successfully.",

    # Documents
    "DOCUMENT_DELETE_SUCCESS"   :   "Document deleted successfully.",
    "DOCUMENT_OVERRIDE_SUCCESS" :   "Document override applied successfully.",

    # Plans
    "COMPANY_PLAN_DELETE_SUCCESS":  "Plan removed from company.",
    "PLAN_UPLOAD_SUCCESS"       :   "Successfully processed and imported {} plans.",

    # Admin / Broker
    "USER_UPDATE_SUCCESS"       :   "User updated successfully.",
    "BROKER_UPDATE_SUCCESS"     :   "Broker updated successfully.",
    "BROKER_FLAG_SUCCESS"       :   "Broker flag status updated.",
    "TEMPLATE_DEACTIVATED"      :   "PDF template deactivated.",
    "MAPPING_DELETE_SUCCESS"    :   "Field mapping deleted."
}


# ERROR MESSAGES
ERROR = {
    # Auth Errors
    "MISSING_REQUIRED_FIELDS"   :   "Missing required fields.",
    "INVALID_CREDENTIALS"       :   "Invalid username or password.",
    "USERNAME_EXISTS"           :   "Username already exists.",
    "EMAIL_EXISTS"              :   "Email already exists.",
    "WEAK_PASSWORD"             :   "Password must be at least 8 characters with uppercase, lowercase, number, and special character.",
    "CURRENT_PASSWORD_INVALID"  :   "Current password is incorrect.",
    "LOGIN_REQUIRED"            :   "Authentication required.",
    "ADMIN_REQUIRED"            :   "Admin access required.",
    "BROKER_REQUIRED"           :   "Access denied: No broker association.",
    "BROKER_OWNER_REQUIRED"     :   "Access denied: Owner role required.",
    "FORBIDDEN"                 :   "Forbidden.",
    "ACCOUNT_DISABLED"          :   "This account has been disabled.",
    "REGISTRATION_FAILED"       :   "Registration failed.",
    "USERNAME_LENGTH"           :   "Username must be between 3 and 50 characters.",
    "TOO_MANY_REQUESTS"         :   "Too many requests, please try again later.",

    # Request Errors
    "INVALID_REQUEST"           :   "Request body is required.",
    "VALIDATION_FAILED"         :   "Validation failed.",
    "INVALID_FIELD"             :   "Invalid value for {}.",
    "FIELD_REQUIRED"            :   "{} is required.",

    # Broker Errors
    "BROKER_NOT_FOUND"          :   "Broker not found.",
    "BROKER_DISABLED"           :   "Broker agency is disabled.",
    "INVALID_COLOR"             :   "{} must be a hex colour like #1e40af.",
    "INVALID_BROKER_USER_ROLE"  :   "Broker users must have the staff or employer role.",
    "BROKER_SAVE_FAILED"        :   "Unable to save broker settings.",
    "LOGO_NOT_FOUND"            :   "No logo has been uploaded.",

    # User Errors
    "USER_NOT_FOUND"            :   "User not found.",
    "INVALID_ROLE"              :   "Invalid role specified.",
    "USER_CREATE_FAILED"        :   "Unable to create user.",
    "USER_UPDATE_FAILED"        :   "Unable to update user.",

    # Company Errors
    "COMPANY_NOT_FOUND"         :   "Company not found.",
    "COMPANY_SAVE_FAILED"       :   "Unable to save company.",
    "OWNERSHIP_EXCEEDS_TOTAL"   :   "Total ownership percentage cannot exceed 100%. Currently allocated: {}%.",
    "OWNERSHIP_TOTAL_INVALID"   :   "Total ownership percentage must equal 100%. Currently: {}%.",
    "OWNERS_REQUIRED"           :   "At least one owner is required.",
    "INVALID_PERCENTAGE"        :   "{} must be a whole number between 0 and 100.",
    "OWNER_SAVE_FAILED"         :   "Unable to save owners.",
    "EMPLOYEE_SAVE_FAILED"      :   "Unable to save employee.",
    "CENSUS_IMPORT_FAILED"      :   "Unable to import census.",
    "COVERAGE_SAVE_FAILED"      :   "Unable to save coverage information.",
    "INITIATOR_SAVE_FAILED"     :   "Unable to save application initiator.",
    "EMPLOYEE_NOT_FOUND"        :   "Employee not found.",
    "CENSUS_EMPTY"              :   "The census file has no employee rows.",
    "CENSUS_MISSING_COLUMNS"    :   "The census file is missing required columns: {}.",
    "CENSUS_UNREADABLE"         :   "The census file could not be read.",
    "INITIATOR_NOT_FOUND"       :   "Application initiator not found.",
    "COVERAGE_NOT_FOUND"        :   "Coverage information not found.",

    # Document Errors
    "FILE_REQUIRED"             :   "No file uploaded.",
    "INVALID_FILE"              :   "Invalid file name.",
    "UNSUPPORTED_FILE_FORMAT"   :   "Unsupported file format: {file_extension}. Supported formats: {supported}",
    "FILE_TOO_LARGE"            :   "File size must be less than {}MB.",
    "DOCUMENT_NOT_FOUND"        :   "Document not found.",
    "DOCUMENT_TYPE_REQUIRED"    :   "Document type is required.",
    "DOCUMENT_UPLOAD_FAILED"    :   "Unable to upload document.",
    "DOCUMENT_DELETE_FAILED"    :   "Unable to delete document.",
    "OVERRIDE_REASON_REQUIRED"  :   "Override reason is required.",
    "OVERRIDE_NOT_ALLOWED"      :   "Insufficient permissions for override.",
    "STORAGE_READ_FAILED"       :   "Stored file could not be read.",

    # Plan Errors
    "PLAN_NOT_FOUND"            :   "Plan not found.",
    "PLAN_ALREADY_SELECTED"     :   "Plan is already selected for this company.",
    "PLAN_NOT_SELECTED"         :   "Plan is not selected for this company.",
    "CARRIER_REQUIRED"          :   "Carrier is required.",
    "PLAN_UPLOAD_FAILED"        :   "Unable to import plans.",
    "PLAN_FILE_EMPTY"           :   "The plan file has no rows.",
    "PLAN_FILE_UNREADABLE"      :   "The plan file could not be read.",
    "PLAN_SELECT_FAILED"        :   "Unable to update plan selection.",
    "CONTRIBUTION_SAVE_FAILED"  :   "Unable to save contribution.",
    "CONTRIBUTION_MINIMUM"      :   "Employer contribution must be at least {}% of the employee premium.",

    # Application Errors
    "APPLICATION_NOT_FOUND"     :   "Application not found.",
    "APPLICATION_UPDATE_FAILED" :   "Unable to update application.",
    "INVALID_STATUS"            :   "Invalid application status.",
    "INVALID_STEP"              :   "Unknown enrollment step: {}.",
    "SIGNATURE_REQUIRED"        :   "Signature is required.",
    "APPLICATION_ALREADY_SUBMITTED": "Application has already been submitted.",

    # PDF Errors
    "PDF_TEMPLATE_NOT_FOUND"    :   "PDF template not found.",
    "PDF_TEMPLATE_INACTIVE"     :   "PDF template is not active.",
    "PDF_TEMPLATE_INVALID"      :   "The uploaded file is not a readable PDF.",
    "PDF_UPLOAD_FAILED"         :   "Failed to upload PDF template.",
    "PDF_GENERATION_FAILED"     :   "Failed to generate PDF.",
    "MAPPING_NOT_FOUND"         :   "Field mapping not found.",
    "MAPPING_SAVE_FAILED"       :   "Unable to save field mapping.",
    "GENERATED_PDF_NOT_FOUND"   :   "Generated PDF not found.",
    "GENERATED_PDF_NOT_READY"   :   "The PDF has not been generated yet.",
    "INVALID_DATA_SOURCE"       :   "Data source must be one of: {}.",
    "INVALID_FIELD_TYPE"        :   "Field type must be one of: {}."
}


# ERROR CODES
ERROR_CODES = {
    "HTTP_400_BAD_REQUEST"                  :   400,
    "HTTP_401_BAD_AUTHORIZATION"            :   401,
    "HTTP_403_NOT_AUTHORIZED"               :   403,
    "HTTP_404_NOT_FOUND"                    :   404,
    "HTTP_409_CONFLICT"                     :   409,
    "HTTP_429_TOO_MANY_REQUEST"             :   429,
    "HTTP_500_INTERNAL_ERROR"               :   500
}
