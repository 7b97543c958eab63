""" All Application Constants declare here... """

# Python Packages
from decouple import Csv, config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'change-me-in-production')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
SESSION_LIFETIME_MINUTES        =   config('SESSION_LIFETIME_MINUTES', default = 30, cast = int)


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Benefits Launcher",
                                "version": "1.0",
                                "description": "Group health-insurance enrollment API: \
                                broker agencies, employer onboarding, documents, \
                                plan selection, PDF generation and admin control center."
                            }


# Database Constants
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'benefits_launcher')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')

# Full URL wins over the individual parts (sqlite:/// for local prototyping)
DATABASE_URL                    =   config('DATABASE_URL', default = '')


# File Storage Constants
FILE_STORAGE_BACKEND            =   config('FILE_STORAGE_BACKEND', default = 'local')
UPLOAD_DIR                      =   config('UPLOAD_DIR', default = 'uploads')
MAX_UPLOAD_SIZE_MB              =   config('MAX_UPLOAD_SIZE_MB', default = 10, cast = int)


# AWS Constants
AWS_ACCESS_KEY_ID		        =	config('AWS_ACCESS_KEY_ID', default = '')
AWS_SECRET_ACCESS_KEY	        =	config('AWS_SECRET_ACCESS_KEY', default = '')
AWS_REGION				        =	config('AWS_REGION', default = 'us-west-2')
AWS_S3_BUCKET_NAME	            =	config('AWS_S3_BUCKET_NAME', default = '')
AWS_S3_KEY_PREFIX               =   config('AWS_S3_KEY_PREFIX', default = 'benefits-launcher')


# Celery Constants
CELERY_BROKER_URL               =   config('CELERY_BROKER_URL', default = 'redis://localhost:6379/0')
CELERY_RESULT_BACKEND           =   config('CELERY_RESULT_BACKEND', default = 'redis://localhost:6379/0')
CELERY_TASK_ALWAYS_EAGER        =   config('CELERY_TASK_ALWAYS_EAGER', default = False, cast = bool)


# Rate Limit Constants (requests, window seconds)
RATE_LIMITS                     =   {
                                        "auth": (5, 15 * 60),
                                        "submission": (10, 60 * 60),
                                        "general": (100, 15 * 60)
                                    }
RATE_LIMIT_ENABLED              =   config('RATE_LIMIT_ENABLED', default = True, cast = bool)


# Reverse proxies in front of the app whose X-Forwarded-For entry is trusted
TRUSTED_PROXY_COUNT             =   config('TRUSTED_PROXY_COUNT', default = 1, cast = int)


# CORS Constants
CORS_ORIGINS                    =   config('CORS_ORIGINS', default = 'http://localhost:5173', cast = Csv())


# Enrollment Constants
MIN_EMPLOYER_CONTRIBUTION       =   50
OWNERSHIP_TOTAL                 =   100
AUDIT_LOG_DEFAULT_LIMIT         =   50


# User Roles
ROLE_ADMIN                      =   "admin"
ROLE_OWNER                      =   "owner"
ROLE_STAFF                      =   "staff"
ROLE_EMPLOYER                   =   "employer"
USER_ROLES                      =   [ROLE_ADMIN, ROLE_OWNER, ROLE_STAFF, ROLE_EMPLOYER]
BROKER_ROLES                    =   [ROLE_OWNER, ROLE_STAFF]


# Application Statuses
APPLICATION_STATUSES            =   ["in_progress", "pending_review", "submitted", "approved", "rejected"]


# Branding Defaults
DEFAULT_BRANDING                =   {
                                        "agency_name": "Murillo Insurance Agency",
                                        "product_name": "Benefits Submission Center",
                                        "color_primary": "#3b82f6",
                                        "color_secondary": "#1e40af",
                                        "logo_url": None,
                                        "contact_email": "support@murilloinsuranceagency.com",
                                        "contact_phone": "(555) 123-4567"
                                    }


# Upload Extensions
DOCUMENT_EXTENSIONS             =   {"pdf", "doc", "docx", "jpg", "jpeg", "png"}
CENSUS_EXTENSIONS               =   {"csv", "xlsx"}
PLAN_FILE_EXTENSIONS            =   {"csv", "xlsx"}
LOGO_EXTENSIONS                 =   {"png", "jpg", "jpeg", "svg"}
PDF_TEMPLATE_EXTENSIONS         =   {"pdf"}
