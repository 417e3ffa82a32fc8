from . import env
# noinspection PyUnresolvedReferences
from .defaults import *

DEBUG = False

# Database
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': env.str('DB_NAME'),
        'USER': env.str('DB_USER'),
        'PASSWORD': env.str('DB_PASSWORD'),
        'HOST': env.str('DB_HOST'),
        'PORT': env.str('DB_PORT'),
        'DISABLE_SERVER_SIDE_CURSORS': True
    }
}

# Receipts and other media are kept on S3 compatible storage
STORAGES = {
    "default": {"BACKEND": "storages.backends.s3boto3.S3Boto3Storage"},
    "staticfiles": {"BACKEND": "storages.backends.s3boto3.S3StaticStorage"},
}

AWS_ACCESS_KEY_ID = env.str("S3_ACCESS_KEY_ID")
AWS_SECRET_ACCESS_KEY = env.str("S3_SECRET_ACCESS_KEY")
AWS_STORAGE_BUCKET_NAME = env.str("S3_STORAGE_BUCKET_NAME")
AWS_S3_ENDPOINT_URL = env.str("S3_ENDPOINT")
AWS_S3_USE_SSL = True
AWS_DEFAULT_ACL = "private"
AWS_QUERYSTRING_AUTH = True
# receipts are write-once
AWS_S3_FILE_OVERWRITE = False
