from . import env
# noinspection PyUnresolvedReferences
from .defaults import *

DEBUG = True

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": env.str("DB_NAME"),
        "USER": env.str("DB_USER"),
        "PASSWORD": env.str("DB_PASSWORD"),
        "HOST": env.str("DB_HOST"),
        "PORT": env.str("DB_PORT"),
        "TEST": {
            "NAME": f"test_{env.str('DB_NAME')}",
        },
    }
}
