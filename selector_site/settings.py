"""
Django settings for selector_site project.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env (for local dev)
load_dotenv()

# =====================
# PATHS
# =====================
BASE_DIR = Path(__file__).resolve().parent.parent

# =====================
# SECURITY & DEBUG
# =====================
SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-selector-site-dev-key')

# DEBUG is False by default unless explicitly set to True
DEBUG = os.getenv("DEBUG", "False").lower() == "true"

ALLOWED_HOSTS = [
    'localhost',
    '127.0.0.1',
    'testserver',
]

# Add Render's dynamic hostname if available
RENDER_EXTERNAL_HOSTNAME = os.getenv("RENDER_EXTERNAL_HOSTNAME")
if RENDER_EXTERNAL_HOSTNAME:
    ALLOWED_HOSTS.append(RENDER_EXTERNAL_HOSTNAME)

# =====================
# APPLICATIONS
# =====================
INSTALLED_APPS = [
    'django.contrib.staticfiles',

    # Your apps
    'apps.results_page',
]

# =====================
# MIDDLEWARE
# =====================
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',  # static files without a separate server
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'selector_site.urls'

# =====================
# TEMPLATES
# =====================
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
            'debug': DEBUG,
        },
    },
]

WSGI_APPLICATION = 'selector_site.wsgi.application'

# =====================
# DATABASE
# =====================
# Results are recomputed from the request parameters on every request.
DATABASES = {}

# =====================
# INTERNATIONALIZATION
# =====================
LANGUAGE_CODE = 'ja'
TIME_ZONE = 'Asia/Tokyo'
USE_I18N = True
USE_TZ = True

# =====================
# STATIC FILES
# =====================
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedStaticFilesStorage',
    },
}
WHITENOISE_USE_FINDERS = True

# =====================
# SELECTOR PAGE COLLABORATORS
# =====================
SELECTOR_RESULTS_PROVIDER = os.getenv(
    'SELECTOR_RESULTS_PROVIDER',
    'apps.results_page.results.fetch_results',
)

SELECTOR_DIRECTORIES = {
    'event': os.getenv('SELECTOR_EVENT_DIRECTORY', 'apps.results_page.directory.list_events'),
    'user': os.getenv('SELECTOR_USER_DIRECTORY', 'apps.results_page.directory.list_users'),
}

# Browser side timeout for lookup and refresh calls
SELECTOR_REQUEST_TIMEOUT_MS = int(os.getenv('SELECTOR_REQUEST_TIMEOUT_MS', '10000'))

# =====================
# LOGGING
# =====================
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
        },
    },
}

# =====================
# DEFAULT PRIMARY KEY
# =====================
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
