"""Root pytest configuration: minimal Django settings for the trucklog app."""

import django
from django.conf import settings


def pytest_configure(config):
    if settings.configured:
        return
    settings.configure(
        DEBUG=True,
        SECRET_KEY='trucklog-tests',
        ALLOWED_HOSTS=['testserver'],
        INSTALLED_APPS=[
            'django.contrib.contenttypes',
            'django.contrib.auth',
            'django.contrib.sessions',
            'rest_framework',
            'trucklog',
        ],
        MIDDLEWARE=[
            'django.contrib.sessions.middleware.SessionMiddleware',
            'django.middleware.common.CommonMiddleware',
            'django.middleware.csrf.CsrfViewMiddleware',
        ],
        SESSION_ENGINE='django.contrib.sessions.backends.signed_cookies',
        ROOT_URLCONF='trucklog.urls',
        TEMPLATES=[{
            'BACKEND': 'django.template.backends.django.DjangoTemplates',
            'APP_DIRS': True,
        }],
        DATABASES={},
        USE_TZ=True,
        TRUCKLOG_SERVICE_URL='http://trip-service.test',
        TRUCKLOG_REQUEST_TIMEOUT=5,
    )
    django.setup()
