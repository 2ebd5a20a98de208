"""
Django settings for quranreader project.

Değerler ortam değişkenlerinden okunur; veritabanı kullanılmaz.
"""
import os

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-quranreader-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '0') == '1'

ALLOWED_HOSTS = [host for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if host]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'quran',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'quranreader.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'quranreader.wsgi.application'

DATABASES = {}

LANGUAGE_CODE = 'tr'
TIME_ZONE = 'Europe/Istanbul'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# Kuran API ayarları
QURAN_API_BASE_URL = os.environ.get('QURAN_API_BASE_URL', 'https://api.alquran.cloud/v1')

# Boş bırakılırsa requests'in varsayılanı (zaman aşımı yok) geçerli olur
QURAN_API_TIMEOUT = float(os.environ['QURAN_API_TIMEOUT']) if os.environ.get('QURAN_API_TIMEOUT') else None

QURAN_API_EDITION = os.environ.get('QURAN_API_EDITION') or None

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'quran': {
            'handlers': ['console'],
            'level': os.environ.get('DJANGO_LOG_LEVEL', 'INFO'),
        },
    },
}
