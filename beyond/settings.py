# beyond/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

# .env w katalogu projektu (opcjonalny)
load_dotenv(BASE_DIR / '.env')


def env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.getenv('BEYOND_SECRET_KEY', 'django-insecure-beyond-dev-key')
DEBUG = env_bool('BEYOND_DEBUG')
ALLOWED_HOSTS = os.getenv('BEYOND_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'apps.core',
    'apps.accounts',
    'apps.daily',
    'apps.ceremonies',
    'apps.goals',
    'apps.journal',
    'apps.cohorts',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'beyond.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv('BEYOND_DB_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
# Strefa użytkownika - od niej zależy "dzisiaj" (klucze dat, seria).
# UTC to tylko wartość domyślna: wdrożenie musi ustawić BEYOND_TIME_ZONE,
# inaczej dzień i seria zmieniają się o północy UTC.
TIME_ZONE = os.getenv('BEYOND_TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# --- Beyond ---

# Adapter magazynu klucz-wartość
BEYOND_STORE = os.getenv('BEYOND_STORE', 'apps.core.adapters.orm_store.DjangoKeyValueStore')

# Uszkodzone dane przy odczycie: 'empty' (log + pusta kolekcja) albo 'raise'
BEYOND_ON_CORRUPT = os.getenv('BEYOND_ON_CORRUPT', 'empty')

BEYOND_DEFAULT_COHORTS = ['Alpha', 'Beta']
BEYOND_INVITE_PREFIX = 'beyond://invite/'

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
        'apps': {
            'handlers': ['console'],
            'level': os.getenv('BEYOND_LOG_LEVEL', 'INFO'),
        },
    },
}
