# mindvault/settings.py
from pathlib import Path

from mindvault.env import env

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env.secret_key
DEBUG = env.debug
ALLOWED_HOSTS = env.allowed_hosts
APP_BASE_URL = env.app_base_url.rstrip('/')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django_filters',

    # Nasze aplikacje
    'apps.core',
    'apps.goals',
    'apps.transcriptions',
    'apps.reports',
    'apps.quotes',
    'apps.subscriptions',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'mindvault.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'mindvault.wsgi.application'

if env.uses_postgres:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': env.postgres_db,
            'USER': env.postgres_user,
            'PASSWORD': env.postgres_password or '',
            'HOST': env.postgres_host,
            'PORT': env.postgres_port,
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
]

# Brak sesji -> przekierowanie do punktu logowania (jak ProtectedRoute)
LOGIN_URL = '/api/login'
LOGIN_REDIRECT_URL = '/'

# Sesja ważna tydzień, odświeżana przy aktywności
SESSION_COOKIE_AGE = 7 * 24 * 60 * 60
SESSION_SAVE_EVERY_REQUEST = True
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = not DEBUG
CSRF_COOKIE_SECURE = not DEBUG

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# --- Email ---
# SendGrid przez SMTP relay: użytkownik 'apikey', hasło = klucz API
EMAIL_ENABLED = bool(env.sendgrid_api_key)
EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
EMAIL_HOST = 'smtp.sendgrid.net'
EMAIL_PORT = 587
EMAIL_USE_TLS = True
EMAIL_HOST_USER = 'apikey'
EMAIL_HOST_PASSWORD = env.sendgrid_api_key or ''
EMAIL_TIMEOUT = 10
DEFAULT_FROM_EMAIL = env.default_from_email
APP_NAME = 'MindVault'

# --- Google OAuth ---
GOOGLE_CLIENT_SECRETS_FILE = env.google_client_secrets_file
GOOGLE_REDIRECT_URI = env.google_redirect_uri
GOOGLE_SCOPES = [
    'openid',
    'https://www.googleapis.com/auth/userinfo.email',
    'https://www.googleapis.com/auth/userinfo.profile',
]

# --- PayPal ---
PAYPAL_CLIENT_ID = env.paypal_client_id
PAYPAL_PLAN_ID = env.paypal_plan_id
TRIAL_DAYS = 30

# --- Connectivity smoke test ---
CONNECTIVITY_TARGETS = {
    'google': 'https://www.google.com',
    'sendgrid': 'https://api.sendgrid.com/v3/mail/send',
    'paypal': 'https://api-m.paypal.com/v1/oauth2/token',
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
        },
        'apps': {
            'handlers': ['console'],
            'level': env.log_level,
        },
        'webclient': {
            'handlers': ['console'],
            'level': env.log_level,
        },
    },
}
