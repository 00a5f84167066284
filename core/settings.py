import os
from pathlib import Path
from dotenv import load_dotenv   # <- nur für lokale/Dev-Umgebung

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent
# ------------------------------------------------------------------
# Laden der Umgebungsvariablen (nur wenn .env existiert)
# ------------------------------------------------------------------
dotenv_path = BASE_DIR / '.env'
if dotenv_path.exists():
  load_dotenv(dotenv_path)

# Quick-start development settings - unsuitable for production
# See https://docs.djangoproject.com/en/5.1/howto/deployment/checklist/

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('SECRET_KEY')
if not SECRET_KEY:
  raise RuntimeError('SECRET_KEY is not set in environment!')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv('DEBUG', 'False').lower() in ('1', 'true', 'yes')

# Split ALLOWED_HOSTS by comma, strip spaces
allowed_hosts_raw = os.getenv('ALLOWED_HOSTS', '127.0.0.1')
ALLOWED_HOSTS = [h.strip() for h in allowed_hosts_raw.split(',')]

STRING_TO_ADMIN_PATH = os.getenv('STRING_TO_ADMIN_PAGE', 'admin/')

# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django_smart_ratelimit',
    'config',
    'shop.apps.ShopConfig',
    'birthday.apps.BirthdayConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [ BASE_DIR / 'templates'],
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

WSGI_APPLICATION = 'core.wsgi.application'


# Database
# https://docs.djangoproject.com/en/5.1/ref/settings/#databases
DATABASES = {
  'default': {
      'ENGINE': os.getenv('DB_ENGINE', 'django.db.backends.sqlite3'),
      'NAME': os.getenv('DB_NAME', BASE_DIR / 'db.sqlite3'),
      'USER': os.getenv('DB_USER', ''),
      'PASSWORD': os.getenv('DB_PASSWORD', ''),
      'HOST': os.getenv('DB_HOST', ''),
      'PORT': os.getenv('DB_PORT', ''),
  }
}


# Password validation
# https://docs.djangoproject.com/en/5.1/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]


# Internationalization
# https://docs.djangoproject.com/en/5.1/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True


# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/5.1/howto/static-files/

STATIC_URL = 'static/'
#STATIC_ROOT =  os.path.join(BASE_DIR,'static/')
STATICFILES_DIRS = [
    BASE_DIR / "static",
]


# Default primary key field type
# https://docs.djangoproject.com/en/5.1/ref/settings/#default-auto-field

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGIN_URL = f'/{STRING_TO_ADMIN_PATH}login/'

PLATFORM_NAME = 'Birthday Order Fields'

# Überschrift über den Geburtsdaten im Checkout. None = übersetzte Standardüberschrift, leerer String = keine Überschrift.
BIRTHDAY_FIELDS_HEADING = os.getenv('BIRTHDAY_FIELDS_HEADING')

REDIS_SERVER_IP = os.getenv('REDIS_SERVER_IP', '127.0.0.1')
REDIS_SERVER_PORT = os.getenv('REDIS_SERVER_PORT', '6379')
REDIS_SERVER_DB = os.getenv('REDIS_SERVER_DB', '0')


RATELIMIT_BACKEND = os.getenv('RATELIMIT_BACKEND', 'redis')
RATELIMIT_REDIS = {
    'host': REDIS_SERVER_IP,
    'port': REDIS_SERVER_PORT,
    'db': REDIS_SERVER_DB,
}
USER_RATELIMIT_PER_HOUR = 100
IP_RATELIMIT_PER_MINUTE = 30

# -------------------------------------------------------------
# Logging – Konsole + rotierende Log‑Datei
# -------------------------------------------------------------
# Pfad für Log‑Datei – relative Pfad im Projektverzeichnis
LOG_DIR = BASE_DIR / 'logs'
LOG_DIR.mkdir(exist_ok=True)
BIRTHDAY_LOG_FILE = os.path.join(LOG_DIR, 'birthday.log')

LOGGING = {
  'version': 1,
  'disable_existing_loggers': False,
  'formatters': {
      'verbose': {
          'format': '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
          'datefmt': '%Y-%m-%d %H:%M:%S',
      },
  },
  'handlers': {
      # Standard‑Django‑Handler
      'console': {
          'class': 'logging.StreamHandler',
          'formatter': 'verbose',
      },
      # max 5MB, 3 alte Log‑Dateien behalten; Datei wird erst beim ersten Eintrag geöffnet
      'birthday_file': {
          'class': 'logging.handlers.RotatingFileHandler',
          'filename': BIRTHDAY_LOG_FILE,
          'maxBytes': 5 * 1024 * 1024,
          'backupCount': 3,
          'formatter': 'verbose',
          'encoding': 'utf-8',
          'delay': True,
      },
  },
  'loggers': {
      # Django‑Standard‑Logger
      'django': {
          'handlers': ['console'],
          'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
          'propagate': False,
      },
      'birthday': {
          'handlers': ['console', 'birthday_file'],
          'level': 'INFO',
          'propagate': False,
      },
      'shop': {
          'handlers': ['console', 'birthday_file'],
          'level': 'INFO',
          'propagate': False,
      },
      'config': {
          'handlers': ['console'],
          'level': 'INFO',
          'propagate': False,
      },
  },
}
