"""Django settings for the registro electoral project.

- SECRET_KEY/DEBUG/ALLOWED_HOSTS/DB/store keys pulled from environment variables
- WhiteNoise enabled for static files
- Production security headers enabled when DEBUG=False
"""

from pathlib import Path
import os

from decouple import config
import dj_database_url
from dotenv import load_dotenv
import certifi

# ------------------------------------------------------------
# Base paths / env
# ------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

# Certificate bundle for the outbound HTTPS calls to the hosted store
os.environ["SSL_CERT_FILE"] = certifi.where()

# ------------------------------------------------------------
# Core security
# ------------------------------------------------------------
SECRET_KEY = config("SECRET_KEY", default="CHANGE_ME_IN_ENV")
DEBUG = config("DEBUG", cast=bool, default=False)

# Comma-separated list: "localhost,127.0.0.1,.onrender.com"
ALLOWED_HOSTS = [h.strip() for h in config(
    "ALLOWED_HOSTS",
    default="localhost,127.0.0.1,testserver,.onrender.com"
).split(",") if h.strip()]

# ------------------------------------------------------------
# Application definition
# ------------------------------------------------------------
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # terceros
    "rest_framework",
    "corsheaders",
    "chartkick.django",

    # apps
    "registros",
    "registros_api",
    "panel",

    # librerias
    "crispy_forms",
    "crispy_bootstrap5",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",

    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",

    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

# ------------------------------------------------------------
# Database
# ------------------------------------------------------------
DATABASE_URL = config(
    "DATABASE_URL",
    default="sqlite:///" + str(BASE_DIR / "db.sqlite3"),
)

DATABASES = {
    "default": dj_database_url.parse(
        DATABASE_URL,
        conn_max_age=600,
        # Postgres gestionado usa SSL; sqlite no acepta sslmode
        ssl_require=not DEBUG and not DATABASE_URL.startswith("sqlite"),
    )
}

# ------------------------------------------------------------
# CORS
# ------------------------------------------------------------
CORS_ALLOW_ALL_ORIGINS = config("CORS_ALLOW_ALL_ORIGINS", cast=bool, default=True)

# ------------------------------------------------------------
# Password validation
# ------------------------------------------------------------
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# ------------------------------------------------------------
# Internationalization
# ------------------------------------------------------------
DEFAULT_CHARSET = "utf-8"
LANGUAGE_CODE = "es"
TIME_ZONE = config("TIME_ZONE", default="America/Caracas")
USE_I18N = True
USE_TZ = True

# ------------------------------------------------------------
# Static (WhiteNoise)
# ------------------------------------------------------------
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"    # collectstatic output
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ------------------------------------------------------------
# Messages -> toasts
# ------------------------------------------------------------
MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"

# ------------------------------------------------------------
# DRF
# ------------------------------------------------------------
REST_FRAMEWORK = {
    # el panel no usa usuarios de Django, el permiso mira la sesion
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# ------------------------------------------------------------
# Crispy forms
# ------------------------------------------------------------
CRISPY_ALLOWED_TEMPLATE_PACKS = "bootstrap5"
CRISPY_TEMPLATE_PACK = "bootstrap5"

# ------------------------------------------------------------
# Almacen de registros (Supabase / PostgREST)
# ------------------------------------------------------------
SUPABASE_URL = config("SUPABASE_URL", default="")
SUPABASE_ANON_KEY = config("SUPABASE_ANON_KEY", default="")
SUPABASE_TABLE = config("SUPABASE_TABLE", default="registrations")
SUPABASE_TIMEOUT = config("SUPABASE_TIMEOUT", cast=float, default=10)

# Sin Supabase configurado se usa la tabla local (desarrollo)
REGISTROS_BACKEND = config(
    "REGISTROS_BACKEND",
    default=(
        "registros.servicios.supabase_backend.SupabaseBackend"
        if SUPABASE_URL
        else "registros.servicios.orm_backend.ORMBackend"
    ),
)

# ------------------------------------------------------------
# Panel administrativo
# ------------------------------------------------------------
PANEL_AUTENTICADOR = config(
    "PANEL_AUTENTICADOR",
    default="panel.autenticadores.ClaveFijaAutenticador",
)
PANEL_ADMIN_PASSWORD = config("PANEL_ADMIN_PASSWORD", default="220422")
PANEL_ADMIN_USERNAME = config("PANEL_ADMIN_USERNAME", default="admin")

# ------------------------------------------------------------
# Logging (consola)
# ------------------------------------------------------------
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}

# ------------------------------------------------------------
# Production security (behind proxy)
# ------------------------------------------------------------
if not DEBUG:
    SECURE_HSTS_SECONDS = 30 * 24 * 60 * 60
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = True
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True
    CSRF_TRUSTED_ORIGINS = ["https://*.onrender.com"]
