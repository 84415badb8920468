"""
Django base settings for the salon management API.
"""
import os
from pathlib import Path
import environ

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Initialize environment variables
env = environ.Env(
    DEBUG=(bool, False)
)

# Read .env file
environ.Env.read_env(os.path.join(BASE_DIR, '.env'))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env('SECRET_KEY')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env('DEBUG')

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', default=[])

# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party apps
    'rest_framework',
    'corsheaders',
    'django_filters',
    'drf_spectacular',

    # Local apps
    'apps.core',
    'apps.salons',
    'apps.authentication',
    'apps.subscriptions',
    'apps.staff',
    'apps.services',
    'apps.clients',
    'apps.bookings',
    'apps.schedules',
    'apps.finance',
    'apps.notifications',
    'apps.support',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'apps.authentication.middleware.TenancyGateMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
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

WSGI_APPLICATION = 'config.wsgi.application'

# Database
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': env('DB_NAME'),
        'USER': env('DB_USER'),
        'PASSWORD': env('DB_PASSWORD'),
        'HOST': env('DB_HOST'),
        'PORT': env('DB_PORT'),
    }
}

# Custom account model
AUTH_USER_MODEL = 'authentication.Account'

# Password validation
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
LANGUAGE_CODE = 'en-us'
TIME_ZONE = env('TIME_ZONE', default='UTC')
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# Media files
MEDIA_URL = 'media/'
MEDIA_ROOT = BASE_DIR / 'media'

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# REST Framework Configuration
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        # Reads the account resolved by TenancyGateMiddleware
        'apps.authentication.auth_backends.TenancyGateAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_PAGINATION_CLASS': 'apps.core.pagination.StandardResultsSetPagination',
    'PAGE_SIZE': 50,
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
        'rest_framework.filters.SearchFilter',
        'rest_framework.filters.OrderingFilter',
    ],
    'DEFAULT_SCHEMA_CLASS': 'apps.core.schema.CustomAutoSchema',
    'EXCEPTION_HANDLER': 'apps.core.exceptions.custom_exception_handler',
}

# DRF Spectacular (API Documentation)
SPECTACULAR_SETTINGS = {
    'TITLE': 'Salon Management API',
    'DESCRIPTION': (
        'Multi-tenant salon management: scheduling, point of sale, clients, '
        'finance and licensing. Every tenant request passes the tenancy and license gate.'
    ),
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'COMPONENT_SPLIT_REQUEST': True,
    'TAGS': [
        {'name': 'Authentication - Public', 'description': 'Login and salon registration'},
        {'name': 'Authentication', 'description': 'Current account'},
        {'name': 'System', 'description': 'System health and status'},
        {'name': 'Users', 'description': 'Salon user management'},
        {'name': 'Salon', 'description': 'Settings of the salon in context'},
        {'name': 'Public', 'description': 'Salon directory and online booking'},
        {'name': 'Clients', 'description': 'Salon clients'},
        {'name': 'Services', 'description': 'Service catalogue'},
        {'name': 'Staff', 'description': 'Professionals'},
        {'name': 'Appointments', 'description': 'Internal scheduling, checkout and waiting list'},
        {'name': 'Schedules', 'description': 'Slot and professional availability'},
        {'name': 'Finance', 'description': 'Transactions and reports'},
        {'name': 'Billing', 'description': 'License of the salon in context'},
        {'name': 'Platform', 'description': 'Platform administration'},
        {'name': 'Support', 'description': 'Support tickets'},
    ],
    'APPEND_COMPONENTS': {
        'securitySchemes': {
            'BearerAuth': {
                'type': 'http',
                'scheme': 'bearer',
                'bearerFormat': 'JWT',
                'description': 'Token returned by /api/v1/auth/login/'
            },
            'AccountIdAuth': {
                'type': 'apiKey',
                'in': 'header',
                'name': 'X-Account-ID',
                'description': 'Opaque account reference'
            },
            'MasterKeyAuth': {
                'type': 'apiKey',
                'in': 'header',
                'name': 'X-Master-Key',
                'description': 'Platform master credential'
            }
        }
    },
    'SECURITY': [
        {'BearerAuth': []},
        {'AccountIdAuth': []},
        {'MasterKeyAuth': []}
    ],
}

# CORS Configuration
CORS_ALLOWED_ORIGINS = env.list('CORS_ALLOWED_ORIGINS', default=[])
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_HEADERS = [
    'accept',
    'authorization',
    'content-type',
    'origin',
    'x-csrftoken',
    'x-requested-with',
    'x-account-id',
    'x-master-key',
    'x-act-as-salon',
]

# Tenancy and license gate
TENANCY_GATE_PUBLIC_PATHS = [
    '/api/v1/public/',
    '/api/v1/auth/login/',
    '/api/v1/auth/register-salon/',
    '/api/v1/auth/health/',
    '/api/schema/',
    '/api/docs/',
    '/admin/',
    '/static/',
]
LICENSE_EXEMPT_READ_PATHS = [
    '/api/v1/salon/me/',
    '/api/v1/billing/',
    '/api/v1/auth/me/',
]

# Platform credentials
PLATFORM_MASTER_KEY = env('PLATFORM_MASTER_KEY', default='')
PLATFORM_OWNER_EMAIL = env('PLATFORM_OWNER_EMAIL', default='')
PLATFORM_OWNER_PASSWORD = env('PLATFORM_OWNER_PASSWORD', default='')

# Bearer tokens
JWT_SECRET_KEY = env('JWT_SECRET_KEY', default=SECRET_KEY)
JWT_ALGORITHM = env('JWT_ALGORITHM', default='HS256')
JWT_ACCESS_TOKEN_LIFETIME_HOURS = env.int('JWT_ACCESS_TOKEN_LIFETIME_HOURS', default=12)

# Email Configuration - SMTP
EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
EMAIL_HOST = env('EMAIL_HOST', default='localhost')
EMAIL_PORT = env.int('EMAIL_PORT', default=587)
EMAIL_USE_TLS = env.bool('EMAIL_USE_TLS', default=True)
EMAIL_HOST_USER = env('EMAIL_HOST_USER', default='')
EMAIL_HOST_PASSWORD = env('EMAIL_HOST_PASSWORD', default='')
DEFAULT_FROM_EMAIL = env('DEFAULT_FROM_EMAIL', default='Salon Manager <noreply@example.com>')
SUPPORT_EMAIL = env('SUPPORT_EMAIL', default='support@example.com')

# Logging Configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
