import os
import logging.config

DEFAULT_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75
DEFAULT_DEDUPE_BUCKETS = 100

LOGGER_NAME = 'hashtable_logger'

LOGZIO_API_KEY = os.getenv("logzIO_api_key")

# Check if we're in test mode
IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

TEST_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s - %(message)s',
        }
    },
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
            'level': 'DEBUG'
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': 'DEBUG',
            'handlers': ['null'],  # Use null handler to suppress logs during tests
            'propagate': False
        }
    }
}

CONSOLE_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': 'INFO',
            'handlers': ['console'],
            'propagate': False
        }
    }
}

# Production logging configuration (logz.io)
PRODUCTION_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'logzioFormat': {
            'format': '%(message)s',
        }
    },
    'handlers': {
        'logzio': {
            'class': 'logzio.handler.LogzioHandler',
            'level': 'INFO',
            'formatter': 'logzioFormat',
            'token': LOGZIO_API_KEY,
            'logzio_type': 'hashtable-logs',
            'logs_drain_timeout': 5,
            'url': 'https://listener-eu.logz.io:8071',
            'retries_no': 4,
            'retry_timeout': 2,
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': 'DEBUG',
            'handlers': ['logzio'],
            'propagate': False
        }
    }
}

if IS_TESTING:
    LOGGING = TEST_LOGGING
elif LOGZIO_API_KEY:
    LOGGING = PRODUCTION_LOGGING
else:
    LOGGING = CONSOLE_LOGGING


def configure_logging(config=None):
    logging.config.dictConfig(config or LOGGING)
    return logging.getLogger(LOGGER_NAME)
