import os

from chaintable.errors import InvalidArgument

LOGGER_NAME = 'chaintable_logger'

LOGZIO_API_KEY = os.getenv("LOGZIO_API_KEY")

# Check if we're in test mode
IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

LOG_LEVEL = os.getenv("CHAINTABLE_LOG_LEVEL", "INFO").upper()


def _env_number(name, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        raise InvalidArgument(f"Environment variable {name} must be a {cast.__name__}, got {raw!r}") from None


DEFAULT_CAPACITY = _env_number("CHAINTABLE_DEFAULT_CAPACITY", 16, int)
DEFAULT_LOAD_FACTOR = _env_number("CHAINTABLE_DEFAULT_LOAD_FACTOR", 0.75, float)


def _logging_config(handler, level=LOG_LEVEL, fmt='%(message)s'):
    """dictConfig routing the chaintable logger to a single handler."""
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'default': {'format': fmt}},
        'handlers': {'default': dict(handler, formatter='default')},
        'loggers': {
            LOGGER_NAME: {'level': level, 'handlers': ['default'], 'propagate': False}
        }
    }


# Null handler suppresses logs during tests
TEST_LOGGING = _logging_config({'class': 'logging.NullHandler'}, level='DEBUG')

CONSOLE_LOGGING = _logging_config(
    {'class': 'logging.StreamHandler', 'stream': 'ext://sys.stdout'},
    fmt='%(asctime)s %(levelname)s: %(message)s',
)


def production_logging(token):
    """Ship logs to logz.io"""
    return _logging_config({
        'class': 'logzio.handler.LogzioHandler',
        'level': 'INFO',
        'token': token,
        'logzio_type': 'chaintable-logs',
        'url': 'https://listener-eu.logz.io:8071',
    })


def select_logging(is_testing=None, api_key=None):
    """Pick the dictConfig for the current environment."""
    if is_testing is None:
        is_testing = IS_TESTING
    if api_key is None:
        api_key = LOGZIO_API_KEY
    if is_testing:
        return TEST_LOGGING
    if api_key:
        return production_logging(api_key)
    return CONSOLE_LOGGING


LOGGING = select_logging()
