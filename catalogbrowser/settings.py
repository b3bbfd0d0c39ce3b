"""Runtime settings for catalogbrowser.

Values come from the environment so the command-line tool and embedding
applications can be configured without code changes.
"""

from __future__ import annotations

import logging.config
import os

CONFIG_PATH = os.getenv('CATALOGBROWSER_CONFIG')
CATALOG_PATH = os.getenv('CATALOGBROWSER_CATALOG', './catalog.yaml')

log_level = os.getenv('CATALOGBROWSER_LOG_LEVEL', 'INFO').upper()
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': log_level,
    },
    'loggers': {
        'catalogbrowser': {
            'handlers': ['console'],
            'level': log_level,
            'propagate': False,
        },
    },
}


def configure_logging() -> None:
    logging.config.dictConfig(LOGGING)
