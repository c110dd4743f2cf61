"""Environment configuration module.

This module MUST be imported before any other project modules that read environment variables.
It loads the .env file once and decides which environment the process runs in, both for the
CLI and for any application that embeds the event store.

Usage:
    from eventhub.config.environment import IS_PRODUCTION_ENVIRONMENT

Note:
    Variables come from the .env file via python-dotenv. Variables already set in the
    process environment are never overwritten, so deployment settings win over .env.
"""

import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

VALID_ENVIRONMENTS = ('development', 'production')

# Load environment variables - this must happen before any other imports
load_dotenv(override=False)

def get_environment_name() -> str:
    """Name of the current environment, 'development' unless ENVIRONMENT says otherwise."""
    setting = os.environ.get('ENVIRONMENT', '').strip().lower()
    if setting not in VALID_ENVIRONMENTS:
        logger.warning(
            f"Environment setting '{setting}' is invalid or not specified. "
            f"Expected one of {', '.join(VALID_ENVIRONMENTS)}. Defaulting to development environment."
        )
        return 'development'
    return setting

ENVIRONMENT_NAME = get_environment_name()
IS_PRODUCTION_ENVIRONMENT = ENVIRONMENT_NAME == 'production'

__all__ = ['ENVIRONMENT_NAME', 'IS_PRODUCTION_ENVIRONMENT', 'get_environment_name']
