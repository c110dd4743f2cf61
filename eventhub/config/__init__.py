"""Configuration package."""

from .environment import ENVIRONMENT_NAME, IS_PRODUCTION_ENVIRONMENT
from .store import StoreConfig

__all__ = ['ENVIRONMENT_NAME', 'IS_PRODUCTION_ENVIRONMENT', 'StoreConfig']
