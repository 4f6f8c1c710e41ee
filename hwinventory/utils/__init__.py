# hwinventory/utils/__init__.py
"""
Utility modules for hardware inventory collection
"""

from .linuxpath import Paths
from .logging_config import setup_logging, get_logger, get_warn_func, WarnFunc

__all__ = [
    'Paths',
    'setup_logging',
    'get_logger',
    'get_warn_func',
    'WarnFunc'
]
