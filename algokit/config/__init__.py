"""
Configuration management module.

Centralizes logging and demonstration settings.
"""

from .settings import Settings, get_settings, set_settings, parse_int_list, parse_int

__all__ = [
    'Settings',
    'get_settings',
    'set_settings',
    'parse_int_list',
    'parse_int',
]
