"""
Services module for demonstration orchestration.

Provides the layer console callers talk to.
"""

from .demonstration_service import DemonstrationService, SEARCH_MODES

__all__ = [
    'DemonstrationService',
    'SEARCH_MODES',
]
