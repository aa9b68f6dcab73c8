"""
Application settings and configuration.

Centralizes all configurable values.
"""

import os
from typing import Optional, Dict, Any, List
from dotenv import load_dotenv

from ..core.exceptions import ConfigurationError

# Load environment variables
load_dotenv()


def parse_int_list(raw: str, key: Optional[str] = None) -> List[int]:
    """
    Parse a comma-separated list of integers.

    Args:
        raw: Text such as "5, 3, 1" (blank entries are ignored)
        key: Name of the setting, used in error messages

    Returns:
        List of parsed integers

    Raises:
        ConfigurationError: If an entry is not an integer
    """
    values = []
    for part in raw.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            values.append(int(part))
        except ValueError:
            label = key or 'value list'
            raise ConfigurationError(f"Invalid integer '{part}' in {label}", key=key) from None
    return values


def parse_int(raw: str, key: Optional[str] = None) -> int:
    """
    Parse a single integer setting.

    Raises:
        ConfigurationError: If the text is not an integer
    """
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid integer '{raw}' in {key or 'value'}", key=key) from None


class Settings:
    """
    Application settings.

    Centralizes all configuration values.
    """

    def __init__(self):
        """Initialize settings from environment and defaults."""
        # Logging Settings
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        self.log_file = os.getenv('LOG_FILE') or None

        # Search Settings
        self.verify_sorted_input = os.getenv('VERIFY_SORTED_INPUT', 'true').lower() == 'true'

        # Demonstration data
        self.demo_sort_values = parse_int_list(
            os.getenv('DEMO_SORT_VALUES', '64,34,25,12,22,11,90,5'), 'DEMO_SORT_VALUES'
        )
        self.demo_search_values = parse_int_list(
            os.getenv('DEMO_SEARCH_VALUES', '2,5,8,12,16,23,38,45,67,78,90'), 'DEMO_SEARCH_VALUES'
        )
        self.demo_search_targets = parse_int_list(
            os.getenv('DEMO_SEARCH_TARGETS', '16,45,100,5'), 'DEMO_SEARCH_TARGETS'
        )
        self.demo_duplicate_values = parse_int_list(
            os.getenv('DEMO_DUPLICATE_VALUES', '2,5,5,5,12,16,16,23,23,23,45'), 'DEMO_DUPLICATE_VALUES'
        )
        self.demo_recursive_target = parse_int(
            os.getenv('DEMO_RECURSIVE_TARGET', '23'), 'DEMO_RECURSIVE_TARGET'
        )
        self.demo_first_occurrence_target = parse_int(
            os.getenv('DEMO_FIRST_OCCURRENCE_TARGET', '5'), 'DEMO_FIRST_OCCURRENCE_TARGET'
        )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value
        """
        value = getattr(self, key, None)
        return value if value is not None else default

    def validate(self) -> bool:
        """
        Validate that the demonstration data is usable.

        Returns:
            True if valid, False otherwise
        """
        if not self.demo_search_values or not self.demo_duplicate_values:
            return False

        # Binary search demonstrations need ascending input
        for values in (self.demo_search_values, self.demo_duplicate_values):
            if any(values[i] > values[i + 1] for i in range(len(values) - 1)):
                return False

        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'log_level': self.log_level,
            'log_file': self.log_file,
            'verify_sorted_input': self.verify_sorted_input,
            'demo_sort_values': list(self.demo_sort_values),
            'demo_search_values': list(self.demo_search_values),
            'demo_search_targets': list(self.demo_search_targets),
            'demo_duplicate_values': list(self.demo_duplicate_values),
            'demo_recursive_target': self.demo_recursive_target,
            'demo_first_occurrence_target': self.demo_first_occurrence_target,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
