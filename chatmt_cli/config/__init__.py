"""Plugin configuration helpers shared by the translator and the CLI."""

from .defaults import DEFAULT_PLUGIN_CONFIG, get_default_config, merge_config
from .validator import ConfigValidator, ValidationError

__all__ = [
    "DEFAULT_PLUGIN_CONFIG",
    "get_default_config",
    "merge_config",
    "ConfigValidator",
    "ValidationError",
]
