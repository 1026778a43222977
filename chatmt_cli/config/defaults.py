"""Default values for the plugin options."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

# NOTE:
# Empty strings are treated as "not configured" for every option except
# progress_suffix, where an empty string disables the streaming marker.

DEFAULT_PLUGIN_CONFIG: Dict[str, Any] = {
    "apiKey": "",
    "requestPath": "",
    "model": "gpt-4o-mini",
    "system_prompt": "You are a helpful translation assistant.",
    "user_prompt": "Translate the following text from $from to $to: $text",
    "parameters": '{"temperature": 0.1}',
    "removeTag": "<think>,<help>",
    "use_stream": "false",
    "language": {},
    "done_behavior": "stop",
    "progress_suffix": "...",
    "timeout": 30,
}


def get_default_config() -> Dict[str, Any]:
    """Return a deep copy of the default plugin configuration."""
    return deepcopy(DEFAULT_PLUGIN_CONFIG)


def merge_config(base: Dict[str, Any], override: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Merge host-supplied options over a base configuration.

    Options whose value is ``None`` keep the base value. Nested mappings (the
    ``language`` table) are merged key by key.

    Args:
        base: The base configuration that provides default values.
        override: Options coming from the host (can be None).

    Returns:
        A new dictionary containing the merged configuration.
    """
    if override is None:
        return deepcopy(base)

    merged = deepcopy(base)
    for key, value in override.items():
        if value is None:
            continue
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged
