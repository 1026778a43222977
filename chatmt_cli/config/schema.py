"""TypedDict definition of the host-facing plugin options.

Option names follow the host application's plugin settings (camelCase for the
connection options, snake_case for the rest), so a configuration bundle can be
passed through unchanged.
"""

from __future__ import annotations

from typing import Literal, Mapping, TypedDict, Union

__all__ = ["PluginConfig"]


PluginConfig = TypedDict(
    "PluginConfig",
    {
        "apiKey": str,
        "requestPath": str,
        "model": str,
        "system_prompt": str,
        "user_prompt": str,
        "parameters": str,
        "removeTag": str,
        "use_stream": Union[str, bool],
        "language": Mapping[str, str],
        "done_behavior": Literal["stop", "chunk"],
        "progress_suffix": str,
        "timeout": Union[str, int, float],
    },
    total=False,
)
