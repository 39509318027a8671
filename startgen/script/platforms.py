# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Target platform conventions for generated start scripts."""

from __future__ import annotations

from typing import Any, Literal

from startgen.exceptions import ConfigError

Platform = Literal["posix", "windows"]

PLATFORMS: tuple[Platform, ...] = ("posix", "windows")

PATH_SEPARATORS: dict[str, str] = {"posix": "/", "windows": "\\"}
CLASSPATH_SEPARATORS: dict[str, str] = {"posix": ":", "windows": ";"}
HOME_TOKENS: dict[str, str] = {"posix": "$APP_HOME/", "windows": "%APP_HOME%\\"}
LINE_ENDINGS: dict[str, str] = {"posix": "\n", "windows": "\r\n"}


def check_platform(name: str) -> Platform:
    """Return name as a Platform, or raise ConfigError if it is unknown."""
    if name not in PLATFORMS:
        raise ConfigError(
            f"Unknown platform '{name}' (expected one of: {', '.join(PLATFORMS)})"
        )
    return name  # type: ignore[return-value]


def resolve_platforms(raw: Any) -> list[Platform]:
    """Resolve a scripts.platforms value into a list of platforms.

    Args:
        raw: The configured value. None selects every platform.

    Returns:
        The platforms in the order given, duplicates dropped.

    Raises:
        ConfigError: If the value is not a non-empty list of known platform
            names.
    """
    if raw is None:
        return list(PLATFORMS)
    if not isinstance(raw, list) or not raw:
        raise ConfigError("scripts.platforms: must be a non-empty list")

    resolved: list[Platform] = []
    for name in raw:
        if not isinstance(name, str):
            raise ConfigError("scripts.platforms: entries must be strings")
        platform = check_platform(name)
        if platform not in resolved:
            resolved.append(platform)
    return resolved
