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

"""Relative path from a start script back to the installation root.

A script installed at ``bin/app`` inside a distribution needs to step up one
directory to reach the distribution root; a script at the root needs none.

Example:
    ```python
    from startgen.script.paths import relativize

    relativize("bin/app")                # ".."
    relativize("a/b/c/app", "windows")   # "..\\..\\.."
    relativize("app")                    # "."
    ```
"""

from __future__ import annotations

from startgen.exceptions import InvalidPathError
from startgen.script.platforms import PATH_SEPARATORS, Platform

PARENT_DIR = ".."
CURRENT_DIR = "."


def _split_script_path(script_relative_path: str) -> list[str]:
    """Split a forward-slash path into segments, rejecting malformed input.

    Raises:
        InvalidPathError: If the path is empty, absolute, ends with a
            separator, or has empty, "." or ".." segments or backslashes.
    """
    if not script_relative_path:
        raise InvalidPathError("Script relative path cannot be empty")
    if "\\" in script_relative_path:
        raise InvalidPathError(
            f"Script relative path must use '/' separators: {script_relative_path!r}"
        )
    if script_relative_path.startswith("/"):
        raise InvalidPathError(
            f"Script relative path must not be absolute: {script_relative_path!r}"
        )

    segments = script_relative_path.split("/")
    for segment in segments:
        if segment in ("", CURRENT_DIR, PARENT_DIR):
            raise InvalidPathError(
                f"Malformed script relative path: {script_relative_path!r}"
            )
    return segments


def relativize(script_relative_path: str, platform: Platform = "posix") -> str:
    """Compute the path from the script's directory to the distribution root.

    Args:
        script_relative_path: Script location inside the distribution,
            forward-slash separated (e.g., "bin/app").
        platform: Target platform, selects the path separator.

    Returns:
        One ".." per containing directory joined with the platform separator,
            or "." when the script sits at the root.

    Raises:
        InvalidPathError: If the path is empty or malformed.
    """
    segments = _split_script_path(script_relative_path)
    depth = len(segments) - 1
    if depth == 0:
        return CURRENT_DIR
    return PATH_SEPARATORS[platform].join([PARENT_DIR] * depth)
