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

"""Template binding assembly for start scripts.

This module turns a LaunchDescriptor into the flat placeholder mapping that
start script templates are rendered against. Identifiers are copied as-is;
runtime options and classpath entries are encoded and joined for the target
platform.

Placeholders:
    applicationName, optsEnvironmentVar, exitEnvironmentVar, mainClassName,
    defaultJvmOpts, appNameSystemProperty, appHomeRelativePath, classpath

Private Helpers:
    - _join_default_jvm_opts: Encode, quote and join runtime options
    - _join_classpath: Prefix and join classpath entries

Example:
    ```python
    from startgen.script.binding import assemble_binding

    binding = assemble_binding(descriptor, "windows")
    binding["classpath"]       # "%APP_HOME%\\lib\\a.jar;%APP_HOME%\\lib\\b.jar"
    binding["defaultJvmOpts"]  # '"-Xmx512m" "-Dfoo=%%PATH%%"'
    ```
"""

from __future__ import annotations

from collections.abc import Iterable

from startgen.descriptor import LaunchDescriptor
from startgen.script.encoding import (
    check_representable,
    encode_posix,
    encode_windows,
    escape_posix_double_quoted,
)
from startgen.script.paths import relativize
from startgen.script.platforms import (
    CLASSPATH_SEPARATORS,
    HOME_TOKENS,
    PATH_SEPARATORS,
    Platform,
)

PLACEHOLDERS: tuple[str, ...] = (
    "applicationName",
    "optsEnvironmentVar",
    "exitEnvironmentVar",
    "mainClassName",
    "defaultJvmOpts",
    "appNameSystemProperty",
    "appHomeRelativePath",
    "classpath",
)


def _join_default_jvm_opts(opts: Iterable[str], platform: Platform) -> str:
    """Encode each option, wrap it in double quotes and space-join.

    On POSIX the joined list is additionally single-quoted so the template
    can assign it to one variable that the script expands with eval.
    """
    if platform == "windows":
        return " ".join(f'"{encode_windows(opt)}"' for opt in opts)

    joined = " ".join(f'"{escape_posix_double_quoted(opt)}"' for opt in opts)
    return encode_posix(joined) if joined else ""


def _join_classpath(classpath: Iterable[str], platform: Platform) -> str:
    """Prefix each entry with the home token and join with the separator."""
    separator = PATH_SEPARATORS[platform]
    home = HOME_TOKENS[platform]
    return CLASSPATH_SEPARATORS[platform].join(
        home + entry.replace("/", separator) for entry in classpath
    )


def assemble_binding(descriptor: LaunchDescriptor, platform: Platform) -> dict[str, str]:
    """Assemble the template binding for one platform.

    Args:
        descriptor: Launch descriptor (not modified).
        platform: Target platform ("posix" or "windows").

    Returns:
        A new mapping with one entry per name in PLACEHOLDERS. Empty option
            or classpath lists produce empty strings, never missing keys.

    Raises:
        InvalidPathError: If the script relative path is empty or malformed.
        EncodingError: If a value contains a character the platform cannot
            represent.
    """
    from startgen.logging import get_global_logger

    logger = get_global_logger()

    home_path = relativize(descriptor.script_relative_path, platform)

    binding = {
        "applicationName": descriptor.application_name,
        "optsEnvironmentVar": descriptor.opts_environment_var,
        "exitEnvironmentVar": descriptor.exit_environment_var,
        "mainClassName": descriptor.main_class_name,
        "defaultJvmOpts": _join_default_jvm_opts(descriptor.default_jvm_opts, platform),
        "appNameSystemProperty": descriptor.app_name_system_property,
        "appHomeRelativePath": home_path,
        "classpath": _join_classpath(descriptor.classpath, platform),
    }

    for key, value in binding.items():
        check_representable(value, platform, key)

    logger.debug("BINDING", f"--- {platform} binding ---")
    for key, value in binding.items():
        logger.debug("BINDING", f"  {key} = {value}")

    return binding
