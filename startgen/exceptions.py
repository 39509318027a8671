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

"""Exception hierarchy for startgen.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- ConfigError: Descriptor-related errors (YAML parse, missing fields, bad types)
- InvalidPathError: A script path that cannot be relativized
- EncodingError: A value the target command interpreter cannot represent
- GenerationError: Template and output file errors

All exceptions inherit from StartGenError, allowing users to catch all
startgen errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from startgen.core import generate_start_scripts
        from startgen.exceptions import ConfigError, EncodingError

        try:
            result = generate_start_scripts(Path("launch.yaml"))
        except ConfigError as e:
            print(f"Configuration error: {e}")
        except EncodingError as e:
            print(f"Encoding error: {e}")
        ```

    Catching all startgen errors:
        ```python
        from startgen.exceptions import StartGenError

        try:
            result = generate_start_scripts(Path("launch.yaml"))
        except StartGenError as e:
            print(f"startgen error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "StartGenError",
    "ConfigError",
    "InvalidPathError",
    "EncodingError",
    "GenerationError",
]


class StartGenError(Exception):
    """Base exception for all startgen errors.

    All startgen-specific exceptions inherit from this class, allowing users
    to catch all startgen errors with a single except clause if needed.
    """

    pass


class ConfigError(StartGenError):
    """Raised for descriptor configuration errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, empty files, non-mapping documents)
    - Missing or invalid descriptor fields
    - Unknown target platform names
    """

    pass


class InvalidPathError(StartGenError):
    """Raised when a script relative path is empty or malformed.

    Example:
        ```python
        from startgen.script.paths import relativize

        relativize("")  # raises InvalidPathError
        ```
    """

    pass


class EncodingError(StartGenError):
    """Raised when a value cannot be represented in the target script.

    NUL characters, line breaks inside Windows batch lines and unpaired
    surrogates fall in this category.
    """

    pass


class GenerationError(StartGenError):
    """Raised for template and output errors.

    This exception is raised when there are problems with:

    - Reading a custom template file
    - A template referencing a placeholder the binding does not provide
    - Writing the rendered script to disk
    """

    pass
