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

"""Argument encoding for POSIX shells and the Windows command interpreter.

Each encoder turns an arbitrary option string into text that the target
interpreter parses back into the original string as a single token.

POSIX Quoting:
    - The whole value is wrapped in single quotes
    - An embedded ' becomes '\\'' (close, escaped quote, reopen)
    - Nothing else is interpreted inside single quotes

Windows Batch Quoting:
    - " must be encoded as \\"
    - % must be encoded as %%
    - \\" must be encoded as \\\\\\", but other than that \\ is left alone
    - Every other character (including ') passes through
    - The caller wraps the result in double quotes

Example:
    ```python
    from startgen.script.encoding import encode_posix, encode_windows

    encode_posix("it's")              # "'it'\\\\''s'"
    encode_windows("-Dfoo=%PATH%")    # "-Dfoo=%%PATH%%"
    ```
"""

from __future__ import annotations

from startgen.exceptions import EncodingError
from startgen.script.platforms import Platform

# Characters with special meaning inside a double-quoted POSIX string
_POSIX_DOUBLE_QUOTE_SPECIALS = frozenset('\\"$`')

_UNREPRESENTABLE: dict[str, frozenset[str]] = {
    "posix": frozenset("\x00"),
    "windows": frozenset("\x00\r\n"),
}


def encode_posix(value: str) -> str:
    """Single-quote a value for a POSIX shell.

    Args:
        value: Raw string.

    Returns:
        The value wrapped in single quotes with embedded quotes escaped.
    """
    return "'" + value.replace("'", "'\\''") + "'"


def escape_posix_double_quoted(value: str) -> str:
    """Escape a value for use between double quotes in a POSIX shell.

    Backslash, double quote, dollar and backtick are prefixed with a
    backslash; everything else is literal inside double quotes.
    """
    return "".join(
        "\\" + ch if ch in _POSIX_DOUBLE_QUOTE_SPECIALS else ch for ch in value
    )


def encode_windows(value: str) -> str:
    """Escape a value for a double-quoted Windows batch argument.

    Walks the value left to right in one of two states: NORMAL, or
    AFTER_BACKSLASH when the previous character was a backslash. Only the
    quote character behaves differently between the two states.

    Args:
        value: Raw string.

    Returns:
        The escaped value, without the surrounding double quotes.

    Example:
        ```python
        encode_windows("-Xmx512m")          # unchanged
        encode_windows("50%")               # "50%%"
        ```
    """
    was_backslash = False
    escaped: list[str] = []

    for ch in value:
        if ch == "%":
            repl = "%%"
        elif ch == '"':
            # the backslash already emitted plus these two make \\\"
            repl = '\\\\"' if was_backslash else '\\"'
        else:
            repl = ch
        was_backslash = ch == "\\"
        escaped.append(repl)

    return "".join(escaped)


def check_representable(value: str, platform: Platform, name: str) -> str:
    """Ensure a value can be written into a script for the platform.

    Args:
        value: String headed for the rendered script.
        platform: Target platform.
        name: Placeholder or field name, used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        EncodingError: If the value holds a character the platform's
            script text cannot carry.
    """
    for index, ch in enumerate(value):
        if ch in _UNREPRESENTABLE[platform]:
            raise EncodingError(
                f"{name}: character {ch!r} at position {index} cannot be "
                f"represented in a {platform} start script"
            )
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as err:
        raise EncodingError(
            f"{name}: value is not encodable as UTF-8: {err.reason}"
        ) from err
    return value
