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

"""Start script rendering.

Converts a template body to the platform's line-ending convention (LF for
POSIX, CRLF for Windows) and substitutes an assembled binding into it.

Example:
    ```python
    from startgen.script.render import render_start_script

    text = render_start_script(descriptor, "windows")
    Path("build/scripts/my-app.bat").write_bytes(text.encode("utf-8"))
    ```
"""

from __future__ import annotations

import string

from startgen.descriptor import LaunchDescriptor
from startgen.exceptions import GenerationError
from startgen.script.binding import assemble_binding
from startgen.script.platforms import LINE_ENDINGS, Platform
from startgen.script.templates import default_template


def _convert_line_endings(text: str, platform: Platform) -> str:
    """Normalize every line break to the platform's line ending."""
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.replace("\n", LINE_ENDINGS[platform])


def render_template(template: str, binding: dict[str, str], platform: Platform) -> str:
    """Render a template body against a binding.

    Args:
        template: Template text in string.Template syntax.
        binding: Placeholder values from assemble_binding().
        platform: Target platform, selects the line ending.

    Returns:
        The rendered script text.

    Raises:
        GenerationError: If the template uses a placeholder that is not in
            the binding, or contains an invalid $ sequence.
    """
    # Line endings are converted on the template only; bound values may
    # carry CR or LF that must reach the script unchanged.
    # substitute() rather than safe_substitute() so a typo in a custom
    # template fails instead of leaking ${name} into the script
    body = _convert_line_endings(template, platform)
    try:
        rendered = string.Template(body).substitute(binding)
    except KeyError as err:
        raise GenerationError(
            f"Template references unknown placeholder: {err.args[0]}"
        ) from err
    except ValueError as err:
        raise GenerationError(f"Invalid template syntax: {err}") from err

    return rendered


def render_start_script(
    descriptor: LaunchDescriptor,
    platform: Platform,
    template: str | None = None,
) -> str:
    """Render the start script text for one platform.

    Args:
        descriptor: Launch descriptor.
        platform: Target platform ("posix" or "windows").
        template: Custom template text. Default is the built-in template.

    Returns:
        The complete script text with platform line endings.

    Raises:
        InvalidPathError: If the script relative path is malformed.
        EncodingError: If a value cannot be represented on the platform.
        GenerationError: If the template cannot be rendered.
    """
    from startgen.logging import get_global_logger

    logger = get_global_logger()

    binding = assemble_binding(descriptor, platform)
    if template is None:
        logger.verbose("RENDER", f"Using built-in {platform} template")
        template = default_template(platform)

    return render_template(template, binding, platform)
