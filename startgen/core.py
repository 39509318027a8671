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

"""Core orchestration for startgen.

This module provides the high-level workflow that turns a descriptor file
into start scripts on disk:

1. Load the effective configuration (org defaults + descriptor)
2. Build the LaunchDescriptor
3. For each platform: assemble the binding and render the template
4. Write each script to the output directory (POSIX scripts made executable)

All scripts are rendered before the first one is written, so a descriptor
that fails on one platform leaves the output directory untouched.

Example:
    Programmatic usage:
        ```python
        from pathlib import Path
        from startgen.core import generate_start_scripts

        result = generate_start_scripts(Path("apps/my-app/launch.yaml"))

        for script in result.scripts:
            print(f"{script.platform}: {script.path}")
        ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from startgen.config import load_effective_config
from startgen.descriptor import LaunchDescriptor, descriptor_from_config
from startgen.exceptions import GenerationError
from startgen.logging import get_global_logger
from startgen.results import GeneratedScript, GenerateResult
from startgen.script.platforms import Platform, resolve_platforms
from startgen.script.render import render_start_script
from startgen.script.templates import load_template

EXECUTABLE_MODE = 0o755


def script_file_name(descriptor: LaunchDescriptor, platform: Platform) -> str:
    """Return the file name of the script for a platform.

    Example:
        ```python
        script_file_name(descriptor, "posix")    # "my-app"
        script_file_name(descriptor, "windows")  # "my-app.bat"
        ```
    """
    name = descriptor.script_name
    return f"{name}.bat" if platform == "windows" else name


def write_start_script(text: str, path: Path, platform: Platform) -> Path:
    """Write rendered script text to disk.

    Args:
        text: Rendered script, already in the platform's line endings.
        path: Destination file path. Parent directories are created.
        platform: Target platform. POSIX scripts get mode 0o755.

    Returns:
        The path written.

    Raises:
        GenerationError: If the file cannot be written.
    """
    logger = get_global_logger()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # write_bytes keeps line endings exactly as rendered
        path.write_bytes(text.encode("utf-8"))
        if platform == "posix":
            path.chmod(EXECUTABLE_MODE)
    except OSError as err:
        logger.error("GENERATE", f"Failed to write start script to {path}: {err}")
        raise GenerationError(f"Failed to write start script {path}: {err}") from err

    logger.verbose("GENERATE", f"Start script written to: {path}")
    return path


def _requested_platforms(
    config: dict[str, Any], platforms: list[str] | None
) -> list[Platform]:
    """Resolve the platform list from the argument or the configuration."""
    raw = platforms if platforms is not None else config["scripts"].get("platforms")
    return resolve_platforms(raw)


def _template_path(config: dict[str, Any], platform: Platform) -> Path | None:
    templates = config["scripts"].get("templates") or {}
    raw = templates.get(platform)
    return Path(raw) if raw else None


def generate_start_scripts(
    descriptor_path: Path,
    output_dir: Path | None = None,
    platforms: list[str] | None = None,
) -> GenerateResult:
    """Generate start scripts for every requested platform.

    Args:
        descriptor_path: Path to the descriptor YAML file.
        output_dir: Directory to write scripts to. Default is
            scripts.output_dir from the configuration (build/scripts next to
            the descriptor when unset).
        platforms: Platform names to generate. Default is
            scripts.platforms from the configuration (both when unset).

    Returns:
        GenerateResult listing the written scripts.

    Raises:
        ConfigError: If the descriptor cannot be loaded or is invalid.
        InvalidPathError: If the script relative path is malformed.
        EncodingError: If a value cannot be represented on a platform.
        GenerationError: If a template cannot be read or rendered, or a
            script cannot be written.
    """
    logger = get_global_logger()

    config = load_effective_config(descriptor_path)
    descriptor = descriptor_from_config(config)
    targets = _requested_platforms(config, platforms)
    out_dir = output_dir if output_dir is not None else Path(config["scripts"]["output_dir"])

    logger.verbose(
        "GENERATE",
        f"Generating {len(targets)} start script(s) for {descriptor.application_name}",
    )

    rendered: list[tuple[Platform, str, Path | None]] = []
    for idx, platform in enumerate(targets, start=1):
        logger.step(idx, len(targets), f"Rendering {platform} start script...")
        template_path = _template_path(config, platform)
        template = load_template(template_path) if template_path else None
        text = render_start_script(descriptor, platform, template)
        rendered.append((platform, text, template_path))

    scripts: list[GeneratedScript] = []
    for platform, text, template_path in rendered:
        path = write_start_script(text, out_dir / script_file_name(descriptor, platform), platform)
        scripts.append(
            GeneratedScript(platform=platform, path=path, template=template_path)
        )

    return GenerateResult(
        app_name=descriptor.application_name,
        main_class=descriptor.main_class_name,
        output_dir=out_dir,
        scripts=scripts,
        status="success",
    )
