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

"""Configuration loading and merging for startgen.

This module implements a two-layer configuration system that allows
organization-wide defaults (shared JVM options, output directory, custom
templates) to be overridden by each descriptor file.

Configuration Layers:

1. **Organization defaults** (defaults/org.yaml)
    - Base configuration for every descriptor below it in the tree
    - Optional; found by walking upward from the descriptor file

2. **Descriptor** (e.g., apps/my-app/launch.yaml)
    - Application-specific configuration
    - Always required
    - Overrides organization defaults

Merge Behavior:

The loader performs deep merging with "last wins" semantics:

- **Dicts**: Recursively merged (keys from overlay override base)
- **Lists**: Completely replaced (NOT appended/extended)
- **Scalars**: Overwritten (strings, numbers, booleans)

Replacing lists keeps JVM option and classpath order exactly as written
in the layer that defines them.

Path Resolution:

Relative paths are resolved against the DESCRIPTOR FILE location:

- scripts.output_dir
- scripts.templates.posix
- scripts.templates.windows

Example:
    Basic usage:
        ```python
        from pathlib import Path
        from startgen.config import load_effective_config

        cfg = load_effective_config(Path("apps/my-app/launch.yaml"))
        print(cfg["application"]["name"])  # my-app
        ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from startgen.exceptions import ConfigError
from startgen.script.platforms import PLATFORMS

DEFAULT_OUTPUT_DIR = "build/scripts"

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Loads a YAML file and returns the parsed Python object.

    Args:
        p: Path to the YAML file to load.

    Returns:
        The parsed Python object from the YAML file.

    Raises:
        ConfigError: When file does not exist, invalid YAML (parse error), or empty files.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merges two dicts with "overlay wins" semantics.

    Merge behavior:

    - dict + dict -> deep merge
    - list + list -> overlay REPLACES base (not concatenated)
    - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.

    Args:
        base: The base dictionary.
        overlay: The overlay dictionary that takes precedence.

    Returns:
        A new dictionary with the merged contents.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


# -------------------------------
# Defaults discovery
# -------------------------------


def _find_defaults_root(start_dir: Path) -> Path | None:
    """Walks upward from start_dir looking for a defaults/org.yaml file.

    Args:
        start_dir: The directory to start searching from.

    Returns:
        The defaults/ directory if found, None otherwise.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / "defaults" / "org.yaml"
        if candidate.exists():
            return parent / "defaults"
    return None


# -------------------------------
# Path resolution
# -------------------------------


def _resolve_known_paths(cfg: dict[str, Any], descriptor_dir: Path) -> None:
    """Resolves relative path fields inside the merged config.

    Handled fields:

    - scripts.output_dir (defaults to build/scripts)
    - scripts.templates.posix
    - scripts.templates.windows

    Relative paths are resolved against descriptor_dir. Modifies cfg in
    place.

    Raises:
        ConfigError: If the scripts section or one of the fields has the
            wrong type, or a template names an unknown platform.
    """
    scripts = cfg.setdefault("scripts", {})
    if not isinstance(scripts, dict):
        raise ConfigError("Section 'scripts' must be a mapping")

    output_dir = scripts.get("output_dir", DEFAULT_OUTPUT_DIR)
    if not isinstance(output_dir, str) or not output_dir:
        raise ConfigError("scripts.output_dir: must be a non-empty string")
    scripts["output_dir"] = str((descriptor_dir / output_dir).resolve())

    templates = scripts.get("templates")
    if templates is None:
        return
    if not isinstance(templates, dict):
        raise ConfigError("scripts.templates: must be a mapping")
    for platform, raw_path in templates.items():
        if platform not in PLATFORMS:
            raise ConfigError(f"scripts.templates: unknown platform '{platform}'")
        if not isinstance(raw_path, str) or not raw_path:
            raise ConfigError(f"scripts.templates.{platform}: must be a non-empty string")
        templates[platform] = str((descriptor_dir / raw_path).resolve())


# -------------------------------
# Verbose helpers
# -------------------------------


def _print_yaml_content(data: dict[str, Any], indent: int = 0) -> None:
    """Prints YAML content through the debug logger."""
    from startgen.logging import get_global_logger

    logger = get_global_logger()

    yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():
            logger.debug("CONFIG", " " * indent + line)


# -------------------------------
# Public API
# -------------------------------


def load_effective_config(descriptor_path: Path) -> dict[str, Any]:
    """Loads and merges the effective configuration for a descriptor.

    Performs the following operations:

    1. Read descriptor YAML
    2. Find defaults root by scanning upwards for defaults/org.yaml
    3. Load org defaults if a defaults root exists
    4. Merge: org -> descriptor (dicts deep-merge, lists replace)
    5. Resolve known relative paths (relative to the descriptor directory)

    Args:
        descriptor_path: Path to the descriptor YAML file.

    Returns:
        A merged configuration dict ready for descriptor_from_config().

    Raises:
        ConfigError: On YAML parse errors, empty files, invalid structure,
            or if the descriptor file is missing.
    """
    from startgen.logging import get_global_logger

    logger = get_global_logger()
    descriptor_path = descriptor_path.resolve()
    descriptor_dir = descriptor_path.parent

    logger.verbose("CONFIG", f"Loading descriptor: {descriptor_path}")

    # 1) Read descriptor
    descriptor_obj = _load_yaml_file(descriptor_path)
    if not isinstance(descriptor_obj, dict):
        raise ConfigError(
            f"top-level YAML must be a mapping (dict): {descriptor_path}"
        )

    # 2) Find defaults root
    defaults_root = _find_defaults_root(descriptor_dir)
    if defaults_root:
        logger.verbose("CONFIG", f"Found defaults root: {defaults_root}")

    merged: dict[str, Any] = {}
    layers_merged = 0

    # 3) Load org defaults
    if defaults_root:
        org_defaults_path = defaults_root / "org.yaml"
        logger.verbose(
            "CONFIG",
            f"Loading: {org_defaults_path.relative_to(defaults_root.parent)}",
        )
        org_defaults = _load_yaml_file(org_defaults_path)
        if not isinstance(org_defaults, dict):
            raise ConfigError(
                f"top-level YAML must be a mapping (dict): {org_defaults_path}"
            )
        logger.debug("CONFIG", "--- Content from org.yaml ---")
        _print_yaml_content(org_defaults)
        merged = _deep_merge_dicts(merged, org_defaults)
        layers_merged += 1

    logger.debug("CONFIG", f"--- Content from {descriptor_path.name} ---")
    _print_yaml_content(descriptor_obj)

    # 4) Merge descriptor on top
    merged = _deep_merge_dicts(merged, descriptor_obj)
    layers_merged += 1

    logger.verbose("CONFIG", f"Deep merging {layers_merged} layer(s)")
    logger.debug("CONFIG", "--- Final Merged Configuration ---")
    _print_yaml_content(merged)

    # 5) Resolve relative paths against the descriptor directory
    _resolve_known_paths(merged, descriptor_dir)

    return merged
