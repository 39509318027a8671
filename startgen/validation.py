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

"""Descriptor validation module.

This module checks a launch descriptor without writing any files. This is
useful for quick feedback while editing descriptors and in CI/CD pipelines.

Validation Checks:

- YAML syntax is valid and the org defaults merge cleanly
- apiVersion is present and supported
- application section has the required fields with the right types
- scripts.platforms names known platforms
- script_relative_path can be relativized
- Every value can be represented on every targeted platform
- Custom template files exist

Warnings (not errors):

- Classpath entries with whitespace or shell-significant characters
- Identifiers (name, env vars, system property) with quote characters

Example:
    Validate a descriptor and handle results:
        ```python
        from pathlib import Path
        from startgen.validation import validate_descriptor

        result = validate_descriptor(Path("apps/my-app/launch.yaml"))
        if result.status == "valid":
            print(f"Descriptor is valid for: {', '.join(result.platforms)}")
        else:
            for error in result.errors:
                print(f"Error: {error}")
        ```
"""

from __future__ import annotations

from pathlib import Path
import re

from startgen.config import load_effective_config
from startgen.descriptor import descriptor_from_config
from startgen.exceptions import ConfigError, StartGenError
from startgen.results import ValidationResult
from startgen.script.binding import assemble_binding
from startgen.script.platforms import Platform, resolve_platforms

__all__ = ["validate_descriptor"]

SUPPORTED_API_VERSION = "startgen/v1"

# Characters that are substituted into scripts without quoting
_SHELL_SIGNIFICANT = re.compile(r"[\s\"'`$%&|<>^;()*?!]")
_QUOTE_CHARS = re.compile(r"[\"'`]")


def _invalid(errors: list[str], warnings: list[str], path: Path) -> ValidationResult:
    return ValidationResult(
        status="invalid",
        errors=errors,
        warnings=warnings,
        platforms=[],
        descriptor_path=str(path),
    )


def validate_descriptor(descriptor_path: Path, verbose: bool = False) -> ValidationResult:
    """Validate a descriptor file without writing anything.

    Args:
        descriptor_path: Path to the descriptor YAML file to validate.
        verbose: If True, print validation progress. Default is False.

    Returns:
        ValidationResult with status "valid" or "invalid", the errors and
            warnings found, and the platforms the descriptor targets.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if verbose:
        print(f"Validating descriptor: {descriptor_path}")

    if not descriptor_path.exists():
        errors.append(f"Descriptor file not found: {descriptor_path}")
        return _invalid(errors, warnings, descriptor_path)

    try:
        config = load_effective_config(descriptor_path)
    except ConfigError as err:
        errors.append(str(err))
        return _invalid(errors, warnings, descriptor_path)

    if verbose:
        print("  [OK] YAML syntax is valid")

    # Check apiVersion
    api_version = config.get("apiVersion")
    if api_version is None:
        errors.append("Missing required field: apiVersion")
    elif not isinstance(api_version, str):
        errors.append("apiVersion must be a string")
    elif api_version != SUPPORTED_API_VERSION:
        warnings.append(
            f"apiVersion '{api_version}' may not be supported "
            f"(expected: {SUPPORTED_API_VERSION})"
        )

    # Check application section
    try:
        descriptor = descriptor_from_config(config)
    except ConfigError as err:
        errors.append(str(err))
        return _invalid(errors, warnings, descriptor_path)

    if verbose:
        print(f"  [OK] Application: {descriptor.application_name}")

    # Check platforms (same resolution generate uses)
    platforms: list[Platform] = []
    try:
        platforms = resolve_platforms(config["scripts"].get("platforms"))
    except ConfigError as err:
        errors.append(str(err))

    # Assemble each binding to surface path and encoding errors
    for platform in platforms:
        try:
            assemble_binding(descriptor, platform)
        except StartGenError as err:
            errors.append(f"{platform}: {err}")
            continue
        if verbose:
            print(f"  [OK] {platform} binding assembles cleanly")

    # Check custom templates exist for the platforms that will be generated
    templates = config["scripts"].get("templates") or {}
    for platform in platforms:
        template_path = templates.get(platform)
        if template_path and not Path(template_path).exists():
            errors.append(
                f"scripts.templates.{platform}: template not found: {template_path}"
            )

    for idx, entry in enumerate(descriptor.classpath):
        if _SHELL_SIGNIFICANT.search(entry):
            warnings.append(
                f"application.classpath[{idx}]: '{entry}' contains whitespace or "
                "shell-significant characters and is not quoted in the scripts"
            )

    identifiers = {
        "name": descriptor.application_name,
        "opts_env_var": descriptor.opts_environment_var,
        "exit_env_var": descriptor.exit_environment_var,
        "app_name_system_property": descriptor.app_name_system_property,
    }
    for field, value in identifiers.items():
        if _QUOTE_CHARS.search(value):
            warnings.append(
                f"application.{field}: '{value}' contains quote characters and "
                "is embedded in the scripts without escaping"
            )

    status = "valid" if not errors else "invalid"

    if verbose:
        if status == "valid":
            print("  [OK] Descriptor is valid!")
        else:
            print(f"  [ERROR] Descriptor has {len(errors)} error(s)")

    return ValidationResult(
        status=status,
        errors=errors,
        warnings=warnings,
        platforms=list(platforms),
        descriptor_path=str(descriptor_path),
    )
