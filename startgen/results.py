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

"""Public API return types for startgen.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Note:
    Only public API return types belong in this module. Domain types
    (like LaunchDescriptor) should remain co-located with their related
    logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratedScript:
    """One start script written to disk.

    Attributes:
        platform: Target platform ("posix" or "windows").
        path: Path of the written script.
        template: Custom template path, or None for the built-in template.
    """

    platform: str
    path: Path
    template: Path | None


@dataclass(frozen=True)
class GenerateResult:
    """Result from generating start scripts for a descriptor.

    Attributes:
        app_name: Application display name.
        main_class: Entry point the scripts launch.
        output_dir: Directory the scripts were written to.
        scripts: The written scripts, in platform order.
        status: Always "success" for successful generation.
    """

    app_name: str
    main_class: str
    output_dir: Path
    scripts: list[GeneratedScript]
    status: str


@dataclass(frozen=True)
class ValidationResult:
    """Result from validating a descriptor.

    Attributes:
        status: Validation status ("valid" or "invalid").
        errors: List of error messages (empty if valid).
        warnings: List of warning messages.
        platforms: Platforms the descriptor targets.
        descriptor_path: String path to the validated descriptor file.
    """

    status: str
    errors: list[str]
    warnings: list[str]
    platforms: list[str]
    descriptor_path: str
