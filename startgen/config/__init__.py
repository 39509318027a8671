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

"""Configuration loading for startgen.

This module loads YAML launch descriptors with a layered approach:

  - Organization-wide defaults (defaults/org.yaml)
  - Descriptor-specific configuration (any path below the defaults root)

The loader performs deep merging where dicts are merged recursively and
lists/scalars are replaced (last wins). Relative paths are resolved against
the descriptor file location.

Public API:

- load_effective_config: Load and merge configuration for a descriptor

Example:
    Basic usage:

        from pathlib import Path
        from startgen.config import load_effective_config

        config = load_effective_config(Path("apps/my-app/launch.yaml"))
        print(config["application"]["main_class"])

"""

from .loader import load_effective_config

__all__ = ["load_effective_config"]
