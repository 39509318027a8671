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

"""startgen - start script generator

A Python-based CLI tool that renders launcher scripts for JVM application
distributions from a YAML launch descriptor.

startgen provides:

- YAML-based launch descriptors with organization-wide defaults
- POSIX sh and Windows batch start scripts from one descriptor
- Correct quoting of JVM options containing spaces, quotes or percent signs
- Distribution-relative APP_HOME discovery and classpath assembly
- Custom template support

Quick Start:
Validate a descriptor:

    $ startgen validate apps/my-app/launch.yaml

Generate the start scripts:

    $ startgen generate apps/my-app/launch.yaml

For full CLI documentation:

    $ startgen --help

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "startgen - start script generator for JVM distributions"

# Re-export commonly used functions for convenience
from startgen.config import load_effective_config
from startgen.core import generate_start_scripts
from startgen.descriptor import LaunchDescriptor, descriptor_from_config
from startgen.exceptions import (
    ConfigError,
    EncodingError,
    GenerationError,
    InvalidPathError,
    StartGenError,
)
from startgen.script import assemble_binding, relativize, render_start_script
from startgen.validation import validate_descriptor

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "ConfigError",
    "EncodingError",
    "GenerationError",
    "InvalidPathError",
    "LaunchDescriptor",
    "StartGenError",
    "assemble_binding",
    "descriptor_from_config",
    "generate_start_scripts",
    "load_effective_config",
    "relativize",
    "render_start_script",
    "validate_descriptor",
]
