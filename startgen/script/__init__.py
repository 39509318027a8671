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

"""
Start script encoding, binding assembly and rendering for startgen.

This package holds the pure core that turns a LaunchDescriptor into
shell-safe script text. It performs no file writes.

Public API:

relativize : function
    Relative path from the script's directory to the distribution root.
encode_posix : function
    Single-quote a value for a POSIX shell.
encode_windows : function
    Escape a value for a double-quoted Windows batch argument.
assemble_binding : function
    Build the placeholder mapping for a platform.
render_start_script : function
    Render the complete script text for a platform.

Example:
    from startgen.script import render_start_script

    text = render_start_script(descriptor, "posix")
"""

from .binding import PLACEHOLDERS, assemble_binding
from .encoding import encode_posix, encode_windows
from .paths import relativize
from .platforms import PLATFORMS, Platform
from .render import render_start_script, render_template

__all__ = [
    "PLACEHOLDERS",
    "PLATFORMS",
    "Platform",
    "assemble_binding",
    "encode_posix",
    "encode_windows",
    "relativize",
    "render_start_script",
    "render_template",
]
