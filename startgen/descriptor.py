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

"""Launch descriptor: everything a start script needs to know.

A LaunchDescriptor is built either directly or from the ``application``
section of a merged descriptor configuration. Optional fields are derived
from the application name the same way for every project:

    name: my-app  ->  opts_environment_var:     MY_APP_OPTS
                      exit_environment_var:     MY_APP_EXIT_CONSOLE
                      app_name_system_property: my-app.appname
                      script_relative_path:     bin/my-app

Example:
    ```python
    from startgen.descriptor import LaunchDescriptor

    descriptor = LaunchDescriptor(
        application_name="my-app",
        main_class_name="com.example.Main",
        opts_environment_var="MY_APP_OPTS",
        exit_environment_var="MY_APP_EXIT_CONSOLE",
        default_jvm_opts=("-Xmx512m",),
        app_name_system_property="my-app.appname",
        classpath=("lib/my-app.jar",),
        script_relative_path="bin/my-app",
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any

from startgen.exceptions import ConfigError

_NON_CONSTANT_CHARS = re.compile(r"[^A-Za-z0-9]+")


@dataclass(frozen=True)
class LaunchDescriptor:
    """Immutable description of how to launch an application.

    Attributes:
        application_name: Display name of the application.
        main_class_name: Entry point passed to the runtime.
        opts_environment_var: Environment variable holding extra runtime
            options at launch time.
        exit_environment_var: Environment variable that makes the Windows
            script exit the console with the launch status.
        default_jvm_opts: Runtime options, in precedence order.
        app_name_system_property: System property receiving the script name.
        classpath: Distribution-relative classpath entries, in search order.
        script_relative_path: Location of the script inside the distribution.
    """

    application_name: str
    main_class_name: str
    opts_environment_var: str
    exit_environment_var: str
    default_jvm_opts: tuple[str, ...]
    app_name_system_property: str
    classpath: tuple[str, ...]
    script_relative_path: str

    @property
    def script_name(self) -> str:
        """File name of the script (last path segment)."""
        return self.script_relative_path.rsplit("/", 1)[-1]


def to_constant(name: str) -> str:
    """Convert a display name to an environment-variable style constant.

    Example:
        ```python
        to_constant("my-app")       # "MY_APP"
        to_constant("Some App 2")   # "SOME_APP_2"
        ```
    """
    return _NON_CONSTANT_CHARS.sub("_", name).strip("_").upper()


def _require_str(app: dict[str, Any], key: str) -> str:
    value = app.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"application.{key}: must be a non-empty string")
    return value


def _optional_str(app: dict[str, Any], key: str, default: str) -> str:
    value = app.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"application.{key}: must be a string")
    return value


def _str_tuple(app: dict[str, Any], key: str) -> tuple[str, ...]:
    value = app.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError(f"application.{key}: must be a list of strings")
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigError(f"application.{key}[{idx}]: must be a string")
    return tuple(value)


def descriptor_from_config(config: dict[str, Any]) -> LaunchDescriptor:
    """Build a LaunchDescriptor from a merged descriptor configuration.

    Args:
        config: Merged configuration (org defaults + descriptor file).

    Returns:
        The launch descriptor, with optional fields derived from the
            application name.

    Raises:
        ConfigError: If the application section is missing or a field has
            the wrong type.
    """
    app = config.get("application")
    if not isinstance(app, dict):
        raise ConfigError("Missing required section: application")

    name = _require_str(app, "name")
    constant = to_constant(name) or "APP"

    return LaunchDescriptor(
        application_name=name,
        main_class_name=_require_str(app, "main_class"),
        opts_environment_var=_optional_str(app, "opts_env_var", f"{constant}_OPTS"),
        exit_environment_var=_optional_str(
            app, "exit_env_var", f"{constant}_EXIT_CONSOLE"
        ),
        default_jvm_opts=_str_tuple(app, "default_jvm_opts"),
        app_name_system_property=_optional_str(
            app, "app_name_system_property", f"{name}.appname"
        ),
        classpath=_str_tuple(app, "classpath"),
        script_relative_path=_optional_str(app, "script_relative_path", f"bin/{name}"),
    )
