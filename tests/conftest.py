"""
Pytest configuration and shared fixtures for startgen tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from startgen.descriptor import LaunchDescriptor
from startgen.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger so CLI tests don't leak verbosity."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_descriptor() -> LaunchDescriptor:
    """Provide a typical launch descriptor."""
    return LaunchDescriptor(
        application_name="my-app",
        main_class_name="com.example.Main",
        opts_environment_var="MY_APP_OPTS",
        exit_environment_var="MY_APP_EXIT_CONSOLE",
        default_jvm_opts=("-Xmx512m", "-Dfoo=%PATH%"),
        app_name_system_property="my-app.appname",
        classpath=("lib/my-app.jar", "lib/dep.jar"),
        script_relative_path="bin/my-app",
    )


@pytest.fixture
def sample_descriptor_data() -> dict[str, Any]:
    """
    Provide sample descriptor configuration data.

    Returns a complete descriptor structure for testing.
    """
    return {
        "apiVersion": "startgen/v1",
        "application": {
            "name": "my-app",
            "main_class": "com.example.Main",
            "default_jvm_opts": ["-Xmx512m", "-Dfoo=%PATH%"],
            "classpath": ["lib/my-app.jar", "lib/dep.jar"],
        },
    }


@pytest.fixture
def sample_org_defaults() -> dict[str, Any]:
    """Provide sample organization defaults."""
    return {
        "apiVersion": "startgen/v1",
        "application": {
            "default_jvm_opts": ["-Xms64m"],
        },
        "scripts": {
            "platforms": ["posix"],
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("launch.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
