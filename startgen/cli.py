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

"""Command-line interface for startgen.

This module provides the main CLI entry point for the startgen tool.

Commands:

    validate: Validate a launch descriptor (no files written)
    generate: Write start scripts for every targeted platform
    render: Print one platform's start script to stdout

Example:
    Validate a descriptor:
        ```bash
        $ startgen validate apps/my-app/launch.yaml
        ```

    Generate both scripts into build/scripts:
        ```bash
        $ startgen generate apps/my-app/launch.yaml
        ```

    Generate only the Windows script into dist/bin:
        ```bash
        $ startgen generate apps/my-app/launch.yaml --platform windows --output-dir dist/bin
        ```

    Preview the POSIX script:
        ```bash
        $ startgen render apps/my-app/launch.yaml --platform posix
        ```

Exit Codes:

- 0: Success
- 1: Error (configuration, path, encoding or generation failure)

Note:
    The CLI uses argparse for command parsing.
    Each command has its own handler function (cmd_<command>).
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode and prints every binding value.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
import traceback

from startgen import __version__
from startgen.config import load_effective_config
from startgen.core import generate_start_scripts
from startgen.descriptor import descriptor_from_config
from startgen.exceptions import StartGenError
from startgen.logging import get_logger, set_global_logger
from startgen.script.platforms import PLATFORMS, check_platform
from startgen.script.render import render_start_script
from startgen.script.templates import load_template
from startgen.validation import validate_descriptor


def _report_error(err: StartGenError, args: argparse.Namespace) -> int:
    print(f"Error: {err}", file=sys.stderr)
    if args.verbose or getattr(args, "debug", False):
        traceback.print_exc()
    return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Handler for 'startgen validate' command.

    Args:
        args: Parsed command-line arguments containing the descriptor path
            and verbose flag.

    Returns:
        Exit code (0 for valid descriptor, 1 for invalid).
    """
    logger = get_logger(verbose=args.verbose, debug=False)
    set_global_logger(logger)

    descriptor_path = Path(args.descriptor).resolve()

    print(f"Validating descriptor: {descriptor_path}")
    print()

    result = validate_descriptor(descriptor_path, verbose=args.verbose)

    print("=" * 70)
    print("VALIDATION RESULTS")
    print("=" * 70)
    print(f"Descriptor:  {result.descriptor_path}")
    print(f"Status:      {result.status.upper()}")
    print(f"Platforms:   {', '.join(result.platforms) or '-'}")
    print()

    if result.warnings:
        print(f"Warnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  [WARNING] {warning}")
        print()

    if result.errors:
        print(f"Errors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  [X] {error}")
        print()

    print("=" * 70)

    if result.status == "valid":
        print()
        print("[SUCCESS] Descriptor is valid!")
        return 0

    print()
    print(f"[FAILED] Descriptor validation failed with {len(result.errors)} error(s).")
    return 1


def cmd_generate(args: argparse.Namespace) -> int:
    """Handler for 'startgen generate' command.

    Args:
        args: Parsed command-line arguments containing the descriptor path,
            output directory, platform selection and flags.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    descriptor_path = Path(args.descriptor).resolve()
    output_dir = Path(args.output_dir).resolve() if args.output_dir else None

    if not descriptor_path.exists():
        print(f"Error: Descriptor file not found: {descriptor_path}", file=sys.stderr)
        return 1

    print(f"Generating start scripts for descriptor: {descriptor_path}")
    print()

    try:
        result = generate_start_scripts(
            descriptor_path,
            output_dir=output_dir,
            platforms=args.platform,
        )
    except StartGenError as err:
        return _report_error(err, args)

    print()
    print("=" * 70)
    print("GENERATION RESULTS")
    print("=" * 70)
    print(f"App Name:        {result.app_name}")
    print(f"Main Class:      {result.main_class}")
    print(f"Output Dir:      {result.output_dir}")
    for script in result.scripts:
        template = script.template or "built-in"
        print(f"{script.platform.capitalize() + ':':<17}{script.path} ({template})")
    print(f"Status:          {result.status}")
    print("=" * 70)
    print()
    print("[SUCCESS] Start scripts generated successfully!")

    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Handler for 'startgen render' command.

    Prints the rendered script for one platform to stdout without writing
    any files. Line endings are kept as rendered (CRLF for Windows).

    Args:
        args: Parsed command-line arguments containing the descriptor path,
            platform and flags.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    # Progress output would mix with the script on stdout
    logger = get_logger(verbose=False, debug=False)
    set_global_logger(logger)

    descriptor_path = Path(args.descriptor).resolve()

    try:
        platform = check_platform(args.platform)
        config = load_effective_config(descriptor_path)
        descriptor = descriptor_from_config(config)
        templates = config["scripts"].get("templates") or {}
        template = (
            load_template(Path(templates[platform])) if templates.get(platform) else None
        )
        text = render_start_script(descriptor, platform, template)
    except StartGenError as err:
        return _report_error(err, args)

    sys.stdout.buffer.write(text.encode("utf-8"))
    sys.stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the startgen CLI.

    This function is registered as the 'startgen' console script in
    pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="startgen",
        description="startgen - start script generator for JVM application distributions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"startgen {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'validate' command
    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate a launch descriptor (no files written)",
        description="Check descriptor YAML for syntax, schema, path and encoding problems.",
    )
    parser_validate.add_argument(
        "descriptor",
        help="Path to the descriptor YAML file",
    )
    parser_validate.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show validation progress and details",
    )
    parser_validate.set_defaults(func=cmd_validate)

    # 'generate' command
    parser_generate = subparsers.add_parser(
        "generate",
        help="Write start scripts for every targeted platform",
        description="Render and write POSIX and/or Windows start scripts from a descriptor.",
    )
    parser_generate.add_argument(
        "descriptor",
        help="Path to the descriptor YAML file",
    )
    parser_generate.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the scripts (default: scripts.output_dir or build/scripts)",
    )
    parser_generate.add_argument(
        "--platform",
        action="append",
        choices=PLATFORMS,
        default=None,
        help="Platform to generate; repeat for several (default: scripts.platforms or all)",
    )
    parser_generate.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser_generate.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )
    parser_generate.set_defaults(func=cmd_generate)

    # 'render' command
    parser_render = subparsers.add_parser(
        "render",
        help="Print one platform's start script to stdout",
        description="Render a start script without writing any files.",
    )
    parser_render.add_argument(
        "descriptor",
        help="Path to the descriptor YAML file",
    )
    parser_render.add_argument(
        "--platform",
        choices=PLATFORMS,
        default="posix",
        help="Platform to render (default: posix)",
    )
    parser_render.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show tracebacks on errors",
    )
    parser_render.set_defaults(func=cmd_render)

    # Parse and dispatch
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
