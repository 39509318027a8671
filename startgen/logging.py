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

"""Progress and diagnostic output for startgen.

Library code never prints directly. It asks for the global logger and
reports through it; the CLI swaps in a DefaultLogger sized to the -v/-d
flags, everything else gets the SilentLogger.

Levels:
- step: numbered progress line, always shown by DefaultLogger
- verbose: shown with -v (or -d)
- debug: shown with -d; used for merged config dumps and binding values
- warning/error: always shown, written to stderr

Prefixes name the component that logs: CONFIG, BINDING, RENDER, GENERATE.

Example:
    ```python
    from startgen.logging import get_global_logger

    logger = get_global_logger()
    logger.step(1, 2, "Rendering posix start script...")
    logger.debug("BINDING", "  classpath = $APP_HOME/lib/my-app.jar")
    ```
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Logger(Protocol):
    """Interface every startgen logger implements."""

    def step(self, step: int, total: int, message: str) -> None:
        """Report progress through a fixed number of steps.

        Args:
            step: Current step number (1-based).
            total: Number of steps.
            message: What the step does.
        """
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Report detail worth seeing with -v."""
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Report internals worth seeing with -d."""
        ...

    def warning(self, prefix: str, message: str) -> None: ...

    def error(self, prefix: str, message: str) -> None: ...


class DefaultLogger:
    """Console logger driven by the CLI verbosity flags.

    Progress goes to stdout; warnings and errors go to stderr so they never
    end up inside a script piped out of ``startgen render``.
    """

    def __init__(
        self,
        verbose: bool = False,
        debug: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._verbose = verbose or debug
        self._debug = debug
        self._out = out
        self._err = err

    def _emit(self, text: str, to_err: bool = False) -> None:
        # Streams are looked up per call; sys.stdout may be swapped later
        stream = (self._err or sys.stderr) if to_err else (self._out or sys.stdout)
        print(text, file=stream)

    def step(self, step: int, total: int, message: str) -> None:
        self._emit(f"[{step}/{total}] {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            self._emit(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            self._emit(f"[{prefix}] {message}")

    def warning(self, prefix: str, message: str) -> None:
        self._emit(f"[{prefix}] [WARNING] {message}", to_err=True)

    def error(self, prefix: str, message: str) -> None:
        self._emit(f"[{prefix}] [ERROR] {message}", to_err=True)


class SilentLogger:
    """Logger that discards everything. The default for library use."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass

    def warning(self, prefix: str, message: str) -> None:
        pass

    def error(self, prefix: str, message: str) -> None:
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Build a console logger for the given CLI flags.

    Args:
        verbose: Show verbose messages.
        debug: Show debug messages too (implies verbose).

    Returns:
        A DefaultLogger.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger library code should report through."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Replace the global logger.

    Example:
        ```python
        set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))
        ```
    """
    global _global_logger
    _global_logger = logger
