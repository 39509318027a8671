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

"""Built-in start script templates and custom template loading.

Templates use string.Template syntax: placeholders are written ${name} and
a literal dollar sign is written $$. Templates are stored with LF line
endings; the renderer converts them to the platform convention.

Runtime Behavior (both platforms):
    - Locate APP_HOME from the script's own directory
    - Pick the java command from JAVA_HOME or the PATH
    - Pass DEFAULT_JVM_OPTS, JAVA_OPTS and the application opts variable
    - Pass -D<appNameSystemProperty>=<script base name>
    - Run the main class with the script's arguments
"""

from __future__ import annotations

from pathlib import Path

from startgen.exceptions import GenerationError
from startgen.script.platforms import Platform

POSIX_START_SCRIPT_TEMPLATE = r"""#!/usr/bin/env sh

##############################################################################
##
##  ${applicationName} start up script for UN*X
##
##############################################################################

# Attempt to set APP_HOME
# Resolve links: $$0 may be a link
PRG="$$0"
# Need this for relative symlinks.
while [ -h "$$PRG" ] ; do
    ls=`ls -ld "$$PRG"`
    link=`expr "$$ls" : '.*-> \(.*\)$$'`
    if expr "$$link" : '/.*' > /dev/null; then
        PRG="$$link"
    else
        PRG=`dirname "$$PRG"`"/$$link"
    fi
done
SAVED="`pwd`"
cd "`dirname \"$$PRG\"`/${appHomeRelativePath}" >/dev/null
APP_HOME="`pwd -P`"
cd "$$SAVED" >/dev/null

APP_NAME="${applicationName}"
APP_BASE_NAME=`basename "$$0"`

# Add default JVM options here. You can also use JAVA_OPTS and ${optsEnvironmentVar} to pass JVM options to this script.
DEFAULT_JVM_OPTS=${defaultJvmOpts}

warn () {
    echo "$$*"
}

die () {
    echo
    echo "$$*"
    echo
    exit 1
}

# OS specific support (must be 'true' or 'false').
cygwin=false
msys=false
case "`uname`" in
  CYGWIN* )
    cygwin=true
    ;;
  MINGW* )
    msys=true
    ;;
esac

CLASSPATH=${classpath}

# Determine the Java command to use to start the JVM.
if [ -n "$$JAVA_HOME" ] ; then
    if [ -x "$$JAVA_HOME/jre/sh/java" ] ; then
        # IBM's JDK on AIX uses strange locations for the executables
        JAVACMD="$$JAVA_HOME/jre/sh/java"
    else
        JAVACMD="$$JAVA_HOME/bin/java"
    fi
    if [ ! -x "$$JAVACMD" ] ; then
        die "ERROR: JAVA_HOME is set to an invalid directory: $$JAVA_HOME

Please set the JAVA_HOME variable in your environment to match the
location of your Java installation."
    fi
else
    JAVACMD="java"
    which java >/dev/null 2>&1 || die "ERROR: JAVA_HOME is not set and no 'java' command could be found in your PATH.

Please set the JAVA_HOME variable in your environment to match the
location of your Java installation."
fi

# For Cygwin or MSYS, switch paths to Windows format before running java
if [ "$$cygwin" = "true" -o "$$msys" = "true" ] ; then
    APP_HOME=`cygpath --path --mixed "$$APP_HOME"`
    CLASSPATH=`cygpath --path --mixed "$$CLASSPATH"`
    JAVACMD=`cygpath --unix "$$JAVACMD"`
fi

# Escape application args
save () {
    for i do printf %s\\n "$$i" | sed "s/'/'\\\\''/g;1s/^/'/;\$$s/\$$/' \\\\/" ; done
    echo " "
}
APP_ARGS=`save "$$@"`

# Collect all arguments for the java command, following the shell quoting and substitution rules
eval set -- "$$DEFAULT_JVM_OPTS" $$JAVA_OPTS $$${optsEnvironmentVar} "\"-D${appNameSystemProperty}=$$APP_BASE_NAME\"" -classpath "\"$$CLASSPATH\"" ${mainClassName} "$$APP_ARGS"

exec "$$JAVACMD" "$$@"
"""

WINDOWS_START_SCRIPT_TEMPLATE = r"""@if "%DEBUG%" == "" @echo off
@rem ##########################################################################
@rem
@rem  ${applicationName} startup script for Windows
@rem
@rem ##########################################################################

@rem Set local scope for the variables with windows NT shell
if "%OS%"=="Windows_NT" setlocal

set DIRNAME=%~dp0
if "%DIRNAME%" == "" set DIRNAME=.
set APP_BASE_NAME=%~n0
set APP_HOME=%DIRNAME%${appHomeRelativePath}

@rem Add default JVM options here. You can also use JAVA_OPTS and ${optsEnvironmentVar} to pass JVM options to this script.
set DEFAULT_JVM_OPTS=${defaultJvmOpts}

@rem Find java.exe
if defined JAVA_HOME goto findJavaFromJavaHome

set JAVA_EXE=java.exe
%JAVA_EXE% -version >NUL 2>&1
if "%ERRORLEVEL%" == "0" goto init

echo.
echo ERROR: JAVA_HOME is not set and no 'java' command could be found in your PATH.
echo.
echo Please set the JAVA_HOME variable in your environment to match the
echo location of your Java installation.

goto fail

:findJavaFromJavaHome
set JAVA_HOME=%JAVA_HOME:"=%
set JAVA_EXE=%JAVA_HOME%/bin/java.exe

if exist "%JAVA_EXE%" goto init

echo.
echo ERROR: JAVA_HOME is set to an invalid directory: %JAVA_HOME%
echo.
echo Please set the JAVA_HOME variable in your environment to match the
echo location of your Java installation.

goto fail

:init
@rem Get command-line arguments
set CMD_LINE_ARGS=%*

@rem Setup the command line
set CLASSPATH=${classpath}

@rem Execute ${applicationName}
"%JAVA_EXE%" %DEFAULT_JVM_OPTS% %JAVA_OPTS% %${optsEnvironmentVar}% "-D${appNameSystemProperty}=%APP_BASE_NAME%" -classpath "%CLASSPATH%" ${mainClassName} %CMD_LINE_ARGS%

:end
@rem End local scope for the variables with windows NT shell
if "%ERRORLEVEL%"=="0" goto mainEnd

:fail
rem Set variable ${exitEnvironmentVar} if you need the _script_ return code instead of
rem the _cmd.exe /c_ return code!
if  not "" == "%${exitEnvironmentVar}%" exit 1
exit /b 1

:mainEnd
if "%OS%"=="Windows_NT" endlocal

:omega
"""

_DEFAULT_TEMPLATES: dict[str, str] = {
    "posix": POSIX_START_SCRIPT_TEMPLATE,
    "windows": WINDOWS_START_SCRIPT_TEMPLATE,
}


def default_template(platform: Platform) -> str:
    """Return the built-in template body for a platform."""
    return _DEFAULT_TEMPLATES[platform]


def load_template(template_path: Path) -> str:
    """Read a custom template file.

    Args:
        template_path: Path to a UTF-8 template file.

    Returns:
        The template text.

    Raises:
        GenerationError: If the file does not exist or cannot be read.
    """
    from startgen.logging import get_global_logger

    logger = get_global_logger()

    if not template_path.exists():
        raise GenerationError(f"Start script template not found: {template_path}")

    logger.verbose("RENDER", f"Reading template: {template_path}")
    try:
        return template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise GenerationError(
            f"Failed to read start script template {template_path}: {err}"
        ) from err
