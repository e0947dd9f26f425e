# topmark:header:start
#
#   project      : routemap
#   file         : exit_codes.py
#   file_relpath : src/routemap/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the routemap CLI.

Values other than ``SUCCESS`` and ``FAILURE`` follow the BSD ``sysexits.h``
conventions so shell scripts can tell failure kinds apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the routemap CLI.

    Attributes:
        SUCCESS (int): The command completed (including "unchanged" and a missing routes file).
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line usage.
        MALFORMED_ANNOTATION (int): The routes file holds a malformed route map block.
        ENCODING_ERROR (int): The routes file is not valid UTF-8 text.
        PROVIDER_ERROR (int): The route listing command could not be run.
        IO_ERROR (int): Reading or writing the routes file failed.
        CONFIG_ERROR (int): Invalid configuration.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    MALFORMED_ANNOTATION = 65  # EX_DATAERR
    ENCODING_ERROR = 66  # EX_NOINPUT: input not readable as text
    PROVIDER_ERROR = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
