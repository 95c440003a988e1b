"""POSIX-style exit codes and the domain error mapping used by CLI commands.

Contents:
    * :class:`ExitCode` - IntEnum of every code the CLI returns.
    * :func:`exit_code_for` - Translate a domain error into its exit code.
"""

from __future__ import annotations

from enum import IntEnum

from monthname.domain.errors import ConfigurationError, FetchTimeout, InvalidTableSize, ResourceUnavailable


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno where one fits.

    * 0-1: generic success / failure
    * 22: EINVAL
    * 65: EX_DATAERR
    * 69: EX_UNAVAILABLE
    * 78: EX_CONFIG
    * 110: ETIMEDOUT

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.RESOURCE_UNAVAILABLE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    RESOURCE_UNAVAILABLE = 69
    CONFIG_ERROR = 78
    TIMEOUT = 110


# Most specific first: FetchTimeout is also a ResourceUnavailable.
_DOMAIN_EXIT_CODES: tuple[tuple[type[Exception], ExitCode], ...] = (
    (FetchTimeout, ExitCode.TIMEOUT),
    (ResourceUnavailable, ExitCode.RESOURCE_UNAVAILABLE),
    (InvalidTableSize, ExitCode.DATA_ERROR),
    (ConfigurationError, ExitCode.CONFIG_ERROR),
)


def exit_code_for(exc: BaseException) -> ExitCode:
    """Return the exit code reported for *exc*.

    Examples:
        >>> exit_code_for(FetchTimeout("https://example.com/months.txt", 1.0))
        <ExitCode.TIMEOUT: 110>
        >>> exit_code_for(InvalidTableSize(3))
        <ExitCode.DATA_ERROR: 65>
        >>> exit_code_for(RuntimeError("boom"))
        <ExitCode.GENERAL_ERROR: 1>
    """
    for error_type, code in _DOMAIN_EXIT_CODES:
        if isinstance(exc, error_type):
            return code
    return ExitCode.GENERAL_ERROR


__all__ = ["ExitCode", "exit_code_for"]
