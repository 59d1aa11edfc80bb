"""Exit codes for the action.

A GitHub Actions step fails on any non-zero exit code; the distinct values
let wrapper scripts tell a missing release apart from a network outage.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (ref is not a tag, invalid pattern)
    - 2: Environment error (runner context missing or malformed)
    - 3: Resolve error (no tag matched the patterns)
    - 4: Network error (API unreachable, auth, rate limit, bad payload)
    - 5: I/O error (outputs file not writable)
    - 6: Not found (no release published for the tag)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    RESOLVE_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5
    NOT_FOUND = 6
