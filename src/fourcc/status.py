"""Status checks with a discriminated result.

APIs that report failure through a status code return NO_ERR on success.
``check_status`` turns such a status into a ``Success`` or a ``Failure``
carrying a ``CodedError``; raising is left to the caller via ``unwrap()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Union

from pydantic import TypeAdapter

from .codec.fourcc import Code
from .exceptions import CodedError

logger = logging.getLogger(__name__)

NO_ERR = 0

_status_adapter = TypeAdapter(Code)


@dataclass(frozen=True)
class Success:
    """Result of a status check that passed."""

    ok: Literal[True] = True

    def unwrap(self) -> None:
        """Do nothing; the status was NO_ERR."""
        return None


@dataclass(frozen=True)
class Failure:
    """Result of a status check that failed.

    Attributes:
        error: The error describing the failed status
    """

    error: CodedError
    ok: Literal[False] = False

    @property
    def status(self) -> int:
        """The failed status code."""
        return self.error.code

    def unwrap(self) -> None:
        """Raise the carried error."""
        raise self.error


StatusResult = Union[Success, Failure]


def check_status(
    status: int,
    message: str | None = None,
    *,
    error_type: type[CodedError] = CodedError,
) -> StatusResult:
    """Check a status code against NO_ERR.

    Args:
        status: Signed or unsigned 32-bit status returned by an API
        message: Context to attach to the error if the status failed
        error_type: CodedError subclass to build on failure

    Returns:
        Success if status == NO_ERR, otherwise Failure carrying error_type(status, message)

    Raises:
        pydantic.ValidationError: If status is not an int that fits in 32 bits

    Examples:
        ```python
        from fourcc import check_status

        result = check_status(status, "Creating sound")
        if not result.ok:
            log.warning("%s", result.error)

        # Or raise on failure
        check_status(status, "Creating sound").unwrap()
        ```
    """
    status = _status_adapter.validate_python(status)

    if status == NO_ERR:
        return Success()

    error = error_type(status, message)
    logger.debug("Status check failed: %s (%s)", error.code, error_type.__name__)
    return Failure(error)
