"""Exception hierarchy for fourcc.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from FourCCError for easy catching of any fourcc-specific error.

Invalid codes and code strings are not errors: the codec reports them as None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .codec.fourcc import decode, to_signed
from .formatting.describe import describe

if TYPE_CHECKING:
    from .status import StatusResult


class FourCCError(Exception):
    """Base exception for all fourcc errors."""

    pass


class CodedError(FourCCError):
    """An error identified by a 32-bit status code returned from an API.

    Subclass per API to set the domain and, optionally, per-status short
    descriptions. The string form is a report that includes the status's
    four-character code when it has one, which is often the quickest way to
    identify an OSStatus while debugging.

    Examples:
        ```python
        class AudioServicesError(CodedError):
            domain = "Audio Services Error"
            short_description = "Unknown error"
            descriptions = {561211770: "Bad property size"}

        result = AudioServicesError.check(561211770, "Reading volume")
        if not result.ok:
            print(result.error)
            # Audio Services Error: Bad property size.
            #     Message: Reading volume
            #     Code: 561211770 ('!siz')
        ```

    Attributes:
        domain: API that defines the status codes
        short_description: Fallback short description
        descriptions: Per-status short descriptions (optional)
        code: The signed 32-bit status
        message: Context the error was raised from, if any
    """

    domain: ClassVar[str] = "Coded Error"
    short_description: ClassVar[str] = "Error"
    descriptions: ClassVar[dict[int, str] | None] = None

    def __init__(self, status: int, message: str | None = None) -> None:
        self.code = to_signed(status)
        self.message = message
        super().__init__(status, message)

    @property
    def description(self) -> str:
        """Short description of this particular status."""
        if self.descriptions is not None and self.code in self.descriptions:
            return self.descriptions[self.code]
        return self.short_description

    @property
    def raw_value(self) -> int:
        """The raw status value; same as ``code``."""
        return self.code

    @property
    def code_string(self) -> str | None:
        """Four-character form of the status, or None."""
        return decode(self.code)

    def __str__(self) -> str:
        return describe(
            self.domain, self.description, self.code, self.message, error=True
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.code}, message={self.message!r})"

    @classmethod
    def from_raw_value(cls, status: int) -> CodedError:
        """Create an error from a raw status with a placeholder message."""
        return cls(status, "No message.")

    @classmethod
    def check(cls, status: int, message: str | None = None) -> StatusResult:
        """Check a status against NO_ERR.

        Returns Success for NO_ERR and Failure carrying an instance of this
        class otherwise. See ``fourcc.status.check_status``.
        """
        # Import here to avoid circular dependency
        from .status import check_status

        return check_status(status, message, error_type=cls)
