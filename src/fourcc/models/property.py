"""Coded property model.

Many APIs identify properties by constant 32-bit values, most of which are
four-character codes. CodedProperty wraps such a constant with the domain that
defines it and a short description, and prints both together with the code's
four-character form.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

from ..codec.fourcc import UINT32_MAX, UInt32, decode, encode
from ..formatting.describe import describe

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="CodedProperty")

_code_adapter = TypeAdapter(UInt32)


class CodedProperty(BaseModel):
    """Base class for API-defined properties identified by a 32-bit constant.

    Subclasses set the domain as a ClassVar and may restrict the accepted codes
    with a ``known_codes`` table mapping each code to its short description.

    Example:
        >>> from typing import ClassVar, Optional
        >>> class SoundProperty(CodedProperty):
        ...     domain: ClassVar[str] = "System Sound Services Property"
        ...     known_codes: ClassVar[Optional[dict[int, str]]] = {
        ...         0x69737569: "Is UI sound",
        ...     }
        >>> prop = SoundProperty.from_code_string("isui")
        >>> prop.code, prop.short_description
        (1769174377, 'Is UI sound')
        >>> SoundProperty.from_code(7) is None
        True

    Attributes:
        code: Unsigned 32-bit constant that identifies the property
        short_description: Short description of the property
        domain: API that defines the property (ClassVar)
        known_codes: Accepted codes and their descriptions, or None to accept any code (ClassVar)
    """

    model_config = ConfigDict(
        # Codes must already be ints; no coercion from str or float
        strict=True,
        frozen=True,
        extra="forbid",
    )

    code: UInt32
    short_description: str = ""

    domain: ClassVar[str] = "Coded Property"
    known_codes: ClassVar[dict[int, str] | None] = None

    @property
    def raw_value(self) -> int:
        """The raw value of the property; same as ``code``."""
        return self.code

    @property
    def code_string(self) -> str | None:
        """Four-character form of the code, or None."""
        return decode(self.code)

    def __str__(self) -> str:
        return describe(self.domain, self.short_description, self.code)

    @classmethod
    def from_code(cls: type[P], code: int) -> P | None:
        """Create a property from its code.

        Args:
            code: Unsigned 32-bit constant

        Returns:
            The property, or None if ``known_codes`` is set and does not contain code

        Raises:
            pydantic.ValidationError: If code is not an unsigned 32-bit int
        """
        code = _code_adapter.validate_python(code)

        if cls.known_codes is None:
            return cls(code=code)

        if code not in cls.known_codes:
            logger.debug("Unknown %s code: %s", cls.__name__, code)
            return None

        return cls(code=code, short_description=cls.known_codes[code])

    @classmethod
    def from_raw_value(cls: type[P], raw_value: int) -> P | None:
        """Create a property from its raw value. Same as ``from_code``."""
        return cls.from_code(raw_value)

    @classmethod
    def from_code_string(cls: type[P], text: str) -> P | None:
        """Create a property from its four-character code string.

        Returns None if text is not a valid code string or its code is unknown.
        """
        code = encode(text)
        if code is None:
            return None
        return cls.from_code(code)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Reject known_codes tables that hold values outside UInt32."""
        super().__init_subclass__(**kwargs)

        if cls.known_codes is not None:
            for code in cls.known_codes:
                valid = isinstance(code, int) and not isinstance(code, bool)
                if not valid or not 0 <= code <= UINT32_MAX:
                    raise ValueError(
                        f"{cls.__name__}.known_codes: {code!r} is not an unsigned 32-bit code"
                    )
