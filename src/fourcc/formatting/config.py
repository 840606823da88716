"""Configuration for descriptive report formatting.

This module provides the options dataclass used by ``describe()`` to lay out
the report strings of coded properties and coded errors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DescribeOptions:
    """Layout options for coded property and error descriptions.

    Attributes:
        indent: Prefix of each detail line (default a single tab).
            Must be non-empty and whitespace only.

        quote: Character placed around the decoded code string (default "'").

        show_code_string: Append the decoded code string after the numeric code
            when it has one (default True).

    Examples:
        ```python
        from fourcc import DescribeOptions, describe

        options = DescribeOptions(indent="    ", quote='"')
        print(describe("Audio Services", "Bad property size", 561211770, options=options))
        # Audio Services: Bad property size
        #     Code: 561211770 ("!siz")
        ```
    """

    indent: str = "\t"
    quote: str = "'"
    show_code_string: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.indent or not self.indent.isspace():
            raise ValueError(f"indent must be non-empty whitespace, got {self.indent!r}")

        if len(self.quote) != 1:
            raise ValueError(f"quote must be a single character, got {self.quote!r}")


DEFAULT_OPTIONS = DescribeOptions()
