"""Human-readable descriptions of coded values.

Coded properties and coded errors share one report layout: a headline made of
the domain and short description, followed by indented detail lines. The
numeric code is always printed; its four-character form is appended only when
the code decodes.
"""

from __future__ import annotations

from ..codec.fourcc import Code, decode
from .config import DEFAULT_OPTIONS, DescribeOptions


def describe(
    domain: str,
    short_description: str,
    code: Code,
    message: str | None = None,
    *,
    error: bool = False,
    options: DescribeOptions | None = None,
) -> str:
    """Build the report string for a coded property or coded error.

    Property form::

        <domain>: <short_description>
        \\tCode: <code> ('<code string>')

    Error form adds a terminating period and an optional message line::

        <domain>: <short_description>.
        \\tMessage: <message>
        \\tCode: <code> ('<code string>')

    Args:
        domain: API or subsystem that defines the code
        short_description: Short description of the code
        code: Numeric code, printed as given (signed statuses print negative)
        message: Context message for the error form; ignored in the property form
        error: Use the error form
        options: Layout options (defaults to DEFAULT_OPTIONS)

    Returns:
        Multi-line description

    Raises:
        pydantic.ValidationError: If code does not fit in 32 bits

    Example:
        >>> describe("Audio Services", "Bad property size", 561211770)
        "Audio Services: Bad property size\\n\\tCode: 561211770 ('!siz')"
    """
    if options is None:
        options = DEFAULT_OPTIONS

    # Validates the width of code even when the parenthetical is disabled
    code_string = decode(code)

    if error:
        lines = [f"{domain}: {short_description}."]
        if message is not None:
            lines.append(f"{options.indent}Message: {message}")
    else:
        lines = [f"{domain}: {short_description}"]

    code_line = f"{options.indent}Code: {code}"
    if options.show_code_string and code_string is not None:
        code_line += f" ({options.quote}{code_string}{options.quote})"
    lines.append(code_line)

    return "\n".join(lines)
