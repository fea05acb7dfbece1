"""Parsing of the two rendered duration formats.

Only the exact shapes produced by Duration.to_long_string() and
Duration.to_short_string() are accepted.
"""

from __future__ import annotations

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from pytimeutil._errors import ERR_MSG_INVALID_FORMAT, InvalidFormatError
from pytimeutil.duration import Duration

_GRAMMAR = r"""
    ?duration: long_form | short_form

    long_form: NUMBER "-" _clock ":" NUMBER
    short_form: _clock

    _clock: NUMBER ":" NUMBER ":" NUMBER

    NUMBER: /[0-9]+/
"""

_parser = Lark(_GRAMMAR, start=["duration", "long_form", "short_form"], parser="lalr")

# Digit count per field; None means any width.
_LONG_WIDTHS = (None, 2, 2, 2, 4)
_SHORT_WIDTHS = (2, 2, 2)


def _build(tree: Tree, text: str) -> Duration:
    tokens = [str(token) for token in tree.children]
    widths = _LONG_WIDTHS if tree.data == "long_form" else _SHORT_WIDTHS
    for token, width in zip(tokens, widths):
        if width is not None and len(token) != width:
            raise InvalidFormatError(
                ERR_MSG_INVALID_FORMAT,
                f"field {token!r} in {text!r} must have {width} digits",
            )
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"field of {max(map(len, tokens))} digits exceeds the integer conversion limit",
            wrapped=exc,
        ) from exc
    if tree.data == "long_form":
        return Duration(*values)
    hours, minutes, seconds = values
    return Duration(hours=hours, minutes=minutes, seconds=seconds)


def _parse(text: str, start: str) -> Duration:
    if not isinstance(text, str):
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"expected a string, got {type(text).__name__}",
        )
    try:
        tree = _parser.parse(text, start=start)
    except UnexpectedInput as exc:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"cannot parse {text!r} as {start}: {exc}",
            wrapped=exc,
        ) from exc
    return _build(tree, text)


def parse_long(text: str) -> Duration:
    """Parse ``D-HH:MM:SS:MMMM``.

    Raises:
        InvalidFormatError: If the text is not in the long form.
        InvalidArgumentError: If a field is outside its range.
    """
    return _parse(text, "long_form")


def parse_short(text: str) -> Duration:
    """Parse ``HH:MM:SS`` into a duration with zero days and milliseconds."""
    return _parse(text, "short_form")


def parse(text: str) -> Duration:
    """Parse either rendered form."""
    return _parse(text, "duration")
