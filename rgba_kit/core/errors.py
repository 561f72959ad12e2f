"""Errors raised when a colour string cannot be parsed."""


class ColorFormatError(ValueError):
    """A colour string was rejected. `text` holds the offending input."""

    kind = 'format'

    def __init__(self, message: str, text: str):
        super().__init__(f'{message}: {text!r}')
        self.text = text


class InvalidFormatError(ColorFormatError):
    """The string looked like a supported format but did not match it."""

    kind = 'invalid'


class UnsupportedFormatError(ColorFormatError):
    """The string is in a format this library does not parse."""

    kind = 'unsupported'
