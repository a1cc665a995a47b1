
class EncodingError(ValueError):
    """Base class for everything this package raises on malformed input."""


class UnknownVariant(EncodingError):
    """The base32 variant tag is not one of the recognized ones."""

    def __init__(self, given):
        self.given = given
        super().__init__('Unknown base32 variant: {}'.format(given))


class InvalidCharacter(EncodingError):
    """A character of the encoded text is missing from the variant alphabet."""

    def __init__(self, char):
        self.char = char
        super().__init__('Invalid character found: "{}"'.format(char))


class UnsupportedEncoding(EncodingError):
    def __init__(self, name):
        self.name = name
        super().__init__('Unknown encoding: {}'.format(name))
