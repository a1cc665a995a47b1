# -*- test-case-name: crypto_encoder.test.test_base32 -*-

"""
base32.py: base32 encoding in the RFC4648, RFC4648-HEX and Crockford flavours

The variant is named by a plain string tag. RFC3548 is accepted as an alias
for RFC4648. The RFC4648 variants pad to a multiple of 8 characters by
default, Crockford does not.
"""

from twisted.python import log

from crypto_encoder.buffer import coerce_to_bytes, binary_to_string
from crypto_encoder.errors import UnknownVariant, InvalidCharacter


RFC3548     = 'RFC3548'
RFC4648     = 'RFC4648'
RFC4648_HEX = 'RFC4648-HEX'
CROCKFORD   = 'Crockford'

VARIANT = {
    'RFC3548'    : RFC3548,
    'RFC4648'    : RFC4648,
    'RFC4648_HEX': RFC4648_HEX,
    'Crockford'  : CROCKFORD,
}

ALPHABET = {
    'RFC4648'    : 'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567',
    'RFC4648_HEX': '0123456789ABCDEFGHIJKLMNOPQRSTUV',
    'CROCKFORD'  : '0123456789ABCDEFGHJKMNPQRSTVWXYZ',  # no I, L, O, U
}

for _alphabet in ALPHABET.values():
    assert len(_alphabet) == 32 and len(set(_alphabet)) == 32, _alphabet
del _alphabet

# variant -> (alphabet, pad by default)
VARIANTS = {
    RFC3548    : (ALPHABET['RFC4648'],     True),
    RFC4648    : (ALPHABET['RFC4648'],     True),
    RFC4648_HEX: (ALPHABET['RFC4648_HEX'], True),
    CROCKFORD  : (ALPHABET['CROCKFORD'],   False),
}

PAD = '='


def resolve_variant(variant):
    try:
        return VARIANTS[variant]
    except (KeyError, TypeError):
        raise UnknownVariant(variant) from None


def encode(data, variant, padding=None, options=None):
    """Encode C{data} (anything L{coerce_to_bytes} takes) to base32 text.

    C{padding} forces '=' padding on or off; left as None, the variant
    default applies. C{options} may carry the same flag as
    C{{'padding': bool}}, the keyword wins when both are given.
    """
    alphabet, default_padding = resolve_variant(variant)

    if padding is None and options:
        padding = options.get('padding')

    if padding is None:
        padding = default_padding
    elif padding and variant == CROCKFORD:
        log.msg('base32: padding Crockford output on request, '
                'Crockford decode will not strip it')

    output = []
    buffer = 0
    n = 0

    for b in coerce_to_bytes(data):
        buffer = buffer << 8
        buffer = buffer | b
        n = n + 8
        while n >= 5:
            output.append(alphabet[(buffer >> (n - 5)) & 0x1F])
            n = n - 5
        buffer = buffer & 0x1F  # keep only bits not yet emitted

    if n > 0:
        buffer = buffer << (5 - n)
        output.append(alphabet[buffer & 0x1F])

    if padding and output:
        output.append(PAD * (-len(output) % 8))

    return ''.join(output)


def decode(text, variant):
    """Decode base32 C{text} back to bytes.

    RFC4648 flavours drop their trailing '=' run. Crockford input is
    upper-cased and the look-alikes O, I and L are read as 0, 1 and 1.
    """
    alphabet, text = _prepare_input(text, variant)

    output = bytearray(len(text) * 5 // 8)
    buffer = 0
    n = 0
    index = 0

    for c in text:
        buffer = (buffer << 5) | read_char(alphabet, c)
        n = n + 5
        if n >= 8:
            output[index] = (buffer >> (n - 8)) & 0xFF
            index = index + 1
            n = n - 8
        buffer = buffer & 0xFF

    return bytes(output)


def read_char(alphabet, char):
    index = alphabet.find(char) if len(char) == 1 else -1
    if index == -1:
        raise InvalidCharacter(char)
    return index


def is_base32(text, variant=RFC4648):
    alphabet, text = _prepare_input(text, variant)
    for c in text:
        if c not in alphabet:
            return False
    return True


def _prepare_input(text, variant):
    alphabet, _ = resolve_variant(variant)

    if not isinstance(text, str):
        text = coerce_to_bytes(text).decode('latin-1')

    if variant == CROCKFORD:
        text = text.upper().replace('O', '0').replace('I', '1').replace('L', '1')
    else:
        text = text.rstrip(PAD)

    return alphabet, text


to_string = binary_to_string
