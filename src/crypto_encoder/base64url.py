# -*- test-case-name: crypto_encoder.test.test_base64url -*-

import base64

from crypto_encoder.buffer import coerce_to_bytes, binary_to_string


def from_base64(string, normalize=True):
    """Normalize a base64 string to base64url (no padding)."""
    if not normalize:
        return string
    return string.replace('=', '').replace('+', '-').replace('/', '_')


def from_base64url(string):
    """Normalize a base64url string to base64. Padding is not restored."""
    return string.replace('-', '+').replace('_', '/')


def encode(data, normalize=False):
    encoded = base64.b64encode(coerce_to_bytes(data)).decode('ascii')
    return from_base64(encoded, normalize)


def decode(data):
    # takes both alphabets, with or without padding
    string = from_base64url(binary_to_string(data)).rstrip('=')
    return base64.b64decode(string + '=' * (-len(string) % 4))


# @deprecated: use crypto_encoder.buffer.binary_to_string
to_string = binary_to_string
