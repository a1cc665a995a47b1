# -*- test-case-name: crypto_encoder.test.test_encoder -*-

"""
encoder.py: pick a codec by encoding name

'base32' goes through the RFC3548 base32 codec, 'base64' and 'base64url'
through the base64 normalizer, and the remaining names map onto Python's own
text codecs.
"""

from twisted.python import log

from crypto_encoder import base32, base64url
from crypto_encoder.buffer import coerce_to_bytes, binary_to_string
from crypto_encoder.errors import UnsupportedEncoding


def _render_ascii(data):
    return bytes(b & 0x7F for b in data).decode('ascii')

def _parse_latin1(text):
    return bytes(ord(c) & 0xFF for c in text)

def _render_latin1(data):
    return data.decode('latin-1')

def _render_hex(data):
    return data.hex()

def _render_utf16le(data):
    # a trailing odd byte cannot form a code unit
    return data[:len(data) & ~1].decode('utf-16-le', 'replace')

def _parse_utf16le(text):
    return text.encode('utf-16-le', 'surrogatepass')

def _render_utf8(data):
    return data.decode('utf-8', 'replace')

def _parse_utf8(text):
    return text.encode('utf-8')


# encoding name -> (bytes -> str, str -> bytes)
NATIVE_CODECS = {
    'ascii'   : (_render_ascii,    _parse_latin1),
    'binary'  : (_render_latin1,   _parse_latin1),
    'hex'     : (_render_hex,      bytes.fromhex),
    'latin1'  : (_render_latin1,   _parse_latin1),
    'ucs-2'   : (_render_utf16le,  _parse_utf16le),
    'ucs2'    : (_render_utf16le,  _parse_utf16le),
    'utf-16le': (_render_utf16le,  _parse_utf16le),
    'utf-8'   : (_render_utf8,     _parse_utf8),
    'utf16le' : (_render_utf16le,  _parse_utf16le),
    'utf8'    : (_render_utf8,     _parse_utf8),
}

SUPPORTED_ENCODINGS = sorted(['base32', 'base64', 'base64url'] + list(NATIVE_CODECS))


def _native_codec(encoding):
    try:
        return NATIVE_CODECS[encoding]
    except (KeyError, TypeError):
        log.msg('encoder: rejecting encoding {!r}'.format(encoding))
        raise UnsupportedEncoding(encoding) from None


class Encoder:
    SUPPORTED_ENCODINGS = SUPPORTED_ENCODINGS

    @staticmethod
    def encode(data, encoding=None, input_encoding=None):
        """Render C{data} as text in C{encoding} (utf-8 when None).

        C{data} is first turned into bytes with L{Encoder.decode}, reading it
        as C{input_encoding}.
        """
        raw = Encoder.decode(data, input_encoding)

        if encoding == 'base32':
            return base32.encode(raw, base32.RFC3548)
        if encoding in ('base64', 'base64url'):
            return base64url.encode(raw, encoding == 'base64url')
        if encoding is None:
            return _render_utf8(raw)

        render, _ = _native_codec(encoding)
        return render(raw)

    @staticmethod
    def decode(data, encoding=None):
        """Turn C{data}, text written in C{encoding}, into bytes.

        With no encoding C{data} is only coerced to bytes.
        """
        if encoding == 'base32':
            return base32.decode(data, base32.RFC3548)
        if encoding in ('base64', 'base64url'):
            return base64url.decode(data)
        if encoding is None:
            return coerce_to_bytes(data)

        _, parse = _native_codec(encoding)
        return parse(binary_to_string(data))

    to_string = staticmethod(binary_to_string)
