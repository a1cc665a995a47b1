"""Base32 (RFC4648, RFC4648-HEX, Crockford) and base64 text encodings."""

__version__ = '1.0.0'

from crypto_encoder.errors import EncodingError, UnknownVariant, InvalidCharacter, UnsupportedEncoding
from crypto_encoder.buffer import coerce_to_bytes, binary_to_string
from crypto_encoder.encoder import Encoder, SUPPORTED_ENCODINGS
from crypto_encoder import base32, base64url
