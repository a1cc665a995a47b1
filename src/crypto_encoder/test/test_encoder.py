
from twisted.trial import unittest
from twisted.python import log

from crypto_encoder import base32
from crypto_encoder.encoder import Encoder, SUPPORTED_ENCODINGS
from crypto_encoder.errors import UnsupportedEncoding


STRING_DATA = 'dec0d3d v@lu3 with #spec1al!! chars!'
HEX_DATA = '646563306433642076406c7533207769746820237370656331616c212120636861727321'
UCS2_DATA = '敤っ㍤⁤䁶畬″楷桴⌠灳捥愱Ⅼ‡档牡ⅳ'

# (encoding, output) for STRING_DATA
VECTORS = [
    ('ascii',     STRING_DATA),
    ('base32',    'MRSWGMDEGNSCA5SANR2TGIDXNF2GQIBDONYGKYZRMFWCCIJAMNUGC4TTEE======'),
    ('base64',    'ZGVjMGQzZCB2QGx1MyB3aXRoICNzcGVjMWFsISEgY2hhcnMh'),
    ('base64url', 'ZGVjMGQzZCB2QGx1MyB3aXRoICNzcGVjMWFsISEgY2hhcnMh'),
    ('binary',    STRING_DATA),
    ('hex',       HEX_DATA),
    ('latin1',    STRING_DATA),
    ('ucs-2',     UCS2_DATA),
    ('ucs2',      UCS2_DATA),
    ('utf-16le',  UCS2_DATA),
    ('utf-8',     STRING_DATA),
    ('utf16le',   UCS2_DATA),
    ('utf8',      STRING_DATA),
]


class Supported(unittest.TestCase):
    def test_supported_encodings(self):
        expected = ['ascii', 'base32', 'base64', 'base64url', 'binary', 'hex', 'latin1',
                    'ucs-2', 'ucs2', 'utf-16le', 'utf-8', 'utf16le', 'utf8']
        self.assertEqual(sorted(Encoder.SUPPORTED_ENCODINGS), expected)
        self.assertEqual(SUPPORTED_ENCODINGS, Encoder.SUPPORTED_ENCODINGS)


class Encode(unittest.TestCase):
    def test_vectors(self):
        for encoding, output in VECTORS:
            self.assertEqual(Encoder.encode(STRING_DATA, encoding), output, encoding)

    def test_default_is_utf8(self):
        self.assertEqual(Encoder.encode(STRING_DATA.encode('utf-8')), STRING_DATA)

    def test_input_encoding(self):
        self.assertEqual(Encoder.encode(HEX_DATA, 'base64url', 'hex'),
                         'ZGVjMGQzZCB2QGx1MyB3aXRoICNzcGVjMWFsISEgY2hhcnMh')

    def test_base32_uses_rfc3548(self):
        self.assertEqual(Encoder.encode(b'some value', 'base32'),
                         base32.encode(b'some value', base32.RFC3548))

    def test_base64url_drops_padding(self):
        self.assertEqual(Encoder.encode(b'\xfb\xff', 'base64'), '+/8=')
        self.assertEqual(Encoder.encode(b'\xfb\xff', 'base64url'), '-_8')

    def test_ascii_clears_high_bit(self):
        self.assertEqual(Encoder.encode(b'\xe1b', 'ascii'), 'ab')

    def test_ucs2_ignores_odd_byte(self):
        self.assertEqual(Encoder.encode(b'a\x00b', 'ucs2'), 'a')

    def test_unsupported(self):
        e = self.assertRaises(UnsupportedEncoding, Encoder.encode, STRING_DATA, 'doesntevenexists')
        self.assertEqual(e.name, 'doesntevenexists')
        self.assertEqual(str(e), 'Unknown encoding: doesntevenexists')

    def test_unsupported_input_encoding(self):
        self.assertRaises(UnsupportedEncoding, Encoder.encode, STRING_DATA, 'utf8', 'ebcdic')


class Decode(unittest.TestCase):
    def test_vectors(self):
        for encoding, output in VECTORS:
            decoded = Encoder.decode(output, encoding)
            self.assertEqual(decoded, STRING_DATA.encode('utf-8'), encoding)
            self.assertEqual(Encoder.encode(decoded), STRING_DATA, encoding)

    def test_back_to_input_encoding(self):
        decoded = Encoder.decode('ZGVjMGQzZCB2QGx1MyB3aXRoICNzcGVjMWFsISEgY2hhcnMh', 'base64url')
        self.assertEqual(Encoder.encode(decoded, 'hex'), HEX_DATA)

    def test_no_encoding_coerces(self):
        self.assertEqual(Encoder.decode('abc'), b'abc')
        self.assertEqual(Encoder.decode([1, 2]), b'\x01\x02')

    def test_base32_uses_rfc3548(self):
        self.assertEqual(Encoder.decode('ONXW2ZJAOZQWY5LF', 'base32'), b'some value')

    def test_bad_hex(self):
        self.assertRaises(ValueError, Encoder.decode, 'zz', 'hex')

    def test_unsupported(self):
        e = self.assertRaises(UnsupportedEncoding, Encoder.decode, STRING_DATA, 'doesntevenexists')
        self.assertEqual(e.name, 'doesntevenexists')

    def test_to_string(self):
        self.assertEqual(Encoder.to_string(b'\xc3\xa9'), 'é')


class Logging(unittest.TestCase):
    def test_unsupported_is_logged(self):
        events = []
        log.addObserver(events.append)
        self.addCleanup(log.removeObserver, events.append)

        self.assertRaises(UnsupportedEncoding, Encoder.decode, 'x', 'rot13')

        messages = [' '.join(str(m) for m in e.get('message', ())) for e in events]
        self.assertTrue(any('rot13' in m for m in messages))
