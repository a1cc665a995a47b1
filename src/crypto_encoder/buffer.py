# -*- test-case-name: crypto_encoder.test.test_buffer -*-

"""
buffer.py: coerce the various things callers hand us into plain bytes

Strings are taken as UTF-8 text. Anything that speaks the buffer protocol
(bytes, bytearray, memoryview, array.array, ...) is flattened into unsigned
bytes regardless of its item size. Lists and tuples of small ints are taken
as byte values.
"""


def coerce_to_bytes(data):
    if isinstance(data, bytes):
        return data

    if isinstance(data, str):
        return data.encode('utf-8')

    if isinstance(data, (list, tuple)):
        # bytes() raises ValueError for items outside 0..255
        return bytes(data)

    if isinstance(data, (int, float)) or data is None:
        # bytes(5) would silently give b'\x00' * 5
        raise TypeError('Cannot coerce {!r} to bytes'.format(type(data).__name__))

    try:
        view = memoryview(data)
    except TypeError:
        raise TypeError('Cannot coerce {!r} to bytes'.format(type(data).__name__))

    with view:
        return view.tobytes()


def to_byte_view(data):
    return memoryview(coerce_to_bytes(data)).toreadonly()


def binary_to_string(data):
    return coerce_to_bytes(data).decode('utf-8', 'replace')
