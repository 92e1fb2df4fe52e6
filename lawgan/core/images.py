"""
Image Codec
===========

Images travel as base64 (optionally wrapped in a ``data:<mime>;base64,``
URL) from the browser, are stored as binary, and go back out as data URLs.

Storage representations:
- ``sql``: raw bytes bound as a query parameter
- ``rest``: bytea hex string (``\\x0a1b...``), the PostgREST convention
"""

import base64
import binascii
import re
from collections import namedtuple

from .errors import InvalidImageData

DEFAULT_MIME = 'image/png'

ImagePayload = namedtuple('ImagePayload', ['binary', 'mime'])

_DATA_URL_MIME = re.compile(r'^data:([\w.+-]+/[\w.+-]+)')
_WHITESPACE = re.compile(r'\s+')


def decode_image(data, declared_mime=None):
    """Decode a base64 / data URL payload.

    Returns ``ImagePayload(None, None)`` when nothing was supplied and raises
    ``InvalidImageData`` when the payload does not decode to any bytes.
    """
    if not data:
        return ImagePayload(None, None)
    if not isinstance(data, str):
        raise InvalidImageData()

    mime = declared_mime or None
    if ',' in data:
        prefix, data = data.rsplit(',', 1)
        if not mime:
            match = _DATA_URL_MIME.match(prefix)
            if match:
                mime = match.group(1)

    cleaned = _WHITESPACE.sub('', data)
    # Browsers occasionally drop the trailing padding
    cleaned += '=' * (-len(cleaned) % 4)

    try:
        binary = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidImageData()

    if not binary:
        raise InvalidImageData()

    return ImagePayload(binary, mime)


def encode_for_storage(binary, backend='sql'):
    if binary is None:
        return None
    if backend == 'rest':
        return '\\x' + bytes(binary).hex()
    return bytes(binary)


def decode_from_storage(value):
    """Turn whatever a backend handed back into ``bytes`` (or None)"""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, dict) and value.get('type') == 'Buffer':
        value = value.get('data') or []
    if isinstance(value, list):
        return bytes(value)
    if isinstance(value, str):
        if value.startswith('\\x'):
            try:
                return bytes.fromhex(value[2:])
            except ValueError:
                return None
        return None
    return None


def encode_for_display(stored, mime=None):
    """Data URL for stored image binary, or None when there is no image"""
    if stored is None:
        return None
    if isinstance(stored, str) and stored.startswith(('http://', 'https://', 'data:')):
        return stored
    if isinstance(stored, str) and not stored.startswith('\\x'):
        # Legacy rows hold bare base64 text
        return f"data:{mime or DEFAULT_MIME};base64,{stored}"

    binary = decode_from_storage(stored)
    if not binary:
        return None

    encoded = base64.b64encode(binary).decode('ascii')
    return f"data:{mime or DEFAULT_MIME};base64,{encoded}"
