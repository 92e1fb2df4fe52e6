"""Image codec: base64 in, binary stored, data URLs out."""

import base64

import pytest

from lawgan.core.errors import InvalidImageData
from lawgan.core.images import decode_image, encode_for_storage, decode_from_storage, encode_for_display

from conftest import PNG_BYTES, PNG_DATA_URL


def test_data_url_decodes_with_mime():
    payload = decode_image(PNG_DATA_URL)
    assert payload.binary == PNG_BYTES
    assert payload.mime == "image/png"


def test_declared_mime_wins_over_prefix():
    assert decode_image(PNG_DATA_URL, "image/webp").mime == "image/webp"


def test_bare_base64_with_whitespace_and_missing_padding():
    encoded = base64.b64encode(b"abcd").decode("ascii").rstrip("=")
    payload = decode_image(encoded[:3] + "\n " + encoded[3:])
    assert payload.binary == b"abcd"
    assert payload.mime is None


@pytest.mark.parametrize("value", [None, ""])
def test_absent_image_is_not_an_error(value):
    assert decode_image(value) == (None, None)


@pytest.mark.parametrize("value", [
    "data:image/png;base64,",
    "data:image/png;base64,@@@@",
    12345,
])
def test_malformed_image_raises(value):
    with pytest.raises(InvalidImageData) as excinfo:
        decode_image(value)
    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Invalid image data."


def test_storage_encoding_per_backend():
    assert encode_for_storage(b"\x01\xff", "sql") == b"\x01\xff"
    assert encode_for_storage(b"\x01\xff", "rest") == "\\x01ff"
    assert encode_for_storage(None, "rest") is None


@pytest.mark.parametrize("stored", [
    b"\x01\xff",
    memoryview(b"\x01\xff"),
    "\\x01ff",
    {"type": "Buffer", "data": [1, 255]},
    [1, 255],
])
def test_decode_from_storage_shapes(stored):
    assert decode_from_storage(stored) == b"\x01\xff"


def test_display_round_trip():
    url = encode_for_display(encode_for_storage(PNG_BYTES, "rest"), "image/png")
    assert decode_image(url).binary == PNG_BYTES


def test_display_passthrough_and_defaults():
    assert encode_for_display(None) is None
    assert encode_for_display("https://cdn.test/a.png") == "https://cdn.test/a.png"
    assert encode_for_display(b"\x00").startswith("data:image/png;base64,")
    assert encode_for_display("QUJD", "image/jpeg") == "data:image/jpeg;base64,QUJD"
