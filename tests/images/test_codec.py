"""Tests for images.codec."""

import base64
from pathlib import Path

import pytest
from PIL import Image

from hyuga_toolkit.images import (
    ImageDecodeError,
    PillowImageCodec,
    encode_file_as_data_url,
    load_reference_bytes,
    strip_data_url,
)


class TestStripDataUrl:

    @pytest.mark.parametrize(
        "payload",
        [
            "data:image/png;base64,QUJD",
            "data:image/svg+xml;base64,QUJD",
            "data:image/png;charset=utf-8;base64,QUJD",
            "data:;base64,QUJD",
        ],
    )
    def test_when_data_url_then_prefix_removed(self, payload):
        assert strip_data_url(payload) == "QUJD"

    def test_when_plain_base64_then_unchanged(self):
        assert strip_data_url("QUJD") == "QUJD"


class TestLoadReferenceBytes:

    def test_when_existing_path_then_file_bytes(self, sample_image: Path):
        assert load_reference_bytes(str(sample_image)) == sample_image.read_bytes()

    def test_when_data_url_then_decoded(self, make_png_bytes, make_data_url):
        assert load_reference_bytes(make_data_url()) == make_png_bytes()

    def test_when_bare_base64_with_whitespace_then_decoded(self):
        encoded = base64.b64encode(b"hello world").decode("ascii")
        wrapped = f"  {encoded[:6]}\n{encoded[6:]}  "

        assert load_reference_bytes(wrapped) == b"hello world"

    @pytest.mark.parametrize("reference", ["", "   "])
    def test_when_empty_then_raises(self, reference):
        with pytest.raises(ImageDecodeError):
            load_reference_bytes(reference)

    def test_when_invalid_base64_then_raises(self):
        with pytest.raises(ImageDecodeError):
            load_reference_bytes("data:image/png;base64,@@not-base64@@")

    def test_when_missing_path_then_treated_as_payload_and_fails(self, tmp_path: Path):
        with pytest.raises(ImageDecodeError):
            load_reference_bytes(str(tmp_path / "missing.png"))


class TestPillowImageCodec:

    def test_when_png_then_size_reported(self, make_png_bytes):
        decoded = PillowImageCodec().decode(make_png_bytes(40, 20))

        assert (decoded.width, decoded.height) == (40, 20)
        assert decoded.image.mode == "RGB"

    def test_when_transparent_then_rgba(self, tmp_path: Path):
        path = tmp_path / "alpha.png"
        Image.new("RGBA", (8, 8), (0, 0, 0, 0)).save(path)

        decoded = PillowImageCodec().decode(path.read_bytes())

        assert decoded.image.mode == "RGBA"

    def test_when_garbage_then_raises(self):
        with pytest.raises(ImageDecodeError):
            PillowImageCodec().decode(b"definitely not an image")


def test_encode_file_as_data_url_round_trips(sample_image: Path):
    data_url = encode_file_as_data_url(sample_image)

    assert data_url.startswith("data:image/png;base64,")
    assert load_reference_bytes(data_url) == sample_image.read_bytes()
