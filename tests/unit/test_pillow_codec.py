"""
Unit Tests for PillowCodec

Metadata, JPEG re-encoding, resizing, and error mapping, plus the encoder
running against real JPEG output.
"""

import io

import pytest
from PIL import Image

from converter.contracts import SizeConstraint
from converter.imaging import (
    CodecUnavailable,
    DecodeFailed,
    EncodingExhausted,
    PillowCodec,
    encode_to_size,
    round_half_up,
)
from tests.fakes import make_image_bytes

JPEG_MAGIC = b"\xff\xd8"


def open_image(data):
    return Image.open(io.BytesIO(data))


@pytest.fixture
def codec():
    return PillowCodec()


class TestPillowCodec:
    """Test decode/metadata/encode."""

    def test_metadata(self, codec, png_bytes):
        metadata = codec.decode_metadata(png_bytes)
        assert (metadata.width, metadata.height) == (300, 200)
        assert metadata.format == "PNG"

    def test_encode_produces_jpeg(self, codec, png_bytes):
        data = codec.encode(png_bytes, quality=80)

        assert data.startswith(JPEG_MAGIC)
        image = open_image(data)
        assert image.format == "JPEG"
        assert image.size == (300, 200)

    def test_width_override_keeps_aspect_ratio(self, codec, png_bytes):
        image = open_image(codec.encode(png_bytes, quality=50, width=150))
        assert image.size == (150, 100)

    def test_lower_quality_is_smaller(self, codec, noisy_png_bytes):
        high = codec.encode(noisy_png_bytes, quality=80)
        low = codec.encode(noisy_png_bytes, quality=20)
        assert len(low) < len(high)

    @pytest.mark.parametrize("mode", ["RGBA", "L", "P"])
    def test_non_rgb_modes(self, codec, mode):
        """Alpha is flattened and palettes converted; output is RGB JPEG."""
        if mode == "P":
            source = make_image_bytes(mode="RGB")
            buffer = io.BytesIO()
            open_image(source).convert("P").save(buffer, format="PNG")
            source = buffer.getvalue()
        else:
            source = make_image_bytes(mode=mode)

        image = open_image(codec.encode(source, quality=70))
        assert image.mode == "RGB"

    def test_garbage_bytes(self, codec):
        with pytest.raises(DecodeFailed):
            codec.decode_metadata(b"definitely not an image")
        with pytest.raises(DecodeFailed):
            codec.encode(b"definitely not an image", quality=80)

    def test_truncated_image(self, codec, noisy_png_bytes):
        """A header without pixel data fails when decoding."""
        with pytest.raises(EncodingExhausted):
            codec.encode(noisy_png_bytes[:200], quality=80)

    def test_error_hierarchy(self):
        assert issubclass(DecodeFailed, EncodingExhausted)
        assert issubclass(CodecUnavailable, EncodingExhausted)


class TestEncodeToSizeWithPillow:
    """Size-targeted encoding against real JPEG output."""

    def test_small_image_fits_first_try(self, codec, png_bytes):
        result = encode_to_size(png_bytes, SizeConstraint.from_kilobytes(100), codec)

        assert result.within_target
        assert result.attempt.quality == 80
        assert len(result.attempts) == 1
        assert result.data.startswith(JPEG_MAGIC)

    def test_noisy_image_enters_width_descent(self, codec, noisy_png_bytes):
        """Noise does not compress to 2 KB at full size, so width shrinks."""
        result = encode_to_size(noisy_png_bytes, SizeConstraint.from_kilobytes(2), codec)

        assert [a.quality for a in result.attempts[:7]] == [80, 70, 60, 50, 40, 30, 20]
        assert result.attempts[7].width == round_half_up(600 * 0.9)
        assert result.attempt.width is not None
        assert open_image(result.data).size[0] == result.attempt.width

    def test_undecodable_input(self, codec):
        with pytest.raises(DecodeFailed):
            encode_to_size(b"\x00" * 64, SizeConstraint.from_kilobytes(100), codec)
