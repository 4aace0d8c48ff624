"""
Unit tests for file discovery, decoding and histogram extraction.
"""

import pytest
import numpy as np
from pathlib import Path
from PIL import Image

from histomatch.exceptions import DecodeError, DirectoryReadError, UnsupportedPixelFormat
from histomatch.models import Histogram
from histomatch.scanner import (
    is_jpeg,
    list_image_files,
    decode_luma,
    extract_histogram,
    histogram_for_file,
    write_histogram_dat,
    read_histogram_dat,
    HistogramCache,
)
from histomatch.scanner.histogram import histogram_dump_path

from helpers import FakeDecoder, two_level_grid


class TestIsJpeg:
    """Test the is_jpeg predicate."""

    @pytest.mark.parametrize("name", [
        "photo.jpg", "photo.jpeg", "PHOTO.JPG", "Photo.JpEg", "/some/dir/a.b.jpg",
    ])
    def test_accepts_jpeg_names(self, name):
        assert is_jpeg(name)

    @pytest.mark.parametrize("name", [
        "photo.png", "photo.jpg.txt", "jpg", "photo.jpe", "notes",
    ])
    def test_rejects_other_names(self, name):
        assert not is_jpeg(name)

    def test_accepts_path_objects(self):
        assert is_jpeg(Path("/x/y.JPEG"))


class TestListImageFiles:
    """Test list_image_files function."""

    def test_only_jpeg_files(self, sample_images, temp_dir):
        files = list_image_files(temp_dir)
        names = [Path(f).name for f in files]
        assert names == ["bright.jpeg", "color.jpg", "dark.jpg", "mid.JPG"]

    def test_absolute_paths(self, sample_images, temp_dir):
        files = list_image_files(temp_dir)
        assert all(Path(f).is_absolute() for f in files)

    def test_not_recursive(self, temp_dir):
        subdir = temp_dir / "subdir"
        subdir.mkdir()
        Image.new('L', (4, 4)).save(subdir / "nested.jpg")

        assert list_image_files(temp_dir) == []

    def test_skips_directories_named_like_jpeg(self, temp_dir):
        (temp_dir / "folder.jpg").mkdir()
        assert list_image_files(temp_dir) == []

    def test_empty_directory(self, temp_dir):
        assert list_image_files(temp_dir) == []

    def test_missing_directory(self, temp_dir):
        with pytest.raises(DirectoryReadError):
            list_image_files(temp_dir / "missing")


class TestDecodeLuma:
    """Test decode_luma function."""

    def test_grayscale_jpeg(self, sample_images):
        grid = decode_luma(sample_images['dark'])
        assert grid.shape == (48, 64)
        assert grid.dtype == np.uint8

    def test_rgb_jpeg(self, sample_images):
        grid = decode_luma(sample_images['color'])
        assert grid.shape == (40, 50)

    def test_png_decodes_too(self, sample_images):
        # Eligibility is decided by file name, not by the decoder
        grid = decode_luma(sample_images['other'])
        assert grid.shape == (48, 64)

    def test_lossless_luma_values(self, temp_dir):
        grid = two_level_grid(10, 20)
        path = temp_dir / "grid.png"
        Image.fromarray(grid).save(path)

        assert np.array_equal(decode_luma(path), grid)

    def test_not_an_image(self, sample_images):
        with pytest.raises(DecodeError):
            decode_luma(sample_images['notes'])

    def test_corrupt_jpeg(self, corrupt_jpeg):
        with pytest.raises(DecodeError) as exc_info:
            decode_luma(corrupt_jpeg)
        assert exc_info.value.path == corrupt_jpeg

    def test_missing_file(self):
        with pytest.raises(DecodeError):
            decode_luma("/nonexistent/image.jpg")

    def test_cmyk_is_unsupported(self, cmyk_jpeg):
        with pytest.raises(UnsupportedPixelFormat):
            decode_luma(cmyk_jpeg)

    def test_colour_jpeg_uses_stored_luma(self, sample_images):
        with Image.open(sample_images['color']) as img:
            img.draft('YCbCr', img.size)
            img.load()
            assert img.mode == 'YCbCr'
            stored = np.asarray(img.getchannel('Y'))

        assert np.array_equal(decode_luma(sample_images['color']), stored)

    def test_oversized_image(self, temp_dir, monkeypatch):
        monkeypatch.setattr(Image, 'MAX_IMAGE_PIXELS', 200)
        path = temp_dir / "big.jpg"
        Image.new('L', (32, 32), color=128).save(path, 'JPEG')

        with pytest.raises(DecodeError) as exc_info:
            decode_luma(path)
        assert "too large" in exc_info.value.reason


class TestExtractHistogram:
    """Test extract_histogram function."""

    def test_counts_sum_to_pixel_count(self):
        rng = np.random.default_rng(1)
        grid = rng.integers(0, 256, size=(37, 53), dtype=np.uint8)

        histogram = extract_histogram(grid)
        assert histogram.pixel_count == 37 * 53

    def test_counts_per_level(self):
        histogram = extract_histogram(two_level_grid(10, 20))
        assert histogram.as_dict() == {10: 32, 20: 32}

    def test_extreme_levels(self):
        histogram = extract_histogram([[0, 255], [255, 255]])
        assert histogram[0] == 1
        assert histogram[255] == 3

    def test_accepts_wider_integer_types(self):
        histogram = extract_histogram(np.array([[1, 2, 3]], dtype=np.int32))
        assert histogram.pixel_count == 3

    def test_empty_grid(self):
        histogram = extract_histogram(np.zeros((0, 5), dtype=np.uint8))
        assert histogram.pixel_count == 0

    def test_rejects_out_of_range_samples(self):
        with pytest.raises(UnsupportedPixelFormat):
            extract_histogram(np.array([[0, 256]], dtype=np.int32))

    def test_rejects_negative_samples(self):
        with pytest.raises(UnsupportedPixelFormat):
            extract_histogram(np.array([[-1, 3]], dtype=np.int32))

    def test_rejects_color_grid(self):
        with pytest.raises(UnsupportedPixelFormat):
            extract_histogram(np.zeros((4, 4, 3), dtype=np.uint8))

    def test_rejects_float_samples(self):
        with pytest.raises(UnsupportedPixelFormat):
            extract_histogram(np.full((2, 2), 0.5))

    def test_histogram_for_file(self, sample_images):
        histogram = histogram_for_file(sample_images['mid'])
        assert isinstance(histogram, Histogram)
        assert histogram.pixel_count == 64 * 48


class TestHistogramDump:
    """Test the .dat diagnostic output."""

    def test_dump_beside_image(self, sample_images):
        histogram = histogram_for_file(sample_images['dark'])
        dest = write_histogram_dat(histogram, sample_images['dark'])

        assert dest == Path(sample_images['dark']).with_name("dark.dat")
        assert dest.exists()

    def test_dump_format(self, temp_dir):
        histogram = extract_histogram(two_level_grid(20, 10))
        dest = write_histogram_dat(histogram, temp_dir / "pic.jpeg")

        assert dest.read_text() == "10\t32\n20\t32\n"

    def test_dump_to_output_dir(self, temp_dir):
        histogram = extract_histogram(two_level_grid(5, 6))
        dest = write_histogram_dat(histogram, "/photos/beach.jpg", temp_dir / "dat")

        assert dest == temp_dir / "dat" / "beach.dat"
        assert read_histogram_dat(dest) == histogram

    def test_dump_path(self):
        assert histogram_dump_path("/photos/IMG_1.JPG").name == "IMG_1.dat"


class TestHistogramCache:
    """Test HistogramCache class."""

    def test_decodes_once(self):
        decoder = FakeDecoder({'/a.jpg': two_level_grid(1, 2)})
        cache = HistogramCache(decoder)

        first = cache.get('/a.jpg')
        second = cache.get('/a.jpg')

        assert first is second
        assert decoder.calls == ['/a.jpg']
        assert cache.hits == 1
        assert cache.misses == 1
        assert len(cache) == 1

    def test_failures_not_cached(self):
        decoder = FakeDecoder({})
        cache = HistogramCache(decoder)

        for _ in range(2):
            with pytest.raises(DecodeError):
                cache.get('/missing.jpg')

        assert decoder.calls == ['/missing.jpg', '/missing.jpg']
        assert cache.peek('/missing.jpg') is None

    def test_clear(self):
        cache = HistogramCache(FakeDecoder({'/a.jpg': two_level_grid(1, 2)}))
        cache.get('/a.jpg')
        cache.clear()
        assert len(cache) == 0
