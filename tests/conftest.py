"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image
import numpy as np

from helpers import two_level_grid, gradient


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Point the user configuration at an empty directory."""
    from histomatch.user_config import get_user_config

    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv('HISTOMATCH_CONFIG_DIR', str(config_dir))
    for var in ('HISTOMATCH_WORKERS', 'HISTOMATCH_SCORER', 'HISTOMATCH_OUTPUT_DIR'):
        monkeypatch.delenv(var, raising=False)
    get_user_config().reload()
    yield config_dir
    get_user_config().reload()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def synthetic_grids():
    """
    Five two-level luma grids with exactly known cross-correlations.

    For two such histograms sharing k levels the correlation is
    (1024 * k - 16) / 2032: 1.0 for k=2, 1008/2032 for k=1, -16/2032 for k=0.
    b has the same levels as a in a different pixel arrangement.
    """
    return {
        '/img/a.jpg': two_level_grid(10, 20),
        '/img/b.jpg': two_level_grid(20, 10),
        '/img/c.jpg': two_level_grid(20, 30),
        '/img/d.jpg': two_level_grid(100, 110),
        '/img/e.jpg': two_level_grid(110, 120),
    }


@pytest.fixture
def sample_images(temp_dir):
    """
    Create a directory of sample files for testing.

    Returns:
        dict with paths to:
        - dark.jpg, mid.JPG, bright.jpeg (grayscale JPEG gradients)
        - color.jpg (RGB JPEG)
        - other.png (valid image, wrong extension)
        - notes.txt (not an image)
    """
    images = {}

    Image.fromarray(gradient(0, 120)).save(temp_dir / "dark.jpg", 'JPEG', quality=95)
    images['dark'] = str(temp_dir / "dark.jpg")

    Image.fromarray(gradient(60, 180)).save(temp_dir / "mid.JPG", 'JPEG', quality=95)
    images['mid'] = str(temp_dir / "mid.JPG")

    Image.fromarray(gradient(130, 250)).save(temp_dir / "bright.jpeg", 'JPEG', quality=95)
    images['bright'] = str(temp_dir / "bright.jpeg")

    rgb = np.zeros((40, 50, 3), dtype=np.uint8)
    rgb[:, :25] = (200, 30, 30)
    rgb[:, 25:] = (30, 30, 200)
    Image.fromarray(rgb).save(temp_dir / "color.jpg", 'JPEG', quality=95)
    images['color'] = str(temp_dir / "color.jpg")

    Image.fromarray(gradient(0, 200)).save(temp_dir / "other.png", 'PNG')
    images['other'] = str(temp_dir / "other.png")

    (temp_dir / "notes.txt").write_text("not an image")
    images['notes'] = str(temp_dir / "notes.txt")

    return images


@pytest.fixture
def corrupt_jpeg(temp_dir):
    """A file with a JPEG name that is not an image."""
    path = temp_dir / "zz_broken.jpg"
    path.write_text("definitely not a jpeg")
    return str(path)


@pytest.fixture
def cmyk_jpeg(temp_dir):
    """A JPEG whose pixels are stored as CMYK."""
    path = temp_dir / "cmyk.jpg"
    Image.new('CMYK', (16, 16), color=(10, 20, 30, 40)).save(path, 'JPEG')
    return str(path)
