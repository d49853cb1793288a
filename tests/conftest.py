import base64
import io
import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import hyuga_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Qt must not try to open a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def png_bytes(width: int = 40, height: int = 20, color: str = "red") -> bytes:
    """Encode a solid-color PNG."""
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=color).save(buf, format="PNG")
    return buf.getvalue()


def png_data_url(width: int = 40, height: int = 20, color: str = "red") -> str:
    """Solid-color PNG as a data URL, the form assets store inline."""
    encoded = base64.b64encode(png_bytes(width, height, color)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


# Common test fixtures
@pytest.fixture
def sample_image(tmp_path: Path) -> Path:
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def image_factory(tmp_path: Path):
    """Write solid-color PNGs into tmp_path/inputs."""
    inputs = tmp_path / "inputs"
    inputs.mkdir(exist_ok=True)

    def _make(name: str, width: int = 40, height: int = 20, color: str = "red") -> Path:
        path = inputs / name
        path.write_bytes(png_bytes(width, height, color))
        return path

    return _make


@pytest.fixture
def fixed_ids():
    """Deterministic id factory: id-1, id-2, ..."""
    counter = {"n": 0}

    def _next() -> str:
        counter["n"] += 1
        return f"id-{counter['n']}"

    return _next


@pytest.fixture
def make_data_url():
    """Factory for inline PNG payloads."""
    return png_data_url


@pytest.fixture
def make_png_bytes():
    """Factory for encoded PNG bytes."""
    return png_bytes
