"""Pytest configuration for the test suite."""
import pytest

pytest_plugins = ['pytest_asyncio']

PNG_HEX = "89504e470d0a1a0a"
PNG_DATA_URL = "data:image/png;base64,iVBORw0KGgo="
JPEG_HEX = "ffd8ffe0"
JPEG_DATA_URL = "data:image/jpeg;base64,/9j/4A=="


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test."
    )


def pict(marker: str, payload: str, blip_uid: str = None, extra: str = "") -> str:
    """Build a Word-like \\pict group."""
    uid = "{\\*\\blipuid " + blip_uid + "}" if blip_uid else ""
    return "{\\pict" + extra + "\\picw10\\pich10" + marker + uid + "\n" + payload + "}"


@pytest.fixture
def png_pict():
    return pict("\\pngblip", PNG_HEX, blip_uid="a1")


@pytest.fixture
def jpeg_pict():
    return pict("\\jpegblip", JPEG_HEX, blip_uid="b2")
