# xgen_clip2html/core/functions/img_processor.py
"""
Image Processing Module

Converts raw image payloads into self-contained Data URLs.

Main Features:
- ImageFormat enum with MIME types and codec support flag
- Hex string -> bytes conversion (RTF \\pict payloads)
- Bytes -> Base64 conversion
- Image type recognition from file signatures (magic numbers)
- Data URL construction ("data:<mime>;base64,<payload>")

Usage Example:
    from xgen_clip2html.core.functions.img_processor import (
        ImageFormat,
        create_src_with_base64,
        get_image_type_from_signature,
    )

    src = create_src_with_base64("89504e470d0a1a0a", ImageFormat.PNG)
    # Result: "data:image/png;base64,iVBORw0KGgo="

    image_type = get_image_type_from_signature(blob_bytes)
    src = create_src_with_base64(blob_bytes, image_type)
"""
import base64
import logging
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

logger = logging.getLogger("xgen_clip2html.image_processor")


class ImageFormat(Enum):
    """Image formats recognized in clipboard payloads."""
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    EMF = "emf"
    WMF = "wmf"
    UNKNOWN = "unknown"

    @property
    def mime_type(self) -> str:
        """MIME type ('image/png'), or 'unknown' for unrecognized images."""
        if self is ImageFormat.UNKNOWN:
            return self.value
        return f"image/{self.value}"

    @property
    def is_supported(self) -> bool:
        """Whether the format can be embedded as a Data URL."""
        return self in SUPPORTED_IMAGE_TYPES


# Raster formats browsers can render from a Data URL
SUPPORTED_IMAGE_TYPES: FrozenSet[ImageFormat] = frozenset({
    ImageFormat.PNG,
    ImageFormat.JPEG,
    ImageFormat.GIF,
})

# File signatures as hex prefixes, checked in order
IMAGE_SIGNATURES: List[Tuple[str, ImageFormat]] = [
    ('ffd8ff', ImageFormat.JPEG),
    ('47494638', ImageFormat.GIF),
    ('89504e47', ImageFormat.PNG),
]


def convert_hex_string_to_bytes(hex_string: str) -> bytes:
    """
    Convert a hex digit string into bytes, two characters per byte.

    Args:
        hex_string: Even-length string of hex digits

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the string has odd length or non-hex characters
    """
    return bytes.fromhex(hex_string)


def convert_bytes_to_base64(data: Union[bytes, bytearray, Iterable[int]]) -> str:
    """
    Encode bytes as standard Base64 (A-Z a-z 0-9 + /, '=' padding).

    Args:
        data: Bytes or an iterable of byte values

    Returns:
        Base64 string ('' for empty input)
    """
    if not isinstance(data, (bytes, bytearray)):
        data = bytes(data)
    return base64.b64encode(data).decode('ascii')


def get_image_type_from_signature(data: Optional[bytes]) -> Optional[ImageFormat]:
    """
    Return the image type based on the first 4 bytes of the given file.

    Args:
        data: File bytes

    Returns:
        ImageFormat (JPEG, GIF or PNG) or None if the signature is unknown
    """
    if not data:
        return None

    hex_signature = bytes(data[:4]).hex()

    for signature, image_type in IMAGE_SIGNATURES:
        if hex_signature.startswith(signature):
            return image_type

    return None


def create_src_with_base64(
    data: Union[str, bytes, bytearray, None],
    image_type: Optional[ImageFormat],
    supported_types: Optional[Iterable[ImageFormat]] = None,
) -> Optional[str]:
    """
    Create image source as a Base64-encoded Data URL.

    Args:
        data: Hex digit string (RTF payload) or raw bytes
        image_type: Image format; None when the type is unknown
        supported_types: Formats allowed to be embedded
                        (default: SUPPORTED_IMAGE_TYPES)

    Returns:
        Data URL, or None if the image type is absent or unsupported

    Raises:
        ValueError: If `data` is a malformed hex string
    """
    if image_type is None:
        return None

    allowed = SUPPORTED_IMAGE_TYPES if supported_types is None else frozenset(supported_types)
    if image_type not in allowed:
        return None

    if data is None:
        data = b""
    elif isinstance(data, str):
        data = convert_hex_string_to_bytes(data)

    return f"data:{image_type.mime_type};base64,{convert_bytes_to_base64(data)}"


__all__ = [
    'ImageFormat',
    'SUPPORTED_IMAGE_TYPES',
    'IMAGE_SIGNATURES',
    'convert_hex_string_to_bytes',
    'convert_bytes_to_base64',
    'get_image_type_from_signature',
    'create_src_with_base64',
]
