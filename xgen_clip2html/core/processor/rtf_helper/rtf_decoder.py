# xgen_clip2html/core/processor/rtf_helper/rtf_decoder.py
"""
RTF Decoding Utilities

Encoding detection and decoding functions for RTF clipboard payloads.
"""
import logging
import re
from typing import Union

import chardet

from xgen_clip2html.core.processor.rtf_helper.rtf_constants import (
    CODEPAGE_ENCODING_MAP,
    DEFAULT_ENCODINGS,
)

logger = logging.getLogger("xgen_clip2html.rtf.decoder")

_ANSICPG_RE = re.compile(r'\\ansicpg(\d+)')


def detect_encoding(content: bytes, default_encoding: str = "cp1252") -> str:
    """
    Detect encoding from RTF content.

    Looks for the \\ansicpgXXXX pattern in the header.

    Args:
        content: RTF binary data
        default_encoding: Fallback encoding

    Returns:
        Detected encoding string
    """
    text = content[:1000].decode('ascii', errors='ignore')

    match = _ANSICPG_RE.search(text)
    if match:
        codepage = int(match.group(1))
        encoding = CODEPAGE_ENCODING_MAP.get(codepage, 'cp1252')
        logger.debug(f"RTF encoding detected: {encoding} (codepage {codepage})")
        return encoding

    return default_encoding


def decode_content(content: Union[str, bytes, bytearray], encoding: str = "cp1252") -> str:
    """
    Decode an RTF payload to string.

    Detection order:
    1. Code page declared with \\ansicpg (or `encoding` when none is declared)
    2. chardet guess (when confident)
    3. Default encoding candidates
    4. latin-1 fallback (always succeeds)

    Args:
        content: RTF payload (str is returned unchanged)
        encoding: Preferred encoding when none is declared

    Returns:
        Decoded string
    """
    if isinstance(content, str):
        return content

    content = bytes(content)
    declared = detect_encoding(content, encoding)

    try:
        return content.decode(declared)
    except (UnicodeDecodeError, LookupError):
        logger.debug(f"Declared encoding {declared} failed")

    detected = chardet.detect(content[:10000])
    if detected and detected.get('encoding'):
        detected_enc = detected['encoding']
        confidence = detected.get('confidence', 0)
        logger.debug(f"chardet detected: {detected_enc} (confidence: {confidence})")

        if confidence > 0.7:
            try:
                return content.decode(detected_enc)
            except (UnicodeDecodeError, LookupError):
                pass

    for enc in DEFAULT_ENCODINGS:
        try:
            return content.decode(enc)
        except (UnicodeDecodeError, LookupError):
            continue

    return content.decode('latin-1', errors='replace')


__all__ = [
    'detect_encoding',
    'decode_content',
]
