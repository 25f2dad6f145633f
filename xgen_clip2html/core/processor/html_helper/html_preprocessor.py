# xgen_clip2html/core/processor/html_helper/html_preprocessor.py
"""
HTML Preprocessor - Prepare the HTML clipboard payload.

Processing Pipeline Position:
    1. Host supplies the HTML payload (str or bytes)
    2. HTMLPreprocessor.preprocess() -> PreprocessedData (THIS STEP)
    3. <img> placeholder matching

The payload text is left untouched (placeholders are rewritten in place),
only byte payloads are decoded.
"""
import logging
from typing import Any, Optional

import chardet

from xgen_clip2html.core.functions.preprocessor import (
    BasePreprocessor,
    PreprocessedData,
)
from xgen_clip2html.core.processor.html_helper.html_image_tags import (
    extract_tags_from_html,
)

logger = logging.getLogger("xgen_clip2html.html.preprocessor")


class HTMLPreprocessor(BasePreprocessor):
    """HTML payload preprocessor."""

    DEFAULT_ENCODINGS = ['utf-8', 'utf-8-sig', 'cp1252']

    def __init__(self, encoding: Optional[str] = None):
        """
        Initialize HTMLPreprocessor.

        Args:
            encoding: Specific encoding for byte payloads
        """
        self._encoding = encoding

    def preprocess(self, payload: Any, **kwargs) -> PreprocessedData:
        """
        Preprocess the HTML payload.

        Args:
            payload: HTML text or bytes
            **kwargs: Additional options (encoding)

        Returns:
            PreprocessedData with the HTML text and its <img> sources
        """
        if payload is None:
            return PreprocessedData(raw_content=None, clean_content="")

        encoding = "utf-8"
        if isinstance(payload, (bytes, bytearray)):
            text, encoding = self._decode(bytes(payload), kwargs.get("encoding", self._encoding))
        else:
            text = str(payload)

        img_tags = extract_tags_from_html(text)
        logger.debug(f"HTML preprocessor: {len(img_tags)} <img> tags")

        return PreprocessedData(
            raw_content=payload,
            clean_content=text,
            encoding=encoding,
            metadata={
                "img_tags": img_tags,
                "image_count": len(img_tags),
            },
        )

    def _decode(self, data: bytes, encoding: Optional[str] = None):
        """Decode bytes to string, returning (text, encoding)."""
        if encoding:
            try:
                return data.decode(encoding), encoding
            except (UnicodeDecodeError, LookupError):
                logger.debug(f"Preferred encoding {encoding} failed")

        for enc in self.DEFAULT_ENCODINGS:
            try:
                return data.decode(enc), enc
            except UnicodeDecodeError:
                continue

        detected = chardet.detect(data[:10000])
        detected_enc = detected.get('encoding') if detected else None
        if detected_enc:
            try:
                return data.decode(detected_enc), detected_enc
            except (UnicodeDecodeError, LookupError):
                pass

        return data.decode('utf-8', errors='replace'), 'utf-8'

    def get_format_name(self) -> str:
        """Return format name."""
        return "HTML Preprocessor"

    def validate(self, data: Any) -> bool:
        """Validate if data contains any <img> tag."""
        if isinstance(data, (bytes, bytearray)):
            return b'<img' in bytes(data).lower()
        return isinstance(data, str) and '<img' in data.lower()


__all__ = ['HTMLPreprocessor']
