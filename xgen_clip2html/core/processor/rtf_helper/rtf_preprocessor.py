# xgen_clip2html/core/processor/rtf_helper/rtf_preprocessor.py
"""
RTF Preprocessor

Prepares an RTF clipboard payload for image extraction:
- Encoding detection and decoding of byte payloads
- Removal of header/footer, \\nonshppict and \\shprslt groups

Implements BasePreprocessor interface.
"""
import logging
from typing import Any, Optional

from xgen_clip2html.core.functions.preprocessor import (
    BasePreprocessor,
    PreprocessedData,
)
from xgen_clip2html.core.processor.rtf_helper.rtf_constants import (
    EXCLUDED_GROUP_PATTERN,
)
from xgen_clip2html.core.processor.rtf_helper.rtf_decoder import (
    decode_content,
    detect_encoding,
)
from xgen_clip2html.core.processor.rtf_helper.rtf_group_scanner import (
    remove_groups,
)

logger = logging.getLogger("xgen_clip2html.rtf.preprocessor")


class RTFPreprocessor(BasePreprocessor):
    """
    RTF-specific preprocessor.

    Usage:
        preprocessor = RTFPreprocessor()
        result = preprocessor.preprocess(rtf_bytes)

        # result.clean_content - RTF text without excluded groups
        # result.encoding - detected encoding
    """

    RTF_MAGIC = '{\\rtf'

    def __init__(
        self,
        default_encoding: str = "cp1252",
        excluded_group_pattern: Optional[str] = EXCLUDED_GROUP_PATTERN,
    ):
        """
        Initialize RTFPreprocessor.

        Args:
            default_encoding: Encoding used when no \\ansicpg is declared
            excluded_group_pattern: Group name pattern to strip (None keeps all)
        """
        self._default_encoding = default_encoding
        self._excluded_group_pattern = excluded_group_pattern

    def preprocess(self, payload: Any, **kwargs) -> PreprocessedData:
        """
        Preprocess an RTF payload.

        Args:
            payload: RTF text or bytes
            **kwargs: Additional options (encoding)

        Returns:
            PreprocessedData with clean content and encoding
        """
        if payload is None:
            return PreprocessedData(raw_content=None, clean_content="")

        encoding = kwargs.get("encoding", self._default_encoding)

        if isinstance(payload, (bytes, bytearray)):
            encoding = detect_encoding(bytes(payload), encoding)
            text = decode_content(payload, encoding)
        else:
            text = str(payload)

        clean_content = text
        if text and self._excluded_group_pattern:
            clean_content = remove_groups(text, self._excluded_group_pattern)

        removed = len(text) - len(clean_content)
        if removed:
            logger.debug(f"Removed {removed} characters of excluded RTF groups")

        return PreprocessedData(
            raw_content=payload,
            clean_content=clean_content,
            encoding=encoding,
            metadata={
                "is_rtf": self.validate(text),
                "removed_chars": removed,
            },
        )

    def get_format_name(self) -> str:
        """Return format name."""
        return "RTF Preprocessor"

    def validate(self, data: Any) -> bool:
        """Validate if data looks like RTF content."""
        if isinstance(data, (bytes, bytearray)):
            return bytes(data).lstrip().startswith(self.RTF_MAGIC.encode('ascii'))
        if isinstance(data, str):
            return data.lstrip().startswith(self.RTF_MAGIC)
        return False


__all__ = ['RTFPreprocessor']
