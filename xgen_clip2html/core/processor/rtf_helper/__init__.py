# xgen_clip2html/core/processor/rtf_helper/__init__.py
"""
RTF Helper Module

Provides RTF group scanning and image extraction utilities.

Architecture:
    - Group scanning: find_group(), get_groups(), remove_groups()
    - Content extraction: extract_group_content(), get_group_name()
    - RTFPreprocessor: Decoding and removal of excluded groups
    - RTFImageExtractor: Ordered, deduplicated \\pict image extraction

Usage:
    from xgen_clip2html.core.processor.rtf_helper import (
        RTFImageExtractor,
        RTFPreprocessor,
        extract_from_rtf,
        build_data_url,
    )
"""

# Group scanner
from xgen_clip2html.core.processor.rtf_helper.rtf_group_scanner import (
    RTFGroup,
    find_group,
    get_groups,
    remove_groups,
)

# Content extraction
from xgen_clip2html.core.processor.rtf_helper.rtf_content_extractor import (
    extract_group_content,
    get_group_name,
)

# Decoder utilities
from xgen_clip2html.core.processor.rtf_helper.rtf_decoder import (
    detect_encoding,
    decode_content,
)

# Preprocessor
from xgen_clip2html.core.processor.rtf_helper.rtf_preprocessor import (
    RTFPreprocessor,
)

# Image extraction
from xgen_clip2html.core.processor.rtf_helper.rtf_image_extractor import (
    RTFImageData,
    RTFImageExtractor,
    build_data_url,
    extract_from_rtf,
    get_image_content,
    get_image_id,
    get_image_type,
)

# Constants
from xgen_clip2html.core.processor.rtf_helper.rtf_constants import (
    EXCLUDED_GROUP_PATTERN,
    IMAGE_TYPE_MARKERS,
    CODEPAGE_ENCODING_MAP,
)


__all__ = [
    # Group scanner
    'RTFGroup',
    'find_group',
    'get_groups',
    'remove_groups',
    # Content
    'extract_group_content',
    'get_group_name',
    # Decoder
    'detect_encoding',
    'decode_content',
    # Preprocessor
    'RTFPreprocessor',
    # Images
    'RTFImageData',
    'RTFImageExtractor',
    'build_data_url',
    'extract_from_rtf',
    'get_image_content',
    'get_image_id',
    'get_image_type',
    # Constants
    'EXCLUDED_GROUP_PATTERN',
    'IMAGE_TYPE_MARKERS',
    'CODEPAGE_ENCODING_MAP',
]
