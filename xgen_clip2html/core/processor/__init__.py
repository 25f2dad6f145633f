# xgen_clip2html/core/processor/__init__.py
"""
Processor - Pasted Image Handler Module

Provides handlers for rewriting the <img> sources of pasted HTML.

Handler List:
- rtf_image_handler: file:// placeholders replaced with RTF pictures
- blob_image_handler: blob: sources resolved through an object URL resolver

Helper Modules (subdirectories):
- rtf_helper/: RTF group scanning and picture extraction
- html_helper/: <img> source discovery and rewriting

Usage Example:
    from xgen_clip2html.core.processor import RTFImageHandler
    from xgen_clip2html.core.processor.rtf_helper import extract_from_rtf
"""

# === Handlers ===
from xgen_clip2html.core.processor.base_handler import BaseHandler
from xgen_clip2html.core.processor.rtf_image_handler import RTFImageHandler
from xgen_clip2html.core.processor.blob_image_handler import (
    BlobImageHandler,
    extract_blob_urls,
)

# === Helper Modules (subpackages) ===
from xgen_clip2html.core.processor import rtf_helper
from xgen_clip2html.core.processor import html_helper

__all__ = [
    # Handlers
    "BaseHandler",
    "RTFImageHandler",
    "BlobImageHandler",
    "extract_blob_urls",
    # Helper subpackages
    "rtf_helper",
    "html_helper",
]
