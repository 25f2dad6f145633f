# xgen_clip2html/core/__init__.py
"""
Core - Pasted Image Processing Core Module

Module Structure:
- paste_processor: Main PasteImageProcessor class
- processor/: Handlers and helpers
    - rtf_image_handler: RTF picture placement
    - blob_image_handler: Object URL fallback
    - rtf_helper/: RTF scanning and picture extraction
    - html_helper/: <img> source rewriting
- functions/: Utility functions
    - img_processor: Data URL codec and signature recognition
    - object_url_resolver: Object URL resolvers
    - paste_report: Reported conditions and results

Usage:
    from xgen_clip2html import PasteImageProcessor
    from xgen_clip2html.core.processor import RTFImageHandler
    from xgen_clip2html.core.functions import create_src_with_base64
"""

# === Main Class ===
from xgen_clip2html.core.paste_processor import (
    PasteImageProcessor,
    create_paste_processor,
    extract_images_from_rtf,
    rewrite_html_image_sources,
    build_data_url,
)

# === Configuration and Results ===
from xgen_clip2html.core.functions.paste_config import PasteProcessorConfig
from xgen_clip2html.core.functions.paste_report import (
    ImageRewriteResult,
    PasteIssue,
    PasteIssueType,
)

# === Explicit Subpackage Imports ===
from xgen_clip2html.core import processor
from xgen_clip2html.core import functions

__all__ = [
    # Main Class
    "PasteImageProcessor",
    "create_paste_processor",
    # Convenience Functions
    "extract_images_from_rtf",
    "rewrite_html_image_sources",
    "build_data_url",
    # Configuration and Results
    "PasteProcessorConfig",
    "ImageRewriteResult",
    "PasteIssue",
    "PasteIssueType",
    # Subpackages
    "processor",
    "functions",
]
