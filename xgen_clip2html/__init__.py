# xgen_clip2html/__init__.py
"""
xgen_clip2html Library

Keeps images pasted from word processors and browsers alive by turning
their clipboard references into self-contained Data URLs.

Package Structure:
- core: Pasted image processing core module
    - PasteImageProcessor: Main paste processing class
    - processor: RTF and object URL handlers
    - functions: Utility functions

Usage:
    from xgen_clip2html import PasteImageProcessor

    processor = PasteImageProcessor()
    result = processor.rewrite(html, rtf)
    html = result.html
"""

__version__ = "0.1.0"

# Expose core classes at top level
from xgen_clip2html.core import (
    PasteImageProcessor,
    PasteProcessorConfig,
    ImageRewriteResult,
    PasteIssue,
    PasteIssueType,
    create_paste_processor,
    extract_images_from_rtf,
    rewrite_html_image_sources,
    build_data_url,
)

# Explicit subpackages
from xgen_clip2html import core

__all__ = [
    "__version__",
    # Core classes
    "PasteImageProcessor",
    "PasteProcessorConfig",
    "ImageRewriteResult",
    "PasteIssue",
    "PasteIssueType",
    # Convenience functions
    "create_paste_processor",
    "extract_images_from_rtf",
    "rewrite_html_image_sources",
    "build_data_url",
    # Subpackages
    "core",
]
