# xgen_clip2html/core/processor/html_helper/__init__.py
"""
HTML Helper Module

Provides <img> placeholder discovery and rewriting for HTML clipboard payloads.

Usage:
    from xgen_clip2html.core.processor.html_helper import (
        HTMLPreprocessor,
        extract_tags_from_html,
        replace_image_src,
        apply_blob_sources,
    )
"""

from xgen_clip2html.core.processor.html_helper.html_image_tags import (
    extract_tags_from_html,
    replace_image_src,
)

from xgen_clip2html.core.processor.html_helper.html_blob_images import (
    apply_blob_sources,
    find_image_sources,
    replace_all_image_src,
)

from xgen_clip2html.core.processor.html_helper.html_preprocessor import (
    HTMLPreprocessor,
)


__all__ = [
    'extract_tags_from_html',
    'replace_image_src',
    'apply_blob_sources',
    'find_image_sources',
    'replace_all_image_src',
    'HTMLPreprocessor',
]
