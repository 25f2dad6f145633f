# xgen_clip2html/core/functions/__init__.py
"""
Functions - Common Utility Functions Module

Module Components:
- img_processor: Data URL codec and image signature recognition
- paste_config: PasteProcessorConfig
- paste_report: Reported conditions and the ImageRewriteResult container
- preprocessor: BasePreprocessor interface
- object_url_resolver: Object URL resolvers (mapping, HTTP)

Usage Example:
    from xgen_clip2html.core.functions import create_src_with_base64, ImageFormat
    from xgen_clip2html.core.functions.object_url_resolver import MappingObjectUrlResolver
"""

from xgen_clip2html.core.functions.img_processor import (
    ImageFormat,
    SUPPORTED_IMAGE_TYPES,
    IMAGE_SIGNATURES,
    convert_hex_string_to_bytes,
    convert_bytes_to_base64,
    get_image_type_from_signature,
    create_src_with_base64,
)

from xgen_clip2html.core.functions.paste_config import (
    PasteProcessorConfig,
    resolve_config,
)

from xgen_clip2html.core.functions.paste_report import (
    PasteIssueType,
    PasteIssue,
    ImageRewriteResult,
    report_issue,
)

from xgen_clip2html.core.functions.preprocessor import (
    BasePreprocessor,
    PreprocessedData,
)

from xgen_clip2html.core.functions.object_url_resolver import (
    ResolverType,
    BaseObjectUrlResolver,
    MappingObjectUrlResolver,
    HttpObjectUrlResolver,
    create_object_url_resolver,
)

__all__ = [
    # Image codec
    "ImageFormat",
    "SUPPORTED_IMAGE_TYPES",
    "IMAGE_SIGNATURES",
    "convert_hex_string_to_bytes",
    "convert_bytes_to_base64",
    "get_image_type_from_signature",
    "create_src_with_base64",
    # Config
    "PasteProcessorConfig",
    "resolve_config",
    # Report
    "PasteIssueType",
    "PasteIssue",
    "ImageRewriteResult",
    "report_issue",
    # Preprocessing
    "BasePreprocessor",
    "PreprocessedData",
    # Object URL resolvers
    "ResolverType",
    "BaseObjectUrlResolver",
    "MappingObjectUrlResolver",
    "HttpObjectUrlResolver",
    "create_object_url_resolver",
]
