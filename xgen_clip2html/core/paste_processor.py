# xgen_clip2html/core/paste_processor.py
"""PasteImageProcessor - Pasted Image Processing Class

Main paste processing class for the xgen_clip2html library.
Rewrites the <img> sources of an HTML clipboard payload so that pasted
images survive outside the clipboard:

- local file placeholders (file://...) are replaced with the pictures of the
  parallel RTF clipboard payload, as Data URLs
- without an RTF payload, object URLs (blob:...) are resolved through an
  object URL resolver and replaced with Data URLs

This class is the recommended entry point when using the library.

Usage Example:
    from xgen_clip2html.core.paste_processor import PasteImageProcessor

    processor = PasteImageProcessor()

    # Word paste: HTML + RTF
    result = processor.rewrite(html, rtf)
    print(result.html)

    # Browser paste: HTML only, blob: sources
    processor = PasteImageProcessor(object_url_resolver=MappingObjectUrlResolver(objects))
    result = await processor.rewrite_async(html)
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from xgen_clip2html.core.functions.object_url_resolver import BaseObjectUrlResolver
from xgen_clip2html.core.functions.paste_config import (
    PasteProcessorConfig,
    resolve_config,
)
from xgen_clip2html.core.functions.paste_report import ImageRewriteResult
from xgen_clip2html.core.processor.blob_image_handler import BlobImageHandler
from xgen_clip2html.core.processor.html_helper import HTMLPreprocessor
from xgen_clip2html.core.processor.rtf_helper import (
    RTFImageData,
    build_data_url,
    extract_from_rtf,
)
from xgen_clip2html.core.processor.rtf_image_handler import RTFImageHandler

logger = logging.getLogger("xgen_clip2html")

ImageCapability = Callable[[], bool]


class PasteImageProcessor:
    """
    xgen_clip2html Main Paste Processing Class

    Attributes:
        config: PasteProcessorConfig
        rtf_handler: Handler replacing file:// placeholders with RTF pictures
        blob_handler: Handler resolving blob: sources (async)

    Example:
        >>> processor = PasteImageProcessor()
        >>> result = processor.rewrite(html, rtf)
        >>> result.html
    """

    def __init__(
        self,
        config: Optional[Union[Dict[str, Any], PasteProcessorConfig]] = None,
        *,
        is_image_allowed: Optional[ImageCapability] = None,
        object_url_resolver: Optional[BaseObjectUrlResolver] = None,
        supported_image_types: Optional[Any] = None,
        replaceable_src_prefixes: Optional[Any] = None,
        default_rtf_encoding: Optional[str] = None,
        html_parser: Optional[str] = None,
        fetch_timeout: Optional[float] = None,
        **kwargs
    ):
        """
        Initialize PasteImageProcessor.

        Args:
            config: Configuration dictionary or PasteProcessorConfig
                   - None: Use default settings
            is_image_allowed: Callable telling whether the host accepts <img>
                   elements; returning False disables every rewrite
            object_url_resolver: Resolver for blob: sources
                   - Default: HttpObjectUrlResolver with fetch_timeout
            supported_image_types: Formats embedded as Data URLs
                   - Default: png, jpeg, gif
            replaceable_src_prefixes: <img> sources replaced by RTF pictures
                   - Default: ("file://",)
            default_rtf_encoding: Encoding of RTF bytes without \\ansicpg
                   - Default: "cp1252"
            html_parser: BeautifulSoup parser for the blob fallback
                   - Default: "html.parser"
            fetch_timeout: Object URL fetch timeout in seconds
                   - Default: 10.0
            **kwargs: Additional configuration options (ignored if unknown)
        """
        self._config = resolve_config(
            config,
            supported_image_types=supported_image_types,
            replaceable_src_prefixes=replaceable_src_prefixes,
            default_rtf_encoding=default_rtf_encoding,
            html_parser=html_parser,
            fetch_timeout=fetch_timeout,
            **kwargs
        )
        self._is_image_allowed = is_image_allowed

        self._logger = logging.getLogger("xgen_clip2html.processor")

        self._html_preprocessor = HTMLPreprocessor()
        self._rtf_handler = RTFImageHandler(self._config)
        self._blob_handler = BlobImageHandler(self._config, resolver=object_url_resolver)

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> PasteProcessorConfig:
        """Current configuration."""
        return self._config

    @property
    def rtf_handler(self) -> RTFImageHandler:
        """RTF picture handler."""
        return self._rtf_handler

    @property
    def blob_handler(self) -> BlobImageHandler:
        """Object URL handler."""
        return self._blob_handler

    # =========================================================================
    # Public Methods
    # =========================================================================

    def is_image_allowed(self) -> bool:
        """Whether the host accepts <img> elements."""
        if self._is_image_allowed is None:
            return True
        return bool(self._is_image_allowed())

    def rewrite(self, html: Any, rtf: Any = None) -> ImageRewriteResult:
        """
        Replace the file:// placeholders of the HTML payload with RTF pictures.

        Never raises: failures are logged and the HTML is returned unchanged.
        Without an RTF payload the HTML is returned unchanged, use
        rewrite_async() to resolve blob: sources.

        Args:
            html: HTML clipboard payload (str or bytes)
            rtf: RTF clipboard payload (str or bytes)

        Returns:
            ImageRewriteResult
        """
        html_text = ""
        try:
            preprocessed = self._html_preprocessor.preprocess(html)
            html_text = preprocessed.clean_content
            result = ImageRewriteResult(html=html_text, original_html=html_text)

            if not html_text or not self.is_image_allowed():
                return result

            if not rtf:
                self._logger.debug("No RTF payload, image sources left unchanged")
                return result

            img_tags = preprocessed.metadata.get("img_tags", [])
            if not img_tags or not self._html_preprocessor.validate(html_text):
                return result

            return self._rtf_handler.handle(html_text, rtf, img_tags=img_tags)

        except Exception as e:
            self._logger.error(f"Error rewriting pasted images: {e}")
            return ImageRewriteResult(html=html_text, original_html=html_text)

    async def rewrite_async(self, html: Any, rtf: Any = None) -> ImageRewriteResult:
        """
        Rewrite pasted image sources, resolving blob: sources without RTF.

        Args:
            html: HTML clipboard payload (str or bytes)
            rtf: RTF clipboard payload (str or bytes), optional

        Returns:
            ImageRewriteResult
        """
        if rtf:
            return self.rewrite(html, rtf)

        html_text = ""
        try:
            preprocessed = self._html_preprocessor.preprocess(html)
            html_text = preprocessed.clean_content
            if not html_text or not self.is_image_allowed():
                return ImageRewriteResult(html=html_text, original_html=html_text)

            return await self._blob_handler.handle(
                html_text,
                img_tags=preprocessed.metadata.get("img_tags", []),
            )

        except Exception as e:
            self._logger.error(f"Error resolving pasted object URLs: {e}")
            return ImageRewriteResult(html=html_text, original_html=html_text)

    def extract_images(self, rtf: Any) -> List[RTFImageData]:
        """
        Extract the ordered images of an RTF payload.

        Args:
            rtf: RTF clipboard payload (str or bytes)

        Returns:
            Images in placeholder order
        """
        return self._rtf_handler.extract_images(rtf)

    async def aclose(self) -> None:
        """Release the resources of the object URL resolver."""
        await self._blob_handler.aclose()

    # =========================================================================
    # Context Manager Support
    # =========================================================================

    def __enter__(self) -> "PasteImageProcessor":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        pass

    async def __aenter__(self) -> "PasteImageProcessor":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # =========================================================================
    # String Representation
    # =========================================================================

    def __repr__(self) -> str:
        types = ", ".join(sorted(t.value for t in self._config.supported_image_types))
        return f"PasteImageProcessor(supported_image_types=[{types}])"

    def __str__(self) -> str:
        return f"xgen_clip2html PasteImageProcessor ({len(self._config.supported_image_types)} image formats)"


# === Module-level Convenience Functions ===

def create_paste_processor(
    config: Optional[Union[Dict[str, Any], PasteProcessorConfig]] = None,
    *,
    is_image_allowed: Optional[ImageCapability] = None,
    object_url_resolver: Optional[BaseObjectUrlResolver] = None,
    **kwargs
) -> PasteImageProcessor:
    """
    Create a PasteImageProcessor instance.

    Args:
        config: Configuration dictionary or PasteProcessorConfig
        is_image_allowed: Callable telling whether the host accepts <img>
        object_url_resolver: Resolver for blob: sources
        **kwargs: Additional configuration options

    Returns:
        PasteImageProcessor instance

    Example:
        >>> processor = create_paste_processor()
        >>> processor = create_paste_processor({"supported_image_types": ["png"]})
    """
    return PasteImageProcessor(
        config=config,
        is_image_allowed=is_image_allowed,
        object_url_resolver=object_url_resolver,
        **kwargs
    )


def extract_images_from_rtf(rtf_text: str) -> List[RTFImageData]:
    """
    Parse RTF content to find embedded images.

    Args:
        rtf_text: RTF content

    Returns:
        Images in placeholder order
    """
    return extract_from_rtf(rtf_text)


def rewrite_html_image_sources(
    html: str,
    rtf_text: Optional[str],
    is_image_allowed: Optional[ImageCapability] = None,
) -> str:
    """
    Replace the file:// placeholders of pasted HTML with RTF pictures.

    Example:
        rewrite_html_image_sources(
            '<img src="file://img1.png">',
            '{\\\\rtf1{\\\\pict\\\\pngblip 89504e470d0a1a0a}}',
        )
        # Returns: '<img src="data:image/png;base64,iVBORw0KGgo=">'

    Args:
        html: HTML clipboard payload
        rtf_text: RTF clipboard payload; None leaves the HTML unchanged
        is_image_allowed: Callable telling whether the host accepts <img>

    Returns:
        Rewritten HTML
    """
    processor = PasteImageProcessor(is_image_allowed=is_image_allowed)
    return processor.rewrite(html, rtf_text).html


__all__ = [
    "PasteImageProcessor",
    "create_paste_processor",
    "extract_images_from_rtf",
    "rewrite_html_image_sources",
    "build_data_url",
]
