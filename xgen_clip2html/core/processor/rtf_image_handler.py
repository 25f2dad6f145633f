# xgen_clip2html/core/processor/rtf_image_handler.py
"""
RTF Image Handler

Replaces the local file placeholders of a pasted HTML payload with the
images carried by the parallel RTF payload.

Processing flow:
1. preprocessor.preprocess() -> RTF text without excluded groups
2. RTFImageExtractor.extract() -> ordered images
3. create_src_with_base64() -> Data URL per image
4. extract_tags_from_html() -> ordered <img> sources
5. Positional matching, replace_image_src() per placeholder
"""
import logging
from typing import Any, List, Optional

from xgen_clip2html.core.functions.img_processor import create_src_with_base64
from xgen_clip2html.core.functions.paste_report import (
    ImageRewriteResult,
    PasteIssue,
    PasteIssueType,
    report_issue,
)
from xgen_clip2html.core.processor.base_handler import BaseHandler
from xgen_clip2html.core.processor.html_helper import (
    extract_tags_from_html,
    replace_image_src,
)
from xgen_clip2html.core.processor.rtf_helper import (
    RTFImageData,
    RTFImageExtractor,
    RTFPreprocessor,
)

logger = logging.getLogger("xgen_clip2html.processor.rtf")


class RTFImageHandler(BaseHandler):
    """
    Pasted image handler backed by the RTF clipboard payload.

    Usage:
        handler = RTFImageHandler()
        result = handler.handle(html, rtf)
    """

    def _create_preprocessor(self) -> RTFPreprocessor:
        """Create RTF-specific preprocessor."""
        return RTFPreprocessor(default_encoding=self._config.default_rtf_encoding)

    def extract_images(
        self,
        rtf: Any,
        issues: Optional[List[PasteIssue]] = None,
    ) -> List[RTFImageData]:
        """
        Extract the ordered images of an RTF payload.

        Args:
            rtf: RTF text or bytes
            issues: Optional collector for reported conditions

        Returns:
            Images in placeholder order
        """
        preprocessed = self.preprocess(rtf)
        if not preprocessed.metadata.get("is_rtf"):
            self._logger.debug("RTF payload has no {\\rtf header, scanning it anyway")
        extractor = RTFImageExtractor(self._config.supported_image_types)
        return extractor.extract(preprocessed.clean_content, issues=issues, preprocessed=True)

    def build_data_urls(self, images: List[RTFImageData]) -> List[Optional[str]]:
        """
        Create a Data URL per image.

        A malformed hex payload yields None, the same as an unsupported type.
        """
        data_urls: List[Optional[str]] = []
        for index, image in enumerate(images):
            try:
                data_urls.append(
                    create_src_with_base64(image.hex, image.type, self._config.supported_image_types)
                )
            except ValueError as e:
                self._logger.warning(f"Image {index}: invalid hex payload - {e}")
                data_urls.append(None)
        return data_urls

    def is_replaceable(self, src: str) -> bool:
        """Whether an <img> source is a placeholder to be replaced."""
        return src.startswith(tuple(self._config.replaceable_src_prefixes))

    def handle(
        self,
        html: str,
        rtf: Any,
        img_tags: Optional[List[str]] = None,
        issues: Optional[List[PasteIssue]] = None,
    ) -> ImageRewriteResult:
        """
        Replace placeholders of the HTML payload with RTF images.

        Args:
            html: HTML payload text
            rtf: RTF payload (text or bytes)
            img_tags: <img> sources of `html` (extracted when None)
            issues: Optional collector for reported conditions

        Returns:
            ImageRewriteResult; html is the input HTML when nothing was replaced
        """
        issues = issues if issues is not None else []
        result = ImageRewriteResult(html=html, original_html=html, issues=issues)

        images = self.extract_images(rtf, issues=issues)
        result.images = images
        if not images:
            self._logger.debug("No images in RTF payload")
            return result

        if img_tags is None:
            img_tags = extract_tags_from_html(html)

        data_urls = self.build_data_urls(images)
        result.data_urls = data_urls

        # Abort when the RTF and the HTML disagree, nothing can be paired.
        if len(images) != len(img_tags):
            report_issue(
                issues,
                PasteIssueType.COUNT_MISMATCH,
                "There was a problem with the image count between RTF and HTML",
                log=self._logger,
                rtf=len(images),
                html=len(img_tags),
            )
            return result

        replaced = 0
        for index, src in enumerate(img_tags):
            if not self.is_replaceable(src):
                continue

            data_url = data_urls[index]
            if data_url is None:
                report_issue(
                    issues,
                    PasteIssueType.UNSUPPORTED_IMAGE_TYPE,
                    "Unsupported image type",
                    log=self._logger,
                    type=images[index].type.value,
                    index=index,
                )
                continue

            html = replace_image_src(html, src, data_url)
            replaced += 1

        result.html = html
        self._logger.info(f"Replaced {replaced} of {len(img_tags)} pasted image sources")
        return result


__all__ = ['RTFImageHandler']
