# xgen_clip2html/core/processor/blob_image_handler.py
"""
Blob Image Handler

Fallback used when a paste carries no RTF payload: <img> elements whose
src is an object URL (blob:...) are replaced with Data URLs built from the
bytes returned by an object URL resolver.

Processing flow:
1. extract_tags_from_html() -> <img> sources, keep distinct blob: URLs
2. resolver.fetch() for every URL, concurrently (asyncio.gather)
3. get_image_type_from_signature() -> Data URL or None
4. apply_blob_sources() -> rewritten HTML
"""
import asyncio
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from xgen_clip2html.core.functions.img_processor import (
    create_src_with_base64,
    get_image_type_from_signature,
)
from xgen_clip2html.core.functions.object_url_resolver import (
    BaseObjectUrlResolver,
    HttpObjectUrlResolver,
)
from xgen_clip2html.core.functions.paste_config import PasteProcessorConfig
from xgen_clip2html.core.functions.paste_report import (
    ImageRewriteResult,
    PasteIssue,
    PasteIssueType,
    report_issue,
)
from xgen_clip2html.core.processor.base_handler import BaseHandler
from xgen_clip2html.core.processor.html_helper import (
    apply_blob_sources,
    extract_tags_from_html,
)

logger = logging.getLogger("xgen_clip2html.processor.blob")

_BLOB_URL_RE = re.compile(r'^blob:', re.IGNORECASE)


def extract_blob_urls(img_tags: List[str]) -> List[str]:
    """
    Return the distinct object URLs among <img> sources, in order.

    Args:
        img_tags: <img> src values

    Returns:
        blob: URLs without duplicates
    """
    seen = set()
    blob_urls = []
    for src in img_tags:
        if _BLOB_URL_RE.match(src) and src not in seen:
            seen.add(src)
            blob_urls.append(src)
    return blob_urls


class BlobImageHandler(BaseHandler):
    """
    Pasted image handler backed by an object URL resolver.

    Usage:
        handler = BlobImageHandler(resolver=MappingObjectUrlResolver(objects))
        result = await handler.handle(html)
    """

    def __init__(
        self,
        config: Union[PasteProcessorConfig, Mapping[str, Any], None] = None,
        resolver: Optional[BaseObjectUrlResolver] = None,
    ):
        """
        Initialize BlobImageHandler.

        Args:
            config: PasteProcessorConfig or dict
            resolver: Object URL resolver (default: HttpObjectUrlResolver)
        """
        super().__init__(config)
        self._resolver = resolver
        self._owns_resolver = resolver is None

    @property
    def resolver(self) -> BaseObjectUrlResolver:
        """Object URL resolver (lazy-initialized)."""
        if self._resolver is None:
            self._resolver = HttpObjectUrlResolver(timeout=self._config.fetch_timeout)
        return self._resolver

    async def convert_blob_url_to_base64(
        self,
        url: str,
        index: int = 0,
        issues: Optional[List[PasteIssue]] = None,
    ) -> Optional[str]:
        """
        Fetch an object URL and convert its content to a Data URL.

        Args:
            url: Object URL
            index: Position of the URL among the distinct URLs
            issues: Optional collector for reported conditions

        Returns:
            Data URL, or None if the content is missing or not a known image
        """
        try:
            data = await self.resolver.fetch(url)
        except Exception as e:
            self._logger.warning(f"Failed to resolve object URL {url[:80]}: {e}")
            return None

        if not data:
            return None

        image_type = get_image_type_from_signature(data)
        if image_type is None:
            report_issue(
                issues,
                PasteIssueType.UNRECOGNIZED_SIGNATURE,
                "Unrecognized image file signature",
                log=self._logger,
                url=url,
                index=index,
            )
            return None

        return create_src_with_base64(data, image_type, self._config.supported_image_types)

    async def handle(
        self,
        html: str,
        img_tags: Optional[List[str]] = None,
        issues: Optional[List[PasteIssue]] = None,
    ) -> ImageRewriteResult:
        """
        Replace object URL sources of the HTML payload with Data URLs.

        Args:
            html: HTML payload text
            img_tags: <img> sources of `html` (extracted when None)
            issues: Optional collector for reported conditions

        Returns:
            ImageRewriteResult; data_urls follow the distinct blob URLs
        """
        issues = issues if issues is not None else []
        result = ImageRewriteResult(html=html, original_html=html, issues=issues)

        if img_tags is None:
            img_tags = extract_tags_from_html(html)

        blob_urls = extract_blob_urls(img_tags)
        if not blob_urls:
            return result

        self._logger.debug(f"Resolving {len(blob_urls)} object URLs")
        data_urls = await asyncio.gather(*(
            self.convert_blob_url_to_base64(url, index, issues)
            for index, url in enumerate(blob_urls)
        ))
        result.data_urls = list(data_urls)

        unrecognized = {
            issue.details.get("url") for issue in issues
            if issue.issue_type == PasteIssueType.UNRECOGNIZED_SIGNATURE
        }
        for index, (url, data_url) in enumerate(zip(blob_urls, data_urls)):
            if data_url is None and url not in unrecognized:
                report_issue(
                    issues,
                    PasteIssueType.UNSUPPORTED_IMAGE_TYPE,
                    "Object URL could not be converted to a Data URL",
                    log=self._logger,
                    type="blob",
                    index=index,
                )

        replacements: Dict[str, Optional[str]] = dict(zip(blob_urls, data_urls))
        result.html = apply_blob_sources(html, replacements, parser=self._config.html_parser)

        resolved = sum(1 for data_url in data_urls if data_url)
        self._logger.info(f"Resolved {resolved} of {len(blob_urls)} object URLs")
        return result

    async def aclose(self) -> None:
        """Close the resolver created by this handler."""
        if self._resolver is not None and self._owns_resolver:
            await self._resolver.aclose()


__all__ = [
    'BlobImageHandler',
    'extract_blob_urls',
]
