# xgen_clip2html/core/processor/rtf_helper/rtf_image_extractor.py
"""
RTF Image Extractor

Parses RTF content to find embedded images (\\pict groups) in the order
they should be matched against HTML <img> placeholders.

Word writes the same picture several times in some cases:
- the same image inserted twice shares the same blip id
- an image may be followed by a copy in another format (alternate format)
- WordArt and horizontal lines are stored as pictures too
This module resolves those cases so that the resulting list lines up with
the <img> tags of the HTML clipboard payload.
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from xgen_clip2html.core.functions.img_processor import (
    ImageFormat,
    SUPPORTED_IMAGE_TYPES,
    create_src_with_base64,
)
from xgen_clip2html.core.functions.paste_report import PasteIssue
from xgen_clip2html.core.processor.rtf_helper.rtf_constants import (
    BLIP_TAG_PATTERN,
    BLIP_UID_PATTERN,
    EXCLUDED_GROUP_PATTERN,
    HORIZONTAL_RULE_MARKER,
    IMAGE_TYPE_MARKERS,
    PICT_GROUP_NAME,
    WORDART_MARKER,
)
from xgen_clip2html.core.processor.rtf_helper.rtf_content_extractor import (
    extract_group_content,
)
from xgen_clip2html.core.processor.rtf_helper.rtf_group_scanner import (
    get_groups,
    remove_groups,
)

logger = logging.getLogger("xgen_clip2html.rtf.images")

_BLIP_UID_RE = re.compile(BLIP_UID_PATTERN)
_BLIP_TAG_RE = re.compile(BLIP_TAG_PATTERN)
_IMAGE_TYPE_MARKERS = [
    (re.compile(marker), ImageFormat(type_name)) for marker, type_name in IMAGE_TYPE_MARKERS
]
_WHITESPACE_RE = re.compile(r'\s')


@dataclass(eq=False)
class RTFImageData:
    """
    Image extracted from RTF content.

    Duplicated images are represented by the same instance appearing several
    times in the image list, so equality is identity.

    Attributes:
        id: Blip uid or blip tag; None when the producer omitted both
            (e.g. LibreOffice), such images are always unique
        type: Image format recognized from RTF markers
        hex: Hex payload without whitespace; None for unsupported formats
    """
    id: Optional[str]
    type: ImageFormat
    hex: Optional[str] = None

    @property
    def mime_type(self) -> str:
        return self.type.mime_type


def get_image_id(image: str) -> Optional[str]:
    """
    Get the image id from its RTF content.

    Args:
        image: Whole \\pict group string

    Returns:
        Blip uid, blip tag, or None
    """
    uid_match = _BLIP_UID_RE.search(image)
    if uid_match:
        return uid_match.group(1)

    tag_match = _BLIP_TAG_RE.search(image)
    if tag_match:
        return tag_match.group(1)

    return None


def get_image_type(image: str) -> ImageFormat:
    """
    Extract the image type from its RTF content.

    Markers are tested in a fixed order; the first match wins.

    Args:
        image: Image content as RTF string

    Returns:
        ImageFormat, UNKNOWN if no marker is present
    """
    for marker, image_type in _IMAGE_TYPE_MARKERS:
        if marker.search(image):
            return image_type
    return ImageFormat.UNKNOWN


def get_image_content(image: str, issues: Optional[List[PasteIssue]] = None) -> str:
    """
    Get the hex payload of a \\pict group.

    RTF breaks the payload into several lines, all whitespace is removed.
    """
    return _WHITESPACE_RE.sub('', extract_group_content(image, issues=issues))


def build_data_url(image: RTFImageData) -> Optional[str]:
    """
    Create a Data URL for an extracted image.

    Returns:
        Data URL or None if the image type cannot be embedded

    Raises:
        ValueError: If the hex payload is malformed
    """
    return create_src_with_base64(image.hex, image.type)


class RTFImageExtractor:
    """
    Ordered, deduplicated image extraction from RTF content.

    Usage:
        extractor = RTFImageExtractor()
        images = extractor.extract(rtf_content)
    """

    def __init__(self, supported_types=None):
        """
        Initialize RTFImageExtractor.

        Args:
            supported_types: Formats whose payload is kept
                            (default: SUPPORTED_IMAGE_TYPES)
        """
        self._supported_types = frozenset(supported_types or SUPPORTED_IMAGE_TYPES)
        self._logger = logging.getLogger("xgen_clip2html.rtf.images.RTFImageExtractor")

    def strip_excluded_groups(self, rtf_content: str) -> str:
        """
        Remove headers, footers, non-Word images and drawn objects.

        Headers and footers are in \\header* and \\footer* groups, non-Word
        images are inside \\nonshppict groups and drawn objects (e.g. image
        alignment) are inside \\shprslt.
        """
        return remove_groups(rtf_content, EXCLUDED_GROUP_PATTERN)

    def extract(
        self,
        rtf_content: str,
        issues: Optional[List[PasteIssue]] = None,
        preprocessed: bool = False,
    ) -> List[RTFImageData]:
        """
        Parse RTF content to find embedded images.

        Args:
            rtf_content: RTF content
            issues: Optional collector for reported conditions
            preprocessed: True if excluded groups were already removed

        Returns:
            Images in placeholder order
        """
        if not rtf_content:
            return []

        if not preprocessed:
            rtf_content = self.strip_excluded_groups(rtf_content)

        whole_images = get_groups(rtf_content, PICT_GROUP_NAME)
        if not whole_images:
            return []

        images: List[RTFImageData] = []
        # id -> index of the first image with that id
        index_by_id: Dict[str, int] = {}

        for position, group in enumerate(whole_images):
            current_image = group.content
            # WordArt shapes are defined using \defshp
            if WORDART_MARKER in current_image:
                self._logger.debug(f"Picture {position}: WordArt shape, skipped")
                continue

            if HORIZONTAL_RULE_MARKER in current_image:
                self._logger.debug(f"Picture {position}: horizontal line, skipped")
                continue

            image_id = get_image_id(current_image)
            image_type = get_image_type(current_image)
            image_index = index_by_id.get(image_id, -1) if image_id is not None else -1

            prior = images[image_index] if image_index != -1 else None
            is_already_extracted = prior is not None and bool(prior.hex)

            # The same image inserted more than once uses the same id
            if is_already_extracted and prior.type == image_type:
                self._logger.debug(f"Picture {position}: duplicate of image id={image_id}")
                images.append(prior)
                continue

            # An alternate format usually directly follows the original,
            # so the original is the last extracted image.
            if is_already_extracted and image_index == len(images) - 1:
                self._logger.debug(
                    f"Picture {position}: alternate format {image_type.value} "
                    f"of image id={image_id}, skipped"
                )
                continue

            image_hex = None
            if image_type in self._supported_types:
                image_hex = get_image_content(current_image, issues=issues)

            new_image = RTFImageData(id=image_id, type=image_type, hex=image_hex)

            if image_index != -1:
                images[image_index] = new_image
            else:
                if image_id is not None:
                    index_by_id[image_id] = len(images)
                images.append(new_image)

        self._logger.debug(
            f"Extracted {len(images)} images from {len(whole_images)} picture groups"
        )
        return images


def extract_from_rtf(
    rtf_content: str,
    issues: Optional[List[PasteIssue]] = None,
) -> List[RTFImageData]:
    """
    Parse RTF content to find embedded images.

    Args:
        rtf_content: RTF content to be checked for images
        issues: Optional collector for reported conditions

    Returns:
        List of RTFImageData found in the content
    """
    return RTFImageExtractor().extract(rtf_content, issues=issues)


__all__ = [
    'RTFImageData',
    'RTFImageExtractor',
    'build_data_url',
    'extract_from_rtf',
    'get_image_content',
    'get_image_id',
    'get_image_type',
]
