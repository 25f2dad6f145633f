# xgen_clip2html/core/processor/html_helper/html_image_tags.py
"""
HTML Image Tags

Finding and rewriting <img src> values in an HTML clipboard payload.

Word clipboard HTML is not well-formed (conditional comments, VML), so
the <img> tags are located textually rather than through a DOM parser:
the order of the src values must match the order of RTF pictures.
"""
import logging
import re
from typing import List

logger = logging.getLogger("xgen_clip2html.html.images")

_IMG_SRC_RE = re.compile(r'<img[^>]+src="([^"]+)[^>]+')


def extract_tags_from_html(html: str) -> List[str]:
    """
    Extract the src attributes of <img> tags from the given HTML.

    Example:
        extract_tags_from_html('<img src="a.png" alt=""><img src="b.png" alt="">')
        # Returns: ['a.png', 'b.png']

    Args:
        html: HTML code

    Returns:
        src values in document order, including VML, blob and data sources
    """
    if not html:
        return []
    return _IMG_SRC_RE.findall(html)


def replace_image_src(html: str, src: str, new_src: str) -> str:
    """
    Replace the first <img> source equal to `src` with `new_src`.

    Only real <img> tags are touched (Word may insert the same image through
    VML too). The path is escaped before building the pattern because Windows
    paths contain backslashes.

    Args:
        html: HTML code
        src: Current src value
        new_src: Replacement src value

    Returns:
        HTML with at most one src replaced
    """
    img_regex = re.compile(r'(<img [^>]*src=["\']?)' + re.escape(src))
    return img_regex.sub(lambda m: m.group(1) + new_src, html, count=1)


__all__ = [
    'extract_tags_from_html',
    'replace_image_src',
]
