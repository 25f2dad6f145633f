# xgen_clip2html/core/processor/html_helper/html_blob_images.py
"""
HTML Blob Images

Applies resolved object URLs (blob:...) to every <img> that references them.

BeautifulSoup only locates the <img> elements (URLs mentioned in comments,
scripts or VML are not images). The payload text itself is rewritten in
place, so markup around the images is kept byte for byte.
"""
import logging
import re
from typing import Dict, Optional, Set

from bs4 import BeautifulSoup

logger = logging.getLogger("xgen_clip2html.html.blob")


def find_image_sources(html: str, parser: str = 'html.parser') -> Set[str]:
    """
    Return the src values of the <img> elements of an HTML document.

    Args:
        html: HTML code
        parser: BeautifulSoup parser to use

    Returns:
        Set of src values
    """
    soup = BeautifulSoup(html, parser)
    return {img.get('src') for img in soup.find_all('img') if img.get('src')}


def replace_all_image_src(html: str, src: str, new_src: str) -> str:
    """Replace every <img> source equal to `src` with `new_src`."""
    img_regex = re.compile(r'(<img [^>]*src=["\']?)' + re.escape(src) + r'(?=["\'\s>])')
    return img_regex.sub(lambda m: m.group(1) + new_src, html)


def apply_blob_sources(
    html: str,
    replacements: Dict[str, Optional[str]],
    parser: str = 'html.parser',
) -> str:
    """
    Set src of every <img src="<blob url>"> to its Data URL.

    Args:
        html: HTML code
        replacements: blob URL -> Data URL (None entries are left unresolved)
        parser: BeautifulSoup parser to use

    Returns:
        Rewritten HTML, or the input HTML when nothing was replaced
    """
    resolved = {url: data_url for url, data_url in replacements.items() if data_url}
    if not html or not resolved:
        return html

    image_sources = find_image_sources(html, parser)
    replaced = 0

    for url, data_url in resolved.items():
        if url not in image_sources:
            continue
        html = replace_all_image_src(html, url, data_url)
        replaced += 1

    if replaced:
        logger.debug(f"Replaced {replaced} blob image sources")
    return html


__all__ = [
    'apply_blob_sources',
    'find_image_sources',
    'replace_all_image_src',
]
