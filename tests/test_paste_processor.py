"""Unit tests for PasteImageProcessor, the RTF placement path."""

import logging

import pytest

from conftest import JPEG_DATA_URL, JPEG_HEX, PNG_DATA_URL, PNG_HEX, pict
from xgen_clip2html import (
    ImageRewriteResult,
    PasteImageProcessor,
    PasteIssueType,
    PasteProcessorConfig,
    build_data_url,
    create_paste_processor,
    extract_images_from_rtf,
    rewrite_html_image_sources,
)
from xgen_clip2html.core.functions.img_processor import ImageFormat


def rtf(*groups: str) -> str:
    return "{\\rtf1\\ansi\\ansicpg1252 " + "".join(groups) + "}"


# ---------------------------------------------------------------------------
# Module-level functions
# ---------------------------------------------------------------------------

class TestRewriteHtmlImageSources:
    def test_end_to_end_png(self):
        html = '<img src="file://img1.png">'
        result = rewrite_html_image_sources(html, "{\\rtf1{\\pict\\pngblip 89504e470d0a1a0a}}")
        assert result == '<img src="' + PNG_DATA_URL + '">'

    def test_no_rtf_leaves_html_unchanged(self):
        html = '<img src="file://img1.png">'
        assert rewrite_html_image_sources(html, None) == html
        assert rewrite_html_image_sources(html, "") == html

    def test_capability_false_leaves_html_unchanged(self):
        html = '<img src="file://img1.png">'
        payload = rtf(pict("\\pngblip", PNG_HEX, "a1"))
        assert rewrite_html_image_sources(html, payload, is_image_allowed=lambda: False) == html

    def test_capability_true(self):
        html = '<img src="file://img1.png">'
        payload = rtf(pict("\\pngblip", PNG_HEX, "a1"))
        result = rewrite_html_image_sources(html, payload, is_image_allowed=lambda: True)
        assert PNG_DATA_URL in result

    def test_extract_images_from_rtf(self):
        images = extract_images_from_rtf(rtf(pict("\\jpegblip", JPEG_HEX, "b2")))
        assert build_data_url(images[0]) == JPEG_DATA_URL


# ---------------------------------------------------------------------------
# PasteImageProcessor.rewrite
# ---------------------------------------------------------------------------

class TestRewrite:
    def test_placeholders_replaced_in_order(self):
        html = (
            '<p><img width="1" src="file:///C:/tmp/clip_image001.png" alt="">'
            '<img width="2" src="file:///C:/tmp/clip_image002.jpg" alt=""></p>'
        )
        payload = rtf(pict("\\pngblip", PNG_HEX, "a1"), pict("\\jpegblip", JPEG_HEX, "b2"))

        result = PasteImageProcessor().rewrite(html, payload)

        assert isinstance(result, ImageRewriteResult)
        assert result.changed
        assert result.issues == []
        assert result.html == (
            '<p><img width="1" src="' + PNG_DATA_URL + '" alt="">'
            '<img width="2" src="' + JPEG_DATA_URL + '" alt=""></p>'
        )
        assert result.data_urls == [PNG_DATA_URL, JPEG_DATA_URL]

    def test_duplicated_image_fills_both_placeholders(self):
        html = '<img src="file://a.png"><img src="file://a.png">'
        group = pict("\\pngblip", PNG_HEX, "a1")

        result = PasteImageProcessor().rewrite(html, rtf(group, group))

        assert result.html == '<img src="' + PNG_DATA_URL + '"><img src="' + PNG_DATA_URL + '">'
        assert result.images[0] is result.images[1]

    def test_count_mismatch_leaves_html_byte_identical(self):
        html = '<img src="file://a.png"><img src="file://b.png">'
        payload = rtf(pict("\\pngblip", PNG_HEX, "a1"))

        result = PasteImageProcessor().rewrite(html, payload)

        assert result.html == html
        assert not result.changed
        assert result.has_issue(PasteIssueType.COUNT_MISMATCH)
        issue = result.issues[0]
        assert issue.details == {"rtf": 1, "html": 2}

    def test_count_mismatch_is_logged(self, caplog):
        html = '<img src="file://a.png"><img src="file://b.png">'
        payload = rtf(pict("\\pngblip", PNG_HEX, "a1"))

        with caplog.at_level(logging.WARNING, logger="xgen_clip2html"):
            PasteImageProcessor().rewrite(html, payload)

        assert "count_mismatch" in caplog.text

    def test_unsupported_image_reported_and_skipped(self):
        html = '<img src="file://a.emf"><img src="file://b.png">'
        payload = rtf(pict("\\emfblip", "01000000", "e1"), pict("\\pngblip", PNG_HEX, "a1"))

        result = PasteImageProcessor().rewrite(html, payload)

        assert result.html == '<img src="file://a.emf"><img src="' + PNG_DATA_URL + '">'
        assert result.has_issue(PasteIssueType.UNSUPPORTED_IMAGE_TYPE)
        assert result.issues[0].details == {"type": "emf", "index": 0}

    def test_malformed_hex_degrades_to_unsupported(self):
        html = '<img src="file://a.png">'
        payload = rtf(pict("\\pngblip", "89504", "a1"))

        result = PasteImageProcessor().rewrite(html, payload)

        assert result.html == html
        assert result.has_issue(PasteIssueType.UNSUPPORTED_IMAGE_TYPE)

    def test_non_file_sources_are_not_replaced(self):
        html = '<img src="https://example.com/a.png"><img src="file://b.png">'
        payload = rtf(pict("\\pngblip", PNG_HEX, "a1"), pict("\\jpegblip", JPEG_HEX, "b2"))

        result = PasteImageProcessor().rewrite(html, payload)

        assert result.html == '<img src="https://example.com/a.png"><img src="' + JPEG_DATA_URL + '">'

    def test_no_images_in_rtf(self):
        html = '<img src="file://a.png">'
        result = PasteImageProcessor().rewrite(html, rtf("text only"))
        assert result.html == html
        assert result.images == []
        assert result.issues == []

    def test_no_img_tags(self):
        html = "<p>text</p>"
        result = PasteImageProcessor().rewrite(html, rtf(pict("\\pngblip", PNG_HEX, "a1")))
        assert result.html == html
        assert result.issues == []

    def test_bytes_payloads(self):
        html = '<img src="file://a.png">'.encode("utf-8")
        payload = rtf(pict("\\pngblip", PNG_HEX, "a1")).encode("cp1252")

        result = PasteImageProcessor().rewrite(html, payload)

        assert result.html == '<img src="' + PNG_DATA_URL + '">'

    def test_unexpected_error_returns_input(self, monkeypatch):
        processor = PasteImageProcessor()

        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(processor.rtf_handler, "handle", boom)
        html = '<img src="file://a.png">'

        result = processor.rewrite(html, rtf(pict("\\pngblip", PNG_HEX, "a1")))

        assert result.html == html

    def test_extract_images(self):
        processor = PasteImageProcessor()
        images = processor.extract_images(rtf(pict("\\pngblip", PNG_HEX, "a1")))
        assert [image.type for image in images] == [ImageFormat.PNG]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class TestConfig:
    def test_defaults(self):
        config = PasteImageProcessor().config
        assert config.replaceable_src_prefixes == ("file://",)
        assert config.default_rtf_encoding == "cp1252"
        assert config.html_parser == "html.parser"
        assert config.fetch_timeout == 10.0

    def test_dict_config_with_type_names(self):
        processor = PasteImageProcessor({"supported_image_types": ["png"], "unknown": 1})
        assert processor.config.supported_image_types == frozenset({ImageFormat.PNG})

    def test_keyword_overrides_win(self):
        processor = PasteImageProcessor(
            PasteProcessorConfig(fetch_timeout=3.0),
            fetch_timeout=1.5,
            replaceable_src_prefixes="file:",
        )
        assert processor.config.fetch_timeout == 1.5
        assert processor.config.replaceable_src_prefixes == ("file:",)

    def test_restricted_types_report_unsupported(self):
        html = '<img src="file://a.jpg">'
        processor = create_paste_processor(supported_image_types=[ImageFormat.PNG])

        result = processor.rewrite(html, rtf(pict("\\jpegblip", JPEG_HEX, "b2")))

        assert result.html == html
        assert result.has_issue(PasteIssueType.UNSUPPORTED_IMAGE_TYPE)

    def test_custom_prefixes(self):
        html = '<img src="C:/tmp/a.png">'
        processor = PasteImageProcessor(replaceable_src_prefixes=("C:/",))

        result = processor.rewrite(html, rtf(pict("\\pngblip", PNG_HEX, "a1")))

        assert result.html == '<img src="' + PNG_DATA_URL + '">'

    def test_prefix_match_is_case_sensitive(self):
        html = '<img src="FILE://a.png">'
        processor = PasteImageProcessor()

        result = processor.rewrite(html, rtf(pict("\\pngblip", PNG_HEX, "a1")))

        assert result.html == html
        assert not processor.rtf_handler.is_replaceable("FILE://a.png")
        assert processor.rtf_handler.is_replaceable("file://a.png")

    def test_html_without_images_is_returned_early(self):
        html = "<p>no images</p>"
        processor = PasteImageProcessor()

        result = processor.rewrite(html, rtf(pict("\\pngblip", PNG_HEX, "a1")))

        assert result.html == html
        assert result.images == []

    def test_unknown_image_type_name(self):
        with pytest.raises(ValueError):
            PasteProcessorConfig.from_dict({"supported_image_types": ["tiff"]})
