"""Unit tests for <img> source discovery and rewriting."""

from xgen_clip2html.core.processor.html_helper import (
    HTMLPreprocessor,
    apply_blob_sources,
    extract_tags_from_html,
    replace_image_src,
)


class TestExtractTags:
    def test_sources_in_document_order(self):
        html = '<p><img src="a.png" alt=""><img width="3" src="file:///C:/b.png"></p>'
        assert extract_tags_from_html(html) == ["a.png", "file:///C:/b.png"]

    def test_all_source_kinds_are_listed(self):
        html = (
            '<img src="file://x.png"><img src="blob:https://app/1">'
            '<img src="data:image/png;base64,AA==">'
        )
        assert extract_tags_from_html(html) == [
            "file://x.png",
            "blob:https://app/1",
            "data:image/png;base64,AA==",
        ]

    def test_no_images(self):
        assert extract_tags_from_html("<p>text</p>") == []
        assert extract_tags_from_html("") == []


class TestReplaceImageSrc:
    def test_first_occurrence_only(self):
        html = '<img src="file://a.png"><img src="file://a.png">'
        result = replace_image_src(html, "file://a.png", "data:x")
        assert result == '<img src="data:x"><img src="file://a.png">'

    def test_windows_path_with_backslashes(self):
        src = "file:///C:\\Users\\me\\AppData\\Local\\Temp\\msohtmlclip1\\01\\clip_image001.png"
        html = '<img width="10" src="' + src + '" alt="">'
        result = replace_image_src(html, src, "data:image/png;base64,AA==")
        assert result == '<img width="10" src="data:image/png;base64,AA==" alt="">'

    def test_regex_metacharacters_in_path(self):
        src = "file:///tmp/a(1)+[b].png"
        html = '<img src="' + src + '">'
        assert replace_image_src(html, src, "data:y") == '<img src="data:y">'

    def test_vml_imagedata_is_not_touched(self):
        html = '<v:imagedata src="file://a.png"/><img src="file://a.png">'
        result = replace_image_src(html, "file://a.png", "data:z")
        assert result == '<v:imagedata src="file://a.png"/><img src="data:z">'

    def test_backreference_like_text_in_new_src(self):
        html = '<img src="file://a.png">'
        assert replace_image_src(html, "file://a.png", r"data:\1") == r'<img src="data:\1">'


class TestApplyBlobSources:
    def test_every_matching_image_is_replaced(self):
        html = '<p><img src="blob:https://app/1"><img src="blob:https://app/1"></p>'
        result = apply_blob_sources(html, {"blob:https://app/1": "data:image/png;base64,AA=="})
        assert result.count('src="data:image/png;base64,AA=="') == 2

    def test_unresolved_urls_are_left_as_is(self):
        html = '<img src="blob:https://app/1">'
        assert apply_blob_sources(html, {"blob:https://app/1": None}) == html

    def test_markup_is_not_reserialized(self):
        html = '<p>a&nbsp;b<br><img alt=x src=blob:x><!-- note --></p>'
        result = apply_blob_sources(html, {"blob:x": "data:image/png;base64,AA=="})
        assert result == '<p>a&nbsp;b<br><img alt=x src=data:image/png;base64,AA==><!-- note --></p>'

    def test_url_only_in_comment_is_not_replaced(self):
        html = '<p><!-- <img src="blob:x"> --></p>'
        assert apply_blob_sources(html, {"blob:x": "data:image/png;base64,AA=="}) == html

    def test_longer_url_with_same_prefix_is_untouched(self):
        html = '<img src="blob:x"><img src="blob:xy">'
        result = apply_blob_sources(html, {"blob:x": "data:image/png;base64,AA=="})
        assert result == '<img src="data:image/png;base64,AA=="><img src="blob:xy">'


class TestHTMLPreprocessor:
    def test_bytes_are_decoded(self):
        data = '<img src="file://ä.png">'.encode("utf-8")
        result = HTMLPreprocessor().preprocess(data)
        assert result.clean_content == '<img src="file://ä.png">'
        assert result.encoding == "utf-8"
        assert result.metadata["image_count"] == 1

    def test_text_is_kept_verbatim(self):
        html = '<img src="a.png" >'
        result = HTMLPreprocessor().preprocess(html)
        assert result.clean_content == html
        assert result.metadata["img_tags"] == ["a.png"]

    def test_validate(self):
        preprocessor = HTMLPreprocessor()
        assert preprocessor.validate("<IMG src='x'>")
        assert not preprocessor.validate("<p>no images</p>")
