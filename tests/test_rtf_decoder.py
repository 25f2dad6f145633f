"""Unit tests for RTF payload decoding and preprocessing."""

from conftest import PNG_HEX, pict
from xgen_clip2html.core.processor.rtf_helper import (
    RTFPreprocessor,
    decode_content,
    detect_encoding,
)


class TestDetectEncoding:
    def test_ansicpg_is_honoured(self):
        assert detect_encoding(b"{\\rtf1\\ansi\\ansicpg1251 x}") == "cp1251"

    def test_unknown_codepage_falls_back_to_cp1252(self):
        assert detect_encoding(b"{\\rtf1\\ansi\\ansicpg99999 x}") == "cp1252"

    def test_default_when_not_declared(self):
        assert detect_encoding(b"{\\rtf1 x}", "cp949") == "cp949"


class TestDecodeContent:
    def test_str_is_returned_unchanged(self):
        assert decode_content("{\\rtf1 é}") == "{\\rtf1 é}"

    def test_declared_codepage(self):
        data = "{\\rtf1\\ansicpg1251 Привет}".encode("cp1251")
        assert decode_content(data) == "{\\rtf1\\ansicpg1251 Привет}"

    def test_never_fails(self):
        data = b"{\\rtf1\\ansicpg65001 \xff\xfe\x81}"
        assert isinstance(decode_content(data), str)


class TestRTFPreprocessor:
    def test_excluded_groups_removed(self):
        payload = "{\\rtf1{\\header h}{\\nonshppict " + pict("\\wmetafile8", "00") + "}body}"
        result = RTFPreprocessor().preprocess(payload)
        assert result.clean_content == "{\\rtf1body}"
        assert result.metadata["is_rtf"] is True
        assert result.metadata["removed_chars"] > 0

    def test_bytes_payload(self):
        payload = ("{\\rtf1\\ansi\\ansicpg1252 " + pict("\\pngblip", PNG_HEX, "a1") + "}").encode("cp1252")
        result = RTFPreprocessor().preprocess(payload)
        assert result.encoding == "cp1252"
        assert PNG_HEX in result.clean_content

    def test_none_payload(self):
        assert RTFPreprocessor().preprocess(None).clean_content == ""

    def test_validate(self):
        preprocessor = RTFPreprocessor()
        assert preprocessor.validate(b"  {\\rtf1 x}")
        assert not preprocessor.validate("<html>")
