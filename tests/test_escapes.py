import unittest

from html5tests import decode_escapes


class TestDecodeEscapes(unittest.TestCase):
    def test_plain_text_is_returned_unchanged(self) -> None:
        text = "Plain text with a \\ backslash"
        assert decode_escapes(text) is text

    def test_decodes_hex_escape(self) -> None:
        assert decode_escapes("Hello\\x20World") == "Hello World"

    def test_decodes_unicode_escape(self) -> None:
        assert decode_escapes("Hello\\u0020World") == "Hello World"

    def test_decodes_multiple_escapes(self) -> None:
        assert decode_escapes("\\x48\\x65\\x6C\\x6c\\x6F") == "Hello"

    def test_escape_at_end_of_text(self) -> None:
        assert decode_escapes("a\\x41") == "aA"
        assert decode_escapes("a\\u00e9") == "a\u00e9"

    def test_surrogate_becomes_replacement_character(self) -> None:
        assert decode_escapes("\\uD800") == "\ufffd"
        assert decode_escapes("Test\\uDFFFSurrogate") == "Test\ufffdSurrogate"

    def test_code_points_next_to_surrogate_range_are_kept(self) -> None:
        assert decode_escapes("\\uD7FF") == "\ud7ff"
        assert decode_escapes("\\uE000") == "\ue000"

    def test_hex_escape_covers_latin1_range(self) -> None:
        assert decode_escapes("\\x00\\xff") == "\x00\xff"

    def test_invalid_hex_digits_are_left_verbatim(self) -> None:
        assert decode_escapes("\\xZZ") == "\\xZZ"
        assert decode_escapes("\\u12G4") == "\\u12G4"

    def test_short_escape_is_left_verbatim(self) -> None:
        assert decode_escapes("\\x4") == "\\x4"
        assert decode_escapes("\\u004") == "\\u004"

    def test_no_partial_consumption(self) -> None:
        # Scanning resumes right after the backslash, so the next escape still decodes
        assert decode_escapes("\\x\\x41") == "\\xA"

    def test_backslash_before_backslash(self) -> None:
        assert decode_escapes("\\\\x41") == "\\A"

    def test_other_backslash_sequences_pass_through(self) -> None:
        assert decode_escapes("\\n\\t\\x41") == "\\n\\tA"
