import pytest

from knowledgequest.core.domain.utils import normalize_text, preview, strip_bom


class TestStripBom:
    """Unit tests for BOM removal."""

    @pytest.mark.unit
    def test_empty_text_returns_empty_string(self):
        assert strip_bom("") == ""
        assert strip_bom(None) == ""

    @pytest.mark.unit
    def test_removes_every_bom(self):
        assert strip_bom("\ufeffHello\ufeff world") == "Hello world"

    @pytest.mark.unit
    def test_other_characters_are_kept(self):
        """Subscripts, full-width letters and accents are not folded."""
        text = "H₂O Notes ＡＢＣ Café \ufffd"
        assert strip_bom(text) == text


class TestNormalizeText:
    @pytest.mark.unit
    def test_strips_whitespace_and_bom(self):
        assert normalize_text("  \ufeff Office hours \n") == "Office hours"

    @pytest.mark.unit
    def test_whitespace_only_becomes_empty(self):
        assert normalize_text(" \t\n ") == ""
        assert normalize_text(None) == ""

    @pytest.mark.unit
    def test_non_ascii_text_is_unchanged(self):
        assert normalize_text(" ＡＢＣ H₂O ") == "ＡＢＣ H₂O"


class TestPreview:
    @pytest.mark.unit
    def test_short_text_is_flattened(self):
        assert preview("line one\n\nline   two") == "line one line two"

    @pytest.mark.unit
    def test_long_text_is_truncated_with_ellipsis(self):
        text = "word " * 50

        result = preview(text, limit=20)

        assert len(result) <= 20
        assert result.endswith("…")

    @pytest.mark.unit
    def test_exact_limit_is_not_truncated(self):
        assert preview("a" * 10, limit=10) == "a" * 10
