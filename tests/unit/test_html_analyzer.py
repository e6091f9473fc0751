import pytest
from app.fetch.html_analyzer import Span, find_span, find_spans, inner_text, paragraphs_to_lines, strip_tags

class TestFindSpans:
    """Unit tests for the start/end marker search"""

    def test_single_span_keeps_start_marker(self):
        """Test single span keeps the start marker"""
        assert find_spans("xx [a] yy [b]", "[", "]") == [Span(offset=3, text="[a")]

    def test_exclude_start_marker(self):
        """Test span without the start marker"""
        assert find_spans("xx <b>a</b>", "<b>", "</b>", include_start=False) == [Span(offset=3, text="a")]

    def test_repeated_spans(self):
        """Test repeated spans with offsets"""
        spans = find_spans("<i>a</i> - <i>b</i>", "<i>", "</i>", repeat=True, include_start=False)
        assert [s.text for s in spans] == ["a", "b"]
        assert [s.offset for s in spans] == [0, 11]

    def test_end_searched_after_start(self):
        """An end marker in front of the start marker does not close the span"""
        assert find_span("END start body END", "start", "END").text == "start body "

    def test_missing_start(self):
        """Test missing start marker"""
        assert find_spans("body END", "start", "END") == []
        assert find_span("body END", "start", "END") is None

    def test_missing_end(self):
        """Test missing end marker"""
        assert find_spans("start body", "start", "END") == []

    def test_unclosed_last_span_is_dropped(self):
        """Test unclosed trailing span is dropped"""
        spans = find_spans("(a) (b) (c", "(", ")", repeat=True, include_start=False)
        assert [s.text for s in spans] == ["a", "b"]

    def test_from_offset(self):
        """Test search from an offset"""
        spans = find_spans("(a) (b)", "(", ")", include_start=False, from_offset=2)
        assert spans == [Span(offset=4, text="b")]

    @pytest.mark.parametrize("start,end", [("", ")"), ("(", ""), ("", "")])
    def test_empty_marker_rejected(self, start, end):
        """Test empty markers are rejected"""
        with pytest.raises(ValueError):
            find_spans("(a) (b)", start, end, repeat=True)

class TestMarkupHelpers:
    """Unit tests for markup stripping"""

    def test_strip_tags_decodes_entities(self):
        """Test HTML entities are decoded"""
        assert strip_tags("<p>Gul&aacute;&scaron; &amp; knedľa</p>") == "Guláš & knedľa"

    def test_strip_tags_keeps_layout(self):
        """Test line breaks survive tag stripping"""
        assert strip_tags("<h2>PONDELOK</h2>\n<p>Polievka</p>") == "PONDELOK\nPolievka"

    def test_paragraphs_to_lines(self):
        """Test paragraphs become lines"""
        html = '<div><p>1. <strong>Guláš</strong></p><p>2. Rizoto</p></div>'
        assert paragraphs_to_lines(html) == "1. Guláš\n2. Rizoto\n"

    def test_inner_text(self):
        """Test inner text is single spaced"""
        assert inner_text("  <span>150</span>  <b>Rizoto</b> ") == "150 Rizoto"
