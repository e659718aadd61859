"""Tests for JSON syntax highlighting."""
import json
import re
from html import unescape

from poster_extractor.highlight import highlight
from poster_extractor.schemas import compile_schema
from poster_extractor.schemas.events import EVENTS

SPAN_RE = re.compile(r'<span class="(\w+)">(.*?)</span>', re.DOTALL)


def strip_markup(markup: str) -> str:
    return unescape(re.sub(r"</?span[^>]*>", "", markup))


def spans(markup: str) -> list:
    return SPAN_RE.findall(markup)


def test_highlight_token_classes():
    """Test each token gets the expected class."""
    markup = highlight({"a": 1, "b": None, "c": True})

    found = spans(markup)
    assert ("key", '"a":') in found
    assert ("number", "1") in found
    assert ("null", "null") in found
    assert ("boolean", "true") in found
    classes = [cls for cls, _ in found]
    assert classes.count("key") == 3
    assert classes.count("number") == 1
    assert classes.count("null") == 1
    assert classes.count("boolean") == 1


def test_highlight_string_values():
    """Test quoted strings not followed by a colon are strings."""
    markup = highlight({"bands": ["The Testers", "Null Pointers"]})

    assert ("key", '"bands":') in spans(markup)
    assert ("string", '"The Testers"') in spans(markup)
    assert ("string", '"Null Pointers"') in spans(markup)


def test_highlight_numbers():
    """Test signed, fractional and exponent numbers."""
    markup = highlight([-2, 3.5, 1e21, 0])

    numbers = [text for cls, text in spans(markup) if cls == "number"]
    assert numbers == ["-2", "3.5", "1e+21", "0"]


def test_highlight_keywords_inside_strings():
    """Test literals inside strings stay part of the string token."""
    markup = highlight({"note": "true or false, null, 42"})

    found = spans(markup)
    assert ("string", '"true or false, null, 42"') in found
    assert [cls for cls, _ in found] == ["key", "string"]


def test_highlight_escaped_quotes():
    """Test escaped quotes do not end a string token."""
    markup = highlight({"venue": 'The "Pit"'})

    assert ("string", '"The \\"Pit\\""') in spans(markup)


def test_highlight_preserves_text():
    """Test stripping markup gives back the serialized JSON."""
    value = {
        "events": [
            {"venue": "<Club> & Bar", "date": "2026-10-18T20:00", "isUpcoming": True},
        ],
        "count": -1.5e3,
        "missing": None,
        "unicode": "Café Ünïcode",
    }

    markup = highlight(value)

    assert strip_markup(markup) == json.dumps(value, indent=2, ensure_ascii=False)


def test_highlight_escapes_html():
    """Test markup from model output cannot inject tags."""
    markup = highlight({"band": "<script>alert(1)</script>"})

    assert "<script>" not in markup
    assert "&lt;script&gt;" in markup


def test_highlight_text_input_is_not_reserialized():
    """Test JSON text is highlighted as given."""
    text = '{"a":1}'

    markup = highlight(text)

    assert strip_markup(markup) == text
    assert ("key", '"a":') in spans(markup)


def test_highlight_json_schema():
    """Test a compiled schema round-trips through the highlighter."""
    schema = compile_schema(EVENTS)

    markup = highlight(schema)

    assert json.loads(strip_markup(markup)) == schema
    assert ("boolean", "false") in spans(markup)
