import unittest

from jsonforge import JSONSyntaxError, Span, SpanClass, format_value, highlight, minify, to_html
from jsonforge.highlighter import escape_html

from .test_formatter import SAMPLES


def _pairs(spans):
    return [(span.text, span.kind) for span in spans]


class HighlighterTests(unittest.TestCase):
    def test_classifies_every_token(self):
        spans = highlight('{"a": [1, true, null, "x"]}')
        P, W = SpanClass.PUNCTUATION, SpanClass.WHITESPACE
        self.assertEqual(_pairs(spans), [
            ("{", P),
            ('"a"', SpanClass.KEY),
            (":", P),
            (" ", W),
            ("[", P),
            ("1", SpanClass.NUMBER),
            (",", P),
            (" ", W),
            ("true", SpanClass.BOOLEAN),
            (",", P),
            (" ", W),
            ("null", SpanClass.NULL),
            (",", P),
            (" ", W),
            ('"x"', SpanClass.STRING),
            ("]", P),
            ("}", P),
        ])

    def test_key_with_space_before_colon(self):
        spans = highlight('{"a" : false}')
        self.assertEqual(_pairs(spans)[:4], [
            ("{", SpanClass.PUNCTUATION),
            ('"a"', SpanClass.KEY),
            (" ", SpanClass.WHITESPACE),
            (":", SpanClass.PUNCTUATION),
        ])

    def test_numbers_and_escaped_strings(self):
        spans = highlight('[-1.5e3, "a\\"b"]')
        self.assertIn(("-1.5e3", SpanClass.NUMBER), _pairs(spans))
        self.assertIn(('"a\\"b"', SpanClass.STRING), _pairs(spans))

    def test_string_values_are_not_keys(self):
        spans = highlight('["a", "b"]')
        self.assertEqual([s.kind for s in spans if s.text.startswith('"')], [SpanClass.STRING, SpanClass.STRING])

    def test_newlines_are_separate_spans(self):
        spans = highlight(format_value({"a": 1}, 2))
        self.assertEqual([s.text for s in spans], ["{", "\n", "  ", '"a"', ":", " ", "1", "\n", "}"])
        self.assertEqual(sum(1 for s in spans if s.is_line_break), 2)

    def test_coverage(self):
        for value in SAMPLES:
            for text in (format_value(value, 2), format_value(value, "tab"), minify(value)):
                spans = highlight(text)
                self.assertEqual("".join(s.text for s in spans), escape_html(text))
                self.assertTrue(all(s.text for s in spans))

    def test_html_is_escaped_inside_string_span(self):
        spans = highlight(format_value({"html": "<script>&"}, 2))
        strings = [s for s in spans if s.kind is SpanClass.STRING]
        self.assertEqual(strings[0].text, '"&lt;script&gt;&amp;"')
        self.assertFalse(any("<" in s.text or ">" in s.text for s in spans))

    def test_html_in_key(self):
        spans = highlight('{"<k>": 1}')
        self.assertEqual(spans[1], Span(text='"&lt;k&gt;"', kind=SpanClass.KEY))

    def test_invalid_input_fails_fast(self):
        with self.assertRaises(JSONSyntaxError):
            highlight("{a:1}")
        with self.assertRaises(JSONSyntaxError):
            highlight("")

    def test_span_serializes_with_class_alias(self):
        span = Span(text="1", kind=SpanClass.NUMBER)
        self.assertEqual(span.model_dump(by_alias=True, mode="json"), {"text": "1", "class": "number"})

    def test_to_html(self):
        self.assertEqual(
            to_html(highlight('{"a": 1}')),
            '<span class="json-punctuation">{</span>'
            '<span class="json-key">"a"</span>'
            '<span class="json-punctuation">:</span>'
            '&nbsp;'
            '<span class="json-number">1</span>'
            '<span class="json-punctuation">}</span>',
        )

    def test_to_html_line_breaks(self):
        html: str = to_html(highlight('[\n  "a b"\n]'))
        self.assertEqual(html.count("<br>"), 2)
        self.assertIn('<span class="json-string">"a&nbsp;b"</span>', html)
        self.assertIn("<br>&nbsp;&nbsp;<span", html)


if __name__ == "__main__":
    unittest.main()
