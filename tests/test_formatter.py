import math
import unittest

from jsonforge import JSONSyntaxError, format_text, format_value, minify, minify_text, parse

SAMPLES = [
    {
        "name": "John Doe",
        "age": 30,
        "isEmployed": True,
        "address": {"street": "123 Main St", "city": "New York", "country": "USA"},
        "hobbies": ["reading", "gaming", "hiking"],
        "projects": None,
    },
    {
        "status": "success",
        "code": 200,
        "data": {
            "users": [
                {"id": 1, "name": "Alice <admin>", "score": 9.5},
                {"id": 2, "name": "Bob \"B\" Smith", "score": -1.25e-7},
            ],
            "pagination": {},
            "tags": [],
        },
        "path": "C:\\temp\\new",
    },
    [1, [2, [3, [4, {}]]], "\u00e9\t\n", False],
    "just a string",
    0,
    None,
]

INDENTS = [1, 2, 3, 4, 5, 6, 7, 8, "tab"]


class FormatterTests(unittest.TestCase):
    def test_pretty_print_two_spaces(self):
        value = {"a": 1, "b": [1, 2], "c": {}}
        self.assertEqual(
            format_value(value, 2),
            '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ],\n  "c": {}\n}',
        )

    def test_pretty_print_tab(self):
        self.assertEqual(format_value({"a": []}, "tab"), '{\n\t"a": []\n}')

    def test_string_indent(self):
        self.assertEqual(format_value([1], "4"), "[\n    1\n]")

    def test_minify(self):
        self.assertEqual(minify(parse('{ "a" : [ 1 , 2 ] , "b" : { } }')), '{"a":[1,2],"b":{}}')

    def test_insertion_order_kept(self):
        self.assertEqual(minify({"z": 1, "a": 2}), '{"z":1,"a":2}')

    def test_canonical_numbers(self):
        self.assertEqual(minify([1.0, 1.5, 1e21, -0.0, 100, 2.5e-07]), "[1,1.5,1e+21,0,100,2.5e-07]")
        self.assertEqual(minify(parse("[1.50, 1E3, 10.0]")), "[1.5,1000,10]")

    def test_string_escaping(self):
        self.assertEqual(minify('a"b\\c\n\x01'), r'"a\"b\\c\n\u0001"')
        self.assertEqual(minify("\u00e9 <tag>"), '"\u00e9 <tag>"')

    def test_lone_surrogates_are_escaped(self):
        self.assertEqual(minify(parse(r'"\ud83d"')), r'"\ud83d"')
        self.assertEqual(format_value({"a": "\udc00"}, 2), '{\n  "a": "\\udc00"\n}')
        self.assertEqual(minify("\U0001F47D"), '"\U0001F47D"')

    def test_rejects_non_json_values(self):
        with self.assertRaises(ValueError):
            minify([math.nan])
        with self.assertRaises(ValueError):
            minify(math.inf)
        with self.assertRaises(TypeError):
            minify({1, 2})
        with self.assertRaises(TypeError):
            minify({1: "a"})

    def test_rejects_bad_indent(self):
        for indent in (0, 9, "spaces", True):
            with self.assertRaises(ValueError):
                format_value([], indent)

    def test_round_trip(self):
        for value in SAMPLES:
            for indent in INDENTS:
                text = format_value(value, indent)
                self.assertEqual(parse(text), value)
            self.assertEqual(parse(minify(value)), value)

    def test_round_trip_keeps_key_order(self):
        value = parse('{"b": {"y": 1, "x": 2}, "a": 0}')
        again = parse(format_value(value, 3))
        self.assertEqual(list(again), ["b", "a"])
        self.assertEqual(list(again["b"]), ["y", "x"])

    def test_idempotent(self):
        for value in SAMPLES:
            for indent in INDENTS:
                once = format_value(value, indent)
                self.assertEqual(format_value(parse(once), indent), once)

    def test_format_text(self):
        self.assertEqual(format_text('  {"a":[true]}\n', indent=2), '{\n  "a": [\n    true\n  ]\n}')
        with self.assertRaises(JSONSyntaxError):
            format_text('{"a":1,}')

    def test_minify_text_reports_lengths(self):
        result = minify_text('{ "a": 1 }')
        self.assertEqual(result.text, '{"a":1}')
        self.assertEqual(result.original_length, 10)
        self.assertEqual(result.minified_length, 7)


if __name__ == "__main__":
    unittest.main()
