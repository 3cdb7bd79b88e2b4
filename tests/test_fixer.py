import unittest

from jsonforge import FIX_RULES, ErrorKind, JSONSyntaxError, fix, fix_and_format, parse
from jsonforge.fixer import apply_rules


class FixerTests(unittest.TestCase):
    def test_trailing_comma_and_bare_key(self):
        fixed: str = fix("{a:1,}")
        self.assertEqual(fixed, '{"a":1}')
        self.assertEqual(parse(fixed), {"a": 1})

    def test_trailing_comma_in_array(self):
        self.assertEqual(fix("[1, 2, ]"), "[1, 2]")

    def test_nested_repairs(self):
        fixed = fix("{outer: {inner: [1,2,],},}")
        self.assertEqual(parse(fixed), {"outer": {"inner": [1, 2]}})

    def test_multiline_keys(self):
        fixed = fix("{\n  name: \"x\",\n  count : 2,\n}")
        self.assertEqual(parse(fixed), {"name": "x", "count": 2})

    def test_valid_input_is_untouched(self):
        self.assertEqual(fix('{"a": 1, "b": [true]}'), '{"a": 1, "b": [true]}')

    def test_input_is_stripped(self):
        self.assertEqual(fix("  [1,]\n"), "[1]")

    def test_rule_order(self):
        self.assertEqual([rule.name for rule in FIX_RULES], ["trailing-comma", "quote-keys"])

    def test_rules_run_once(self):
        # The comma left behind by the first rule's match is not revisited
        self.assertEqual(apply_rules("[1,,]"), "[1,]")
        with self.assertRaises(JSONSyntaxError) as ctx:
            fix("[1,,]")
        self.assertEqual(ctx.exception.kind, ErrorKind.UNFIXABLE)

    def test_unfixable(self):
        with self.assertRaises(JSONSyntaxError) as ctx:
            fix('{"a": }')
        error = ctx.exception.error
        self.assertEqual(error.kind, ErrorKind.UNFIXABLE)
        self.assertEqual(error.offset, 6)
        self.assertTrue(error.message.startswith("Unable to automatically fix the JSON"))

    def test_unfixable_offset_points_into_rewritten_text(self):
        with self.assertRaises(JSONSyntaxError) as ctx:
            fix("{a:1, b:}")
        error = ctx.exception.error
        self.assertEqual(error.offset, 12)
        self.assertIn('"b":}', error.context_window)

    def test_rewrites_string_content_that_looks_like_a_trailing_comma(self):
        self.assertEqual(fix('{"k": "a,]"}'), '{"k": "a]"}')

    def test_bare_key_pattern_inside_string_breaks_the_document(self):
        with self.assertRaises(JSONSyntaxError) as ctx:
            fix('{"k": "x,y:1"}')
        self.assertEqual(ctx.exception.kind, ErrorKind.UNFIXABLE)

    def test_only_ascii_bare_keys_are_quoted(self):
        self.assertEqual(apply_rules("{\u00e9:1}"), "{\u00e9:1}")
        with self.assertRaises(JSONSyntaxError) as ctx:
            fix("{\u00e9:1}")
        self.assertEqual(ctx.exception.kind, ErrorKind.UNFIXABLE)
        self.assertEqual(fix("{_k9:1}"), '{"_k9":1}')

    def test_input_too_large_is_not_unfixable(self):
        with self.assertRaises(JSONSyntaxError) as ctx:
            fix("{a:1,}", max_input_size=3)
        self.assertEqual(ctx.exception.kind, ErrorKind.INPUT_TOO_LARGE)

    def test_fix_and_format(self):
        self.assertEqual(fix_and_format("{a:1,}", indent=2), '{\n  "a": 1\n}')
        self.assertEqual(fix_and_format("{b:[],}", indent="tab"), '{\n\t"b": []\n}')


if __name__ == "__main__":
    unittest.main()
