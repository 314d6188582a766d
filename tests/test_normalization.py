import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats import normalize  # noqa: E402
from resume_ats.normalize import (  # noqa: E402
    is_bullet_like,
    non_empty_lines,
    normalize_text,
    split_blocks,
    strip_bullet_prefix,
)


class NormalizationTests(unittest.TestCase):
    def test_line_endings_are_unified(self):
        self.assertEqual(normalize_text("a\r\nb\rc"), "a\nb\nc")

    def test_inline_whitespace_collapses(self):
        self.assertEqual(normalize_text("Python  \t Developer"), "Python Developer")

    def test_blank_line_runs_collapse_to_one(self):
        self.assertEqual(normalize_text("a\n\n\n\nb"), "a\n\nb")

    def test_whitespace_only_lines_do_not_form_runs(self):
        self.assertEqual(normalize_text("a\n  \n \t\n\nb"), "a\n\nb")

    def test_outer_whitespace_is_trimmed(self):
        self.assertEqual(normalize_text("   hello world  \n\n"), "hello world")

    def test_empty_input(self):
        self.assertEqual(normalize_text(""), "")
        self.assertEqual(normalize_text(None), "")

    def test_idempotent(self):
        samples = [
            "Jane Doe\r\n\r\n\r\n  Skills :  Python ,  Go\t\t\n",
            "a\n \n \n\n\nb   c\r\rd",
            "  \n\n\n  ",
            "- bullet one\n\t- bullet two\n\n\n\nExperience",
        ]
        for sample in samples:
            once = normalize_text(sample)
            self.assertEqual(normalize_text(once), once)

    def test_package_alias(self):
        self.assertIs(normalize, normalize_text)


class LineHelperTests(unittest.TestCase):
    def test_non_empty_lines(self):
        self.assertEqual(non_empty_lines("one\n\n  two  \n"), ["one", "two"])

    def test_split_blocks(self):
        self.assertEqual(split_blocks("a\nb\n\nc\n\n\n"), ["a\nb", "c"])

    def test_bullet_helpers(self):
        self.assertTrue(is_bullet_like("- Shipped things"))
        self.assertTrue(is_bullet_like("• Shipped things"))
        self.assertFalse(is_bullet_like("Shipped things"))
        self.assertEqual(strip_bullet_prefix("*   Shipped - fast"), "Shipped - fast")


if __name__ == "__main__":
    unittest.main()
