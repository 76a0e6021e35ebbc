from django.test import SimpleTestCase

from identity.services.normalize import mask, digits_only, strip_whitespace, require_str

class NormalizeTest(SimpleTestCase):
    def test_mask(self):
        self.assertEqual(mask("8001015009087", 6), "800101*******")
        self.assertEqual(mask("8001015009087", 2, 4), "80****5009087")
        self.assertEqual(mask("AB123456", -3), "AB123***")
        self.assertEqual(mask("AB", -5), "**")
        self.assertEqual(mask("", 2), "")
        self.assertEqual(mask("abc", 1, 10, "#"), "a##")

    def test_digits_only(self):
        self.assertEqual(digits_only("800101 5009-087"), "8001015009087")
        self.assertEqual(digits_only("abc"), "")

    def test_strip(self):
        self.assertEqual(strip_whitespace("  x \n"), "x")

    def test_require_str(self):
        self.assertEqual(require_str("a"), "a")
        with self.assertRaises(TypeError):
            require_str(None, "raw")
        with self.assertRaises(TypeError):
            digits_only(123)
