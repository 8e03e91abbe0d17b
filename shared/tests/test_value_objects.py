"""Unit tests for the request value parsers."""

from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase

from shared.domain.errors import InvalidInput
from shared.domain.value_objects import (
    is_missing,
    parse_day,
    parse_positive_int,
    parse_price,
    parse_text_list,
)


class ParsePriceTests(SimpleTestCase):
    def test_absent_price(self):
        for value in (None, "", "  "):
            with self.subTest(value=value):
                self.assertIsNone(parse_price(value))

    def test_numbers_and_numeric_strings(self):
        self.assertEqual(parse_price(120), Decimal("120.00"))
        self.assertEqual(parse_price("99.999"), Decimal("100.00"))
        self.assertEqual(parse_price(0), Decimal("0.00"))

    def test_rejected_values(self):
        for value in (-1, "-0.5", "abc", True, "NaN", "Infinity", [1]):
            with self.subTest(value=value):
                with self.assertRaises(InvalidInput) as ctx:
                    parse_price(value)
                self.assertEqual(ctx.exception.code, "invalid_price")


class ParseValueTests(SimpleTestCase):
    def test_is_missing(self):
        self.assertTrue(is_missing(None))
        self.assertTrue(is_missing(" "))
        self.assertFalse(is_missing(0))
        self.assertFalse(is_missing("x"))

    def test_positive_int(self):
        self.assertEqual(parse_positive_int("3", "guests"), 3)
        self.assertEqual(parse_positive_int(None, "guests", default=1), 1)
        for value in (0, -2, 1.5, "two", False):
            with self.subTest(value=value):
                with self.assertRaises(InvalidInput):
                    parse_positive_int(value, "guests")

    def test_day(self):
        self.assertEqual(parse_day("2030-05-01", "checkIn"), date(2030, 5, 1))
        self.assertEqual(parse_day("2030-05-01T22:00:00.000Z", "checkIn"), date(2030, 5, 1))
        for value in ("2030-13-01", "soon", 20300501, None):
            with self.subTest(value=value):
                with self.assertRaises(InvalidInput) as ctx:
                    parse_day(value, "checkIn")
                self.assertEqual(ctx.exception.code, "invalid_date")

    def test_text_list(self):
        self.assertEqual(parse_text_list(None, "perks"), [])
        self.assertEqual(parse_text_list(["wifi"], "perks"), ["wifi"])
        with self.assertRaises(InvalidInput):
            parse_text_list("wifi", "perks")
