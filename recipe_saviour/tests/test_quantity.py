import unittest
from recipe_saviour.logic.ingredients.quantity import format_quantity, parse_amount, parse_quantity


class TestParseQuantity(unittest.TestCase):

    def test_slash_fraction_with_unit(self):
        self.assertEqual(parse_quantity("1/2 cup flour"), (0.5, "cup"))

    def test_range_is_averaged(self):
        self.assertEqual(parse_quantity("2-3 tomatoes"), (2.5, None))
        self.assertEqual(parse_quantity("2–3 tomatoes"), (2.5, None))

    def test_mixed_vulgar_fraction(self):
        self.assertEqual(parse_quantity("1½ tsp salt"), (1.5, "tsp"))

    def test_no_quantity(self):
        self.assertEqual(parse_quantity("salt"), (None, None))
        self.assertEqual(parse_quantity(""), (None, None))

    def test_unit_without_quantity(self):
        self.assertEqual(parse_quantity("a cup of flour"), (None, "cup"))

    def test_unit_punctuation_and_case(self):
        self.assertEqual(parse_quantity("2 Tbsp. olive oil"), (2.0, "tbsp"))
        self.assertEqual(parse_quantity("1.5 kg beef"), (1.5, "kg"))

    def test_unknown_second_token_is_not_a_unit(self):
        self.assertEqual(parse_quantity("3 eggs"), (3.0, None))


class TestParseAmount(unittest.TestCase):

    def test_glyphs(self):
        self.assertEqual(parse_amount("½"), 0.5)
        self.assertEqual(parse_amount("¾"), 0.75)
        self.assertAlmostEqual(parse_amount("⅓"), 1 / 3)
        self.assertAlmostEqual(parse_amount("2⅔"), 2 + 2 / 3)

    def test_zero_denominator(self):
        self.assertIsNone(parse_amount("1/0"))

    def test_not_a_number(self):
        self.assertIsNone(parse_amount("some"))
        self.assertIsNone(parse_amount("1/2/3"))


class TestFormatQuantity(unittest.TestCase):

    def test_whole_numbers_have_no_decimals(self):
        self.assertEqual(format_quantity(300.0), "300")
        self.assertEqual(format_quantity(3), "3")

    def test_fractions_to_one_decimal(self):
        self.assertEqual(format_quantity(2.5), "2.5")
        self.assertEqual(format_quantity(1 / 3), "0.3")


if __name__ == '__main__':
    unittest.main()
