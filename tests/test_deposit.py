import unittest
from decimal import Decimal

from pycalc import (
    calculate_deposit_by_initial,
    calculate_deposit_by_target,
    calculate_savings_by_initial,
    calculate_savings_by_target,
)

class TestDeposit(unittest.TestCase):

    def test_deposit_by_initial(self):
        result = calculate_deposit_by_initial(10000000, 1, 0.03)
        self.assertEqual(result.total_savings, Decimal('10300000'))
        self.assertEqual(result.interest_by_tax_type.regular, Decimal('253800'))
        self.assertEqual(result.interest_by_tax_type.preferential, Decimal('271500'))
        self.assertEqual(result.interest_by_tax_type.tax_free, Decimal('300000'))

    def test_deposit_by_target(self):
        result = calculate_deposit_by_target(10300000, 1, 0.03)
        self.assertEqual(result.initial_deposit, Decimal('10000000'))
        self.assertEqual(result.savings_by_tax_type.regular, Decimal('10253800'))
        self.assertEqual(result.savings_by_tax_type.preferential, Decimal('10271500'))
        self.assertEqual(result.savings_by_tax_type.tax_free, Decimal('10300000'))

class TestSavings(unittest.TestCase):

    def test_compound_savings_by_initial(self):
        result = calculate_savings_by_initial(1000000, 1, 0.12, True)
        self.assertEqual(result.total_savings, Decimal('1126825'))
        self.assertEqual(result.interest_by_tax_type.regular, Decimal('107294'))
        self.assertEqual(result.interest_by_tax_type.preferential, Decimal('114777'))
        self.assertEqual(result.interest_by_tax_type.tax_free, Decimal('126825'))

    def test_simple_savings_matches_deposit(self):
        self.assertEqual(
            calculate_savings_by_initial(10000000, 1, 0.03, False),
            calculate_deposit_by_initial(10000000, 1, 0.03),
        )
        self.assertEqual(
            calculate_savings_by_target(10300000, 1, 0.03, False),
            calculate_deposit_by_target(10300000, 1, 0.03),
        )

    def test_compound_savings_by_target(self):
        result = calculate_savings_by_target(1000000 * 1.01 ** 12, 1, 0.12, True)
        self.assertEqual(result.initial_deposit, Decimal('1000000'))
        self.assertEqual(result.savings_by_tax_type.tax_free, Decimal('1126825'))

    def test_compound_flag_must_be_boolean(self):
        with self.assertRaises(TypeError):
            calculate_savings_by_initial(1000000, 1, 0.12, 'yes')

if __name__ == '__main__':
    unittest.main()
