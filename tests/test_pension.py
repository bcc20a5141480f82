import unittest
from decimal import Decimal

from pycalc import (
    calculate_retirement_fund,
    calculate_monthly_savings,
    calculate_monthly_pension,
    calculate_lump_sum,
)
from pycalc._rounding import quantize

class TestRetirementFund(unittest.TestCase):

    def test_without_return(self):
        result = calculate_retirement_fund(30, 1000000, average_annual_return=0)
        self.assertEqual(result.total_required_amount, Decimal('360000000'))
        self.assertEqual(result.retirement_start_age, 60)
        self.assertEqual(result.retirement_period, 30)
        self.assertEqual(result.retirement_end_age, 90)
        self.assertEqual(result.monthly_pension, 1000000)

    def test_discounted_to_current_age(self):
        result = calculate_retirement_fund(30, 1000000)
        self.assertEqual(result.total_required_amount, quantize(360000000 / 1.05 ** 30))
        self.assertLess(result.total_required_amount, Decimal('360000000'))

    def test_custom_pension_period(self):
        result = calculate_retirement_fund(40, 2000000, pension_start_age=65, pension_duration=20, average_annual_return=0)
        self.assertEqual(result.total_required_amount, Decimal('480000000'))
        self.assertEqual(result.retirement_end_age, 85)

class TestSavingsProjections(unittest.TestCase):

    def test_monthly_savings_without_return(self):
        result = calculate_monthly_savings(40, 10000000, 1000000, 10, 0)
        self.assertEqual(result.saving_end_age, 50)
        self.assertEqual(result.total_amount_at_retirement, Decimal('130000000'))
        self.assertEqual(result.monthly_pension, Decimal('361111'))
        self.assertEqual(result.pension_start_age, 60)
        self.assertEqual(result.pension_end_age, 90)

    def test_monthly_savings_with_return(self):
        without_return = calculate_monthly_savings(40, 10000000, 1000000, 10, 0)
        with_return = calculate_monthly_savings(40, 10000000, 1000000, 10, 0.05)
        self.assertGreater(with_return.total_amount_at_retirement, without_return.total_amount_at_retirement)

    def test_monthly_pension_saves_until_sixty(self):
        result = calculate_monthly_pension(50, 10000000, 1000000, 5, 0)
        self.assertAlmostEqual(result.total_amount_at_retirement, 130000000)
        self.assertAlmostEqual(result.monthly_pension, 130000000 / 360)
        self.assertEqual(result.saving_period, 5)

    def test_lump_sum(self):
        result = calculate_lump_sum(59, 1000, 1, 0.12)
        expected = 1000 * (1.01 ** 12 - 1) / 0.01
        self.assertAlmostEqual(result.total_amount_at_retirement, expected, places=4)
        self.assertAlmostEqual(result.total_amount_at_retirement, 12682.503, places=2)
        self.assertAlmostEqual(result.monthly_pension, result.total_amount_at_retirement / 360)

if __name__ == '__main__':
    unittest.main()
