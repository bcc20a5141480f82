import unittest
import datetime as dt
from decimal import Decimal

from pycalc import (
    calculate_parental_leave_pay,
    calculate_unemployment_benefit,
    calculate_severance_pay,
)

class TestParentalLeavePay(unittest.TestCase):

    def test_without_spouse(self):
        result = calculate_parental_leave_pay(12, 3000000)
        self.assertEqual(len(result.payments), 12)
        first, seventh = result.payments[0], result.payments[6]
        self.assertAlmostEqual(first.general_leave_payment, 1875000)
        self.assertAlmostEqual(first.retention_payment, 375000)
        self.assertIsNone(first.bonus_leave_payment)
        self.assertAlmostEqual(seventh.general_leave_payment, 75000)
        self.assertEqual(seventh.retention_payment, 0)
        self.assertAlmostEqual(seventh.extended_leave_payment, 1500000)
        self.assertEqual(result.total_general_leave_payment, Decimal('9450000'))
        self.assertEqual(result.total_bonus_leave_payment, Decimal('7560000'))
        self.assertEqual(result.total_extended_leave_payment, Decimal('18000000'))

    def test_with_spouse(self):
        result = calculate_parental_leave_pay(4, 3000000, leave_days=15, spouse_leave_months=2)
        self.assertEqual(len(result.payments), 5)
        self.assertEqual(result.payments[0].bonus_leave_payment, 2500000)
        self.assertEqual(result.payments[1].bonus_leave_payment, 2500000)
        self.assertIsNone(result.payments[2].bonus_leave_payment)
        self.assertEqual(result.total_bonus_leave_payment, Decimal('8600000'))

    def test_low_wage(self):
        result = calculate_parental_leave_pay(1, 1000000)
        self.assertAlmostEqual(result.payments[0].extended_leave_payment, 1000000)
        self.assertEqual(result.total_general_leave_payment, Decimal('800000'))

    def test_rejects_fractional_months(self):
        with self.assertRaises(TypeError):
            calculate_parental_leave_pay(1.5, 3000000)

class TestUnemploymentBenefit(unittest.TestCase):

    def test_minimum_floor(self):
        result = calculate_unemployment_benefit(35, False, 24, [3000000, 3000000, 3000000], 30, 8)
        self.assertEqual(result.daily_benefit_amount, Decimal('61568'))
        self.assertEqual(result.expected_payment_days, 150)
        self.assertEqual(result.total_expected_amount, Decimal('9235200'))

    def test_daily_cap_and_disability(self):
        result = calculate_unemployment_benefit(55, True, 72, [9000000, 9000000, 9000000], 30, 8)
        self.assertEqual(result.daily_benefit_amount, Decimal('66360'))
        self.assertEqual(result.expected_payment_days, 270)
        self.assertEqual(result.total_expected_amount, Decimal('17917200'))

    def test_payment_days(self):
        salaries = [4000000, 4000000, 4000000]
        self.assertEqual(calculate_unemployment_benefit(55, False, 10, salaries, 30, 8).expected_payment_days, 120)
        self.assertEqual(calculate_unemployment_benefit(45, False, 40, salaries, 30, 8).expected_payment_days, 180)
        self.assertEqual(calculate_unemployment_benefit(50, False, 40, salaries, 30, 8).expected_payment_days, 210)
        self.assertEqual(calculate_unemployment_benefit(30, False, 60, salaries, 30, 8).expected_payment_days, 210)

class TestSeverancePay(unittest.TestCase):

    def test_severance_pay(self):
        result = calculate_severance_pay('2020-01-01', '2023-01-01', [3000000, 3000000, 3000000])
        self.assertEqual(result.service_days, 1096)
        self.assertEqual(result.years_of_service, 3)
        self.assertEqual(result.average_daily_wage, Decimal('100000'))
        self.assertEqual(result.expected_severance_pay, Decimal('9008219'))

    def test_bonus_and_leave_allowance(self):
        result = calculate_severance_pay(
            dt.date(2020, 1, 1),
            dt.datetime(2023, 1, 1, 18, 0),
            [3000000, 3000000, 3000000],
            annual_bonus=1200000,
            annual_leave_allowance=600000,
        )
        self.assertEqual(result.service_days, 1096)
        self.assertEqual(result.average_daily_wage, Decimal('101667'))

    def test_end_before_start(self):
        with self.assertRaises(ValueError):
            calculate_severance_pay('2023-01-01', '2020-01-01', [3000000, 3000000, 3000000])

if __name__ == '__main__':
    unittest.main()
