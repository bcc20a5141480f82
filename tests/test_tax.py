import unittest
from decimal import Decimal

from pycalc import (
    AssetType,
    CarType,
    PensionType,
    calculate_income_tax,
    calculate_social_insurance,
    calculate_corporation_tax,
    calculate_composite_income_tax,
    calculate_transfer_income_tax,
    calculate_retirement_income_tax,
    calculate_pension_income_tax,
    calculate_financial_income_tax,
    calculate_interest_income_tax,
    calculate_dividend_income_tax,
    calculate_business_income_tax,
    calculate_car_tax,
)
from pycalc.tax import progressive_tax

class TestProgressiveTax(unittest.TestCase):

    def test_brackets(self):
        self.assertAlmostEqual(progressive_tax(10000000), 600000)
        self.assertAlmostEqual(progressive_tax(12000000), 720000)
        self.assertAlmostEqual(progressive_tax(48500000), 6420000)
        self.assertAlmostEqual(progressive_tax(90000000), 16600000)

    def test_negative_base(self):
        self.assertEqual(progressive_tax(-500000), 0)

class TestIncomeTaxes(unittest.TestCase):

    def test_income_tax(self):
        result = calculate_income_tax(50000000)
        self.assertEqual(result.tax_amount, Decimal('6420000'))
        self.assertEqual(result.tax_name, 'earned income tax')

    def test_income_tax_deductions(self):
        result = calculate_income_tax(30000000, dependents=2, children_under_20=1)
        self.assertEqual(result.tax_amount, Decimal('2745000'))

    def test_income_tax_never_negative(self):
        self.assertEqual(calculate_income_tax(1000000).tax_amount, Decimal('0'))

    def test_composite_income_tax(self):
        self.assertEqual(calculate_composite_income_tax(20000000, 5000000).tax_amount, Decimal('1170000'))

    def test_business_income_tax(self):
        self.assertEqual(calculate_business_income_tax(100000000, 10000000).tax_amount, Decimal('16600000'))

    def test_retirement_income_tax(self):
        self.assertEqual(calculate_retirement_income_tax(100000000, 10).tax_amount, Decimal('4400000'))

    def test_pension_income_tax(self):
        self.assertEqual(calculate_pension_income_tax(10000000, PensionType.NATIONAL).tax_amount, Decimal('300000'))
        self.assertEqual(calculate_pension_income_tax(10000000, 'civil-service').tax_amount, Decimal('500000'))

    def test_financial_income_tax(self):
        self.assertEqual(calculate_financial_income_tax(30000000).tax_amount, Decimal('4500000'))
        self.assertEqual(calculate_financial_income_tax(10000000).tax_amount, Decimal('1400000'))

    def test_flat_rate_taxes(self):
        self.assertEqual(calculate_interest_income_tax(1000000).tax_amount, Decimal('150000'))
        self.assertEqual(calculate_dividend_income_tax(1000000).tax_amount, Decimal('150000'))

class TestCorporationTax(unittest.TestCase):

    def test_middle_bracket(self):
        self.assertEqual(calculate_corporation_tax(300000000).tax_amount, Decimal('40000000'))

    def test_top_bracket(self):
        self.assertEqual(calculate_corporation_tax(30000000000).tax_amount, Decimal('6180000000'))

class TestTransferIncomeTax(unittest.TestCase):

    def test_rates_by_asset(self):
        args = (500000000, 300000000, 20000000)
        self.assertEqual(calculate_transfer_income_tax(*args, 12, AssetType.HOUSE).tax_amount, Decimal('18000000'))
        self.assertEqual(calculate_transfer_income_tax(*args, 5, 'house').tax_amount, Decimal('36000000'))
        self.assertEqual(calculate_transfer_income_tax(*args, 12, 'land').tax_amount, Decimal('54000000'))

    def test_unknown_asset(self):
        with self.assertRaises(ValueError):
            calculate_transfer_income_tax(500000000, 300000000, 0, 3, 'boat')

class TestSocialInsurance(unittest.TestCase):

    def test_social_insurance(self):
        self.assertEqual(calculate_social_insurance(3000000).tax_amount, Decimal('281399'))

    def test_pension_cap(self):
        self.assertEqual(calculate_social_insurance(10000000).tax_amount, Decimal('736847'))

class TestCarTax(unittest.TestCase):

    def test_passenger_car(self):
        result = calculate_car_tax(2000, 5, CarType.PASSENGER)
        self.assertEqual(result.base_tax, Decimal('400000'))
        self.assertEqual(result.age_discount, Decimal('60000'))
        self.assertEqual(result.total_tax, Decimal('340000'))

    def test_small_new_car(self):
        result = calculate_car_tax(1000, 1, 'passenger')
        self.assertEqual(result.base_tax, Decimal('80000'))
        self.assertEqual(result.age_discount, Decimal('0'))
        self.assertEqual(result.total_tax, Decimal('80000'))

    def test_discount_cap(self):
        result = calculate_car_tax(3000, 20, CarType.VAN)
        self.assertEqual(result.base_tax, Decimal('195000'))
        self.assertEqual(result.total_tax, Decimal('97500'))

    def test_flat_rate_vehicles(self):
        self.assertEqual(calculate_car_tax(2500, 0, CarType.TRUCK).total_tax, Decimal('28500'))
        self.assertEqual(calculate_car_tax(2500, 0, CarType.SPECIAL).total_tax, Decimal('60000'))

if __name__ == '__main__':
    unittest.main()
