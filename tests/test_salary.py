import unittest
from decimal import Decimal

from pycalc import RetirementPay, SalaryBasis, calculate_net_salary

class TestNetSalary(unittest.TestCase):

    def test_annual_salary(self):
        result = calculate_net_salary(36000000)
        deductions = result.monthly_deductions
        self.assertEqual(deductions.pension, Decimal('135000'))
        self.assertEqual(deductions.health_insurance, Decimal('106350'))
        self.assertEqual(deductions.long_term_care, Decimal('13049'))
        self.assertEqual(deductions.employment_insurance, Decimal('27000'))
        self.assertEqual(deductions.income_tax, Decimal('341250'))
        self.assertEqual(deductions.local_income_tax, Decimal('34125'))
        self.assertEqual(deductions.total_deductions, Decimal('656774'))
        self.assertEqual(result.monthly_net_salary, Decimal('2343226'))

    def test_retirement_pay_included(self):
        included = calculate_net_salary(39000000, retirement_pay=RetirementPay.INCLUDED)
        self.assertEqual(included, calculate_net_salary(36000000))

    def test_monthly_basis(self):
        monthly = calculate_net_salary(3000000, salary_basis=SalaryBasis.MONTHLY)
        self.assertEqual(monthly, calculate_net_salary(36000000))

    def test_unknown_basis(self):
        with self.assertRaises(ValueError):
            calculate_net_salary(36000000, salary_basis='weekly')

if __name__ == '__main__':
    unittest.main()
