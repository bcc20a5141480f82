# -*- coding: utf-8 -*-
"""
This module contains the take-home pay calculator.
"""
from ._constants import (
    BASIC_DEDUCTION,
    CHILD_DEDUCTION,
    LOCAL_INCOME_TAX_RATE,
    NATIONAL_PENSION_RATE,
    NATIONAL_PENSION_CAP,
    HEALTH_INSURANCE_RATE,
    LONG_TERM_CARE_RATE,
    EMPLOYMENT_INSURANCE_RATE,
    MONTHS_PER_YEAR,
)
from ._enums import SalaryBasis, RetirementPay
from ._models import SalaryDeductions, NetSalaryResult
from ._rounding import quantize
from ._validators import validate_choice, validate_positive_numeric
from .tax import progressive_tax

def calculate_net_salary(annual_salary, salary_basis=SalaryBasis.ANNUAL.value, retirement_pay=RetirementPay.SEPARATE.value,
                         dependents=1, children_under_20=0, non_taxable_amount=0):
    """
    Calculates the monthly take-home pay and the deductions behind it.

    :param annual_salary: The salary amount, yearly or monthly depending on salary_basis.
    :param salary_basis: Whether annual_salary is a yearly (annual) or monthly (monthly) amount.
    :param retirement_pay: Whether the salary already includes the retirement
        pay (included), in which case a thirteenth of it is set aside.
    :param dependents: Number of dependents including the employee.
    :param children_under_20: Number of children aged 20 or under.
    :param non_taxable_amount: Monthly non-taxable allowances.
    :return: A NetSalaryResult, every amount rounded to the won.
    """
    validate_positive_numeric(annual_salary, "ANNUAL_SALARY")
    validate_choice(salary_basis, SalaryBasis, "SALARY_BASIS")
    validate_choice(retirement_pay, RetirementPay, "RETIREMENT_PAY")

    if RetirementPay(retirement_pay) == RetirementPay.INCLUDED:
        adjusted_salary = annual_salary / 13 * 12
    else:
        adjusted_salary = annual_salary

    if SalaryBasis(salary_basis) == SalaryBasis.ANNUAL:
        monthly_salary = adjusted_salary / MONTHS_PER_YEAR
    else:
        monthly_salary = adjusted_salary

    taxable_salary = monthly_salary - non_taxable_amount

    pension = min(taxable_salary * NATIONAL_PENSION_RATE, NATIONAL_PENSION_CAP)
    health_insurance = taxable_salary * HEALTH_INSURANCE_RATE
    long_term_care = health_insurance * LONG_TERM_CARE_RATE
    employment_insurance = taxable_salary * EMPLOYMENT_INSURANCE_RATE

    # annual tax on the yearly taxable pay, spread over twelve months
    taxable_income = (
        taxable_salary * MONTHS_PER_YEAR
        - BASIC_DEDUCTION * dependents
        - CHILD_DEDUCTION * children_under_20
    )
    income_tax = progressive_tax(taxable_income) / MONTHS_PER_YEAR
    local_income_tax = income_tax * LOCAL_INCOME_TAX_RATE

    total_deductions = (
        pension
        + health_insurance
        + long_term_care
        + employment_insurance
        + income_tax
        + local_income_tax
    )

    return NetSalaryResult(
        monthly_net_salary=quantize(monthly_salary - total_deductions),
        monthly_deductions=SalaryDeductions(
            pension=quantize(pension),
            health_insurance=quantize(health_insurance),
            long_term_care=quantize(long_term_care),
            employment_insurance=quantize(employment_insurance),
            income_tax=quantize(income_tax),
            local_income_tax=quantize(local_income_tax),
            total_deductions=quantize(total_deductions),
        ),
    )
