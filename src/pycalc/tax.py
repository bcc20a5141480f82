# -*- coding: utf-8 -*-
"""
This module contains the tax and social insurance calculators.

Every calculator returns a TaxResult whose amount is rounded to the won; the
car tax calculator returns the base tax, the age discount and the total.
"""
from ._constants import (
    INCOME_TAX_BRACKETS,
    CORPORATION_TAX_BRACKETS,
    BASIC_DEDUCTION,
    CHILD_DEDUCTION,
    NATIONAL_PENSION_RATE,
    NATIONAL_PENSION_CAP,
    HEALTH_INSURANCE_RATE,
    LONG_TERM_CARE_RATE,
    EMPLOYMENT_INSURANCE_RATE,
    TRANSFER_TAX_RATE_HOUSE_LONG_HELD,
    TRANSFER_TAX_RATE_HOUSE,
    TRANSFER_TAX_RATE_OTHER,
    TRANSFER_TAX_LONG_HOLDING_YEARS,
    RETIREMENT_ALLOWANCE_PER_YEAR,
    RETIREMENT_TAX_RATE,
    PENSION_TAX_RATE_NATIONAL,
    PENSION_TAX_RATE,
    FINANCIAL_INCOME_THRESHOLD,
    FINANCIAL_TAX_RATE_HIGH,
    FINANCIAL_TAX_RATE_LOW,
    INTEREST_TAX_RATE,
    DIVIDEND_TAX_RATE,
    PASSENGER_CAR_TAX_PER_CC,
    VAN_TAX_PER_CC,
    TRUCK_TAX,
    SPECIAL_VEHICLE_TAX,
    CAR_AGE_DISCOUNT_START,
    CAR_AGE_DISCOUNT_PER_YEAR,
    CAR_AGE_DISCOUNT_CAP,
)
from ._enums import AssetType, PensionType, CarType
from ._models import TaxResult, CarTaxResult
from ._rounding import quantize
from ._validators import validate_choice, validate_positive_numeric

def progressive_tax(taxable_amount, brackets=INCOME_TAX_BRACKETS):
    """
    Applies marginal rates to a taxable amount.

    :param taxable_amount: The tax base. Amounts below zero are taxed as zero.
    :param brackets: (upper bound, rate) pairs in ascending order, the last
        upper bound being None.
    :return: The unrounded tax.
    """
    taxable_amount = max(taxable_amount, 0)
    tax = 0
    lower_bound = 0
    for upper_bound, rate in brackets:
        if upper_bound is None or taxable_amount <= upper_bound:
            return tax + (taxable_amount - lower_bound) * rate
        tax += (upper_bound - lower_bound) * rate
        lower_bound = upper_bound
    return tax

def calculate_income_tax(gross_salary, dependents=1, children_under_20=0, non_taxable_amount=0):
    """Earned income tax after the per-person and per-child deductions."""
    taxable_income = (
        gross_salary
        - non_taxable_amount
        - BASIC_DEDUCTION * dependents
        - CHILD_DEDUCTION * children_under_20
    )
    income_tax = progressive_tax(taxable_income)
    return TaxResult(
        tax_name="earned income tax",
        tax_amount=quantize(income_tax),
        details=(
            f"Gross salary {gross_salary:,}, non-taxable {non_taxable_amount:,}, "
            f"basic deduction {BASIC_DEDUCTION:,} x {dependents}, "
            f"child deduction {CHILD_DEDUCTION:,} x {children_under_20}."
        ),
    )

def calculate_social_insurance(gross_salary):
    """The employee share of the four social insurances."""
    pension = min(gross_salary * NATIONAL_PENSION_RATE, NATIONAL_PENSION_CAP)
    health_insurance = gross_salary * HEALTH_INSURANCE_RATE
    long_term_care = health_insurance * LONG_TERM_CARE_RATE
    employment_insurance = gross_salary * EMPLOYMENT_INSURANCE_RATE
    total_insurance = pension + health_insurance + long_term_care + employment_insurance
    return TaxResult(
        tax_name="social insurance",
        tax_amount=quantize(total_insurance),
        details=(
            f"National pension {quantize(pension)}, health insurance {quantize(health_insurance)}, "
            f"long-term care {quantize(long_term_care)}, employment insurance {quantize(employment_insurance)}."
        ),
    )

def calculate_corporation_tax(net_profit):
    corporation_tax = progressive_tax(net_profit, CORPORATION_TAX_BRACKETS)
    return TaxResult(
        tax_name="corporation tax",
        tax_amount=quantize(corporation_tax),
        details=f"Net profit {net_profit:,}.",
    )

def calculate_composite_income_tax(gross_income, deductible_expenses=0):
    composite_income_tax = progressive_tax(gross_income - deductible_expenses)
    return TaxResult(
        tax_name="composite income tax",
        tax_amount=quantize(composite_income_tax),
        details=f"Gross income {gross_income:,}, deductible expenses {deductible_expenses:,}.",
    )

def calculate_transfer_income_tax(transfer_amount, acquisition_amount, necessary_expenses, ownership_period, asset_type):
    """
    Capital gains tax on the transfer of an asset.

    Houses held for ten years or more are taxed at 10%, other houses at 20%,
    land and other assets at 30%.
    """
    validate_choice(asset_type, AssetType, "ASSET_TYPE")
    asset_type = AssetType(asset_type)

    capital_gain = transfer_amount - acquisition_amount - necessary_expenses
    if asset_type == AssetType.HOUSE:
        if ownership_period >= TRANSFER_TAX_LONG_HOLDING_YEARS:
            transfer_tax_rate = TRANSFER_TAX_RATE_HOUSE_LONG_HELD
        else:
            transfer_tax_rate = TRANSFER_TAX_RATE_HOUSE
    else:
        transfer_tax_rate = TRANSFER_TAX_RATE_OTHER

    return TaxResult(
        tax_name="transfer income tax",
        tax_amount=quantize(capital_gain * transfer_tax_rate),
        details=(
            f"Transfer amount {transfer_amount:,}, acquisition amount {acquisition_amount:,}, "
            f"necessary expenses {necessary_expenses:,}, held {ownership_period} years, "
            f"asset type {asset_type.value}."
        ),
    )

def calculate_retirement_income_tax(retirement_pay, years_of_service):
    basic_allowance = RETIREMENT_ALLOWANCE_PER_YEAR * years_of_service
    retirement_tax = (retirement_pay - basic_allowance) * RETIREMENT_TAX_RATE
    return TaxResult(
        tax_name="retirement income tax",
        tax_amount=quantize(retirement_tax),
        details=(
            f"Retirement pay {retirement_pay:,}, {years_of_service} years of service, "
            f"basic allowance {basic_allowance:,}."
        ),
    )

def calculate_pension_income_tax(pension_amount, pension_type):
    validate_choice(pension_type, PensionType, "PENSION_TYPE")
    pension_type = PensionType(pension_type)

    pension_tax_rate = PENSION_TAX_RATE_NATIONAL if pension_type == PensionType.NATIONAL else PENSION_TAX_RATE
    return TaxResult(
        tax_name="pension income tax",
        tax_amount=quantize(pension_amount * pension_tax_rate),
        details=f"Pension amount {pension_amount:,}, pension type {pension_type.value}.",
    )

def calculate_financial_income_tax(financial_income):
    if financial_income > FINANCIAL_INCOME_THRESHOLD:
        financial_tax_rate = FINANCIAL_TAX_RATE_HIGH
    else:
        financial_tax_rate = FINANCIAL_TAX_RATE_LOW
    return TaxResult(
        tax_name="financial income tax",
        tax_amount=quantize(financial_income * financial_tax_rate),
        details=f"Financial income {financial_income:,} taxed at {financial_tax_rate:.0%}.",
    )

def calculate_interest_income_tax(interest_income):
    return TaxResult(
        tax_name="interest income tax",
        tax_amount=quantize(interest_income * INTEREST_TAX_RATE),
        details=f"Interest income {interest_income:,} taxed at {INTEREST_TAX_RATE:.0%}.",
    )

def calculate_dividend_income_tax(dividend_income):
    return TaxResult(
        tax_name="dividend income tax",
        tax_amount=quantize(dividend_income * DIVIDEND_TAX_RATE),
        details=f"Dividend income {dividend_income:,} taxed at {DIVIDEND_TAX_RATE:.0%}.",
    )

def calculate_business_income_tax(business_income, deductible_expenses=0):
    business_income_tax = progressive_tax(business_income - deductible_expenses)
    return TaxResult(
        tax_name="business income tax",
        tax_amount=quantize(business_income_tax),
        details=f"Business income {business_income:,}, deductible expenses {deductible_expenses:,}.",
    )

def _passenger_car_rate(engine_displacement):
    for upper_bound, rate in PASSENGER_CAR_TAX_PER_CC:
        if upper_bound is None or engine_displacement <= upper_bound:
            return rate

def calculate_car_tax(engine_displacement, car_age, car_type):
    """
    Annual car tax with the age discount.

    :param engine_displacement: Engine displacement in cc.
    :param car_age: Age of the car in years. Each year beyond the second
        takes 5% off the tax, up to 50%.
    :param car_type: A CarType or its value.
    :return: A CarTaxResult.
    """
    validate_choice(car_type, CarType, "CAR_TYPE")
    validate_positive_numeric(engine_displacement, "ENGINE_DISPLACEMENT")
    car_type = CarType(car_type)

    if car_type == CarType.PASSENGER:
        base_tax = engine_displacement * _passenger_car_rate(engine_displacement)
    elif car_type == CarType.VAN:
        base_tax = engine_displacement * VAN_TAX_PER_CC
    elif car_type == CarType.TRUCK:
        base_tax = TRUCK_TAX
    else:
        base_tax = SPECIAL_VEHICLE_TAX

    age_discount_rate = 0
    if car_age > CAR_AGE_DISCOUNT_START:
        excess_years = car_age - CAR_AGE_DISCOUNT_START
        age_discount_rate = min(excess_years * CAR_AGE_DISCOUNT_PER_YEAR, CAR_AGE_DISCOUNT_CAP)

    age_discount = base_tax * age_discount_rate
    return CarTaxResult(
        base_tax=quantize(base_tax),
        age_discount=quantize(age_discount),
        total_tax=quantize(base_tax - age_discount),
    )
