# -*- coding: utf-8 -*-
"""
This module contains the retirement and pension projection calculators.

Returns are annual fractions compounded monthly; savings are paid at the end
of each month. Pensions are paid from age 60 to 90 unless stated otherwise.
"""
from ._constants import (
    PENSION_START_AGE,
    PENSION_END_AGE,
    PENSION_DURATION_YEARS,
    DEFAULT_ANNUAL_RETURN,
    MONTHS_PER_YEAR,
)
from ._models import RetirementFundResult, MonthlySavingsResult, MonthlyPensionResult, LumpSumResult
from ._rounding import quantize

PENSION_MONTHS = PENSION_DURATION_YEARS * MONTHS_PER_YEAR

def _future_value_of_assets(assets, monthly_rate, months):
    return assets * (1 + monthly_rate) ** months

def _future_value_of_savings(monthly_savings, monthly_rate, months):
    if monthly_rate == 0:
        return monthly_savings * months
    return monthly_savings * ((1 + monthly_rate) ** months - 1) / monthly_rate

def calculate_retirement_fund(current_age, desired_monthly_pension, pension_start_age=PENSION_START_AGE,
                              pension_duration=PENSION_DURATION_YEARS, average_annual_return=DEFAULT_ANNUAL_RETURN):
    """
    Calculates what the pension payments are worth today.

    :param current_age: The current age.
    :param desired_monthly_pension: The monthly pension wanted.
    :param pension_start_age: The age the pension starts.
    :param pension_duration: The number of years the pension is paid.
    :param average_annual_return: The average annual return as a fraction.
    :return: A RetirementFundResult; the required amount is discounted to the current age.
    """
    total_required_amount = desired_monthly_pension * MONTHS_PER_YEAR * pension_duration
    saving_period_years = pension_start_age - current_age
    present_value = total_required_amount / (1 + average_annual_return) ** saving_period_years

    return RetirementFundResult(
        retirement_start_age=pension_start_age,
        retirement_period=pension_duration,
        total_required_amount=quantize(present_value),
        monthly_pension=desired_monthly_pension,
        retirement_end_age=pension_start_age + pension_duration,
    )

def calculate_monthly_savings(current_age, current_financial_assets, monthly_savings, saving_period, average_annual_return):
    """Projects current assets and monthly savings over the saving period into a pension."""
    months_of_saving = saving_period * MONTHS_PER_YEAR
    monthly_rate = average_annual_return / MONTHS_PER_YEAR

    total_amount_at_retirement = (
        _future_value_of_assets(current_financial_assets, monthly_rate, months_of_saving)
        + _future_value_of_savings(monthly_savings, monthly_rate, months_of_saving)
    )
    pension_period = (PENSION_END_AGE - PENSION_START_AGE) * MONTHS_PER_YEAR

    return MonthlySavingsResult(
        current_age=current_age,
        current_assets=current_financial_assets,
        monthly_savings=monthly_savings,
        saving_period=saving_period,
        saving_end_age=current_age + saving_period,
        total_amount_at_retirement=quantize(total_amount_at_retirement),
        monthly_pension=quantize(total_amount_at_retirement / pension_period),
        pension_start_age=PENSION_START_AGE,
        pension_end_age=PENSION_END_AGE,
    )

def calculate_monthly_pension(current_age, current_financial_assets, monthly_savings, saving_period, average_annual_return):
    """
    Projects current assets and monthly savings up to age 60 into a pension.

    Saving runs until the pension starts; saving_period is reported back as given.
    """
    months = (PENSION_START_AGE - current_age) * MONTHS_PER_YEAR
    monthly_rate = average_annual_return / MONTHS_PER_YEAR

    total_amount_at_retirement = (
        _future_value_of_assets(current_financial_assets, monthly_rate, months)
        + _future_value_of_savings(monthly_savings, monthly_rate, months)
    )

    return MonthlyPensionResult(
        interest_rate=average_annual_return,
        current_assets=current_financial_assets,
        monthly_savings=monthly_savings,
        saving_period=saving_period,
        total_amount_at_retirement=total_amount_at_retirement,
        monthly_pension=total_amount_at_retirement / PENSION_MONTHS,
    )

def calculate_lump_sum(current_age, monthly_savings, saving_period, average_annual_return):
    """Projects monthly savings up to age 60 into a lump sum and the pension it pays."""
    months = (PENSION_START_AGE - current_age) * MONTHS_PER_YEAR
    monthly_rate = average_annual_return / MONTHS_PER_YEAR

    future_value_of_savings = _future_value_of_savings(monthly_savings, monthly_rate, months)

    return LumpSumResult(
        average_interest_rate=average_annual_return,
        monthly_savings=monthly_savings,
        saving_period=saving_period,
        total_amount_at_retirement=future_value_of_savings,
        monthly_pension=future_value_of_savings / PENSION_MONTHS,
    )
