# -*- coding: utf-8 -*-
"""
This module contains the deposit and installment savings calculators.

Interest is reported three ways: after the regular 15.4% withholding, after
the preferential 9.5% withholding, and tax free.
"""
from ._constants import REGULAR_TAX_RATE, PREFERENTIAL_TAX_RATE
from ._models import InterestByTaxType, DepositResult, DepositTargetResult
from ._rounding import quantize
from ._validators import validate_boolean

def _growth_factor(term_years, annual_rate, is_compound=False):
    if is_compound:
        return (1 + annual_rate / 12) ** (term_years * 12)
    return 1 + annual_rate * term_years

def _interest_by_tax_type(interest, base=0):
    return InterestByTaxType(
        regular=quantize(base + interest - interest * REGULAR_TAX_RATE),
        preferential=quantize(base + interest - interest * PREFERENTIAL_TAX_RATE),
        tax_free=quantize(base + interest),
    )

def calculate_deposit_by_initial(initial_deposit, term_years, annual_rate):
    """
    Simple interest deposit grown from an initial amount.

    :param initial_deposit: The amount deposited up front.
    :param term_years: The deposit term in years.
    :param annual_rate: The annual interest rate as a fraction.
    :return: A DepositResult.
    """
    total_savings = initial_deposit * _growth_factor(term_years, annual_rate)
    interest = total_savings - initial_deposit
    return DepositResult(
        total_savings=quantize(total_savings),
        interest_by_tax_type=_interest_by_tax_type(interest),
    )

def calculate_deposit_by_target(target_amount, term_years, annual_rate):
    """
    Initial amount needed for a simple interest deposit to reach a target.

    The savings by tax type are the initial amount plus the interest left after
    each kind of withholding.
    """
    initial_deposit = target_amount / _growth_factor(term_years, annual_rate)
    interest = target_amount - initial_deposit
    return DepositTargetResult(
        initial_deposit=quantize(initial_deposit),
        savings_by_tax_type=_interest_by_tax_type(interest, base=initial_deposit),
    )

def calculate_savings_by_initial(initial_deposit, term_years, annual_rate, is_compound):
    """Savings grown from an initial amount, compounded monthly when is_compound is set."""
    validate_boolean(is_compound, "IS_COMPOUND")
    total_savings = initial_deposit * _growth_factor(term_years, annual_rate, is_compound)
    interest = total_savings - initial_deposit
    return DepositResult(
        total_savings=quantize(total_savings),
        interest_by_tax_type=_interest_by_tax_type(interest),
    )

def calculate_savings_by_target(target_amount, term_years, annual_rate, is_compound):
    """Initial amount needed for savings to reach a target."""
    validate_boolean(is_compound, "IS_COMPOUND")
    initial_deposit = target_amount / _growth_factor(term_years, annual_rate, is_compound)
    interest = target_amount - initial_deposit
    return DepositTargetResult(
        initial_deposit=quantize(initial_deposit),
        savings_by_tax_type=_interest_by_tax_type(interest, base=initial_deposit),
    )
