# -*- coding: utf-8 -*-
"""
This module contains the real estate calculators: brokerage commission and
area unit conversion.
"""
from ._constants import (
    DEFAULT_COMMISSION_RATES,
    DEFAULT_VAT_RATE,
    MONTHLY_RENT_MULTIPLIER,
    SQUARE_METERS_PER_PYEONG,
)
from ._enums import ContractType, PropertyType, AreaUnit
from ._models import CommissionResult
from ._rounding import quantize
from ._validators import validate_choice, validate_positive_numeric

def calculate_commission(contract_type, property_type, deposit, rate=None, vat_rate=None, monthly_rent=None):
    """
    Calculates the brokerage commission of a real estate contract.

    :param contract_type: A ContractType or its value.
    :param property_type: A PropertyType or its value. Every property type
        currently shares the same default rates.
    :param deposit: The sale price or deposit.
    :param rate: The commission rate in percent, the statutory cap for the contract type when omitted.
    :param vat_rate: The VAT rate in percent, 10 when omitted.
    :param monthly_rent: The monthly rent of a monthly-rent contract.
    :return: A CommissionResult with amounts rounded to two decimals.
    """
    validate_choice(contract_type, ContractType, "CONTRACT_TYPE")
    validate_choice(property_type, PropertyType, "PROPERTY_TYPE")
    validate_positive_numeric(deposit, "DEPOSIT")
    contract_type = ContractType(contract_type)

    applied_rate = rate if rate is not None else DEFAULT_COMMISSION_RATES[contract_type]
    applied_vat_rate = vat_rate if vat_rate is not None else DEFAULT_VAT_RATE

    transaction_amount = deposit
    if contract_type == ContractType.MONTHLY_RENT and monthly_rent is not None:
        transaction_amount = deposit + monthly_rent * MONTHLY_RENT_MULTIPLIER

    commission = transaction_amount * (applied_rate / 100)
    commission_with_tax = commission + commission * (applied_vat_rate / 100)

    return CommissionResult(
        rate=applied_rate,
        commission=quantize(commission, 2),
        commission_with_tax=quantize(commission_with_tax, 2),
    )

def convert_area(value, convert_to):
    """
    Converts an area between pyeong and square metres.

    :param value: The area in the unit other than convert_to.
    :param convert_to: The target AreaUnit or its value.
    :return: The converted area rounded to two decimals.
    """
    validate_choice(convert_to, AreaUnit, "CONVERT_TO")

    if AreaUnit(convert_to) == AreaUnit.SQUARE_METER:
        return quantize(value * SQUARE_METERS_PER_PYEONG, 2)
    return quantize(value / SQUARE_METERS_PER_PYEONG, 2)
