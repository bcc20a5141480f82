# -*- coding: utf-8 -*-
"""
This module contains the loan repayment calculators.

The amortization engine works on raw floats and never rounds a line, so the
running principal balance carries no rounding error from month to month. The
remaining helpers round their single result the way the other calculators do.
"""
import logging

from ._enums import RepaymentMethod, HousingContract
from ._exceptions import DomainError
from ._models import (
    LoanRequest,
    RepaymentLine,
    LoanSchedule,
    RentLeaseComparison,
    HousePriceEstimate,
)
from ._rounding import quantize
from ._validators import validate_repayment_method

logger = logging.getLogger(__name__)

def _annuity_payment(principal, monthly_rate, no_of_payments):
    """Payment that retires the principal in equal installments."""
    if monthly_rate == 0:
        return principal / no_of_payments
    return principal * monthly_rate / (1 - (1 + monthly_rate) ** -no_of_payments)

def _check_repayment_months(request):
    if request.repayment_months <= 0:
        raise DomainError(
            f"GRACE_PERIOD_MONTHS ({request.grace_period_months}) must be smaller than "
            f"the loan term in months ({request.total_months})."
        )

def _equal_installment(request):
    _check_repayment_months(request)
    monthly_rate = request.monthly_rate
    fixed_payment = _annuity_payment(request.principal, monthly_rate, request.repayment_months)

    def lines():
        outstanding_principal = request.principal
        for month in range(1, request.total_months + 1):
            interest = outstanding_principal * monthly_rate
            if month <= request.grace_period_months:
                yield RepaymentLine(month, interest, 0.0, interest)
                continue
            principal_portion = fixed_payment - interest
            outstanding_principal -= principal_portion
            yield RepaymentLine(month, interest, principal_portion, fixed_payment)

    return fixed_payment, lines()

def _equal_principal(request):
    _check_repayment_months(request)
    monthly_rate = request.monthly_rate
    fixed_principal_portion = request.principal / request.repayment_months

    def lines():
        outstanding_principal = request.principal
        for month in range(1, request.total_months + 1):
            interest = outstanding_principal * monthly_rate
            if month <= request.grace_period_months:
                yield RepaymentLine(month, interest, 0.0, interest)
                continue
            outstanding_principal -= fixed_principal_portion
            yield RepaymentLine(month, interest, fixed_principal_portion, fixed_principal_portion + interest)

    # first repaying month, the payments decline afterwards
    monthly_payment = fixed_principal_portion + request.principal * monthly_rate
    return monthly_payment, lines()

def _bullet_payment(request):
    # the balance never declines before maturity, so grace months look like any other month
    fixed_interest = request.principal * request.monthly_rate

    def lines():
        for month in range(1, request.total_months):
            yield RepaymentLine(month, fixed_interest, 0.0, fixed_interest)
        if request.total_months >= 1:
            yield RepaymentLine(
                request.total_months,
                fixed_interest,
                request.principal,
                request.principal + fixed_interest,
            )

    return fixed_interest, lines()

_METHODS = {
    RepaymentMethod.EQUAL_INSTALLMENT: _equal_installment,
    RepaymentMethod.EQUAL_PRINCIPAL: _equal_principal,
    RepaymentMethod.BULLET_PAYMENT: _bullet_payment,
}

def compute_schedule(request):
    """
    Computes the month by month repayment schedule of a loan.

    The reported monthly payment is the fixed payment for equal installments,
    the first repaying month's payment for equal principal, and the recurring
    interest payment for a bullet loan.

    :param request: A LoanRequest.
    :return: A LoanSchedule with one line per month of the term.
    :raises InvalidMethodError: If the repayment method is not supported.
    :raises DomainError: If the grace period leaves no month to repay principal.
    """
    validate_repayment_method(request.repayment_method, "REPAYMENT_METHOD")
    method = RepaymentMethod(request.repayment_method)
    logger.debug(
        "Computing %s schedule over %s months with %s grace months",
        method.value, request.total_months, request.grace_period_months,
    )

    monthly_payment, line_iter = _METHODS[method](request)

    lines = []
    total_interest = 0.0
    for line in line_iter:
        total_interest += line.interest_due
        lines.append(line)

    return LoanSchedule(lines=tuple(lines), monthly_payment=monthly_payment, total_interest=total_interest)

def calculate_loan_repayment(repayment_method, principal, annual_rate, term_years, grace_period_months=0):
    """
    Builds a LoanRequest from plain arguments and computes its schedule.

    :param repayment_method: A RepaymentMethod or its value.
    :param principal: The loan amount.
    :param annual_rate: The annual interest rate as a fraction (0.032 = 3.2%).
    :param term_years: The loan term in years.
    :param grace_period_months: Initial months in which only interest is paid.
    :return: A LoanSchedule.
    """
    request = LoanRequest(
        principal=principal,
        annual_rate=annual_rate,
        term_years=term_years,
        repayment_method=repayment_method,
        grace_period_months=grace_period_months,
    )
    return compute_schedule(request)

def compare_rent_and_lease(rent_loan_amount, rent_loan_rate, monthly_rent, lease_loan_amount, lease_loan_rate):
    """
    Compares the monthly cost of a monthly-rent contract with a jeonse contract.

    The rent cost is the interest on the loan taken for the rent deposit plus
    the rent itself; the jeonse cost is the interest on the jeonse loan.
    """
    total_rent_cost = rent_loan_amount * rent_loan_rate / 12 + monthly_rent
    total_lease_cost = lease_loan_amount * lease_loan_rate / 12

    if total_rent_cost < total_lease_cost:
        return RentLeaseComparison(
            cheaper_option=HousingContract.MONTHLY_RENT,
            cost_difference=total_lease_cost - total_rent_cost,
        )
    return RentLeaseComparison(
        cheaper_option=HousingContract.JEONSE,
        cost_difference=total_rent_cost - total_lease_cost,
    )

def calculate_affordable_house_price(current_savings, monthly_income, monthly_expenses, annual_rate, loan_term_years):
    """
    Estimates the house price affordable with the current savings and the
    largest equal-installment loan the monthly surplus can repay.
    """
    available_monthly_savings = monthly_income - monthly_expenses
    monthly_rate = annual_rate / 12
    repayment_months = loan_term_years * 12

    if monthly_rate == 0:
        max_loan_amount = available_monthly_savings * repayment_months
    else:
        max_loan_amount = available_monthly_savings * (1 - (1 + monthly_rate) ** -repayment_months) / monthly_rate

    return HousePriceEstimate(
        affordable_house_price=quantize(current_savings + max_loan_amount),
        required_loan_amount=quantize(max_loan_amount),
    )

def adjust_loan_amount(current_savings, adjusted_loan_amount):
    """Recomputes the affordable house price for a loan amount chosen by the user."""
    return HousePriceEstimate(
        affordable_house_price=quantize(current_savings + adjusted_loan_amount),
        required_loan_amount=quantize(adjusted_loan_amount),
    )
