# -*- coding: utf-8 -*-
"""
This module contains the employment benefit calculators: parental leave pay,
unemployment benefit and severance pay.
"""
import datetime as dt
import math

from dateutil.relativedelta import relativedelta

from ._constants import (
    PARENTAL_LEAVE_WAGE_RATIO,
    PARENTAL_LEAVE_CAP,
    PARENTAL_LEAVE_BONUS,
    PARENTAL_LEAVE_BONUS_MONTHS,
    PARENTAL_LEAVE_FULL_PAY_MONTHS,
    PARENTAL_LEAVE_REDUCED_RATIO,
    PARENTAL_LEAVE_RETENTION_RATE,
    DAYS_PER_LEAVE_MONTH,
    UNEMPLOYMENT_BENEFIT_RATIO,
    UNEMPLOYMENT_DAILY_CAP,
    MINIMUM_HOURLY_WAGE,
    UNEMPLOYMENT_MINIMUM_WAGE_RATIO,
    UNEMPLOYMENT_DAILY_FLOOR_8H,
    UNEMPLOYMENT_AGE_THRESHOLD,
    UNEMPLOYMENT_DISABILITY_DAYS,
    UNEMPLOYMENT_PAYMENT_DAYS,
    SEVERANCE_REFERENCE_DAYS,
    SEVERANCE_DAYS_PER_YEAR_OF_SERVICE,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
)
from ._models import (
    ParentalLeavePayment,
    ParentalLeaveResult,
    UnemploymentBenefitResult,
    SeverancePayResult,
)
from ._rounding import quantize
from ._validators import (
    validate_strictly_positive_numeric,
    validate_non_negative_integer,
    validate_positive_numeric,
    validate_boolean,
    validate_date,
)

def _to_date(value):
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str):
        return dt.datetime.strptime(value, '%Y-%m-%d').date()
    return value

def calculate_parental_leave_pay(leave_months, average_monthly_wage, leave_days=0, spouse_leave_months=None):
    """
    Calculates the monthly parental leave benefits.

    Three schemes are computed side by side: the general benefit, the father
    bonus (when the spouse is also on leave) and the 6+6 parents benefit. A
    quarter of the general benefit is paid as a retention payment in the
    first six months.

    :param leave_months: Whole months of leave.
    :param average_monthly_wage: The ordinary monthly wage.
    :param leave_days: Remaining days of leave, each started 30 days count as a month.
    :param spouse_leave_months: Months the spouse is on leave, or None.
    :return: A ParentalLeaveResult with one payment line per month.
    """
    validate_non_negative_integer(leave_months, "LEAVE_MONTHS")
    validate_non_negative_integer(leave_days, "LEAVE_DAYS")
    validate_positive_numeric(average_monthly_wage, "AVERAGE_MONTHLY_WAGE")

    total_months = leave_months + math.ceil(leave_days / DAYS_PER_LEAVE_MONTH)

    general_leave_base = min(average_monthly_wage * PARENTAL_LEAVE_WAGE_RATIO, PARENTAL_LEAVE_CAP)
    extended_leave_base = general_leave_base
    retention_payment = general_leave_base * PARENTAL_LEAVE_RETENTION_RATE

    payments = []
    total_general_leave_payment = 0
    total_bonus_leave_payment = 0
    total_extended_leave_payment = 0

    for month in range(1, total_months + 1):
        is_bonus_applicable = spouse_leave_months is not None and month <= spouse_leave_months
        is_full_pay_month = month <= PARENTAL_LEAVE_FULL_PAY_MONTHS

        if is_full_pay_month:
            general_leave_payment = general_leave_base
        else:
            general_leave_payment = general_leave_base * PARENTAL_LEAVE_REDUCED_RATIO

        if is_bonus_applicable and month <= PARENTAL_LEAVE_BONUS_MONTHS:
            bonus_leave_payment = PARENTAL_LEAVE_BONUS
        else:
            bonus_leave_payment = general_leave_payment * PARENTAL_LEAVE_WAGE_RATIO

        total_general_leave_payment += general_leave_payment
        total_bonus_leave_payment += bonus_leave_payment
        total_extended_leave_payment += extended_leave_base

        month_retention = retention_payment if is_full_pay_month else 0
        payments.append(ParentalLeavePayment(
            month=month,
            general_leave_payment=general_leave_payment + month_retention,
            bonus_leave_payment=bonus_leave_payment if is_bonus_applicable else None,
            extended_leave_payment=extended_leave_base + month_retention,
            retention_payment=month_retention,
        ))

    return ParentalLeaveResult(
        payments=tuple(payments),
        total_general_leave_payment=quantize(total_general_leave_payment),
        total_bonus_leave_payment=quantize(total_bonus_leave_payment),
        total_extended_leave_payment=quantize(total_extended_leave_payment),
    )

def _payment_days(age, employment_insurance_months):
    for upper_bound, days_under_threshold, days_over_threshold in UNEMPLOYMENT_PAYMENT_DAYS:
        if upper_bound is None or employment_insurance_months < upper_bound:
            return days_under_threshold if age < UNEMPLOYMENT_AGE_THRESHOLD else days_over_threshold

def calculate_unemployment_benefit(age, is_disabled, employment_insurance_months, recent_three_months_salaries,
                                   average_work_days, daily_work_hours):
    """
    Calculates the job-seeking benefit.

    The daily benefit is 60% of the average daily wage, no lower than the
    minimum-wage floor for the daily working hours and no higher than the
    daily cap. The number of payment days depends on the insured period and
    on whether the claimant is 50 or older; disabled claimants get 30 more.
    """
    validate_boolean(is_disabled, "IS_DISABLED")
    validate_strictly_positive_numeric(daily_work_hours, "DAILY_WORK_HOURS")
    validate_strictly_positive_numeric(average_work_days, "AVERAGE_WORK_DAYS")

    average_monthly_salary = sum(recent_three_months_salaries) / 3
    daily_average_wage = average_monthly_salary / average_work_days

    min_daily_benefit = max(
        UNEMPLOYMENT_MINIMUM_WAGE_RATIO * MINIMUM_HOURLY_WAGE * daily_work_hours,
        UNEMPLOYMENT_DAILY_FLOOR_8H * (daily_work_hours / 8),
    )
    daily_benefit_amount = min(
        max(daily_average_wage * UNEMPLOYMENT_BENEFIT_RATIO, min_daily_benefit),
        UNEMPLOYMENT_DAILY_CAP,
    )

    expected_payment_days = _payment_days(age, employment_insurance_months)
    if is_disabled:
        expected_payment_days += UNEMPLOYMENT_DISABILITY_DAYS

    return UnemploymentBenefitResult(
        daily_benefit_amount=quantize(daily_benefit_amount),
        expected_payment_days=expected_payment_days,
        total_expected_amount=quantize(daily_benefit_amount * expected_payment_days),
    )

def calculate_severance_pay(start_date, end_date, last_three_months_salaries, annual_bonus=0, annual_leave_allowance=0):
    """
    Calculates the statutory severance pay.

    The average daily wage is the pay of the last three months, plus a
    twelfth of the annual bonus and of the annual leave allowance, over 90
    days. Severance is 30 days of that wage per year of service.

    :param start_date: The hiring date, a date or a YYYY-MM-DD string.
    :param end_date: The leaving date, a date or a YYYY-MM-DD string.
    :param last_three_months_salaries: Gross monthly salaries of the last three months.
    :return: A SeverancePayResult.
    """
    validate_date(start_date, "START_DATE")
    validate_date(end_date, "END_DATE")
    start_date = _to_date(start_date)
    end_date = _to_date(end_date)
    if start_date > end_date:
        raise ValueError('END_DATE cannot be before START_DATE')

    service_days = (end_date - start_date).days
    years_of_service = relativedelta(end_date, start_date).years

    total_included_salary = (
        sum(last_three_months_salaries)
        + annual_bonus / MONTHS_PER_YEAR
        + annual_leave_allowance / MONTHS_PER_YEAR
    )
    average_daily_wage = total_included_salary / SEVERANCE_REFERENCE_DAYS
    expected_severance_pay = average_daily_wage * SEVERANCE_DAYS_PER_YEAR_OF_SERVICE * service_days / DAYS_PER_YEAR

    return SeverancePayResult(
        expected_severance_pay=quantize(expected_severance_pay),
        average_daily_wage=quantize(average_daily_wage),
        service_days=service_days,
        years_of_service=years_of_service,
    )
