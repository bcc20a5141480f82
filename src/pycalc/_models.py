# -*- coding: utf-8 -*-
"""
This module contains the dataclasses exchanged with the calculators.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple, Union

from ._enums import (
    RepaymentMethod,
    HousingContract,
    BmiCategory,
    CalendarType,
)

@dataclass(frozen=True)
class LoanRequest:
    principal: float
    annual_rate: float
    term_years: int
    repayment_method: Union[RepaymentMethod, str]
    grace_period_months: int = 0

    @property
    def monthly_rate(self):
        return self.annual_rate / 12

    @property
    def total_months(self):
        return self.term_years * 12

    @property
    def repayment_months(self):
        """Number of months in which principal is retired."""
        return self.total_months - self.grace_period_months

@dataclass(frozen=True)
class RepaymentLine:
    month: int
    interest_due: float
    principal_due: float
    total_payment: float

@dataclass(frozen=True)
class LoanSchedule:
    lines: Tuple[RepaymentLine, ...]
    # meaning depends on the repayment method, see compute_schedule
    monthly_payment: float
    total_interest: float

    @property
    def total_principal(self):
        return sum(line.principal_due for line in self.lines)

    @property
    def total_payment(self):
        return sum(line.total_payment for line in self.lines)

@dataclass
class RentLeaseComparison:
    cheaper_option: HousingContract
    cost_difference: float

@dataclass
class HousePriceEstimate:
    affordable_house_price: Decimal
    required_loan_amount: Decimal

@dataclass
class InterestByTaxType:
    regular: Decimal
    preferential: Decimal
    tax_free: Decimal

@dataclass
class DepositResult:
    total_savings: Decimal
    interest_by_tax_type: InterestByTaxType

@dataclass
class DepositTargetResult:
    initial_deposit: Decimal
    savings_by_tax_type: InterestByTaxType

@dataclass
class BmiResult:
    bmi: Decimal
    category: BmiCategory

@dataclass
class IdealWeightResult:
    ideal_weight: Decimal
    obesity_rate: Decimal

@dataclass
class OvulationResult:
    ovulation_date: date
    fertile_window_start: date
    fertile_window_end: date

@dataclass
class TaxResult:
    tax_name: str
    tax_amount: Decimal
    details: str

@dataclass
class CarTaxResult:
    base_tax: Decimal
    age_discount: Decimal
    total_tax: Decimal

@dataclass
class SalaryDeductions:
    pension: Decimal
    health_insurance: Decimal
    long_term_care: Decimal
    employment_insurance: Decimal
    income_tax: Decimal
    local_income_tax: Decimal
    total_deductions: Decimal

@dataclass
class NetSalaryResult:
    monthly_net_salary: Decimal
    monthly_deductions: SalaryDeductions

@dataclass
class RetirementFundResult:
    retirement_start_age: int
    retirement_period: int
    total_required_amount: Decimal
    monthly_pension: float
    retirement_end_age: int

@dataclass
class MonthlySavingsResult:
    current_age: int
    current_assets: float
    monthly_savings: float
    saving_period: int
    saving_end_age: int
    total_amount_at_retirement: Decimal
    monthly_pension: Decimal
    pension_start_age: int
    pension_end_age: int

@dataclass
class MonthlyPensionResult:
    interest_rate: float
    current_assets: float
    monthly_savings: float
    saving_period: int
    total_amount_at_retirement: float
    monthly_pension: float

@dataclass
class LumpSumResult:
    average_interest_rate: float
    monthly_savings: float
    saving_period: int
    total_amount_at_retirement: float
    monthly_pension: float

@dataclass
class ParentalLeavePayment:
    month: int
    general_leave_payment: float
    # None when the spouse is not on leave in this month
    bonus_leave_payment: Optional[float]
    extended_leave_payment: float
    retention_payment: float

@dataclass
class ParentalLeaveResult:
    payments: Tuple[ParentalLeavePayment, ...]
    total_general_leave_payment: Decimal
    total_bonus_leave_payment: Decimal
    total_extended_leave_payment: Decimal

@dataclass
class UnemploymentBenefitResult:
    daily_benefit_amount: Decimal
    expected_payment_days: int
    total_expected_amount: Decimal

@dataclass
class SeverancePayResult:
    expected_severance_pay: Decimal
    average_daily_wage: Decimal
    service_days: int
    years_of_service: int

@dataclass
class CommissionResult:
    rate: float
    commission: Decimal
    commission_with_tax: Decimal

@dataclass
class Course:
    course_name: str
    credits: int
    grade: str
    is_major: bool = False

@dataclass
class GradeResult:
    total_gpa_4_5: Decimal
    total_gpa_4_3: Decimal
    major_gpa_4_5: Decimal
    major_gpa_4_3: Decimal
    total_credits: int
    major_credits: int

@dataclass
class DiscountResult:
    discount_amount: Decimal
    final_price: Decimal

@dataclass
class DateConversionResult:
    original_date: str
    converted_date: str
    calendar_type: CalendarType
    is_intercalation: bool = False
