# -*- coding: utf-8 -*-
"""
pycalc: everyday financial and health calculators.

Every calculator is a pure function taking plain values and returning a
small dataclass or number. The loan amortization engine lives in
``pycalc.loan``; the other modules are independent of it and of each other.
"""
import logging

from ._enums import (
    RepaymentMethod,
    HousingContract,
    ContractType,
    PropertyType,
    AreaUnit,
    BmiCategory,
    Gender,
    ExerciseType,
    GradeScale,
    AssetType,
    PensionType,
    CarType,
    SalaryBasis,
    RetirementPay,
    CalendarType,
)
from ._exceptions import PycalcError, InvalidMethodError, DomainError
from ._models import (
    LoanRequest,
    RepaymentLine,
    LoanSchedule,
    RentLeaseComparison,
    HousePriceEstimate,
    InterestByTaxType,
    DepositResult,
    DepositTargetResult,
    BmiResult,
    IdealWeightResult,
    OvulationResult,
    TaxResult,
    CarTaxResult,
    SalaryDeductions,
    NetSalaryResult,
    RetirementFundResult,
    MonthlySavingsResult,
    MonthlyPensionResult,
    LumpSumResult,
    ParentalLeavePayment,
    ParentalLeaveResult,
    UnemploymentBenefitResult,
    SeverancePayResult,
    CommissionResult,
    Course,
    GradeResult,
    DiscountResult,
    DateConversionResult,
)
from .loan import (
    compute_schedule,
    calculate_loan_repayment,
    compare_rent_and_lease,
    calculate_affordable_house_price,
    adjust_loan_amount,
)
from .deposit import (
    calculate_deposit_by_initial,
    calculate_deposit_by_target,
    calculate_savings_by_initial,
    calculate_savings_by_target,
)
from .health import calculate_bmi, calculate_ideal_weight, calculate_calories, calculate_ovulation
from .tax import (
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
from .salary import calculate_net_salary
from .pension import (
    calculate_retirement_fund,
    calculate_monthly_savings,
    calculate_monthly_pension,
    calculate_lump_sum,
)
from .employment import calculate_parental_leave_pay, calculate_unemployment_benefit, calculate_severance_pay
from .real_estate import calculate_commission, convert_area
from .grade import grade_to_point, calculate_grades, convert_score
from .discount import calculate_discount
from .lunar_calendar import convert_date, get_zodiac, get_star_sign

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '1.0.0'
