# -*- coding: utf-8 -*-
"""
This module contains the statutory figures and rate tables used by the calculators.

Monetary amounts are in Korean won unless stated otherwise.
"""
from ._enums import ContractType, ExerciseType

MONTHS_PER_YEAR = 12

# deposit and savings interest withholding
REGULAR_TAX_RATE = 0.154
PREFERENTIAL_TAX_RATE = 0.095

# personal income tax brackets as (upper bound, marginal rate)
INCOME_TAX_BRACKETS = (
    (12000000, 0.06),
    (46000000, 0.15),
    (88000000, 0.24),
    (None, 0.35),
)
CORPORATION_TAX_BRACKETS = (
    (200000000, 0.10),
    (20000000000, 0.20),
    (None, 0.22),
)
BASIC_DEDUCTION = 1500000
CHILD_DEDUCTION = 1500000
LOCAL_INCOME_TAX_RATE = 0.1

# social insurance
NATIONAL_PENSION_RATE = 0.045
NATIONAL_PENSION_CAP = 248850
HEALTH_INSURANCE_RATE = 0.03545
LONG_TERM_CARE_RATE = 0.1227
EMPLOYMENT_INSURANCE_RATE = 0.009

TRANSFER_TAX_RATE_HOUSE_LONG_HELD = 0.1
TRANSFER_TAX_RATE_HOUSE = 0.2
TRANSFER_TAX_RATE_OTHER = 0.3
TRANSFER_TAX_LONG_HOLDING_YEARS = 10
RETIREMENT_ALLOWANCE_PER_YEAR = 1200000
RETIREMENT_TAX_RATE = 0.05
PENSION_TAX_RATE_NATIONAL = 0.03
PENSION_TAX_RATE = 0.05
FINANCIAL_INCOME_THRESHOLD = 20000000
FINANCIAL_TAX_RATE_HIGH = 0.15
FINANCIAL_TAX_RATE_LOW = 0.14
INTEREST_TAX_RATE = 0.15
DIVIDEND_TAX_RATE = 0.15

# car tax
PASSENGER_CAR_TAX_PER_CC = (
    (1000, 80),
    (1600, 140),
    (None, 200),
)
VAN_TAX_PER_CC = 65
TRUCK_TAX = 28500
SPECIAL_VEHICLE_TAX = 60000
CAR_AGE_DISCOUNT_START = 2
CAR_AGE_DISCOUNT_PER_YEAR = 0.05
CAR_AGE_DISCOUNT_CAP = 0.5

# pension projections
PENSION_START_AGE = 60
PENSION_END_AGE = 90
PENSION_DURATION_YEARS = 30
DEFAULT_ANNUAL_RETURN = 0.05

# parental leave
PARENTAL_LEAVE_WAGE_RATIO = 0.8
PARENTAL_LEAVE_CAP = 1500000
PARENTAL_LEAVE_BONUS = 2500000
PARENTAL_LEAVE_BONUS_MONTHS = 3
PARENTAL_LEAVE_FULL_PAY_MONTHS = 6
PARENTAL_LEAVE_REDUCED_RATIO = 0.05
PARENTAL_LEAVE_RETENTION_RATE = 0.25
DAYS_PER_LEAVE_MONTH = 30

# unemployment benefit (2024)
UNEMPLOYMENT_BENEFIT_RATIO = 0.6
UNEMPLOYMENT_DAILY_CAP = 66360
MINIMUM_HOURLY_WAGE = 9620
UNEMPLOYMENT_MINIMUM_WAGE_RATIO = 0.8
UNEMPLOYMENT_DAILY_FLOOR_8H = 61568
UNEMPLOYMENT_AGE_THRESHOLD = 50
UNEMPLOYMENT_DISABILITY_DAYS = 30
# (insurance months upper bound, days under 50, days 50 and over)
UNEMPLOYMENT_PAYMENT_DAYS = (
    (12, 120, 120),
    (36, 150, 180),
    (60, 180, 210),
    (None, 210, 240),
)

# severance pay
SEVERANCE_REFERENCE_DAYS = 90
SEVERANCE_DAYS_PER_YEAR_OF_SERVICE = 30
DAYS_PER_YEAR = 365

# real estate
DEFAULT_COMMISSION_RATES = {
    ContractType.SALE: 0.9,
    ContractType.JEONSE: 0.8,
    ContractType.MONTHLY_RENT: 0.4,
}
DEFAULT_VAT_RATE = 10
MONTHLY_RENT_MULTIPLIER = 100
SQUARE_METERS_PER_PYEONG = 3.3058

# health
BMI_THRESHOLDS = (18.5, 23, 25)
IDEAL_BMI_MALE = 22
IDEAL_BMI_FEMALE = 21
REFERENCE_BODY_WEIGHT = 70
LUTEAL_PHASE_DAYS = 14
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1

# kcal burned per hour by a 70 kg person
EXERCISE_CALORIES = {
    ExerciseType.WALK_SLOW: 200,
    ExerciseType.WALK_NORMAL: 300,
    ExerciseType.WALK_FAST: 400,
    ExerciseType.RUN_SLOW: 500,
    ExerciseType.RUN_NORMAL: 700,
    ExerciseType.RUN_FAST: 900,
    ExerciseType.GOLF_DOUBLE: 250,
    ExerciseType.GOLF_QUAD: 200,
    ExerciseType.BASKETBALL_HALF: 400,
    ExerciseType.BASKETBALL_FULL: 600,
    ExerciseType.ARCHERY: 150,
    ExerciseType.BILLIARDS: 120,
    ExerciseType.DANCE_WALTZ: 180,
    ExerciseType.DANCE_DISCO: 300,
    ExerciseType.DANCE_AEROBICS: 400,
    ExerciseType.HIKING: 450,
    ExerciseType.RACQUETBALL: 600,
    ExerciseType.ROLLER_SKATING: 500,
    ExerciseType.BEAUTY_GYMNASTICS: 200,
    ExerciseType.VOLLEYBALL_MODERATE: 300,
    ExerciseType.VOLLEYBALL_INTENSE: 400,
    ExerciseType.BADMINTON_SINGLES: 500,
    ExerciseType.BADMINTON_DOUBLES: 350,
    ExerciseType.BOATING: 300,
    ExerciseType.BOWLING: 200,
    ExerciseType.SWIMMING_BACK_25: 400,
    ExerciseType.SWIMMING_BACK_40: 600,
    ExerciseType.SWIMMING_BUTTERFLY_20: 700,
    ExerciseType.SWIMMING_BUTTERFLY_40: 900,
    ExerciseType.SWIMMING_FREE_25: 400,
    ExerciseType.SWIMMING_FREE_50: 800,
    ExerciseType.SQUASH_RECREATIONAL: 500,
    ExerciseType.SQUASH_COMPETITIVE: 700,
    ExerciseType.SKIING: 500,
    ExerciseType.HORSE_WALK: 200,
    ExerciseType.HORSE_TROT: 400,
    ExerciseType.ICE_SKATING: 500,
    ExerciseType.ICE_HOCKEY: 700,
    ExerciseType.BASEBALL_FIELDER: 300,
    ExerciseType.BASEBALL_PITCHER: 350,
    ExerciseType.JUDO: 700,
    ExerciseType.CYCLING_FLAT: 300,
    ExerciseType.CYCLING_HILL: 800,
    ExerciseType.SOCCER_MODERATE: 500,
    ExerciseType.SOCCER_INTENSE: 700,
    ExerciseType.TABLE_TENNIS: 300,
    ExerciseType.TAEKWONDO: 800,
    ExerciseType.FENCING_MODERATE: 400,
    ExerciseType.FENCING_INTENSE: 600,
    ExerciseType.TENNIS_SINGLES: 600,
    ExerciseType.TENNIS_DOUBLES: 400,
    ExerciseType.FIELD_HOCKEY: 600,
    ExerciseType.HIKING_TRAIL: 400,
    ExerciseType.HANDBALL_MODERATE: 600,
    ExerciseType.HANDBALL_COMPETITIVE: 800,
}

GRADE_POINTS_4_5 = {
    'A+': 4.5, 'A': 4.0,
    'B+': 3.5, 'B': 3.0,
    'C+': 2.5, 'C': 2.0,
    'D+': 1.5, 'D': 1.0,
    'F': 0.0,
}
GRADE_POINTS_4_3 = {
    'A+': 4.3, 'A': 4.0, 'A-': 3.7,
    'B+': 3.3, 'B': 3.0, 'B-': 2.7,
    'C+': 2.3, 'C': 2.0, 'C-': 1.7,
    'D+': 1.3, 'D': 1.0, 'D-': 0.7,
    'F': 0.0,
}

ZODIAC_ANIMALS = (
    'rat', 'ox', 'tiger', 'rabbit', 'dragon', 'snake',
    'horse', 'goat', 'monkey', 'rooster', 'dog', 'pig',
)
# (name, first month, first day) in calendar order
STAR_SIGNS = (
    ('capricorn', 1, 1),
    ('aquarius', 1, 20),
    ('pisces', 2, 19),
    ('aries', 3, 21),
    ('taurus', 4, 20),
    ('gemini', 5, 21),
    ('cancer', 6, 22),
    ('leo', 7, 23),
    ('virgo', 8, 23),
    ('libra', 9, 23),
    ('scorpio', 10, 23),
    ('sagittarius', 11, 23),
    ('capricorn', 12, 22),
)
