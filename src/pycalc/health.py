# -*- coding: utf-8 -*-
"""
This module contains the body and health calculators.
"""
import datetime as dt

from dateutil.relativedelta import relativedelta

from ._constants import (
    BMI_THRESHOLDS,
    IDEAL_BMI_MALE,
    IDEAL_BMI_FEMALE,
    REFERENCE_BODY_WEIGHT,
    EXERCISE_CALORIES,
    LUTEAL_PHASE_DAYS,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION,
)
from ._enums import BmiCategory, Gender, ExerciseType
from ._models import BmiResult, IdealWeightResult, OvulationResult
from ._rounding import quantize
from ._validators import (
    validate_strictly_positive_numeric,
    validate_positive_numeric,
    validate_positive_integer,
    validate_choice,
    validate_date,
)

def _bmi_category(bmi):
    underweight, normal, overweight = BMI_THRESHOLDS
    if bmi < underweight:
        return BmiCategory.UNDERWEIGHT
    if bmi < normal:
        return BmiCategory.NORMAL
    if bmi < overweight:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE

def calculate_bmi(height_cm, weight_kg):
    """
    Calculates the body mass index with the Korean obesity cut-offs.

    :param height_cm: Height in centimetres.
    :param weight_kg: Weight in kilograms.
    :return: A BmiResult with the index rounded to two decimals.
    """
    validate_strictly_positive_numeric(height_cm, "HEIGHT_CM")
    validate_positive_numeric(weight_kg, "WEIGHT_KG")

    height_m = height_cm / 100
    bmi = weight_kg / (height_m * height_m)
    return BmiResult(bmi=quantize(bmi, 2), category=_bmi_category(bmi))

def calculate_ideal_weight(height_cm, weight_kg, gender):
    """
    Calculates the standard weight for a height and how far a weight is from it.

    The standard weight is the weight at a BMI of 22 for men and 21 for women.
    The obesity rate is the excess over the standard weight in percent.
    """
    validate_strictly_positive_numeric(height_cm, "HEIGHT_CM")
    validate_choice(gender, Gender, "GENDER")

    height_m = height_cm / 100
    ideal_bmi = IDEAL_BMI_MALE if Gender(gender) == Gender.MALE else IDEAL_BMI_FEMALE
    ideal_weight = ideal_bmi * height_m ** 2
    obesity_rate = (weight_kg - ideal_weight) / ideal_weight * 100
    return IdealWeightResult(ideal_weight=quantize(ideal_weight, 2), obesity_rate=quantize(obesity_rate, 2))

def calculate_calories(exercise_type, weight_kg, duration_minutes):
    """Calories burned by an exercise, scaled from a 70 kg reference body."""
    validate_choice(exercise_type, ExerciseType, "EXERCISE_TYPE")
    validate_positive_numeric(weight_kg, "WEIGHT_KG")
    validate_positive_numeric(duration_minutes, "DURATION_MINUTES")

    calories_per_hour = EXERCISE_CALORIES[ExerciseType(exercise_type)]
    calories_burned = calories_per_hour * (weight_kg / REFERENCE_BODY_WEIGHT) * (duration_minutes / 60)
    return quantize(calories_burned, 2)

def calculate_ovulation(last_period_start_date, cycle_length):
    """
    Estimates the ovulation date and fertile window.

    Ovulation is assumed fourteen days before the next period; the fertile
    window runs from five days before to one day after ovulation.

    :param last_period_start_date: A date or a YYYY-MM-DD string.
    :param cycle_length: The cycle length in days.
    :return: An OvulationResult.
    """
    validate_date(last_period_start_date, "LAST_PERIOD_START_DATE")
    validate_positive_integer(cycle_length, "CYCLE_LENGTH")

    if isinstance(last_period_start_date, str):
        last_period_start_date = dt.datetime.strptime(last_period_start_date, '%Y-%m-%d').date()

    ovulation_date = last_period_start_date + relativedelta(days=cycle_length - LUTEAL_PHASE_DAYS)
    return OvulationResult(
        ovulation_date=ovulation_date,
        fertile_window_start=ovulation_date - relativedelta(days=FERTILE_DAYS_BEFORE_OVULATION),
        fertile_window_end=ovulation_date + relativedelta(days=FERTILE_DAYS_AFTER_OVULATION),
    )
