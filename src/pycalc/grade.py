# -*- coding: utf-8 -*-
"""
This module contains the grade point average calculators for the 4.5 and 4.3 scales.
"""
from ._constants import GRADE_POINTS_4_5, GRADE_POINTS_4_3
from ._enums import GradeScale
from ._models import GradeResult
from ._rounding import quantize
from ._validators import validate_choice

_GRADE_POINTS = {
    GradeScale.FOUR_FIVE: GRADE_POINTS_4_5,
    GradeScale.FOUR_THREE: GRADE_POINTS_4_3,
}

def grade_to_point(grade, scale):
    """Points of a letter grade on a scale. Unknown letters are worth nothing."""
    validate_choice(scale, GradeScale, "SCALE")
    return _GRADE_POINTS[GradeScale(scale)].get(grade, 0.0)

def _average(points, credits):
    if credits == 0:
        return quantize(0, 2)
    return quantize(points / credits, 2)

def calculate_grades(courses):
    """
    Calculates the credit weighted GPA of all courses and of the major courses
    on both scales.

    :param courses: An iterable of Course.
    :return: A GradeResult; a GPA over zero credits is 0.
    """
    total_points_4_5 = 0
    total_points_4_3 = 0
    major_points_4_5 = 0
    major_points_4_3 = 0
    total_credits = 0
    major_credits = 0

    for course in courses:
        point_4_5 = grade_to_point(course.grade, GradeScale.FOUR_FIVE) * course.credits
        point_4_3 = grade_to_point(course.grade, GradeScale.FOUR_THREE) * course.credits
        total_points_4_5 += point_4_5
        total_points_4_3 += point_4_3
        total_credits += course.credits

        if course.is_major:
            major_points_4_5 += point_4_5
            major_points_4_3 += point_4_3
            major_credits += course.credits

    return GradeResult(
        total_gpa_4_5=_average(total_points_4_5, total_credits),
        total_gpa_4_3=_average(total_points_4_3, total_credits),
        major_gpa_4_5=_average(major_points_4_5, major_credits),
        major_gpa_4_3=_average(major_points_4_3, major_credits),
        total_credits=total_credits,
        major_credits=major_credits,
    )

def convert_score(score, current_scale):
    """Rescales a GPA from the 4.3 scale to the 4.5 scale or the other way round."""
    validate_choice(current_scale, GradeScale, "CURRENT_SCALE")

    if GradeScale(current_scale) == GradeScale.FOUR_THREE:
        scale_ratio = GradeScale.FOUR_FIVE.value / GradeScale.FOUR_THREE.value
    else:
        scale_ratio = GradeScale.FOUR_THREE.value / GradeScale.FOUR_FIVE.value
    return quantize(score * scale_ratio, 2)
