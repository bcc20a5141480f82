# -*- coding: utf-8 -*-
"""
This module contains the Korean lunar calendar conversions and the zodiac and
star sign lookups.
"""
import datetime as dt
import logging

from korean_lunar_calendar import KoreanLunarCalendar

from ._constants import ZODIAC_ANIMALS, STAR_SIGNS
from ._enums import CalendarType
from ._models import DateConversionResult
from ._validators import validate_boolean, validate_date_string, validate_positive_integer

logger = logging.getLogger(__name__)

def _split_date_string(value, name):
    if not isinstance(value, str):
        raise TypeError(f"Variable {name} must be of type date with format YYYY-MM-DD")
    try:
        year, month, day = (int(part) for part in value.split('-'))
    except ValueError:
        raise ValueError(f"Variable {name} must be a date in YYYY-MM-DD format.")
    return year, month, day

def _format_date(year, month, day):
    return f"{year:04d}-{month:02d}-{day:02d}"

def convert_date(date_string, is_lunar, is_intercalation=False):
    """
    Converts a date between the Korean lunar calendar and the solar calendar.

    :param date_string: The date to convert in YYYY-MM-DD format.
    :param is_lunar: True when date_string is a lunar date, False when it is a solar date.
    :param is_intercalation: Whether a lunar date_string falls in a leap month.
    :return: A DateConversionResult; calendar_type is the calendar of the converted date.
    :raises ValueError: If the date does not exist or is outside the supported range.
    """
    validate_boolean(is_lunar, "IS_LUNAR")
    validate_boolean(is_intercalation, "IS_INTERCALATION")
    calendar = KoreanLunarCalendar()

    if is_lunar:
        # lunar months have 29 or 30 days, so only the library can tell a valid lunar date
        year, month, day = _split_date_string(date_string, "DATE_STRING")
        if not calendar.setLunarDate(year, month, day, is_intercalation):
            raise ValueError(f"Lunar date {date_string} does not exist or is out of the supported range.")
        logger.debug("Converted lunar date %s to solar", date_string)
        return DateConversionResult(
            original_date=date_string,
            converted_date=_format_date(calendar.solarYear, calendar.solarMonth, calendar.solarDay),
            calendar_type=CalendarType.SOLAR,
        )

    validate_date_string(date_string, "DATE_STRING")
    solar_date = dt.datetime.strptime(date_string, '%Y-%m-%d')
    if not calendar.setSolarDate(solar_date.year, solar_date.month, solar_date.day):
        raise ValueError(f"Solar date {date_string} is out of the supported range.")
    logger.debug("Converted solar date %s to lunar", date_string)
    return DateConversionResult(
        original_date=date_string,
        converted_date=_format_date(calendar.lunarYear, calendar.lunarMonth, calendar.lunarDay),
        calendar_type=CalendarType.LUNAR,
        is_intercalation=calendar.isIntercalation,
    )

def get_zodiac(year):
    """The zodiac animal of a year, 4 AD being a year of the rat."""
    return ZODIAC_ANIMALS[(year - 4) % 12]

def get_star_sign(month, day):
    """
    The western star sign of a birthday.

    :param month: The month, 1 to 12.
    :param day: The day of the month.
    :return: The lowercase English name of the star sign.
    """
    validate_positive_integer(month, "MONTH")
    validate_positive_integer(day, "DAY")
    try:
        # a leap year accepts February 29
        dt.date(2000, month, day)
    except ValueError:
        raise ValueError(f"Variables MONTH and DAY must form a valid day of the year, got {month}-{day}.")

    sign = STAR_SIGNS[0][0]
    for name, first_month, first_day in STAR_SIGNS:
        if (month, day) >= (first_month, first_day):
            sign = name
    return sign
