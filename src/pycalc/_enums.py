# -*- coding: utf-8 -*-
"""
This module contains the closed value sets used by the calculators.
"""
from enum import Enum

class RepaymentMethod(Enum):
    EQUAL_INSTALLMENT = 'equal-installment'
    EQUAL_PRINCIPAL = 'equal-principal'
    BULLET_PAYMENT = 'bullet-payment'

class HousingContract(Enum):
    JEONSE = 'jeonse'
    MONTHLY_RENT = 'monthly-rent'

class ContractType(Enum):
    SALE = 'sale'
    JEONSE = 'jeonse'
    MONTHLY_RENT = 'monthly-rent'

class PropertyType(Enum):
    HOUSE = 'house'
    OFFICETEL = 'officetel'
    PRESALE_RIGHT = 'presale-right'
    OTHER = 'other'

class AreaUnit(Enum):
    PYEONG = 'pyeong'
    SQUARE_METER = 'square-meter'

class BmiCategory(Enum):
    UNDERWEIGHT = 'underweight'
    NORMAL = 'normal'
    OVERWEIGHT = 'overweight'
    OBESE = 'obese'

class Gender(Enum):
    MALE = 'male'
    FEMALE = 'female'

class ExerciseType(Enum):
    WALK_SLOW = 'walk-slow'
    WALK_NORMAL = 'walk-normal'
    WALK_FAST = 'walk-fast'
    RUN_SLOW = 'run-slow'
    RUN_NORMAL = 'run-normal'
    RUN_FAST = 'run-fast'
    GOLF_DOUBLE = 'golf-double'
    GOLF_QUAD = 'golf-quad'
    BASKETBALL_HALF = 'basketball-half'
    BASKETBALL_FULL = 'basketball-full'
    ARCHERY = 'archery'
    BILLIARDS = 'billiards'
    DANCE_WALTZ = 'dance-waltz'
    DANCE_DISCO = 'dance-disco'
    DANCE_AEROBICS = 'dance-aerobics'
    HIKING = 'hiking'
    RACQUETBALL = 'racquetball'
    ROLLER_SKATING = 'roller-skating'
    BEAUTY_GYMNASTICS = 'beauty-gymnastics'
    VOLLEYBALL_MODERATE = 'volleyball-moderate'
    VOLLEYBALL_INTENSE = 'volleyball-intense'
    BADMINTON_SINGLES = 'badminton-singles'
    BADMINTON_DOUBLES = 'badminton-doubles'
    BOATING = 'boating'
    BOWLING = 'bowling'
    SWIMMING_BACK_25 = 'swimming-back-25'
    SWIMMING_BACK_40 = 'swimming-back-40'
    SWIMMING_BUTTERFLY_20 = 'swimming-butterfly-20'
    SWIMMING_BUTTERFLY_40 = 'swimming-butterfly-40'
    SWIMMING_FREE_25 = 'swimming-free-25'
    SWIMMING_FREE_50 = 'swimming-free-50'
    SQUASH_RECREATIONAL = 'squash-recreational'
    SQUASH_COMPETITIVE = 'squash-competitive'
    SKIING = 'skiing'
    HORSE_WALK = 'horse-walk'
    HORSE_TROT = 'horse-trot'
    ICE_SKATING = 'ice-skating'
    ICE_HOCKEY = 'ice-hockey'
    BASEBALL_FIELDER = 'baseball-fielder'
    BASEBALL_PITCHER = 'baseball-pitcher'
    JUDO = 'judo'
    CYCLING_FLAT = 'cycling-flat'
    CYCLING_HILL = 'cycling-hill'
    SOCCER_MODERATE = 'soccer-moderate'
    SOCCER_INTENSE = 'soccer-intense'
    TABLE_TENNIS = 'table-tennis'
    TAEKWONDO = 'taekwondo'
    FENCING_MODERATE = 'fencing-moderate'
    FENCING_INTENSE = 'fencing-intense'
    TENNIS_SINGLES = 'tennis-singles'
    TENNIS_DOUBLES = 'tennis-doubles'
    FIELD_HOCKEY = 'field-hockey'
    HIKING_TRAIL = 'hiking-trail'
    HANDBALL_MODERATE = 'handball-moderate'
    HANDBALL_COMPETITIVE = 'handball-competitive'

class GradeScale(Enum):
    FOUR_FIVE = 4.5
    FOUR_THREE = 4.3

class AssetType(Enum):
    HOUSE = 'house'
    LAND = 'land'
    OTHER = 'other'

class PensionType(Enum):
    NATIONAL = 'national'
    CIVIL_SERVICE = 'civil-service'
    PRIVATE_SCHOOL = 'private-school'

class CarType(Enum):
    PASSENGER = 'passenger'
    VAN = 'van'
    TRUCK = 'truck'
    SPECIAL = 'special'

class SalaryBasis(Enum):
    ANNUAL = 'annual'
    MONTHLY = 'monthly'

class RetirementPay(Enum):
    SEPARATE = 'separate'
    INCLUDED = 'included'

class CalendarType(Enum):
    LUNAR = 'lunar'
    SOLAR = 'solar'
