# -*- coding: utf-8 -*-
from ._models import DiscountResult
from ._rounding import quantize
from ._validators import validate_positive_numeric

def calculate_discount(original_price, discount_rate):
    """
    Calculates a discount and the price after it.

    :param original_price: The price before the discount.
    :param discount_rate: The discount in percent.
    :return: A DiscountResult rounded to the won.
    """
    validate_positive_numeric(original_price, "ORIGINAL_PRICE")
    validate_positive_numeric(discount_rate, "DISCOUNT_RATE")

    discount_amount = original_price * discount_rate / 100
    return DiscountResult(
        discount_amount=quantize(discount_amount),
        final_price=quantize(original_price - discount_amount),
    )
