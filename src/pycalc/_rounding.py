# -*- coding: utf-8 -*-
from decimal import Decimal, ROUND_HALF_UP

def quantize(amount, places=0):
    """Round half up to the given number of decimal places."""
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(amount)).quantize(exponent, rounding=ROUND_HALF_UP)
