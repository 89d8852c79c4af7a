def divider(num: int, den: int) -> int:
    """
    Floor modulo: the result has the sign of the divisor.

    :param num: Dividend, may be negative.
    :param den: Positive divisor.
    :return: ``num`` modulo ``den`` rounded toward negative infinity.
    """
    return num - (num // den) * den


def trunc_div(num: int, den: int) -> int:
    """
    Integer division rounded toward zero.

    The classic calendar-to-JDN formulas are written for truncating division,
    which differs from ``//`` when the dividend is negative.

    :param num: Dividend.
    :param den: Non-zero divisor.
    :return: Quotient truncated toward zero.
    """
    quotient = abs(num) // abs(den)
    return quotient if (num >= 0) == (den > 0) else -quotient
