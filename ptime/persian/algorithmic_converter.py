from ptime.config.constants import DAYS_IN_2820_YEARS, PERSIAN_EPOCH_JDN, PERSIAN_MONTH_OFFSETS


class AlgorithmicConverter:
    """
    Persian side of the JDN pivot, using the arithmetic 2820-year grand cycle.
    Months are 1-based. There is no year 0: year -1 is followed by year 1.
    """

    @staticmethod
    def to_jdn(year: int, month: int, day: int) -> int:
        base = year - 474 if year >= 0 else year - 473
        epy = 474 + base % 2820
        md = (month - 1) * 31 if month <= 7 else (month - 1) * 30 + 6
        return (
            day
            + md
            + (epy * 682 - 110) // 2816
            + (epy - 1) * 365
            + base // 2820 * DAYS_IN_2820_YEARS
            + PERSIAN_EPOCH_JDN
        )

    @staticmethod
    def from_jdn(jdn: int):
        depoch = jdn - AlgorithmicConverter.to_jdn(475, 1, 1)
        cycle, cyear = divmod(depoch, DAYS_IN_2820_YEARS)
        if cyear == DAYS_IN_2820_YEARS - 1:
            ycycle = 2820
        else:
            aux1, aux2 = divmod(cyear, 366)
            ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1

        year = ycycle + 2820 * cycle + 474
        if year <= 0:
            year -= 1

        yday = jdn - AlgorithmicConverter.to_jdn(year, 1, 1) + 1
        month = -(-yday // 31) if yday <= 186 else -(-(yday - 6) // 30)
        day = jdn - AlgorithmicConverter.to_jdn(year, month, 1) + 1
        return year, month, day

    @staticmethod
    def day_of_year(month: int, day: int) -> int:
        """
        0-based day of year for a 1-based month.
        """
        return PERSIAN_MONTH_OFFSETS[month - 1] + day - 1
