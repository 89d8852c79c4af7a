class TwelveMonthsYear:
    @staticmethod
    def month_start_of_months_distance(base_date, months_distance: int, create_date):
        """
        Returns the first day of the month a given number of months away from the base date.

        :param base_date: The date to start from, with a 0-based ``tm_mon``.
        :param months_distance: The number of months to move, may be negative.
        :param create_date: Called as ``create_date(year, month, 1)`` with a 0-based month.
        :return: The new date at the start of the calculated month.
        """
        month = months_distance + base_date.tm_mon
        year = base_date.tm_year + month // 12
        month %= 12
        return create_date(year, month, 1)

    @staticmethod
    def months_distance_to(base_date, to_date) -> int:
        """
        Calculates the number of months between the base date and the target date.

        :param base_date: The starting date.
        :param to_date: The target date.
        :return: The number of months between the two dates.
        """
        return ((to_date.tm_year - base_date.tm_year) * 12) + to_date.tm_mon - base_date.tm_mon
