class InvariantViolation(RuntimeError):
    """
    Raised when an index that must have been range-checked at construction
    (month, weekday, day of year) turns out to be out of range.

    Only reachable by building a ``Tm`` around the validating constructors.
    """


def lookup(table, index, what):
    """
    Returns ``table[index]`` for a pre-validated index.

    :param table: Fixed lookup table.
    :param index: Index that construction already range-checked.
    :param what: Name of the indexed field, used in the error message.
    :return: The table entry.
    """
    if not 0 <= index < len(table):
        raise InvariantViolation(f"invalid {what} value of {index}")
    return table[index]
