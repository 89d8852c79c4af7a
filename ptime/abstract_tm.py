import functools


@functools.total_ordering
class AbstractTm:
    """
    Abstract class representing a broken-down moment in time.

    Equality, ordering, hashing and subtraction compare absolute timestamps, so
    two values with different UTC offsets that name the same instant are equal.
    """

    def to_jdn(self):
        raise NotImplementedError("Subclasses must implement this method")

    def to_timespec(self):
        raise NotImplementedError("Subclasses must implement this method")

    def compare(self, other):
        """
        Returns -1, 0 or 1 as this instant is before, equal to or after ``other``.
        """
        mine = self.to_timespec()
        theirs = other.to_timespec()
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other):
        if other is None or not isinstance(other, AbstractTm):
            return NotImplemented
        return self.to_timespec() == other.to_timespec()

    def __lt__(self, other):
        if not isinstance(other, AbstractTm):
            return NotImplemented
        return self.to_timespec() < other.to_timespec()

    def __hash__(self):
        return hash(self.to_timespec())

    def __sub__(self, other):
        if isinstance(other, AbstractTm):
            return self.to_timespec() - other.to_timespec()
        return NotImplemented
