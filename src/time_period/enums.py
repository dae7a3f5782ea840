"""
Time Period Enumerations.

This module defines the enums used throughout time_period to standardise constants across the package.
"""

from enum import Enum


class Designator(Enum):
    """Enum identifying which field of a period carries the attached fraction.

    The value of each member is the name of the corresponding Period field, so the
    fractional field can be looked up with ``getattr(period, designator.value)``.

    Attributes:
        NONE: The period has no fraction.
        YEAR: The fraction is attached to the years field.
        MONTH: The fraction is attached to the months field.
        DAY: The fraction is attached to the days field.
        HOUR: The fraction is attached to the hours field.
        MINUTE: The fraction is attached to the minutes field.
        SECOND: The fraction is attached to the seconds field.
    """

    NONE = "none"
    YEAR = "years"
    MONTH = "months"
    DAY = "days"
    HOUR = "hours"
    MINUTE = "minutes"
    SECOND = "seconds"

    @property
    def is_date(self) -> bool:
        """True if the designator is one of the calendar (year, month, day) fields."""
        return self in (Designator.YEAR, Designator.MONTH, Designator.DAY)
