"""
Period: a calendar/clock period held as a compact fixed-point value.

A period is six signed whole-number fields (years, months, days, hours,
minutes and seconds) plus at most one fraction, in hundredths, which is
attached to exactly one of those fields. For example "1 year, 2 months,
3.5 days" is:

    Period(years=1, months=2, days=3, fraction=50, designator=Designator.DAY)

Each field is limited to +/-32_767 and the fraction to +/-99. All non-zero
fields (and the fraction) of a period share one sign: a period is either
entirely non-negative or entirely non-positive.

Period objects are immutable and hashable. Arithmetic is available through
methods and operators, all of which return new Period objects:

    p = Period.of_hours(1) + Period.of_minutes(45)
    q = (p - Period.of_minutes(30)).normalise(precise=True)
    r = p.rational_scale(1, 3)
    t, precise = p.add_to(datetime.datetime(2025, 1, 31))

Results that do not fit into the fields of a Period raise a
PeriodOverflowError rather than being truncated.

Calendar arithmetic comes in two flavours. Precise arithmetic makes no
assumption about the length of a day or a month. Approximate arithmetic
assumes 24-hour days and the average Gregorian month of 30.436875 days
(one year is 365.2425 days); it is used only where an exact answer is not
available, and the operations that can use it report whether they did.
"""

import datetime as dt
from dataclasses import (
    dataclass,
)
from fractions import Fraction
from typing import (
    Any,
    Union,
)

from time_period.enums import Designator
from time_period.exceptions import PeriodValidationError

# The largest magnitude that each whole-number field can hold
MAX_FIELD = 32_767

# The largest magnitude of the fraction (two decimal places)
MAX_FRACTION = 99

# The average Gregorian month is 365.2425 / 12 = 30.436875 days
DAYS_PER_MONTH_E6 = 30_436_875
SECONDS_PER_MONTH = 2_629_746

CENTISECONDS_PER_CENTIMONTH = SECONDS_PER_MONTH
CENTISECONDS_PER_CENTIDAY = 86_400
CENTISECONDS_PER_DAY = 8_640_000
CENTISECONDS_PER_MONTH = 262_974_600

FIELD_NAMES = ("years", "months", "days", "hours", "minutes", "seconds")


def approximate_centiseconds(cym: int, cd: int, chms: int) -> int:
    """Return the approximate elapsed time represented by three centi-unit totals

    Months are taken to be 30.436875 days long and days 24 hours long.

    Args:
        cym: The year-month total, in hundredths of a month
        cd: The day total, in hundredths of a day
        chms: The hour-minute-second total, in hundredths of a second

    Returns:
        The total number of hundredths of a second
    """
    return (cym * CENTISECONDS_PER_CENTIMONTH) + (cd * CENTISECONDS_PER_CENTIDAY) + chms


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# ------------------------------------------------------------------------------
# Period
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Period:
    """A period of calendar and clock time.

    Period instances are immutable and hashable. Two periods are equal only when
    all of their fields are equal, so "PT60M" and "PT1H" are different periods;
    use normalise() before comparing if that matters.

    Attributes:
        years: The number of whole years
        months: The number of whole months
        days: The number of whole days
        hours: The number of whole hours
        minutes: The number of whole minutes
        seconds: The number of whole seconds
        fraction: Hundredths of a unit, added to the field named by designator
        designator: The field that the fraction belongs to
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    fraction: int = 0
    designator: Designator = Designator.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.designator, Designator):
            raise PeriodValidationError(f"Illegal designator: {self.designator!r}")
        for name in FIELD_NAMES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise PeriodValidationError(f"Illegal {name}: {value!r}")
            if abs(value) > MAX_FIELD:
                raise PeriodValidationError(f"Illegal {name}: {value}")
        if isinstance(self.fraction, bool) or not isinstance(self.fraction, int) or abs(self.fraction) > MAX_FRACTION:
            raise PeriodValidationError(f"Illegal fraction: {self.fraction!r}")
        if (self.fraction == 0) != (self.designator is Designator.NONE):
            raise PeriodValidationError(f"Fraction {self.fraction} does not match designator {self.designator.name}")
        signs = {_sign(value) for value in self._values()} - {0}
        if len(signs) > 1:
            raise PeriodValidationError(f"Period fields must not have mixed signs: {self!r}")

    def _values(self) -> tuple[int, ...]:
        return self.years, self.months, self.days, self.hours, self.minutes, self.seconds, self.fraction

    # --------------------------------------------------------------------------
    # Factories
    # --------------------------------------------------------------------------
    @staticmethod
    def of_years(no_of_years: int) -> "Period":
        """Return a period of "n" years

        Args:
            no_of_years: The number of years in the period

        Returns:
            A Period object
        """
        return Period(years=no_of_years)

    @staticmethod
    def of_months(no_of_months: int) -> "Period":
        """Return a period of "n" months

        Args:
            no_of_months: The number of months in the period

        Returns:
            A Period object
        """
        return Period(months=no_of_months)

    @staticmethod
    def of_days(no_of_days: int) -> "Period":
        """Return a period of "n" days

        Args:
            no_of_days: The number of days in the period

        Returns:
            A Period object
        """
        return Period(days=no_of_days)

    @staticmethod
    def of_hours(no_of_hours: int) -> "Period":
        """Return a period of "n" hours

        Args:
            no_of_hours: The number of hours in the period

        Returns:
            A Period object
        """
        return Period(hours=no_of_hours)

    @staticmethod
    def of_minutes(no_of_minutes: int) -> "Period":
        """Return a period of "n" minutes

        Args:
            no_of_minutes: The number of minutes in the period

        Returns:
            A Period object
        """
        return Period(minutes=no_of_minutes)

    @staticmethod
    def of_seconds(no_of_seconds: int) -> "Period":
        """Return a period of "n" seconds

        Args:
            no_of_seconds: The number of seconds in the period

        Returns:
            A Period object
        """
        return Period(seconds=no_of_seconds)

    @staticmethod
    def of_timedelta(timedelta: dt.timedelta) -> tuple["Period", bool]:
        """Return a period equivalent to an elapsed time

        Durations whose hours fit into the hours field are converted to hours,
        minutes and seconds (with hundredths of a second as the fraction); this
        is always precise. Longer durations are converted to days and clock
        fields, and longer still to years, months and days, assuming 24-hour
        days and 30.436875-day months; these conversions are not precise.
        Anything finer than a hundredth of a second is discarded.

        Args:
            timedelta: The elapsed time

        Returns:
            A tuple of (period, precise)

        Raises:
            PeriodOverflowError: If the duration is too long for a Period
        """
        from time_period.period64 import Period64  # noqa: PLC0415

        total_microseconds = (timedelta.days * 86_400 + timedelta.seconds) * 1_000_000 + timedelta.microseconds
        p64, precise = Period64.of_microseconds(total_microseconds, str(timedelta))
        return p64.to_period(), precise

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------
    def sign(self) -> int:
        """Return -1, 0 or +1 according to the sign of the period."""
        for value in self._values():
            if value != 0:
                return _sign(value)
        return 0

    def is_zero(self) -> bool:
        return self.sign() == 0

    def is_positive(self) -> bool:
        return self.sign() > 0

    def is_negative(self) -> bool:
        return self.sign() < 0

    def centi_ym(self) -> int:
        """Return the years and months of the period in hundredths of a month."""
        total = (self.years * 12 + self.months) * 100
        if self.designator is Designator.YEAR:
            return total + self.fraction * 12
        if self.designator is Designator.MONTH:
            return total + self.fraction
        return total

    def centi_days(self) -> int:
        """Return the days of the period in hundredths of a day."""
        if self.designator is Designator.DAY:
            return self.days * 100 + self.fraction
        return self.days * 100

    def centi_hms(self) -> int:
        """Return the hours, minutes and seconds of the period in hundredths of a second."""
        total = (self.hours * 3_600 + self.minutes * 60 + self.seconds) * 100
        if self.designator is Designator.HOUR:
            return total + self.fraction * 3_600
        if self.designator is Designator.MINUTE:
            return total + self.fraction * 60
        if self.designator is Designator.SECOND:
            return total + self.fraction
        return total

    def duration(self) -> tuple[dt.timedelta, bool]:
        """Return the approximate elapsed time of the period

        Years and months are converted assuming 30.436875-day months,
        and days are assumed to be 24 hours long.

        Returns:
            A tuple of (timedelta, precise) where precise is True
            only if the period has no years, months or days
        """
        ymd = approximate_centiseconds(self.centi_ym(), self.centi_days(), 0)
        centiseconds = ymd + self.centi_hms()
        return dt.timedelta(microseconds=centiseconds * 10_000), ymd == 0

    def hms_duration(self) -> dt.timedelta:
        """Return the exact elapsed time of the hours, minutes and seconds of the period."""
        return dt.timedelta(microseconds=self.centi_hms() * 10_000)

    # --------------------------------------------------------------------------
    # Transformations
    # --------------------------------------------------------------------------
    def negate(self) -> "Period":
        return Period(
            years=-self.years,
            months=-self.months,
            days=-self.days,
            hours=-self.hours,
            minutes=-self.minutes,
            seconds=-self.seconds,
            fraction=-self.fraction,
            designator=self.designator,
        )

    def abs(self) -> "Period":
        return self.negate() if self.is_negative() else self

    def normalise(self, precise: bool) -> "Period":
        """Return an equivalent period in which carries have been propagated
        from seconds up to years

        With precise=True, hours are never folded into days and fractions of
        a day are kept. With precise=False, days are taken to be 24 hours and
        months 30.436875 days long where that helps.

        Args:
            precise: Whether to avoid the 24-hour day and average month assumptions

        Returns:
            A Period object

        Raises:
            PeriodOverflowError: If the result does not fit into a Period
        """
        from time_period.period64 import Period64  # noqa: PLC0415

        return Period64.of_period(self, repr(self)).normalise64(precise).to_period()

    def simplify(self, precise: bool) -> "Period":
        """Return an equivalent period with fewer non-zero fields, where that
        can be done without losing information

        The rules below are applied in order. A rule is skipped when the
        fraction is attached to the larger of the two fields it combines.

            P1YnM becomes (12+n) months for 0 < n <= 6
            P1DTnH becomes (24+n) hours for 0 < n <= 10, unless precise is true
            PT1HnM becomes (60+n) minutes for 0 < n <= 10
            PT1MnS becomes (60+n) seconds for 0 < n <= 10

        Months and days are never combined. This is meant to be applied to a
        normalised period.

        Args:
            precise: If True, days and hours are not combined

        Returns:
            A Period object
        """
        if self.is_negative():
            return self.negate().simplify(precise).negate()

        years, months, days = self.years, self.months, self.days
        hours, minutes, seconds = self.hours, self.minutes, self.seconds

        if years == 1 and 0 < months <= 6 and self.designator is not Designator.YEAR:
            years, months = 0, months + 12

        if not precise and days == 1 and 0 < hours <= 10 and self.designator is not Designator.DAY:
            days, hours = 0, hours + 24

        if hours == 1 and 0 < minutes <= 10 and self.designator is not Designator.HOUR:
            hours, minutes = 0, minutes + 60

        if minutes == 1 and 0 < seconds <= 10 and self.designator is not Designator.MINUTE:
            minutes, seconds = 0, seconds + 60

        return Period(
            years=years,
            months=months,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            fraction=self.fraction,
            designator=self.designator,
        )

    # --------------------------------------------------------------------------
    # Arithmetic
    # --------------------------------------------------------------------------
    def add(self, other: "Period") -> "Period":
        """Add two periods together. Use with negate() to subtract periods.

        The result is not normalised.

        Args:
            other: The period to add

        Returns:
            A Period object

        Raises:
            PeriodOverflowError: If the sum does not fit into a Period
        """
        from time_period.arithmetic import add  # noqa: PLC0415

        return add(self, other)

    def subtract(self, other: "Period") -> "Period":
        return self.add(other.negate())

    def add_to(self, datetime_obj: dt.datetime) -> tuple[dt.datetime, bool]:
        """Add the period to a datetime

        Whole years, months and days are added on the calendar (a day of
        month past the end of a shorter month rolls over into the next one,
        so Jan 31 plus one month is early March), followed by the exact
        hours, minutes and seconds. When a fraction is attached to the years,
        months or days the approximate elapsed time of the whole period is
        added instead.

        Args:
            datetime_obj: The datetime to add the period to

        Returns:
            A tuple of (datetime, precise)

        Raises:
            PeriodOverflowError: If the result is outside the range of datetime
        """
        from time_period.arithmetic import add_to  # noqa: PLC0415

        return add_to(self, datetime_obj)

    def scale(self, factor: Union[int, float, Fraction]) -> "Period":
        """Multiply the period by a factor, which can shrink or enlarge it
        and changes its sign if negative. The result is normalised.

        Floats are taken at the value of their shortest decimal representation,
        so 0.1 is treated as exactly 1/10.

        Args:
            factor: The multiplication factor

        Returns:
            A Period object

        Raises:
            PeriodValidationError: If the factor is not a finite number
            PeriodOverflowError: If the result does not fit into a Period
        """
        from time_period.arithmetic import scale  # noqa: PLC0415

        return scale(self, factor)[0]

    def rational_scale(self, multiplier: int, divisor: int) -> "Period":
        """Multiply the period by multiplier/divisor. The result is normalised.

        Args:
            multiplier: The numerator of the scale factor
            divisor: The denominator of the scale factor

        Returns:
            A Period object

        Raises:
            ZeroDivisionError: If the divisor is zero
            PeriodOverflowError: If the result does not fit into a Period
        """
        from time_period.arithmetic import rational_scale  # noqa: PLC0415

        return rational_scale(self, multiplier, divisor)[0]

    def __neg__(self) -> "Period":
        return self.negate()

    def __abs__(self) -> "Period":
        return self.abs()

    def __add__(self, other: Any) -> "Period":
        if not isinstance(other, Period):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Period":
        if not isinstance(other, Period):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: Any) -> "Period":
        if isinstance(factor, bool) or not isinstance(factor, (int, float, Fraction)):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__
