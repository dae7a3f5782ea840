"""
Period64: the working value used while doing period arithmetic.

A Period64 has the same shape as a Period, but every field holds a
non-negative magnitude of any size and the sign is held separately. An
operation widens its operands into Period64 values (or builds one directly
from centi-unit totals with p64_of), does its arithmetic, normalises the
result and finally narrows it back into a Period with to_period(), which
raises PeriodOverflowError if any field does not fit.

Period64 objects are mutable and each one belongs to a single operation;
the normalisation steps update the object in place and return it so that
they can be chained.
"""

import logging
from dataclasses import (
    dataclass,
)

from time_period.enums import Designator
from time_period.exceptions import PeriodOverflowError
from time_period.period import (
    CENTISECONDS_PER_CENTIDAY,
    CENTISECONDS_PER_DAY,
    CENTISECONDS_PER_MONTH,
    DAYS_PER_MONTH_E6,
    FIELD_NAMES,
    MAX_FIELD,
    MAX_FRACTION,
    SECONDS_PER_MONTH,
    Period,
    approximate_centiseconds,
)

logger = logging.getLogger(__name__)


def _reconcile(cym: int, cd: int, chms: int) -> tuple[int, int, int]:
    """Make three centi-unit totals non-negative by borrowing between them

    A negative hour-minute-second total borrows whole 24-hour days. A negative
    day total is covered by whole 24-hour days of the hour-minute-second total
    where possible, and only what is left borrows whole 30.436875-day months.
    A negative year-month total is folded into days and centiseconds entirely.
    The approximate elapsed time of the three totals must not be negative.

    Args:
        cym: The year-month total, in hundredths of a month
        cd: The day total, in hundredths of a day
        chms: The hour-minute-second total, in hundredths of a second

    Returns:
        A tuple of (cym, cd, chms), all non-negative
    """
    total = approximate_centiseconds(cym, cd, chms)
    if total < 0:
        raise AssertionError(f"Cannot reconcile negative total: {cym}, {cd}, {chms}")

    if chms < 0:
        borrowed_days = -(chms // CENTISECONDS_PER_DAY)
        chms += borrowed_days * CENTISECONDS_PER_DAY
        cd -= borrowed_days * 100

    if cd < 0 and chms >= CENTISECONDS_PER_DAY:
        borrowed_days = min(chms // CENTISECONDS_PER_DAY, -(cd // 100))
        chms -= borrowed_days * CENTISECONDS_PER_DAY
        cd += borrowed_days * 100

    if cd < 0:
        borrowed_months = -((cd * CENTISECONDS_PER_CENTIDAY) // CENTISECONDS_PER_MONTH)
        centiseconds = (cd * CENTISECONDS_PER_CENTIDAY) + (borrowed_months * CENTISECONDS_PER_MONTH)
        cym -= borrowed_months * 100
        whole_days, remainder = divmod(centiseconds, CENTISECONDS_PER_DAY)
        cd = whole_days * 100
        chms += remainder

    if cym < 0:
        cym = 0
        whole_days, chms = divmod(total, CENTISECONDS_PER_DAY)
        cd = whole_days * 100

    return cym, cd, chms


def p64_of(cym: int, cd: int, chms: int, negative: bool) -> "Period64":
    """Return a normalised Period64 from three centi-unit totals

    The whole part of each total becomes months, days and seconds respectively
    and the remainder becomes the fraction. Only one fraction can be kept: a
    day remainder replaces a month remainder, and a second remainder replaces
    both.

    Args:
        cym: The year-month total, in hundredths of a month
        cd: The day total, in hundredths of a day
        chms: The hour-minute-second total, in hundredths of a second
        negative: Whether the result is a negative period

    Returns:
        A Period64 object, normalised in precise mode
    """
    if cym < 0 or cd < 0 or chms < 0:
        cym, cd, chms = _reconcile(cym, cd, chms)

    months, ym_fraction = divmod(cym, 100)
    days, day_fraction = divmod(cd, 100)
    seconds, second_fraction = divmod(chms, 100)
    p64 = Period64(months=months, days=days, seconds=seconds, negative=negative)

    for designator, remainder in (
        (Designator.MONTH, ym_fraction),
        (Designator.DAY, day_fraction),
        (Designator.SECOND, second_fraction),
    ):
        if remainder != 0:
            p64.fraction = remainder
            p64.designator = designator

    return p64.normalise64(True)


# ------------------------------------------------------------------------------
# Period64
# ------------------------------------------------------------------------------
@dataclass
class Period64:
    """A period with widened, sign-less fields, used for intermediate results.

    Attributes:
        years, months, days, hours, minutes, seconds: Magnitudes of the fields
        fraction: Magnitude of the fraction, in hundredths
        designator: The field that the fraction belongs to
        negative: True if the period is negative
        input: A description of the operation's input, used in error messages
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    fraction: int = 0
    designator: Designator = Designator.NONE
    negative: bool = False
    input: str = ""

    @staticmethod
    def of_period(period: Period, input: str = "") -> "Period64":
        """Return a Period64 holding the magnitudes of a period's fields

        Args:
            period: The period to widen
            input: A description of the period, used in error messages

        Returns:
            A Period64 object
        """
        magnitude = period.abs()
        return Period64(
            years=magnitude.years,
            months=magnitude.months,
            days=magnitude.days,
            hours=magnitude.hours,
            minutes=magnitude.minutes,
            seconds=magnitude.seconds,
            fraction=magnitude.fraction,
            designator=magnitude.designator,
            negative=period.is_negative(),
            input=input,
        )

    @staticmethod
    def of_microseconds(total_microseconds: int, input: str = "") -> tuple["Period64", bool]:
        """Return a Period64 equivalent to an elapsed time

        See Period.of_timedelta.

        Args:
            total_microseconds: The elapsed time in microseconds
            input: A description of the elapsed time, used in error messages

        Returns:
            A tuple of (Period64, precise)
        """
        negative = total_microseconds < 0
        total_seconds, centiseconds = divmod(abs(total_microseconds) // 10_000, 100)
        p64 = Period64(negative=negative, input=input)
        if centiseconds != 0:
            p64.fraction = centiseconds
            p64.designator = Designator.SECOND

        total_hours, seconds_in_hour = divmod(total_seconds, 3_600)
        if total_hours <= MAX_FIELD:
            p64.hours = total_hours
            p64.minutes, p64.seconds = divmod(seconds_in_hour, 60)
            return p64, True

        total_days, hours = divmod(total_hours, 24)
        if total_days <= MAX_FIELD:
            p64.days = total_days
            p64.hours = hours
            p64.minutes, p64.seconds = divmod(seconds_in_hour, 60)
            return p64, False

        # it is uncommon to get this far (about 90 years) so the average month is good enough
        total_months, seconds_in_month = divmod(total_seconds, SECONDS_PER_MONTH)
        p64.years, p64.months = divmod(total_months, 12)
        p64.days, seconds_in_day = divmod(seconds_in_month, 86_400)
        p64.hours, seconds_in_hour = divmod(seconds_in_day, 3_600)
        p64.minutes, p64.seconds = divmod(seconds_in_hour, 60)
        return p64, False

    def to_period(self) -> Period:
        """Narrow back into a Period, re-applying the sign

        Returns:
            A Period object

        Raises:
            PeriodOverflowError: Naming every field that is too large for a Period
        """
        values = [getattr(self, name) for name in FIELD_NAMES] + [self.fraction]
        if any(value < 0 for value in values):
            raise AssertionError(f"Negative magnitude in {self}")

        overflowed = [name for name in FIELD_NAMES if getattr(self, name) > MAX_FIELD]
        if self.fraction > MAX_FRACTION:
            overflowed.append("fraction")
        if overflowed:
            raise PeriodOverflowError(input=self.input or str(self), fields=overflowed)

        period = Period(
            years=self.years,
            months=self.months,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            fraction=self.fraction,
            designator=self.designator if self.fraction != 0 else Designator.NONE,
        )
        return period.negate() if self.negative else period

    # --------------------------------------------------------------------------
    # Normalisation
    # --------------------------------------------------------------------------
    def normalise64(self, precise: bool) -> "Period64":
        """Propagate carries up to years, then push the fraction down into a smaller
        unit where that can be done exactly

        Args:
            precise: Whether to avoid the 24-hour day and average month assumptions

        Returns:
            This object
        """
        return (
            self.ripple_up(precise)
            .reduce_years_fraction()
            .reduce_months_fraction(precise)
            .reduce_days_fraction(precise)
            .reduce_hours_fraction()
            .reduce_minutes_fraction()
            .ripple_up(precise)
        )

    def ripple_up(self, precise: bool) -> "Period64":
        """Carry overflowing seconds, minutes, hours, days and months into the next larger field

        Hours are only folded into days when not precise, or when they would not fit
        into a Period otherwise. Days are only converted to months (assuming
        30.436875-day months) when they would not fit into a Period or have gone
        negative.

        Args:
            precise: Whether to avoid the 24-hour day assumption

        Returns:
            This object
        """
        hms = (self.hours * 3_600) + (self.minutes * 60) + self.seconds
        if hms < 0:
            borrowed_days, hms = divmod(hms, 86_400)
            self.days += borrowed_days

        self.hours, seconds_in_hour = divmod(hms, 3_600)
        self.minutes, self.seconds = divmod(seconds_in_hour, 60)

        if not precise or self.hours > MAX_FIELD:
            whole_days, self.hours = divmod(self.hours, 24)
            self.days += whole_days

        if self.days > MAX_FIELD or self.days < 0:
            self._collapse_days()

        if self.months != 0:
            whole_years, self.months = divmod(self.months, 12)
            self.years += whole_years

        return self

    def _collapse_days(self) -> None:
        # Loses the difference between real and average month lengths,
        # so it is only used to keep the days field in range.
        total_seconds = ((((self.days * 24) + self.hours) * 60) + self.minutes) * 60 + self.seconds
        delta_months, seconds_in_month = divmod(total_seconds, SECONDS_PER_MONTH)
        logger.debug(f"{self.input or self}: approximating {self.days} days as {delta_months} months")

        self.months += delta_months
        self.days, seconds_in_day = divmod(seconds_in_month, 86_400)
        self.hours, seconds_in_hour = divmod(seconds_in_day, 3_600)
        self.minutes, self.seconds = divmod(seconds_in_hour, 60)

    def _reduce_fraction(self, designator: Designator, factor: int, field: str) -> "Period64":
        # 'factor' is the number of 'field' units in one 'designator' unit
        if self.designator is designator:
            centi_units, remainder = divmod(factor * self.fraction, 100)
            if remainder == 0:
                setattr(self, field, getattr(self, field) + centi_units)
                self.fraction = 0
                self.designator = Designator.NONE
        return self

    def reduce_years_fraction(self) -> "Period64":
        return self._reduce_fraction(Designator.YEAR, 12, "months")

    def reduce_months_fraction(self, precise: bool) -> "Period64":
        # only approximately right, because months vary in length
        if not precise and self.designator is Designator.MONTH:
            centi_days = (DAYS_PER_MONTH_E6 * self.fraction) // 1_000_000
            if centi_days % 100 == 0:
                self.days += centi_days // 100
                self.fraction = 0
                self.designator = Designator.NONE
        return self

    def reduce_days_fraction(self, precise: bool) -> "Period64":
        if precise:
            return self
        return self._reduce_fraction(Designator.DAY, 24, "hours")

    def reduce_hours_fraction(self) -> "Period64":
        return self._reduce_fraction(Designator.HOUR, 60, "minutes")

    def reduce_minutes_fraction(self) -> "Period64":
        return self._reduce_fraction(Designator.MINUTE, 60, "seconds")

    def __str__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)}" for name in FIELD_NAMES)
        sign = "-" if self.negative else ""
        if self.designator is Designator.NONE:
            return f"{sign}Period64({fields})"
        return f"{sign}Period64({fields}, fraction={self.fraction}, designator={self.designator.name})"
