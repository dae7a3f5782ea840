"""
Period arithmetic: addition, application to datetimes and scaling.

The functions here are also available as methods and operators of the
Period class. The ones that may have to fall back on approximate calendar
arithmetic (24-hour days, 30.436875-day months) return a "precise" flag
alongside their result.
"""

import datetime as dt
import logging
from fractions import Fraction
from typing import Union

from time_period.enums import Designator
from time_period.exceptions import PeriodOverflowError, PeriodValidationError
from time_period.period import (
    CENTISECONDS_PER_CENTIDAY,
    FIELD_NAMES,
    MAX_FRACTION,
    Period,
    approximate_centiseconds,
)
from time_period.period64 import Period64, p64_of

logger = logging.getLogger(__name__)


def add_date(date_time: dt.datetime, years: int, months: int, days: int) -> dt.datetime:
    """Shift a datetime object by a number of years, months and days (+ve or -ve)

    The day of the month is not clipped: a day beyond the end of the target
    month rolls over into the following month, so Jan 31 shifted by one month
    is Mar 3 (or Mar 2 in a leap year). The days are added after the years and
    months. The time of day is kept.

    Args:
        date_time: The date_time object to be shifted
        years: The number of years by which to shift date_time
        months: The number of months by which to shift date_time
        days: The number of days by which to shift date_time

    Returns:
        A datetime object
    """
    y_m = date_time.year * 12 + date_time.month - 1 + years * 12 + months
    new_year, new_month0 = divmod(y_m, 12)
    first_of_month = date_time.replace(year=new_year, month=new_month0 + 1, day=1)
    return first_of_month + dt.timedelta(days=date_time.day - 1 + days)


# ------------------------------------------------------------------------------
# Add
# ------------------------------------------------------------------------------
def add(period: Period, other: Period) -> Period:
    """Add two periods together

    When both periods have the same sign and any fractions belong to the same
    field, the fields are simply summed. Otherwise the periods are combined as
    centi-unit totals and the sign of the result is that of the combined total,
    which may differ from the sign of both inputs.

    The result is not fully normalised; use Period.normalise for that.

    Args:
        period: The first period
        other: The second period

    Returns:
        A Period object

    Raises:
        PeriodOverflowError: If the sum does not fit into a Period
    """
    same_fraction = (
        period.designator is other.designator
        or period.designator is Designator.NONE
        or other.designator is Designator.NONE
    )
    if same_fraction and period.sign() == other.sign():
        return _simple_add(period, other)
    return _non_trivial_add(period, other)


def _simple_add(period: Period, other: Period) -> Period:
    fields = {name: getattr(period, name) + getattr(other, name) for name in FIELD_NAMES}

    if period.designator is Designator.NONE:
        fraction, designator = other.fraction, other.designator
    elif other.designator is Designator.NONE:
        fraction, designator = period.fraction, period.designator
    else:
        designator = period.designator
        fraction = period.fraction + other.fraction
        if abs(fraction) > MAX_FRACTION:
            one = period.sign()
            fields[designator.value] += one
            fraction -= 100 * one

    if fraction == 0:
        designator = Designator.NONE

    p64 = Period64(
        **{name: abs(value) for name, value in fields.items()},
        fraction=abs(fraction),
        designator=designator,
        negative=period.is_negative() or other.is_negative(),
        input=f"{period!r} + {other!r}",
    )
    return p64.to_period()


def _non_trivial_add(period: Period, other: Period) -> Period:
    cym = period.centi_ym() + other.centi_ym()
    cd = period.centi_days() + other.centi_days()
    chms = period.centi_hms() + other.centi_hms()

    # the sign is decided by all three totals together, not by either operand
    negative = approximate_centiseconds(cym, cd, chms) < 0
    if negative:
        cym, cd, chms = -cym, -cd, -chms

    p64 = p64_of(cym, cd, chms, negative)
    p64.input = f"{period!r} + {other!r}"
    return p64.to_period()


# ------------------------------------------------------------------------------
# AddTo
# ------------------------------------------------------------------------------
def add_to(period: Period, date_time: dt.datetime) -> tuple[dt.datetime, bool]:
    """Add a period to a datetime

    When the years, months and days are whole numbers they are added on the
    calendar (see add_date), followed by the exact hours, minutes and seconds;
    the result is precise. Otherwise the approximate elapsed time of the period
    is added (see Period.duration) and the result is not precise.

    Args:
        period: The period to add
        date_time: The datetime to add it to

    Returns:
        A tuple of (datetime, precise)

    Raises:
        PeriodOverflowError: If the result is outside the range of datetime
    """
    try:
        if not period.designator.is_date:
            shifted = add_date(date_time, period.years, period.months, period.days)
            return shifted + period.hms_duration(), True

        duration, precise = period.duration()
        return date_time + duration, precise
    except (ValueError, OverflowError) as err:
        raise PeriodOverflowError(
            f"{period!r} + {date_time.isoformat()}: result is outside the datetime range",
            input=f"{period!r} + {date_time.isoformat()}",
        ) from err


# ------------------------------------------------------------------------------
# Scale
# ------------------------------------------------------------------------------
def scale(period: Period, factor: Union[int, float, Fraction]) -> tuple[Period, bool]:
    """Multiply a period by a factor

    Floats are converted to the exact value of their shortest decimal
    representation (so 0.1 is 1/10) and then handled by rational_scale.

    Args:
        period: The period to scale
        factor: The multiplication factor

    Returns:
        A tuple of (period, precise)

    Raises:
        PeriodValidationError: If the factor is not a finite number
        PeriodOverflowError: If the result does not fit into a Period
    """
    try:
        ratio = Fraction(str(factor))
    except (ValueError, OverflowError) as err:
        raise PeriodValidationError(f"Unable to scale period {period!r} using {factor}") from err
    return rational_scale(period, ratio.numerator, ratio.denominator)


def rational_scale(period: Period, multiplier: int, divisor: int) -> tuple[Period, bool]:
    """Multiply a period by multiplier/divisor

    When every centi-unit total of the period divides exactly, the result is
    exact. Otherwise the period is converted to its approximate elapsed time,
    scaled (rounding half-up to the hundredth of a second) and converted back.
    In both cases the result is normalised.

    Args:
        period: The period to scale
        multiplier: The numerator of the scale factor
        divisor: The denominator of the scale factor

    Returns:
        A tuple of (period, precise)

    Raises:
        ZeroDivisionError: If the divisor is zero
        PeriodOverflowError: If the result does not fit into a Period
    """
    if divisor == 0:
        raise ZeroDivisionError(f"Cannot scale {period!r} by {multiplier}/{divisor}")

    magnitude = period.abs()
    negative = period.is_negative()
    if multiplier < 0:
        multiplier, negative = -multiplier, not negative
    if divisor < 0:
        divisor, negative = -divisor, not negative

    cym = magnitude.centi_ym()
    cd = magnitude.centi_days()
    chms = magnitude.centi_hms()

    mcym = cym * multiplier
    mcd = cd * multiplier
    mchms = chms * multiplier
    label = f"{period!r} * {multiplier}/{divisor}"

    if mcym % divisor == 0 and mchms % divisor == 0:
        if mcd % divisor == 0:
            p64 = p64_of(mcym // divisor, mcd // divisor, mchms // divisor, negative)
            p64.input = label
            return p64.to_period(), True

        if divisor > multiplier and (mcd * 24) % divisor == 0:
            # whole hours, if days are taken to be 24 hours long
            mchms += mcd * CENTISECONDS_PER_CENTIDAY
            p64 = p64_of(mcym // divisor, 0, mchms // divisor, negative).normalise64(False)
            p64.input = label
            return p64.to_period(), False

    ymd = approximate_centiseconds(cym, cd, 0)
    total_microseconds = (ymd + chms) * 10_000
    # add 5ms to round half-up to the nearest hundredth of a second
    scaled = (total_microseconds * multiplier) // divisor + 5_000
    logger.debug(f"{label}: scaling approximately, as {scaled} microseconds")

    p64, exact = Period64.of_microseconds(scaled, label)
    precise = ymd == 0 and exact
    result = p64.to_period()
    if negative:
        result = result.negate()
    return result.normalise(precise).simplify(precise), precise
