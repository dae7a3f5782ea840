"""
Applying periods to polars Series of date/time values.
"""

import polars as pl

from time_period.period import Period


def _pl_offset(amount: int, unit: str) -> str:
    """Return a polars duration string, such as "3mo" or "-2d"."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{abs(amount)}{unit}"


def add_to_series(period: Period, date_times: pl.Series) -> tuple[pl.Series, bool]:
    """Add a period to every value of a Series of date/times.

    This follows the same rules as Period.add_to: whole years and months are added on the calendar
    without clipping the day of the month (a day past the end of a shorter month rolls over into the
    next one), then the whole days, followed by the exact hours, minutes and seconds. If the years,
    months or days carry a fraction, the approximate elapsed time of the period is added instead.

    Args:
        period: The period to add.
        date_times: A Series of date or date/time values.

    Returns:
        A tuple of (Series, precise), where the Series holds the shifted date/time values.
    """
    # Need to ensure we're dealing with datetimes rather than just "dates"
    if date_times.dtype == pl.Date:
        date_times = date_times.cast(pl.Datetime("us"))

    if period.designator.is_date:
        duration, precise = period.duration()
        return date_times + duration, precise

    # Shifting from the first of the month means polars never clips the day, which is then added back
    column = pl.col(date_times.name)
    day_offset = column.dt.day().cast(pl.Int64) - 1
    first_of_month = column - pl.duration(days=day_offset)
    months = period.years * 12 + period.months
    if months != 0:
        first_of_month = first_of_month.dt.offset_by(_pl_offset(months, "mo"))

    shifted = date_times.to_frame().select(first_of_month + pl.duration(days=day_offset + period.days)).to_series()
    return shifted + period.hms_duration(), True
