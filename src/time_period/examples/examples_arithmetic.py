from time_period import Designator, Period


def construct_periods() -> None:
    # [start_block_1]
    from time_period import Designator, Period

    # Create periods using specific methods
    Period.of_years(1)
    Period.of_months(3)
    Period.of_days(1)
    Period.of_hours(1)
    Period.of_minutes(15)
    Period.of_seconds(1)

    # 1 year, 2 months and 3.5 days
    Period(years=1, months=2, days=3, fraction=50, designator=Designator.DAY)
    # [end_block_1]


def timedelta_periods() -> None:
    # [start_block_2]
    from datetime import timedelta

    # Using timedelta objects. The flag says whether the conversion was precise.
    period, precise = Period.of_timedelta(timedelta(hours=2, minutes=30))  # PT2H30M, precise
    period, precise = Period.of_timedelta(timedelta(days=2000))  # P2000D, not precise
    # [end_block_2]


def add_periods() -> None:
    # [start_block_3]
    one_and_a_half_years = Period(years=1, fraction=50, designator=Designator.YEAR)

    # Adding does not normalise the result...
    total = one_and_a_half_years + Period.of_months(3)  # P1.5Y3M

    # ...normalising pushes the fraction down into months where that is exact
    total = total.normalise(precise=True)  # P1Y9M

    # Subtracting is adding the negated period
    difference = Period(hours=1, minutes=45) - Period.of_minutes(30)  # PT1H15M
    # [end_block_3]


def apply_periods() -> None:
    # [start_block_4]
    from datetime import datetime

    # Whole years, months and days are added on the calendar
    end, precise = Period.of_months(1).add_to(datetime(2024, 1, 31))  # 2024-03-02, precise

    # Fractional days are added as an approximate elapsed time
    end, precise = Period(days=1, fraction=50, designator=Designator.DAY).add_to(datetime(2024, 1, 31))
    # [end_block_4]


def scale_periods() -> None:
    # [start_block_5]
    Period.of_days(3).scale(0.5)  # P1.5D
    Period.of_days(1).rational_scale(1, 3)  # PT8H
    Period.of_hours(2) * 3  # PT6H
    # [end_block_5]
