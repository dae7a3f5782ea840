from datetime import datetime

import polars as pl

from time_period import Period
from time_period.series import add_to_series


def shift_series() -> None:
    # [start_block_1]
    df = pl.DataFrame({
        "timestamp": [datetime(2024, 1, 31), datetime(2024, 2, 29), datetime(2024, 3, 31)],
    })

    # Every value is shifted on the calendar, and a day past the end of a shorter month rolls over
    shifted, precise = add_to_series(Period.of_months(1), df["timestamp"])
    df = df.with_columns(shifted.alias("next_month"))
    # [end_block_1]
