import pandas as pd

from .prediction import DayPrediction
from .suntimes import Sun, Zenith


def _check_index(index) -> None:
    if not isinstance(index, pd.DatetimeIndex):
        raise TypeError("index must be a pandas DatetimeIndex")
    if index.tz is None:
        raise ValueError("Index must be timezone-aware")
    if index.empty:
        raise ValueError("Index must not be empty")


def suntimes_frame(
    index: pd.DatetimeIndex,
    latitude: float,
    longitude: float,
    zenith: Zenith = Zenith.OFFICIAL,
) -> pd.DataFrame:
    """Sunrise and sunset for every UTC day covered by an index.

    Args:
        index: Timezone-aware DatetimeIndex, e.g. the index of a measured
               series.  Only the UTC calendar days it touches matter.
        latitude: Degrees north.
        longitude: Degrees east.
        zenith: Sun angle from vertical marking the events.

    Returns:
        DataFrame indexed by UTC midnight of each day with columns "sunrise"
        and "sunset" in UTC.  Events that do not occur are NaT.
    """
    _check_index(index)
    sun = Sun(latitude=latitude, longitude=longitude)
    days = index.tz_convert("UTC").normalize().unique().rename("date")
    times = pd.DataFrame(
        [sun.get_suntimes(day.date(), zenith) for day in days],
        index=days,
        columns=["sunrise", "sunset"],
    )
    # None does not become NaT on its own in object columns
    for column in ["sunrise", "sunset"]:
        times[column] = pd.to_datetime(times[column], utc=True)
    return times


def daytime_mask(
    index: pd.DatetimeIndex,
    latitude: float,
    longitude: float,
    zenith: Zenith = Zenith.OFFICIAL,
) -> pd.Series:
    """Classify each timestamp of an index as day (True) or night (False).

    Timestamps without a prediction, at polar day or night, are <NA>.
    """
    _check_index(index)
    values = []
    for timestamp in index:
        prediction = DayPrediction.create(
            latitude, longitude, date=timestamp.to_pydatetime(), zenith=zenith
        )
        values.append(pd.NA if prediction is None else prediction.is_daytime)
    return pd.Series(values, index=index, dtype="boolean", name="daytime")
