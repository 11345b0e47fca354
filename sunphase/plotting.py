import matplotlib.axes
import matplotlib.dates as mdates
import numpy as np
import pandas as pd

from .frame import _check_index, suntimes_frame
from .suntimes import Zenith


class SuntimesStyle:
    COLOR_SUNRISE = "#e69f00"
    COLOR_SUNSET = "#56b4e9"
    LINEWIDTH = 0.5


def _hour_of_day(times: pd.Series, tz) -> np.ndarray:
    """Wall-clock hour of day in `tz`, NaN where the time is NaT."""
    local = times.dt.tz_convert(tz)
    hours = local.dt.hour + local.dt.minute / 60 + local.dt.second / 3600
    return hours.to_numpy(dtype=float, na_value=np.nan)


def plot_suntimes(
    ax: matplotlib.axes.Axes,
    daterange: pd.DatetimeIndex,
    latitude: float,
    longitude: float,
    zenith: Zenith = Zenith.OFFICIAL,
    color_sunrise: str = SuntimesStyle.COLOR_SUNRISE,
    color_sunset: str = SuntimesStyle.COLOR_SUNSET,
    **kwargs,
) -> list:
    """Plots sunrise and sunset as hour of day over a range of dates.

    Times are shown in the timezone of `daterange`, one point at noon of
    each local calendar date it covers.  Days without sunrise or sunset
    leave a gap in the line.

    Args:
        ax: Axes to draw on.
        daterange: Timezone-aware DatetimeIndex, usually daily.
        latitude: Degrees north.
        longitude: Degrees east.
        zenith: Sun angle from vertical marking the events.
        color_sunrise: Line color for sunrise.
        color_sunset: Line color for sunset.
        **kwargs: Additional keyword arguments passed to `ax.plot`.

    Returns:
        The sunrise and sunset Line2D objects.
    """
    _check_index(daterange)
    # Events of the UTC day with the same calendar date fall on that local date
    local_dates = daterange.normalize().tz_localize(None).unique()
    times = suntimes_frame(local_dates.tz_localize("UTC"), latitude, longitude, zenith=zenith)
    dates = (local_dates + pd.Timedelta(hours=12)).tz_localize(daterange.tz)
    kwargs.setdefault("lw", SuntimesStyle.LINEWIDTH)

    (sunrise,) = ax.plot(
        dates,
        _hour_of_day(times["sunrise"], daterange.tz),
        color=color_sunrise,
        label="Sunrise",
        **kwargs,
    )
    (sunset,) = ax.plot(
        dates,
        _hour_of_day(times["sunset"], daterange.tz),
        color=color_sunset,
        label="Sunset",
        **kwargs,
    )

    ax.set_ylim(0, 24)
    ax.set_yticks(range(0, 25, 6))
    ax.set_ylabel("Hour")
    locator = mdates.AutoDateLocator(tz=daterange.tz)
    ax.xaxis.set_major_locator(locator)
    ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator, tz=daterange.tz))
    ax.spines[["top", "right"]].set_visible(False)

    return [sunrise, sunset]
