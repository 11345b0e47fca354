import datetime
import enum
import logging
from math import sin, cos, tan, atan, radians, degrees, acos, asin, floor
from typing import Optional, Union

logger = logging.getLogger(__name__)

UTC = datetime.timezone.utc


class Zenith(enum.Enum):
    """Angle from vertical at which the sun counts as risen or set."""

    OFFICIAL = 90.83
    CIVIL = 96.0
    NAUTICAL = 102.0
    ASTRONOMICAL = 108.0


class Event(enum.Enum):
    SUNRISE = 6
    SUNSET = 18

    @property
    def base_hour(self) -> int:
        """Local solar hour the approximation starts from."""
        return self.value


def check_coordinates(latitude: float, longitude: float) -> None:
    """Raise ValueError unless latitude and longitude are valid degrees."""
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude must be within [-90, 90], got {latitude}")
    if not -180 <= longitude <= 180:
        raise ValueError(f"Longitude must be within [-180, 180], got {longitude}")


def to_utc(date: Union[datetime.date, datetime.datetime]) -> datetime.datetime:
    """Return an aware UTC datetime. Naive datetimes are taken to be UTC and
    plain dates map to their midnight."""
    if not isinstance(date, datetime.datetime):
        return datetime.datetime(date.year, date.month, date.day, tzinfo=UTC)
    if date.tzinfo is None or date.utcoffset() is None:
        return date.replace(tzinfo=UTC)
    return date.astimezone(UTC)


def utc_day(date: Union[datetime.date, datetime.datetime]) -> datetime.date:
    """Calendar day of `date` in UTC."""
    return to_utc(date).date()


def normalise(value: float, maximum: float) -> float:
    """Bring `value` into [0, maximum] by adding or subtracting `maximum`
    once.  Values more than one period out of range are not handled."""
    if value < 0:
        value += maximum
    if value > maximum:
        value -= maximum
    return value


def compute_event(
    event: Event,
    date: Union[datetime.date, datetime.datetime],
    latitude: float,
    longitude: float,
    zenith: Zenith = Zenith.OFFICIAL,
) -> Optional[datetime.datetime]:
    """Calculate the instant of sunrise or sunset on the UTC day of `date`.

    Uses the almanac approximation published by the US Naval Observatory
    (Almanac for Computers, 1990).  Accuracy is in the order of a minute at
    mid latitudes.  The time of day of `date` is ignored.

    Args:
        event: Event.SUNRISE or Event.SUNSET.
        date: Calendar day; datetimes are reduced to their UTC date.
        latitude: Degrees north, within [-90, 90].
        longitude: Degrees east, within [-180, 180].
        zenith: Sun angle from vertical marking the event.

    Returns:
        Aware UTC datetime of the event, or None if the sun does not cross
        the zenith on that day (polar day or night).
    """
    check_coordinates(latitude, longitude)
    day = utc_day(date)
    day_of_year = day.timetuple().tm_yday

    lng_hour = longitude / 15
    t = day_of_year + (event.base_hour - lng_hour) / 24

    # Sun's mean anomaly and true longitude
    mean_anomaly = 0.9856 * t - 3.289
    true_long = normalise(
        mean_anomaly
        + 1.916 * sin(radians(mean_anomaly))
        + 0.020 * sin(2 * radians(mean_anomaly))
        + 282.634,
        360,
    )

    # Right ascension, in the same quadrant as the true longitude
    right_ascension = normalise(degrees(atan(0.91764 * tan(radians(true_long)))), 360)
    right_ascension += (floor(true_long / 90) - floor(right_ascension / 90)) * 90
    right_ascension /= 15

    sin_dec = 0.39782 * sin(radians(true_long))
    cos_dec = cos(asin(sin_dec))

    cos_h = (cos(radians(zenith.value)) - sin_dec * sin(radians(latitude))) / (
        cos_dec * cos(radians(latitude))
    )
    if cos_h > 1:
        logger.debug(f"Sun stays below the horizon on {day} at ({latitude}, {longitude}), no {event.name.lower()}")
        return None
    if cos_h < -1:
        logger.debug(f"Sun stays above the horizon on {day} at ({latitude}, {longitude}), no {event.name.lower()}")
        return None

    if event is Event.SUNRISE:
        hour_angle = (360 - degrees(acos(cos_h))) / 15
    else:
        hour_angle = degrees(acos(cos_h)) / 15

    local_mean_time = hour_angle + right_ascension - 0.06571 * t - 6.622
    universal_time = normalise(local_mean_time - lng_hour, 24)

    hours = int(universal_time)
    minutes = int((universal_time - hours) * 60)
    seconds = ((universal_time - hours) * 60 - minutes) * 60

    # The approximation works per local day, which can straddle UTC days
    if lng_hour > 0 and universal_time > 12 and event is Event.SUNRISE:
        day -= datetime.timedelta(days=1)
    elif lng_hour < 0 and universal_time < 12 and event is Event.SUNSET:
        day += datetime.timedelta(days=1)

    return datetime.datetime(day.year, day.month, day.day, tzinfo=UTC) + datetime.timedelta(
        hours=hours, minutes=minutes, seconds=seconds
    )


class Sun:
    """Sunrise and sunset for a fixed location.

    A thin wrapper around `compute_event` for repeated calculations over
    many dates.  Invalid coordinates already fail at construction.
    """

    def __init__(self, latitude, longitude):
        check_coordinates(latitude, longitude)
        self.latitude = latitude
        self.longitude = longitude

    def get_suntimes(
        self, date, zenith: Zenith = Zenith.OFFICIAL
    ) -> tuple[Optional[datetime.datetime], Optional[datetime.datetime]]:
        """Calculate sunrise and sunset for the UTC day of `date`.

        Args:
            date: The date for which to calculate sunrise and sunset.
            zenith: Sun angle from vertical marking the events.

        Returns:
            tuple: Sunrise and sunset as aware UTC datetimes, either of
            which is None when the event does not occur.
        """
        return (
            compute_event(Event.SUNRISE, date, self.latitude, self.longitude, zenith),
            compute_event(Event.SUNSET, date, self.latitude, self.longitude, zenith),
        )

    def __repr__(self):
        return f"Sun(latitude={self.latitude}, longitude={self.longitude})"
