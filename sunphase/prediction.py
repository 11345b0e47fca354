import datetime
import logging
from dataclasses import dataclass
from typing import Optional

from .suntimes import Event, Zenith, UTC, check_coordinates, compute_event, to_utc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayPrediction:
    """Sunrise and sunset around a reference instant at one location.

    Construct with `DayPrediction.create` or `DayPrediction.from_location`.
    The sunrise and sunset are those of the UTC day of `date`, moved one
    day ahead when `date` is already past that sunset.
    """

    latitude: float
    longitude: float
    date: datetime.datetime  # reference instant, UTC
    sunrise: datetime.datetime
    sunset: datetime.datetime
    zenith: Zenith = Zenith.OFFICIAL

    @classmethod
    def create(
        cls,
        latitude: float,
        longitude: float,
        date: Optional[datetime.datetime] = None,
        zenith: Zenith = Zenith.OFFICIAL,
    ) -> Optional["DayPrediction"]:
        """Predict sunrise and sunset for a location.

        Args:
            latitude: Degrees north, within [-90, 90].
            longitude: Degrees east, within [-180, 180].
            date: Reference instant.  Defaults to the current time.  Naive
                  datetimes are taken to be UTC.
            zenith: Sun angle from vertical marking sunrise and sunset.

        Returns:
            The prediction, or None when either event does not occur on
            that day (polar day or night).
        """
        check_coordinates(latitude, longitude)
        date = to_utc(date) if date is not None else datetime.datetime.now(UTC)
        start_of_day = date.replace(hour=0, minute=0, second=0, microsecond=0)

        sunrise = compute_event(Event.SUNRISE, start_of_day, latitude, longitude, zenith)
        sunset = compute_event(Event.SUNSET, start_of_day, latitude, longitude, zenith)
        if sunrise is None or sunset is None:
            logger.debug(f"No prediction for {start_of_day.date()} at ({latitude}, {longitude})")
            return None

        if date >= sunset:
            sunrise += datetime.timedelta(days=1)
            sunset += datetime.timedelta(days=1)

        return cls(
            latitude=latitude,
            longitude=longitude,
            date=date,
            sunrise=sunrise,
            sunset=sunset,
            zenith=zenith,
        )

    @classmethod
    def from_location(cls, location, date=None, zenith: Zenith = Zenith.OFFICIAL):
        """Same as `create` for any point type with `latitude` and
        `longitude` attributes, e.g. `geopy.point.Point`."""
        return cls.create(location.latitude, location.longitude, date=date, zenith=zenith)

    @property
    def is_daytime(self) -> bool:
        # Exactly at sunrise or sunset counts as night
        return self.sunrise < self.date < self.sunset

    @property
    def is_nighttime(self) -> bool:
        return not self.is_daytime
