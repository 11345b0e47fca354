from .suntimes import Event, Sun, Zenith, compute_event, normalise
from .prediction import DayPrediction
from .frame import daytime_mask, suntimes_frame
from .plotting import plot_suntimes

__all__ = [
    "DayPrediction",
    "Event",
    "Sun",
    "Zenith",
    "compute_event",
    "daytime_mask",
    "normalise",
    "plot_suntimes",
    "suntimes_frame",
]
