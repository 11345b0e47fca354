import pandas as pd
import matplotlib.pyplot as plt

from sunphase import DayPrediction, Zenith, plot_suntimes


LOCATIONS = [
    {"name": "Zurich", "latitude": 47.37, "longitude": 8.54, "tz": "Europe/Zurich"},
    {"name": "Tromsø", "latitude": 69.65, "longitude": 18.96, "tz": "Europe/Oslo"},
    {"name": "Cupertino", "latitude": 37.334606, "longitude": -122.009102, "tz": "America/Los_Angeles"},
]


def plot_location(ax, location, year):
    daterange = pd.date_range(f"{year}-01-01", f"{year}-12-31", freq="D", tz=location["tz"])
    for zenith, alpha in [(Zenith.OFFICIAL, 1.0), (Zenith.CIVIL, 0.4)]:
        plot_suntimes(
            ax, daterange, location["latitude"], location["longitude"], zenith=zenith, alpha=alpha
        )
    ax.set_title(location["name"], fontsize=9)


if __name__ == "__main__":
    fig, axes = plt.subplots(1, len(LOCATIONS), figsize=(10, 3), sharey=True)
    for ax, location in zip(axes, LOCATIONS):
        plot_location(ax, location, 2024)
    axes[0].legend(["Sunrise", "Sunset"], frameon=False, fontsize=7)
    fig.savefig("docs/sample.png", dpi=300, bbox_inches="tight")

    for location in LOCATIONS:
        prediction = DayPrediction.create(location["latitude"], location["longitude"])
        if prediction is None:
            print(f"{location['name']}: no sunrise or sunset today")
        else:
            state = "day" if prediction.is_daytime else "night"
            print(f"{location['name']}: {state}, sunrise {prediction.sunrise:%Y-%m-%d %H:%M} UTC, "
                  f"sunset {prediction.sunset:%Y-%m-%d %H:%M} UTC")
