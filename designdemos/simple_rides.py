"""A ride booking app that keeps vehicles, rides, status and storage in one class."""

from __future__ import annotations

from pathlib import Path

DRIVER_ASSIGNED = "Driver Assigned"
VEHICLE_NOT_FOUND = "Vehicle Not Found"
DEFAULT_PATH = "ride_details.txt"


class SimpleRideSharingApp:
    """Books rides by exact vehicle name and remembers the last booking's status."""

    def __init__(self) -> None:
        self.vehicles: list[str] = []
        self.rides: list[str] = []
        self.status = ""

    def add_vehicle(self, vehicle: str) -> None:
        self.vehicles.append(vehicle)

    def book_ride(self, vehicle_type: str, destination: str) -> bool:
        """Book a ride on a known vehicle; return whether a driver was assigned."""
        if vehicle_type in self.vehicles:
            self.rides.append(f"{vehicle_type} to {destination}")
            self.status = DRIVER_ASSIGNED
            return True
        self.status = VEHICLE_NOT_FOUND
        return False

    def track_ride_status(self) -> str:
        return self.status

    def save_ride_details(self, path: str | Path = DEFAULT_PATH) -> None:
        """Write one line per booked ride to ``path``; raises OSError on failure."""
        Path(path).write_text("".join(f"{ride}\n" for ride in self.rides), encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    app = SimpleRideSharingApp()
    app.add_vehicle("Honda Bike")
    app.add_vehicle("Suzuki Mehran")
    app.book_ride("Honda Bike", "Gulberg to Mall Road")
    print(f"Ride Status: {app.track_ride_status()}")
    try:
        app.save_ride_details()
    except OSError:
        print("Unable to open file!")
        return 1
    print("Ride details saved successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())