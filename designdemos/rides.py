"""Ride booking built from vehicles, rides, a ride manager and pluggable storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

DRIVER_ASSIGNED = "Driver Assigned"
DEFAULT_PATH = "ride_details.txt"


class VehicleNotFoundError(LookupError):
    """No registered vehicle matches the requested type."""


class Vehicle(ABC):
    """A vehicle that can describe itself."""

    @abstractmethod
    def details(self) -> str:
        """Return a short description of the vehicle."""


@dataclass
class BikeVehicle(Vehicle):
    name: str

    def details(self) -> str:
        return f"Bike: {self.name}"


@dataclass
class CarVehicle(Vehicle):
    name: str

    def details(self) -> str:
        return f"Car: {self.name}"


@dataclass
class Ride:
    """A booked ride on a vehicle to a destination."""

    vehicle: Vehicle
    destination: str
    status: str = DRIVER_ASSIGNED

    def rebook(self, vehicle: Vehicle, destination: str) -> None:
        self.vehicle = vehicle
        self.destination = destination
        self.status = DRIVER_ASSIGNED

    def details(self) -> str:
        return f"{self.vehicle.details()} to {self.destination} ({self.status})"


class Persistence(ABC):
    """Somewhere ride details can be saved."""

    @abstractmethod
    def save(self, content: str) -> None:
        """Store ``content``."""


class FileStorage(Persistence):
    """Saves ride details to a text file; raises OSError if it cannot."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def save(self, content: str) -> None:
        self.path.write_text(content, encoding="utf-8")
        print("Ride details saved successfully!")


class DBStorage(Persistence):
    """Stand-in database storage that reports what it would save."""

    def save(self, content: str) -> None:
        print(f"Saving to database: {content}")


@dataclass
class RideManager:
    """Keeps vehicles and the rides booked on them."""

    vehicles: list[Vehicle] = field(default_factory=list)
    rides: list[Ride] = field(default_factory=list)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self.vehicles.append(vehicle)

    def book_ride(self, vehicle_type: str, destination: str) -> Ride:
        """Book on the first vehicle whose details contain ``vehicle_type``."""
        vehicle = next((v for v in self.vehicles if vehicle_type in v.details()), None)
        if vehicle is None:
            raise VehicleNotFoundError(f"Vehicle not found: {vehicle_type}")
        ride = Ride(vehicle, destination)
        self.rides.append(ride)
        return ride

    def ride_status(self, index: int) -> str:
        if not 0 <= index < len(self.rides):
            raise IndexError("Invalid ride index")
        return self.rides[index].status

    def ride_details(self) -> str:
        return "".join(f"{ride.details()}\n" for ride in self.rides)


class RideSharingApp:
    """Front end that delegates bookings to a manager and saving to storage."""

    def __init__(
        self,
        storage: Persistence | None = None,
        manager: RideManager | None = None,
    ) -> None:
        self.storage = storage if storage is not None else FileStorage()
        self.manager = manager if manager is not None else RideManager()

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self.manager.add_vehicle(vehicle)

    def book_ride(self, vehicle_type: str, destination: str) -> Ride:
        return self.manager.book_ride(vehicle_type, destination)

    def track_ride_status(self, index: int) -> str:
        return self.manager.ride_status(index)

    def save_ride_details(self) -> None:
        self.storage.save(self.manager.ride_details())


def main(argv: list[str] | None = None) -> int:
    app = RideSharingApp(FileStorage())
    app.add_vehicle(BikeVehicle("Honda Bike"))
    app.add_vehicle(CarVehicle("Suzuki Mehran"))
    try:
        app.book_ride("Honda Bike", "Gulberg to Mall Road")
    except VehicleNotFoundError:
        print("Vehicle not found!")
    try:
        print(f"Ride Status: {app.track_ride_status(0)}")
    except IndexError as exc:
        print(f"Ride Status: {exc}")
    try:
        app.save_ride_details()
    except OSError:
        print("Unable to open file!")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())