from dataclasses import dataclass, field
from datetime import date, datetime, timezone

# Fuel types counted as clean energy
CLEAN_FUELS = frozenset({"biomass", "nuclear", "hydro", "wind", "solar"})

# The generation series is published at 30 min resolution
INTERVALS_PER_HOUR = 2


def to_iso_z(dt: datetime) -> str:
    """Render an instant as ISO-8601 UTC with a trailing 'Z'."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class FuelMix:
    fuel: str
    perc: float


@dataclass(frozen=True)
class Interval:
    start: datetime
    end: datetime
    generation_mix: list[FuelMix] = field(default_factory=list)


@dataclass(frozen=True)
class DayMix:
    date: date
    average_mix: dict[str, float]
    clean_energy_percentage: float

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "averageEnergyMix": dict(self.average_mix),
            "cleanEnergyPercentage": self.clean_energy_percentage,
        }


@dataclass(frozen=True)
class ChargingWindow:
    start: datetime
    end: datetime
    clean_energy_percentage: float

    def to_dict(self) -> dict:
        return {
            "startTime": to_iso_z(self.start),
            "endTime": to_iso_z(self.end),
            "cleanEnergyPercentage": self.clean_energy_percentage,
        }
