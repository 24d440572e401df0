from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SkyPosition:
    """Apparent position of a body for one observer at one instant."""

    azimuth: float  # degrees, [0, 360)
    altitude: float  # degrees, negative below the horizon

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude > 0

    def to_dict(self) -> Dict[str, float]:
        return {"azimuth": self.azimuth, "altitude": self.altitude}
