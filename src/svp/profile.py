import math
import numpy as np
import pandas as pd
from typing import List, Tuple


def _g(value: float) -> str:
    # shortest general notation, same as a default C-style stream
    return f"{value:g}"


class Profile:
    """
    Sound velocity profile: a geolocated, timestamped log of (depth, speed) samples.

    The depth and speed columns are materialized lazily from the sample log and
    cached until the log grows. Nothing is validated here; see svp.io for the
    validating loader.
    """

    def __init__(self):
        self.timestamp: int = 0  # microseconds since epoch
        self.latitude: float = np.nan
        self.longitude: float = np.nan
        self.draft: float = 0.0

        self._samples: List[Tuple[float, float]] = []
        self._depths: np.ndarray = np.empty(0, dtype=np.float64)
        self._speeds: np.ndarray = np.empty(0, dtype=np.float64)
        self._depths.flags.writeable = False
        self._speeds.flags.writeable = False

    def add(self, depth: float, speed: float) -> None:
        """
        Append a sample to the log.

        Args:
            depth (float): Depth of the sample [m].
            speed (float): Sound speed at that depth [m/s].
        """
        self._samples.append((float(depth), float(speed)))

    def _materialize(self, column: np.ndarray, idx: int) -> np.ndarray:
        # cache is keyed on length only, the log never shrinks or edits in place
        if column.shape[0] == len(self._samples):
            return column
        column = np.fromiter(
            (sample[idx] for sample in self._samples),
            dtype=np.float64,
            count=len(self._samples),
        )
        column.flags.writeable = False
        return column

    def get_depths(self) -> np.ndarray:
        """
        Get the depth column.

        Returns:
            np.ndarray: Read-only array, element i is the depth of sample i.
        """
        self._depths = self._materialize(self._depths, 0)
        return self._depths

    def get_speeds(self) -> np.ndarray:
        """
        Get the sound speed column.

        Returns:
            np.ndarray: Read-only array, element i is the speed of sample i.
        """
        self._speeds = self._materialize(self._speeds, 1)
        return self._speeds

    def get_size(self) -> int:
        return len(self._samples)

    def __len__(self) -> int:
        return self.get_size()

    def get_samples(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(self._samples)

    def get_latitude(self) -> float:
        return self.latitude

    def set_latitude(self, latitude: float) -> None:
        self.latitude = latitude

    def get_longitude(self) -> float:
        return self.longitude

    def set_longitude(self, longitude: float) -> None:
        self.longitude = longitude

    def get_timestamp(self) -> int:
        return self.timestamp

    def set_timestamp(self, timestamp: int) -> None:
        self.timestamp = timestamp

    def get_draft(self) -> float:
        return self.draft

    def set_draft(self, draft: float) -> None:
        self.draft = draft

    def has_position(self) -> bool:
        return not (math.isnan(self.latitude) or math.isnan(self.longitude))

    @staticmethod
    def latlong_format(value: float) -> str:
        """
        Format decimal degrees as " degrees:minutes:seconds".

        Seconds are computed as (value - minutes) * 60, which is the historical
        output other tools compare against, so 45.5 renders as " 45:30:930".
        """
        degrees = float(np.trunc(value))
        minutes = float(np.trunc((value - degrees) * 60))
        seconds = (value - minutes) * 60
        return f" {_g(degrees)}:{_g(minutes)}:{_g(seconds)}"

    def to_dataframe(self) -> pd.DataFrame:
        """
        Get the profile as a depth/speed table.

        Returns:
            pd.DataFrame: Columns "depth" and "speed", one row per sample.
        """
        return pd.DataFrame(
            {"depth": np.array(self.get_depths()), "speed": np.array(self.get_speeds())}
        )

    def __str__(self) -> str:
        return (
            f"timestamp: {self.timestamp}\n"
            f"latitude: {_g(self.latitude)}\n"
            f"longitude: {_g(self.longitude)}\n"
            f"draft: {_g(self.draft)}\n"
        )
