from typing import Optional
from pydantic import BaseModel, Field

import pandera as pa
from pandera.typing import Series


class SoundVelocityProfile(pa.DataFrameModel):
    """Depth/speed table as read from a GNSS-A *-svp.csv file

    Example data:

    depth,speed
    0.0,1513.2
    10.0,1512.8
    25.5,1510.1
    """

    depth: Series[float] = pa.Field(
        ge=0, le=10000, description="Depth of the speed [m]"
    )
    speed: Series[float] = pa.Field(ge=0, le=3800, description="Speed of sound [m/s]")

    class Config:
        coerce = True


class ProfileHeader(BaseModel):
    timestamp: int = Field(
        default=0, description="Acquisition time [microseconds since epoch]"
    )
    latitude: Optional[float] = Field(default=None, description="Latitude [deg]")
    longitude: Optional[float] = Field(default=None, description="Longitude [deg]")
    draft: float = Field(
        default=0.0, description="Vertical offset of the measurement reference point [m]"
    )


class SVPFileConfig(BaseModel):
    depth_column: str = Field(default="depth", description="Column holding depths")
    speed_column: str = Field(default="speed", description="Column holding sound speeds")
    comment: str = Field(default="#", description="Comment character")
    validate_schema: bool = Field(
        default=True, description="Check the table against SoundVelocityProfile"
    )
