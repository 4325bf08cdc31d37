import os
import logging
import configparser
from datetime import datetime, timezone
from typing import Optional

import numpy as np
import pandas as pd

from .profile import Profile
from .schemas import SoundVelocityProfile, ProfileHeader, SVPFileConfig

logger = logging.getLogger(__name__)


def apply_header(profile: Profile, header: ProfileHeader) -> Profile:
    """
    Copy header metadata onto a profile. Unset coordinates become NaN.
    """
    profile.set_timestamp(header.timestamp)
    profile.set_latitude(np.nan if header.latitude is None else header.latitude)
    profile.set_longitude(np.nan if header.longitude is None else header.longitude)
    profile.set_draft(header.draft)
    return profile


def read_svp_csv(
    file_path: str,
    header: Optional[ProfileHeader] = None,
    config: Optional[SVPFileConfig] = None,
) -> Profile:
    """
    Build a Profile from a depth/speed table.

    Args:
        file_path (str): Path to the sound speed file (e.g. SAGA.1903.kaiyo_k4-svp.csv).
        header (ProfileHeader, optional): Metadata to set on the profile.
        config (SVPFileConfig, optional): Column names and reading options.

    Returns:
        Profile: Samples in file order.

    Raises:
        FileNotFoundError: If file_path does not exist.
        ValueError: If the depth or speed column is missing.
        pandera.errors.SchemaError: If validation is enabled and a value is out of range.
    """
    if config is None:
        config = SVPFileConfig()

    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Sound speed file {file_path} not found")

    svp = pd.read_csv(file_path, comment=config.comment, skipinitialspace=True)
    svp.columns = [str(col).strip() for col in svp.columns]

    missing = [
        col for col in (config.depth_column, config.speed_column) if col not in svp.columns
    ]
    if missing:
        raise ValueError(f"{file_path} is missing columns {missing}")

    svp = svp[[config.depth_column, config.speed_column]].rename(
        columns={config.depth_column: "depth", config.speed_column: "speed"}
    )
    if config.validate_schema:
        svp = SoundVelocityProfile.validate(svp)

    profile = Profile()
    for depth, speed in zip(svp.depth.values, svp.speed.values):
        profile.add(depth, speed)

    if header is not None:
        apply_header(profile, header)

    logger.info(f"Read {profile.get_size()} samples from {file_path}")
    logger.debug(f"Profile metadata:\n{profile}")
    return profile


def load_site_profile(cfg_path: str, config: Optional[SVPFileConfig] = None) -> Profile:
    """
    Load the sound speed profile referenced by a GNSS-A site-parameter file.

    Uses [Obs-parameter] SoundSpeed and Date(UTC), and
    [Site-parameter] Latitude0 and Longitude0.
    """
    cfg = configparser.ConfigParser()
    if not cfg.read(cfg_path, "UTF-8"):
        raise FileNotFoundError(f"Site-parameter file {cfg_path} not found")

    svpf = cfg.get("Obs-parameter", "SoundSpeed").strip()
    if not os.path.isabs(svpf):
        svpf = os.path.join(os.path.dirname(os.path.abspath(cfg_path)), svpf)

    date_utc = datetime.strptime(
        cfg.get("Obs-parameter", "Date(UTC)").strip(), "%Y-%m-%d"
    ).replace(tzinfo=timezone.utc)

    header = ProfileHeader(
        timestamp=int(date_utc.timestamp()) * 1_000_000,
        latitude=cfg.get("Site-parameter", "Latitude0"),
        longitude=cfg.get("Site-parameter", "Longitude0"),
    )
    site = cfg.get("Obs-parameter", "Site_name", fallback="").strip()
    logger.info(f"Loading sound speed profile for site {site or cfg_path}")
    return read_svp_csv(svpf, header=header, config=config)


def write_svp_csv(profile: Profile, file_path: str) -> None:
    """
    Write the depth/speed columns of a profile as csv.
    """
    profile.to_dataframe().to_csv(file_path, index=False)
    logger.info(f"Wrote {profile.get_size()} samples to {file_path}")
