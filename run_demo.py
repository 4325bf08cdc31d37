import sys
import logging

from svp import load_site_profile

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

# site_config = "sample/initcfg/SAGA/SAGA.1903.kaiyo_k4-initcfg.ini"
site_config = sys.argv[1]

profile = load_site_profile(site_config)

logger.info(f"Latitude  {profile.latlong_format(profile.get_latitude())}")
logger.info(f"Longitude {profile.latlong_format(profile.get_longitude())}")
logger.info(f"Depth range {profile.get_depths().min()} - {profile.get_depths().max()} m")
