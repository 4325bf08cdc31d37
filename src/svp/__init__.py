from .profile import Profile
from .io import read_svp_csv, load_site_profile, write_svp_csv, apply_header
