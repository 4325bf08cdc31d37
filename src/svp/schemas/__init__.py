from .svp_data import SoundVelocityProfile, ProfileHeader, SVPFileConfig
