import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEFAULT_COUNTRY = os.getenv("DEFAULT_COUNTRY", "US")
DEFAULT_ANNUAL_LEAVE_QUOTA = int(os.getenv("DEFAULT_ANNUAL_LEAVE_QUOTA", "20"))

# Load the demo roster into the in-memory store on startup
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "1")))
