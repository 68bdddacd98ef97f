import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_COUNTRY = os.getenv("DEFAULT_COUNTRY", "US")
DEFAULT_ANNUAL_LEAVE_QUOTA = int(os.getenv("DEFAULT_ANNUAL_LEAVE_QUOTA", "20"))

AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))
