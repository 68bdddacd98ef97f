SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_COUNTRY = "US"
DEFAULT_ANNUAL_LEAVE_QUOTA = 20

AUTO_SEED_DATA = True
