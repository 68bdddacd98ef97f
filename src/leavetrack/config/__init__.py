import os


def get_settings_module() -> str:
    # Environment from APP_ENV, defaults to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "leavetrack.config.production"

    if env in {"test", "testing"}:
        return "leavetrack.config.testing"

    return "leavetrack.config.development"
