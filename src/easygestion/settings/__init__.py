import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "easygestion.settings.production"

    if env in {"test", "testing"}:
        return "easygestion.settings.testing"

    return "easygestion.settings.development"
