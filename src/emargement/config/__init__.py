import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "emargement.config.production"

    if env in {"test", "testing"}:
        return "emargement.config.testing"

    return "emargement.config.development"


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def validate_runtime_config(settings) -> None:
    if getattr(settings, "ENV", "") == "production" and settings.JWT_SECRET == "change-me":
        raise RuntimeError("JWT_SECRET must be set in production.")
