import json
import os
import threading
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()

ID_STRATEGIES = frozenset({"sequence", "length"})
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_bool(name: str, raw_value: str) -> bool:
    value = raw_value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean value")


def _parse_allowed_origins(raw_allowed_origins: str) -> list[str]:
    # Support both CSV format and JSON array format
    allowed_origins: list[str] = []
    if raw_allowed_origins.startswith("["):
        try:
            parsed_list = json.loads(raw_allowed_origins)
        except json.JSONDecodeError as exc:
            raise ValueError(f"ALLOWED_ORIGINS JSON is malformed: {exc}") from exc
        if not isinstance(parsed_list, list):
            raise ValueError("ALLOWED_ORIGINS JSON must be an array")
        allowed_origins = [
            origin.strip() for origin in parsed_list if isinstance(origin, str) and origin.strip()
        ]
    else:
        allowed_origins = [
            origin.strip() for origin in raw_allowed_origins.split(",") if origin.strip()
        ]

    if not allowed_origins:
        raise ValueError("ALLOWED_ORIGINS must contain at least one origin")

    if "*" in allowed_origins:
        raise ValueError(
            "ALLOWED_ORIGINS cannot contain '*' when credentialed requests are used"
        )

    for origin in allowed_origins:
        parsed = urlparse(origin)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError(
                "ALLOWED_ORIGINS must contain valid http/https origins with host"
            )
    return allowed_origins


class Settings(BaseModel):
    app_name: str = Field(default="Admin Dashboard")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    allowed_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    seed_demo_data: bool = Field(default=True)
    id_strategy: str = Field(default="sequence")

    @classmethod
    def from_env(cls) -> "Settings":
        raw_allowed_origins = os.getenv("ALLOWED_ORIGINS", "").strip()
        if raw_allowed_origins:
            allowed_origins = _parse_allowed_origins(raw_allowed_origins)
        else:
            allowed_origins = cls.model_fields["allowed_origins"].default_factory()

        id_strategy = os.getenv("ID_STRATEGY", cls.model_fields["id_strategy"].default)
        id_strategy = id_strategy.strip().lower()
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"ID_STRATEGY must be one of: {', '.join(sorted(ID_STRATEGIES))}"
            )

        log_level = os.getenv("LOG_LEVEL", cls.model_fields["log_level"].default).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

        return cls(
            app_name=os.getenv("APP_NAME", cls.model_fields["app_name"].default),
            debug=_parse_bool("DEBUG", os.getenv("DEBUG", "false")),
            log_level=log_level,
            allowed_origins=allowed_origins,
            seed_demo_data=_parse_bool(
                "SEED_DEMO_DATA",
                os.getenv("SEED_DEMO_DATA", str(cls.model_fields["seed_demo_data"].default)),
            ),
            id_strategy=id_strategy,
        )


# Settings are read on first access, not at import
_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get settings instance, creating it on first access.

    Uses double-checked locking so concurrent first accesses build a single
    instance.

    Returns:
        Settings instance

    Raises:
        ValueError: If an environment variable holds an invalid value
    """
    global _settings_instance

    if _settings_instance is not None:
        return _settings_instance

    with _settings_lock:
        if _settings_instance is None:
            _settings_instance = Settings.from_env()

    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None


class _SettingsProxy:
    """Proxy to defer settings creation until first attribute access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)


settings = _SettingsProxy()  # type: ignore[assignment]
