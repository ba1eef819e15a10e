"""Configuration helpers for the Wearorithm service."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import List, Optional

DEFAULT_RECOMMENDATION_MODEL = "gemini-2.5-pro"
DEFAULT_ANALYSIS_MODEL = "gemini-2.5-pro"
DEFAULT_PALETTE_MODEL = "gemini-2.5-flash"
DEFAULT_SESSION_SECRET = "default-secret-key"
DEFAULT_TOKEN_TTL_MINUTES = 60 * 24 * 7
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


@dataclass
class WearorithmConfig:
    """Runtime settings for the API, auth and the Gemini gateway.

    A missing ``gemini_api_key`` is a supported mode: the style gateway then
    answers with fixed demo payloads instead of calling the hosted model.
    """

    gemini_api_key: Optional[str] = None
    session_secret: str = DEFAULT_SESSION_SECRET
    token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES
    recommendation_model: str = DEFAULT_RECOMMENDATION_MODEL
    analysis_model: str = DEFAULT_ANALYSIS_MODEL
    palette_model: str = DEFAULT_PALETTE_MODEL
    gemini_timeout_seconds: float = 60.0
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str | None = None

    @property
    def ai_enabled(self) -> bool:
        return bool(self.gemini_api_key)

    @classmethod
    def from_env(cls) -> "WearorithmConfig":
        """Build a config from environment variables and an optional env file.

        ``APP_CONFIG_PATH`` points at a ``key: value`` file directly; otherwise
        ``APP_ENV`` selects ``config/environments/<env>.yaml``. Environment
        variables always win so secrets never have to live in the file.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("WEARORITHM_CONFIG_DIR", "config/environments"))
        file_config: dict = {}

        if config_path:
            path: Optional[Path] = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            file_config = cls._load_key_value_file(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            return os.getenv(key.upper(), file_config.get(key, default))

        origins = get_value("cors_origins", "*") or "*"

        return cls(
            gemini_api_key=get_value("gemini_api_key") or None,
            session_secret=str(get_value("session_secret", DEFAULT_SESSION_SECRET)),
            token_ttl_minutes=int(get_value("token_ttl_minutes", str(DEFAULT_TOKEN_TTL_MINUTES))),
            recommendation_model=str(get_value("recommendation_model", DEFAULT_RECOMMENDATION_MODEL)),
            analysis_model=str(get_value("analysis_model", DEFAULT_ANALYSIS_MODEL)),
            palette_model=str(get_value("palette_model", DEFAULT_PALETTE_MODEL)),
            gemini_timeout_seconds=float(get_value("gemini_timeout_seconds", "60")),
            max_upload_bytes=int(get_value("max_upload_bytes", str(DEFAULT_MAX_UPLOAD_BYTES))),
            cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
            host=str(get_value("host", "0.0.0.0")),
            port=int(get_value("port", "5000")),
            environment=env_name,
        )

    @staticmethod
    def _load_key_value_file(path: Path) -> dict:
        """Parse flat ``key: value`` lines, ignoring blanks and comments."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
                value = value[1:-1]
            config[key.strip().lower()] = value
        return config


__all__ = ["WearorithmConfig"]
