"""Configuration helpers for the CoutureMind app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass
class StylistConfig:
    """Configuration values for the stylist service.

    The API key is the only secret. It may be absent at startup; generation
    requests then fail into the error panel instead of stopping the process.
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_GEMINI_MODEL
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str | None = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables so that the API key can
        be injected by the runtime environment.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("COUTURE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        api_key = get_value("gemini_api_key") or get_value("google_api_key")
        model = get_value("model", DEFAULT_GEMINI_MODEL)
        timeout = get_value("request_timeout_seconds")
        host = get_value("host", "0.0.0.0")
        port = get_value("port", "8080")

        return cls(
            api_key=api_key,
            model=str(model or DEFAULT_GEMINI_MODEL),
            request_timeout_seconds=cls._parse_float(timeout, DEFAULT_TIMEOUT_SECONDS),
            host=str(host or "0.0.0.0"),
            port=int(cls._parse_float(port, 8080)),
            environment=env_name,
        )

    @staticmethod
    def _parse_float(raw: Optional[str], default: float) -> float:
        if raw is None or not str(raw).strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            return default
        return value if value > 0 else default

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
