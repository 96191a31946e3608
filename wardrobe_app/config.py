"""Configuration helpers for the Wardrobe Manager app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_WARDROBE_PATH = "wardrobe.json"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class WardrobeConfig:
    """Configuration values for the wardrobe app.

    ``random_seed`` makes outfit suggestions reproducible when set.
    """

    wardrobe_path: str = DEFAULT_WARDROBE_PATH
    log_level: str = "INFO"
    random_seed: Optional[int] = None
    autoload: bool = True
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "WardrobeConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. Environment variables take precedence over file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("WARDROBE_CONFIG_DIR", "config/environments"))
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

        wardrobe_path = get_value("wardrobe_path", DEFAULT_WARDROBE_PATH)
        log_level = get_value("log_level", "INFO")
        raw_seed = get_value("random_seed")
        autoload = get_value("autoload", "true")

        random_seed = None
        if raw_seed not in (None, ""):
            try:
                random_seed = int(raw_seed)
            except ValueError as exc:
                raise ValueError(f"random_seed must be an integer, got '{raw_seed}'") from exc

        level_name = str(log_level or "INFO").strip().upper()
        if level_name not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(_LOG_LEVELS)}, got '{log_level}'")

        return cls(
            wardrobe_path=str(wardrobe_path or DEFAULT_WARDROBE_PATH),
            log_level=level_name,
            random_seed=random_seed,
            autoload=str(autoload).strip().lower() in _TRUE_VALUES,
            environment=env_name,
        )

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
