"""Configuration and Credential Storage

Everything lives under ~/.config/gitai/:
  credentials  - the Anthropic API key, plaintext, mode 0600
  config.json  - optional settings (style, base URL, timeout)
"""

import json
import logging
import os
import re
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CREDENTIALS_FILENAME = "credentials"
CONFIG_FILENAME = "config.json"
API_KEY_ENV = "ANTHROPIC_API_KEY"
BASE_URL_ENV = "GITAI_BASE_URL"

# Sent verbatim as the x-api-key header
_API_KEY_RE = re.compile(r"^[\x21-\x7e]+$")


def config_dir() -> Path:
    return Path.home() / ".config" / "gitai"


@dataclass
class Config:
    """User settings with sensible defaults."""
    conventional: bool = False
    base_url: str = "https://api.anthropic.com"
    timeout: float = 60.0

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.conventional, bool):
            warnings.append(f"Invalid conventional '{self.conventional}', using {str(defaults.conventional).lower()}")
            self.conventional = defaults.conventional

        if not isinstance(self.base_url, str) or not self.base_url.startswith(("http://", "https://")):
            warnings.append(f"Invalid base_url '{self.base_url}', using '{defaults.base_url}'")
            self.base_url = defaults.base_url

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            warnings.append(f"Invalid timeout '{self.timeout}', using {defaults.timeout}")
            self.timeout = defaults.timeout

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def load_config() -> Config:
    """Read config.json, falling back to defaults. GITAI_BASE_URL wins over the file."""
    path = config_dir() / CONFIG_FILENAME
    data = {}
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError("expected a JSON object")
            data = loaded
        except (ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)

    env_base_url = os.environ.get(BASE_URL_ENV)
    if env_base_url:
        data = {**data, "base_url": env_base_url}
    return Config.from_dict(data)


def save_config(config: Config) -> Path:
    path = config_dir() / CONFIG_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)
    return path


def load_api_key() -> Optional[str]:
    """Return the API key from ANTHROPIC_API_KEY or the credentials file, if any."""
    env_key = os.environ.get(API_KEY_ENV, "").strip()
    if env_key:
        logger.debug("Using API key from %s", API_KEY_ENV)
        return env_key

    path = config_dir() / CREDENTIALS_FILENAME
    try:
        key = path.read_text(encoding='utf-8').strip()
    except FileNotFoundError:
        return None
    logger.debug("Using API key from %s", path)
    return key or None


def save_api_key(api_key: str) -> Path:
    key = api_key.strip()
    if not key:
        raise ValueError("API key must not be empty")
    if not _API_KEY_RE.match(key):
        raise ValueError("API key contains whitespace or non-ASCII characters")

    path = config_dir() / CREDENTIALS_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(key + "\n", encoding='utf-8')
    os.chmod(path, 0o600)
    return path


__all__ = [
    "Config",
    "config_dir",
    "load_config",
    "save_config",
    "load_api_key",
    "save_api_key",
    "API_KEY_ENV",
    "BASE_URL_ENV",
]
