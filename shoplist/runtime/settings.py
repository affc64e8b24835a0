"""Runtime settings: API key, delegated-parsing toggle and service endpoint.

Settings are read from ``settings.toml`` in the config directory and then
overridden by environment variables:

    SHOPLIST_API_KEY   API key for the parsing service (falls back to ANTHROPIC_API_KEY)
    SHOPLIST_USE_AI    1/true/yes/on enables delegated parsing

Example settings.toml:

    [parsing]
    use_ai = true
    api_key = "sk-ant-..."

    [service]
    model = "claude-sonnet-4-20250514"
    timeout = 30.0
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shoplist.runtime.logging import get_logger
from shoplist.runtime.paths import get_paths

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.anthropic.com/v1/messages"
DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_API_VERSION = "2023-06-01"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LIST_MAX_TOKENS = 200
DEFAULT_IMAGE_MAX_TOKENS = 400

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@dataclass(frozen=True)
class ServiceSettings:
    """Transport settings for the text parsing service."""

    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    list_max_tokens: int = DEFAULT_LIST_MAX_TOKENS
    image_max_tokens: int = DEFAULT_IMAGE_MAX_TOKENS


@dataclass(frozen=True)
class Settings:
    """What the orchestrator needs from the user's configuration."""

    api_key: str = ""
    use_ai: bool = False
    service: ServiceSettings = field(default_factory=ServiceSettings)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())

    def __repr__(self) -> str:
        # Never echo the key itself.
        key_state = "set" if self.has_api_key else "unset"
        return f"Settings(api_key=<{key_state}>, use_ai={self.use_ai}, service={self.service!r})"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _service_settings(raw: Any) -> ServiceSettings:
    if not isinstance(raw, Mapping):
        return ServiceSettings()
    return ServiceSettings(
        base_url=str(raw.get("base_url", DEFAULT_BASE_URL)),
        model=str(raw.get("model", DEFAULT_MODEL)),
        api_version=str(raw.get("api_version", DEFAULT_API_VERSION)),
        timeout=float(raw.get("timeout", DEFAULT_TIMEOUT)),
        list_max_tokens=int(raw.get("list_max_tokens", DEFAULT_LIST_MAX_TOKENS)),
        image_max_tokens=int(raw.get("image_max_tokens", DEFAULT_IMAGE_MAX_TOKENS)),
    )


def load_settings(path: Path | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the TOML file and environment.

    Args:
        path: Settings file; defaults to the config directory's settings.toml
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings with environment values taking precedence over the file
    """
    if environ is None:
        import os

        environ = os.environ

    if path is None:
        path = get_paths().settings_file

    data = load_toml(path)
    parsing = data.get("parsing", {})
    if not isinstance(parsing, Mapping):
        parsing = {}

    api_key = str(parsing.get("api_key", "")).strip()
    use_ai = _as_bool(parsing.get("use_ai", False))

    env_key = environ.get("SHOPLIST_API_KEY") or environ.get("ANTHROPIC_API_KEY")
    if env_key:
        api_key = env_key.strip()
    if "SHOPLIST_USE_AI" in environ:
        use_ai = _as_bool(environ["SHOPLIST_USE_AI"])

    settings = Settings(api_key=api_key, use_ai=use_ai, service=_service_settings(data.get("service")))
    logger.debug("Loaded settings from %s: %r", path, settings)
    return settings
