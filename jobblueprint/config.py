"""
Runtime settings.

Settings come from three places, later ones winning:

1. Built-in defaults (the generation parameters the prompt was tuned
   with, the public Gemini endpoint).
2. An optional YAML file passed explicitly or named by the
   ``BLUEPRINT_CONFIG`` environment variable.  Its ``secrets`` section
   is copied into ``os.environ`` before keys are resolved.
3. Environment variables (a ``.env`` file is loaded first via
   python-dotenv): ``GEMINI_API_KEY``/``GOOGLE_API_KEY``,
   ``GEMINI_MODEL``, ``OPENAI_API_KEY``, ``OPENAI_MODEL`` and
   ``BLUEPRINT_PROVIDER``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # type: ignore
from dotenv import load_dotenv

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

GEMINI_ENDPOINT_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_GEMINI_MODEL = "gemini-pro"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
PROVIDER_NAMES = ("gemini", "gemini-sdk", "openai")


@dataclass
class GenerationConfig:
    """Sampling parameters sent with every generation request."""

    temperature: float = 0.9
    top_k: int = 1
    top_p: float = 1.0
    max_output_tokens: int = 2048

    def to_gemini(self) -> Dict[str, Any]:
        """Return the ``generationConfig`` object of the Gemini REST body."""
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }


@dataclass
class Settings:
    """Resolved configuration for one process."""

    provider: Optional[str] = None
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_endpoint: Optional[str] = None
    request_timeout: Optional[float] = None
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    log_level: str = "INFO"

    @property
    def endpoint(self) -> str:
        return self.gemini_endpoint or GEMINI_ENDPOINT_TEMPLATE.format(model=self.gemini_model)


def _load_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping at the top level")
    return data


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping")
    return value


def _apply_env_overrides(secrets: Dict[str, Any]) -> None:
    for key, value in secrets.items():
        if value is None:
            continue
        os.environ[str(key)] = str(value)
        logger.debug("Environment override set for %s", key)


def _build_generation(values: Dict[str, Any]) -> GenerationConfig:
    defaults = GenerationConfig()
    try:
        return GenerationConfig(
            temperature=float(values.get("temperature", defaults.temperature)),
            top_k=int(values.get("top_k", defaults.top_k)),
            top_p=float(values.get("top_p", defaults.top_p)),
            max_output_tokens=int(values.get("max_output_tokens", defaults.max_output_tokens)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid generation settings: {exc}") from exc


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Resolve settings from defaults, an optional YAML file and the environment.

    Args:
        config_path: Path to a YAML config file.  Falls back to the
            ``BLUEPRINT_CONFIG`` environment variable; when neither is
            set only the environment is consulted.

    Returns:
        A populated :class:`Settings` instance.

    Raises:
        ConfigurationError: If the file cannot be read or has the wrong
            shape, or if the provider name is unknown.
    """
    load_dotenv()
    config_path = config_path or os.getenv("BLUEPRINT_CONFIG")
    data: Dict[str, Any] = {}
    if config_path:
        data = _load_yaml(Path(config_path))
        logger.debug("Loaded config from %s", config_path)
    _apply_env_overrides(_section(data, "secrets"))

    gemini_cfg = _section(data, "gemini")
    openai_cfg = _section(data, "openai")
    logging_cfg = _section(data, "logging")

    provider = os.getenv("BLUEPRINT_PROVIDER") or data.get("provider")
    if provider:
        provider = str(provider).lower()
        if provider not in PROVIDER_NAMES:
            raise ConfigurationError(
                f"Unknown provider '{provider}'; expected one of {', '.join(PROVIDER_NAMES)}"
            )

    timeout = gemini_cfg.get("timeout")
    try:
        request_timeout = float(timeout) if timeout is not None else None
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid gemini timeout: {exc}") from exc
    settings = Settings(
        provider=provider,
        gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL") or gemini_cfg.get("model") or DEFAULT_GEMINI_MODEL,
        gemini_endpoint=gemini_cfg.get("endpoint"),
        request_timeout=request_timeout,
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL") or openai_cfg.get("model") or DEFAULT_OPENAI_MODEL,
        generation=_build_generation(_section(data, "generation")),
        log_level=str(logging_cfg.get("level", "INFO")).upper(),
    )
    return settings
