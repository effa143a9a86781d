"""Configuration loader for the documentation generator.

Loads settings from configs/config.yaml (or the file named by the
DOCGEN_CONFIG environment variable) and provides typed access to all
configuration sections via dataclasses.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"
_CONFIG_ENV_VAR = "DOCGEN_CONFIG"
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class APIConfig:
    """Configuration for the Anthropic API client."""

    provider: str = "anthropic"
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 8192
    temperature: float = 0.2
    rate_limit_rpm: int = 50
    retry_max_attempts: int = 3
    retry_base_delay: float = 1.0
    api_key_env: str = "ANTHROPIC_API_KEY"


@dataclass
class OutputConfig:
    """Where generated artifacts are written."""

    output_dir: str = "."
    readme_file: str = "README.md"
    api_docs_file: str = "API_DOCUMENTATION.md"
    usage_examples_file: str = "USAGE_EXAMPLES.md"


@dataclass
class ScriptConfig:
    """Settings for the standalone documentation script."""

    source_path: str = "src/index.ts"
    usage_command: str = "docgen run"


@dataclass
class ServerConfig:
    """Configuration for the HTTP API server."""

    host: str = "127.0.0.1"
    port: int = 3000


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = _DEFAULT_LOG_FORMAT
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    api: APIConfig = field(default_factory=APIConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    script: ScriptConfig = field(default_factory=ScriptConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_path(config_path: Optional[str]) -> Path:
    """Pick the config file: explicit argument, then env var, then default."""
    if config_path:
        return Path(config_path)
    env_path = os.getenv(_CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return _DEFAULT_CONFIG_PATH


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Falls back to defaults for any missing values. The API key itself is
    read by the LLM client from the environment variable named by
    api.api_key_env, never from the config file.

    Args:
        config_path: Path to the YAML config file. If None, uses
            $DOCGEN_CONFIG or the default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = _resolve_path(config_path)

    if not path.exists():
        logger.warning("Config file not found at %s, using defaults", path)
        return AppConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    logger.info("Loaded configuration from %s", path)

    api_data = raw.get("api", {})
    api_config = APIConfig(
        provider=api_data.get("provider", "anthropic"),
        model=api_data.get("model", "claude-sonnet-4-20250514"),
        max_tokens=api_data.get("max_tokens", 8192),
        temperature=api_data.get("temperature", 0.2),
        rate_limit_rpm=api_data.get("rate_limit_rpm", 50),
        retry_max_attempts=api_data.get("retry_max_attempts", 3),
        retry_base_delay=api_data.get("retry_base_delay", 1.0),
        api_key_env=api_data.get("api_key_env", "ANTHROPIC_API_KEY"),
    )

    output_data = raw.get("output", {})
    output_config = OutputConfig(
        output_dir=output_data.get("output_dir", "."),
        readme_file=output_data.get("readme_file", "README.md"),
        api_docs_file=output_data.get("api_docs_file", "API_DOCUMENTATION.md"),
        usage_examples_file=output_data.get(
            "usage_examples_file", "USAGE_EXAMPLES.md"
        ),
    )

    script_data = raw.get("script", {})
    script_config = ScriptConfig(
        source_path=script_data.get("source_path", "src/index.ts"),
        usage_command=script_data.get("usage_command", "docgen run"),
    )

    server_data = raw.get("server", {})
    server_config = ServerConfig(
        host=server_data.get("host", "127.0.0.1"),
        port=server_data.get("port", 3000),
    )

    logging_data = raw.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get("format", _DEFAULT_LOG_FORMAT),
        file=logging_data.get("file"),
    )

    return AppConfig(
        api=api_config,
        output=output_config,
        script=script_config,
        server=server_config,
        logging=logging_config,
    )
