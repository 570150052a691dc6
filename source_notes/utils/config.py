"""Configuration loader for source-notes.

Loads settings from configs/config.yaml and provides typed access
to all configuration sections via dataclasses.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from source_notes.utils.logging import DEFAULT_FORMAT

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"


@dataclass
class ParserConfig:
    """Configuration for reading source files."""

    extensions: list[str] = field(default_factory=lambda: [".java"])
    encoding: str = "utf-8"


@dataclass
class DocumentConfig:
    """Configuration for the layout of a reading note."""

    title_prefix: str = "【在此处输入标题】："
    code_language: str = "java"
    indent: str = "\t"
    templates_dir: Optional[str] = None


@dataclass
class OutputConfig:
    """Configuration for where notes are written."""

    output_dir: Optional[str] = None
    file_suffix: str = "源码笔记.md"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = DEFAULT_FORMAT
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_parser_config(data: dict) -> ParserConfig:
    """Build a ParserConfig from a dictionary.

    Extensions are normalized to lower case with a leading dot.

    Args:
        data: Dictionary with parser settings.

    Returns:
        A configured ParserConfig instance.
    """
    extensions = [
        ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        for ext in data.get("extensions", [".java"])
    ]
    return ParserConfig(
        extensions=extensions,
        encoding=data.get("encoding", "utf-8"),
    )


def _build_document_config(data: dict) -> DocumentConfig:
    """Build a DocumentConfig from a dictionary.

    Args:
        data: Dictionary with document layout settings.

    Returns:
        A configured DocumentConfig instance.
    """
    defaults = DocumentConfig()
    return DocumentConfig(
        title_prefix=data.get("title_prefix", defaults.title_prefix),
        code_language=data.get("code_language", defaults.code_language),
        indent=data.get("indent", defaults.indent),
        templates_dir=data.get("templates_dir"),
    )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a fully typed AppConfig
    object. Falls back to defaults for any missing values.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning("Config file not found at %s, using defaults", path)
        return AppConfig()

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    logger.info("Loaded configuration from %s", path)

    output_data = raw.get("output") or {}
    output_config = OutputConfig(
        output_dir=output_data.get("output_dir"),
        file_suffix=output_data.get("file_suffix", "源码笔记.md"),
    )

    logging_data = raw.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get("format", DEFAULT_FORMAT),
        file=logging_data.get("file"),
    )

    return AppConfig(
        parser=_build_parser_config(raw.get("parser") or {}),
        document=_build_document_config(raw.get("document") or {}),
        output=output_config,
        logging=logging_config,
    )
