"""Application configuration loaded from config.yaml"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from storyscope.ids import IdFactory, make_id_factory

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root log level name")


class AnalysisConfig(BaseModel):
    ids: str = Field(default="sequential", description="Id strategy: sequential or uuid")
    parallel: bool = Field(default=False, description="Run independent stages on a thread pool")

    def id_factory(self) -> IdFactory:
        return make_id_factory(self.ids)


class OutputConfig(BaseModel):
    format: OutputFormat = Field(default=OutputFormat.TABLE)


class AppConfig(BaseModel):
    """Validated contents of config.yaml; every section is optional"""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Load configuration from a YAML file

    Args:
        path: Config file; defaults to config/config.yaml in the project root

    Returns:
        Validated config (built-in defaults when the file does not exist)
    """
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.warning(f"Config file not found at {config_path}, using defaults")
        return AppConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return AppConfig.model_validate(data)


def setup_logging(level: str = "INFO"):
    """Configure the root logger"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
