# mathdocx/config.py
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = "config.yaml"


class ConverterConfig(BaseModel):
    """Settings shared by both parsers and the document adapter."""

    strict: bool = Field(False, description="Raise UnsupportedConstructError instead of degrading to literal text.")
    max_depth: int = Field(64, ge=1, description="Maximum nesting of groups, arguments and markup elements.")
    alignment: Literal['left', 'center', 'right'] = 'center'
    fallback_template: str = "[Formula conversion failed: {source}]"

    def fallback_text(self, source: str) -> str:
        return self.fallback_template.format(source=source)


def load_config(path: str = DEFAULT_CONFIG_FILE) -> ConverterConfig:
    """
    Reads the ``math`` section of a YAML configuration file.

    A missing file, unreadable YAML or invalid values fall back to the
    defaults, so a broken config never blocks document generation.

    Args:
        path (str): Path to the YAML file.

    Returns:
        ConverterConfig: The loaded (or default) configuration.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        section = data['math'] if isinstance(data, dict) and 'math' in data else {}
        config = ConverterConfig(**(section or {}))
        logger.debug("Loaded math configuration from %s", path)
        return config
    except FileNotFoundError:
        logger.info("%s not found, using default math configuration.", path)
    except (yaml.YAMLError, TypeError) as e:
        logger.warning("%s is not valid YAML (%s), using default math configuration.", path, e)
    except ValidationError as e:
        logger.warning("Invalid math configuration in %s, using defaults: %s", path, e)
    return ConverterConfig()
