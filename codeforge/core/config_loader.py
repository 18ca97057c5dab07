import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from codeforge.core.exceptions import ConfigurationError
from codeforge.core.models import GenerationRequest

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate YAML generation recipes."""

    @staticmethod
    def load_request(path: str | Path) -> GenerationRequest:
        """Load and validate a GenerationRequest from a YAML file."""
        data = ConfigLoader.load_yaml(path)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected YAML dict, got {type(data).__name__}")

        try:
            request = GenerationRequest(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid recipe {path}: {e}") from e

        logger.debug(
            f"Loaded recipe {path}: {request.quantity} codes, generator '{request.generator}', "
            f"validators {list(request.validators)}"
        )
        return request

    @staticmethod
    def load_yaml(path: str | Path) -> Any:
        """Load raw YAML data without validation."""
        file_path = Path(path)

        if not file_path.exists():
            raise ConfigurationError(f"Recipe file not found: {file_path}")

        try:
            with open(file_path) as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {file_path}: {e}") from e
