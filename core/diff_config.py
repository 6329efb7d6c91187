import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.exceptions import DiffConfigError

logger = logging.getLogger(__name__)

DEFAULT_BEFORE = "openapi/openapi.before.json"
DEFAULT_AFTER = "openapi/openapi.after.json"
DEFAULT_LIMIT = 200


class DiffConfig(BaseModel):
    """Settings for a diff run, as read from a YAML file."""
    model_config = ConfigDict(extra="forbid")

    before: str = Field(DEFAULT_BEFORE, description="Path to the old OpenAPI document")
    after: str = Field(DEFAULT_AFTER, description="Path to the new OpenAPI document")
    limit: int = Field(DEFAULT_LIMIT, ge=0, description="Maximum entries printed per report section")
    format: Literal["text", "json"] = "text"
    output: Optional[str] = Field(None, description="Write the report here instead of stdout")
    details: bool = False
    sort_unordered: bool = False
    color: bool = False
    fail_on_diff: bool = False

    def merged(self, overrides: Dict[str, Any]) -> "DiffConfig":
        """Return a copy where every non-None override replaces the configured value."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_copy(update=updates)


def load_config(config_path: Optional[Union[str, Path]] = None) -> DiffConfig:
    """Load a DiffConfig from YAML; without a path the built-in defaults are used."""
    if config_path is None:
        return DiffConfig()

    config_path = Path(config_path)
    if not config_path.is_file():
        raise DiffConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DiffConfigError(f"Failed to parse YAML config {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DiffConfigError(f"Config file {config_path} must contain a mapping")

    try:
        config = DiffConfig(**data)
    except ValidationError as e:
        raise DiffConfigError(f"Invalid config {config_path}:\n{e}") from e

    logger.info(f"Loaded diff config from {config_path}")
    return config
