"""Executor options shared by every compiled request."""

from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from probekit.errors import ConfigurationError

DEFAULT_RESOLVERS = ["1.1.1.1", "1.0.0.1", "8.8.8.8", "8.8.4.4"]


class ExecutorOptions(BaseModel):
    """Scan-wide defaults handed to the compiler.

    Nothing here is read from globals; callers build one instance and pass
    it to ``compile_request`` explicitly.
    """

    resolvers: List[str] = Field(default_factory=lambda: list(DEFAULT_RESOLVERS), min_length=1)
    port: int = Field(default=53, ge=1, le=65535)
    timeout: float = Field(default=5.0, gt=0)  # per attempt, seconds
    default_retries: int = Field(default=3, ge=1)
    recursion_desired: bool = True

    model_config = {"frozen": True}

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ExecutorOptions":
        """Load options from a YAML file."""
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read options file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Options file {path} must contain a mapping")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid options in {path}",
                details={"errors": e.errors()},
            ) from e
