import os
from typing import Any

from ruamel.yaml.error import YAMLError

from ami_publisher.errors import ConfigError
from ami_publisher.utils.yaml_loader import load_yaml


class ConfigurationRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path

    def find(self) -> dict[str, Any]:
        if not os.path.isfile(self.file_path):
            return {}
        with open(self.file_path, "r") as f:
            try:
                data = load_yaml(f)
            except YAMLError as e:
                raise ConfigError(f"Invalid publisher configuration {self.file_path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid publisher configuration {self.file_path}: top level must be a mapping")
        return data
