from typing import Any, TextIO

from ruamel.yaml import YAML


def load_yaml(stream: TextIO) -> Any:
    # plain dict/list/str so the result can go straight into pydantic models
    yaml = YAML(typ="safe", pure=True)
    return yaml.load(stream)
