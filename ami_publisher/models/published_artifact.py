from typing import Any

from pydantic import Field
from pydantic.dataclasses import dataclass

from .artifact import StateKey

BUILDER_ID = "post-processor.consul"

@dataclass(frozen=True)
class PublishedArtifact:
    name: str
    type: str
    version: str
    metadata: dict[str, str] = Field(default_factory=dict)
    build_id: int | None = None

    def id(self) -> str:
        return f"{self.name}/{self.type}/{self.version}"

    def builder_id(self) -> str:
        return BUILDER_ID

    def state(self, key: str) -> Any:
        if key == StateKey.TYPE.value:
            return self.type
        if key == StateKey.METADATA.value:
            return dict(self.metadata)
        return None
