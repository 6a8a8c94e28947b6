from enum import Enum
from typing import Any, Protocol

from pydantic import Field
from pydantic.dataclasses import dataclass


class StateKey(str, Enum):
    # An artifact may report its own type here; artifact_type_override wins over it.
    TYPE = "consul.artifact.type"
    # A str -> str mapping merged under the configured metadata.
    METADATA = "consul.artifact.metadata"


class StateOutcome(Enum):
    ABSENT = "absent"
    PRESENT = "present"
    WRONG_TYPE = "wrong_type"


class Artifact(Protocol):
    def id(self) -> str: ...

    def builder_id(self) -> str: ...

    def state(self, key: str) -> Any: ...


@dataclass(frozen=True)
class StateValue:
    outcome: StateOutcome
    value: Any = None


def lookup_state(artifact: Artifact, key: StateKey, expected: type) -> StateValue:
    raw = artifact.state(key.value)
    if raw is None:
        return StateValue(outcome=StateOutcome.ABSENT)
    if not isinstance(raw, expected):
        return StateValue(outcome=StateOutcome.WRONG_TYPE, value=raw)
    return StateValue(outcome=StateOutcome.PRESENT, value=raw)


@dataclass(frozen=True)
class BuildArtifact:
    """An artifact handed over by the build, e.g. the AMIs of an EBS build."""
    artifact_id: str
    builder: str
    state_values: dict[str, Any] = Field(default_factory=dict)

    def id(self) -> str:
        return self.artifact_id

    def builder_id(self) -> str:
        return self.builder

    def state(self, key: str) -> Any:
        return self.state_values.get(key)
