from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

REQUIRED_FIELDS = (
    "artifact",
    "artifact_type",
    "consul_address",
    "aws_access_key",
    "aws_secret_key",
    "project_name",
    "project_version",
)

@dataclass(frozen=True, config=ConfigDict(extra="forbid", coerce_numbers_to_str=True))
class Configuration:
    artifact: str = ""
    artifact_type: str = ""
    artifact_type_override: bool = False
    metadata: dict[str, str] | None = None

    aws_access_key: str = ""
    aws_secret_key: str = ""
    aws_token: str = ""

    consul_address: str = ""
    consul_scheme: str = ""
    consul_token: str = ""

    project_name: str = ""
    project_version: str = ""

    # only ever taken from the environment
    build_id: int | None = None

    def missing_required_fields(self) -> list[str]:
        return [key for key in REQUIRED_FIELDS if not getattr(self, key)]
