from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class StoreKey:
    project_name: str
    root_device_type: str
    project_version: str

    @property
    def prefix(self) -> str:
        return f"amis/{self.project_name}/{self.root_device_type}/{self.project_version}"

    @property
    def data_key(self) -> str:
        return f"{self.prefix}/data"

    @property
    def ami_key(self) -> str:
        return f"{self.prefix}/ami"
