from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ImageReference:
    region: str
    image_id: str
