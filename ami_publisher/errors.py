class PublisherError(Exception):
    pass


class ValidationError(PublisherError):
    """Every required configuration field that was left empty."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields: list[str] = sorted(missing_fields)
        self.errors: list[str] = [f"{key} must be set" for key in self.missing_fields]
        points = "\n".join(f"* {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} error(s) occurred:\n{points}")


class CredentialError(PublisherError):
    pass


class ConfigError(PublisherError):
    pass


class StoreConnectError(PublisherError):
    pass


class MalformedArtifactIdError(PublisherError):
    def __init__(self, artifact_id: str, entry: str):
        self.artifact_id: str = artifact_id
        self.entry: str = entry
        super().__init__(
            f"Malformed artifact id {artifact_id!r}: entry {entry!r} is not region:image_id"
        )


class ImageLookupError(PublisherError):
    def __init__(self, region: str, image_id: str, reason: str):
        self.region: str = region
        self.image_id: str = image_id
        super().__init__(f"Error looking up image {image_id} in {region}: {reason}")


class StoreWriteError(PublisherError):
    def __init__(self, key: str, reason: str):
        self.key: str = key
        super().__init__(f"Error writing consul key {key}: {reason}")


class ArtifactStateError(PublisherError):
    pass
