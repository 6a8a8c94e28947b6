from .artifact import Artifact, BuildArtifact, StateKey, StateOutcome, StateValue, lookup_state
from .configuration import Configuration, REQUIRED_FIELDS
from .image_reference import ImageReference
from .published_artifact import PublishedArtifact
from .store_key import StoreKey

__all__ = [
    "Artifact",
    "BuildArtifact",
    "Configuration",
    "ImageReference",
    "PublishedArtifact",
    "REQUIRED_FIELDS",
    "StateKey",
    "StateOutcome",
    "StateValue",
    "StoreKey",
    "lookup_state",
]
