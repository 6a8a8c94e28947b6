import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, override

from ami_publisher.errors import ArtifactStateError, ImageLookupError, PublisherError
from ami_publisher.models import (
    Artifact,
    ImageReference,
    PublishedArtifact,
    StateKey,
    StateOutcome,
    StoreKey,
    lookup_state,
)
from ami_publisher.models.runtime_context import RuntimeContext
from ami_publisher.services.service import Service
from ami_publisher.utils.artifact_id import parse_artifact_id
from ami_publisher.utils.logging import setup_logger
from ami_publisher.utils.ui import Ui

# builder id -> short name of the builders whose artifact id lists region:ami pairs
AMI_BUILDERS = {
    "mitchellh.amazonebs": "amazonebs",
    "mitchellh.amazon.instance": "amazoninstance",
}


def encode_timestamp(value: Any) -> str:
    # boto3 returns datetimes for timestamp members such as SourceImageCreationTime
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass(frozen=True)
class PostProcessResult:
    artifact: Artifact
    keep: bool
    error: PublisherError | None = None


class ArtifactPublisherService(Service):
    """Publishes the AMIs of a finished build into consul.

    For every region:ami pair of the artifact id the full image description
    goes to ``amis/<project>/<root device type>/<version>/data`` and the bare
    AMI id to ``.../ami``, in the consul datacenter named after the region.
    Regions are published one after another and the first failure stops the
    run. Keys already written for earlier regions are left in place.
    """

    def __init__(self, context: RuntimeContext, ui: Ui, artifact: Artifact):
        self.context: RuntimeContext = context
        self.ui: Ui = ui
        self.artifact: Artifact = artifact
        self.logger: logging.Logger = setup_logger("ArtifactPublisherService")

    @override
    def run(self) -> PostProcessResult:
        return self.post_process(self.artifact)

    def post_process(self, artifact: Artifact) -> PostProcessResult:
        config = self.context.configuration
        self.ui.say("Putting build artifacts into consul")

        builder_id = artifact.builder_id()
        if builder_id not in AMI_BUILDERS:
            self.logger.warning(f"Artifact from builder {builder_id} may not carry region:ami ids")

        try:
            references = parse_artifact_id(artifact.id())
            for reference in references:
                self.publish_region(reference)

            published = PublishedArtifact(
                name=config.artifact,
                type=self.resolve_artifact_type(artifact),
                version=config.project_version,
                metadata=self.compute_output_metadata(artifact),
                build_id=config.build_id,
            )
        except PublisherError as e:
            self.logger.error(f"Publishing artifact {artifact.id()} failed: {e}")
            return PostProcessResult(artifact=artifact, keep=False, error=e)

        self.logger.info(f"Published {len(references)} image(s) for {published.id()}")
        return PostProcessResult(artifact=published, keep=True)

    def publish_region(self, reference: ImageReference) -> StoreKey:
        config = self.context.configuration
        images = self.context.images.describe_images(reference.region, reference.image_id)

        # lookup is by exact id, so the first record speaks for the image
        root_device_type = images[0].get("RootDeviceType")
        if not root_device_type:
            raise ImageLookupError(reference.region, reference.image_id, "image has no RootDeviceType")

        key = StoreKey(
            project_name=config.project_name,
            root_device_type=root_device_type,
            project_version=config.project_version,
        )
        payload = self.serialize_images(images)

        self.ui.message(
            f"Putting {reference.image_id} image data into consul key prefix {key.prefix} "
            f"in datacenter {reference.region}"
        )
        self.context.store.put(key.data_key, payload, datacenter=reference.region)
        self.context.store.put(key.ami_key, reference.image_id.encode("utf-8"), datacenter=reference.region)
        return key

    def serialize_images(self, images: list[dict[str, Any]]) -> bytes:
        try:
            return json.dumps(images, default=encode_timestamp).encode("utf-8")
        except (TypeError, ValueError) as e:
            self.logger.warning(f"Could not serialize image data, writing an empty payload: {e}")
            return b""

    def compute_output_metadata(self, artifact: Artifact) -> dict[str, str]:
        metadata: dict[str, str] = {}
        recorded = lookup_state(artifact, StateKey.METADATA, dict)
        match recorded.outcome:
            case StateOutcome.PRESENT:
                if not all(isinstance(k, str) and isinstance(v, str) for k, v in recorded.value.items()):
                    raise ArtifactStateError(f"Artifact metadata must map strings to strings: {recorded.value!r}")
                metadata.update(recorded.value)
            case StateOutcome.WRONG_TYPE:
                raise ArtifactStateError(f"Artifact metadata must be a mapping, got {type(recorded.value).__name__}")

        # configured values win over what the artifact reported
        metadata.update(self.context.configuration.metadata or {})
        return metadata

    def resolve_artifact_type(self, artifact: Artifact) -> str:
        config = self.context.configuration
        if not config.artifact_type_override:
            recorded = lookup_state(artifact, StateKey.TYPE, str)
            match recorded.outcome:
                case StateOutcome.PRESENT:
                    return recorded.value
                case StateOutcome.WRONG_TYPE:
                    raise ArtifactStateError(f"Artifact type must be a string, got {type(recorded.value).__name__}")
        return config.artifact_type
