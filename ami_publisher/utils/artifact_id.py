from ami_publisher.errors import MalformedArtifactIdError
from ami_publisher.models import ImageReference


def parse_artifact_id(artifact_id: str) -> list[ImageReference]:
    """Split an AMI artifact id into (region, image id) references.

    The id looks like ``us-west-2:ami-123123,eu-west-1:ami-123124``. Order
    and duplicates are kept. The whole id is parsed before anything is
    returned, so a bad entry anywhere means no references at all.
    """
    references: list[ImageReference] = []
    for entry in artifact_id.split(","):
        parts = entry.split(":")
        if len(parts) != 2:
            raise MalformedArtifactIdError(artifact_id, entry)
        region, image_id = parts
        references.append(ImageReference(region=region, image_id=image_id))
    return references
