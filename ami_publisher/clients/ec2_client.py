import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ami_publisher.errors import CredentialError, ImageLookupError

logger = logging.getLogger(__name__)


class Ec2ImageClient:
    def __init__(self, access_key: str = "", secret_key: str = "", token: str = ""):
        # Empty values fall through to the standard botocore credential chain.
        try:
            self.session = boto3.session.Session(
                aws_access_key_id=access_key or None,
                aws_secret_access_key=secret_key or None,
                aws_session_token=token or None,
            )
            credentials = self.session.get_credentials()
        except BotoCoreError as e:
            raise CredentialError(f"Error resolving AWS credentials: {e}") from e
        if credentials is None:
            logger.error("No AWS credentials could be resolved")
            raise CredentialError("No AWS credentials found")

    def describe_images(self, region: str, image_id: str) -> list[dict[str, Any]]:
        try:
            ec2 = self.session.client("ec2", region_name=region)
            response = ec2.describe_images(ImageIds=[image_id])
        except (BotoCoreError, ClientError) as e:
            raise ImageLookupError(region, image_id, str(e)) from e

        images = response.get("Images", [])
        if not images:
            raise ImageLookupError(region, image_id, "no images found")
        return images
