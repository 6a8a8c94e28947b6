#!/usr/bin/env python3
import argparse
import json
import os
import sys
from dataclasses import asdict

from ami_publisher.models import BuildArtifact
from ami_publisher.repositories import ConfigurationRepository
from ami_publisher.services.artifact_publisher_service import ArtifactPublisherService
from ami_publisher.services.configuration_service import ConfigurationService
from ami_publisher.utils.logging import setup_logger
from ami_publisher.utils.ui import ConsoleUi

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Publish built AMIs into consul')
    parser.add_argument('--artifact-id', required=True, help='Artifact id of the build, e.g. us-west-2:ami-123,eu-west-1:ami-456')
    parser.add_argument('--builder-id', default='mitchellh.amazonebs', help='Id of the builder that produced the artifact')
    parser.add_argument('--config', default=None, help='Publisher configuration file')
    args = parser.parse_args(argv)

    logger = setup_logger("AmiPublisher")

    try:
        config_file = args.config or os.environ.get("PUBLISHER_CONFIG_FILE", f"{ROOT_DIR}/ami-publisher.yaml")
        logger.info(f"Starting AMI publisher with config file: {config_file}")
        raw = ConfigurationRepository(config_file).find()
        context = ConfigurationService(raw).run()

        artifact = BuildArtifact(artifact_id=args.artifact_id, builder=args.builder_id)
        result = ArtifactPublisherService(context, ConsoleUi(), artifact).run()
        if result.error is not None:
            raise result.error

        print(json.dumps(asdict(result.artifact)))
        logger.info("AMI publishing completed successfully")
        return 0
    except Exception as e:
        logger.error(f"AMI publishing failed: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
