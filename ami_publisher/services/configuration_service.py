import logging
import os
from dataclasses import replace
from typing import Any, Mapping, override

from ami_publisher.clients.consul_client import ConsulClient
from ami_publisher.clients.ec2_client import Ec2ImageClient
from ami_publisher.errors import ConfigError, ValidationError
from ami_publisher.models import Configuration
from ami_publisher.models.runtime_context import RuntimeContext
from ami_publisher.services.service import Service
from ami_publisher.utils.logging import setup_logger

BUILD_ID_ENV_KEY = "CONSUL_BUILD_ID"


def parse_build_id(value: str) -> int:
    """Parse an integer the way the build tooling writes it: 42, 0x2a, 052, 0o52, 0b101010."""
    if value != value.strip() or not value.isascii():
        raise ValueError(f"invalid syntax: {value!r}")
    sign, digits = "", value
    if digits[:1] in ("+", "-"):
        sign, digits = digits[0], digits[1:]

    if digits[:2].lower() in ("0x", "0o", "0b"):
        base = 0
    elif len(digits) > 1 and digits.startswith("0"):
        base = 8
    else:
        base = 10
    return int(sign + digits, base)


class ConfigurationService(Service):
    def __init__(self, raw: Mapping[str, Any], environ: Mapping[str, str] | None = None):
        self.raw: Mapping[str, Any] = raw
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.logger: logging.Logger = setup_logger("ConfigurationService")

    @override
    def run(self) -> RuntimeContext:
        return self.configure()

    def configure(self) -> RuntimeContext:
        configuration = self.decode()

        missing = configuration.missing_required_fields()
        if missing:
            error = ValidationError(missing)
            self.logger.error(f"Invalid configuration: {error}")
            raise error

        images = Ec2ImageClient(
            configuration.aws_access_key,
            configuration.aws_secret_key,
            configuration.aws_token,
        )
        configuration = replace(configuration, build_id=self.read_build_id())

        store = ConsulClient(
            configuration.consul_address,
            scheme=configuration.consul_scheme,
            token=configuration.consul_token,
        )
        self.logger.info(
            f"Configured publisher for {configuration.project_name} {configuration.project_version} "
            f"(consul {store.base_url}, build id {configuration.build_id})"
        )
        return RuntimeContext(configuration=configuration, store=store, images=images)

    def decode(self) -> Configuration:
        try:
            # a key left blank in the file counts as unset
            return Configuration(**{k: v for k, v in self.raw.items() if v is not None})
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Error decoding configuration: {e}") from e

    def read_build_id(self) -> int | None:
        value = self.environ.get(BUILD_ID_ENV_KEY, "")
        if not value:
            return None
        try:
            return parse_build_id(value)
        except ValueError as e:
            raise ConfigError(f"Error parsing build ID: {e}") from e
