from dataclasses import dataclass

from ami_publisher.clients.consul_client import ConsulClient
from ami_publisher.clients.ec2_client import Ec2ImageClient
from .configuration import Configuration

@dataclass(frozen=True)
class RuntimeContext:
    configuration: Configuration
    store: ConsulClient
    images: Ec2ImageClient
