from .configuration_repository import ConfigurationRepository

__all__ = [
    'ConfigurationRepository',
]
