from ._models import RegistryCredential, RepositoryItem
from .providers.amazon_elastic_container_registry import (
    AmazonElasticContainerRegistry,
)

__all__ = [
    "AmazonElasticContainerRegistry",
    "RegistryCredential",
    "RepositoryItem",
]
