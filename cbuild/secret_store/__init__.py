from ._models import SourceCredential
from .providers.aws_parameter_store import AWSParameterStore

__all__ = [
    "AWSParameterStore",
    "SourceCredential",
]
