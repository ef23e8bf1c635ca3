from ._async_helper import run_async
from ._log_helper import configure_logging, warn
from ._ncall import NCall
from ._provider import AWSProvider, Provider
from ._response import Response
from .data_model import DataModel

__all__ = [
    "AWSProvider",
    "DataModel",
    "NCall",
    "Provider",
    "Response",
    "configure_logging",
    "run_async",
    "warn",
]
