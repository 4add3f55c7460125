from .structs import HTTPMethod
from .rest_client_interface import BaseRestClientInterface

__all__ = [
    "HTTPMethod",
    "BaseRestClientInterface",
]
