from erc20tx.infra.rpc.base import Provider, Transport
from erc20tx.infra.rpc.provider import JsonRpcProvider
from erc20tx.infra.rpc.transport import HttpTransport

__all__ = [
    "HttpTransport",
    "JsonRpcProvider",
    "Provider",
    "Transport",
]
