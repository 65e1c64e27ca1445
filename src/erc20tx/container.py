from dependency_injector import containers, providers

from erc20tx.config import Settings
from erc20tx.erc20.calls import Erc20
from erc20tx.erc20.history import TransactionHistory
from erc20tx.infra.http.rate_limited_client import RateLimitedClient
from erc20tx.infra.rpc.provider import JsonRpcProvider
from erc20tx.infra.rpc.transport import HttpTransport
from erc20tx.tokens import default_registry


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
    )

    provider = providers.Singleton(
        JsonRpcProvider,
        rpc_url=settings.provided.rpc_url,
        http_client=http_client,
        max_attempts=settings.provided.rpc_max_attempts,
        backoff_seconds=settings.provided.rpc_backoff_seconds,
    )

    transport = providers.Singleton(
        HttpTransport,
        rpc_url=settings.provided.log_query_url,
        http_client=http_client,
        max_attempts=settings.provided.rpc_max_attempts,
        backoff_seconds=settings.provided.rpc_backoff_seconds,
    )

    token_registry = providers.Singleton(default_registry)

    erc20 = providers.Factory(Erc20, provider=provider)

    history = providers.Factory(
        TransactionHistory,
        provider=provider,
        transport=transport,
        registry=token_registry,
    )
