from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rpc_url: str = "http://localhost:8545"
    private_rpc_url: str = ""  # empty = same endpoint as rpc_url
    network: str = "mainnet"
    rpc_rate_per_second: float = 5.0
    rpc_timeout: float = 30.0
    rpc_max_attempts: int = 3
    rpc_backoff_seconds: float = 1.0

    @property
    def log_query_url(self) -> str:
        return self.private_rpc_url or self.rpc_url

    class Config:
        env_file = ".env"
        env_prefix = "ERC20TX_"


settings = Settings()
