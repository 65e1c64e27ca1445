from typing import Any

from pydantic import BaseModel


class CallParams(BaseModel):
    """eth_call / eth_sendTransaction parameters for one contract method."""

    to: str
    data: str  # selector + ABI-encoded arguments

    def with_params(self, **extra: Any) -> dict[str, Any]:
        """Transaction dict: {to, data} merged with extra params (extra wins)."""
        return {**self.model_dump(), **extra}
