from erc20tx.domain.models.call import CallParams
from erc20tx.domain.models.transfer import TransferLogEntry, TransferRecord

__all__ = [
    "CallParams",
    "TransferLogEntry",
    "TransferRecord",
]
