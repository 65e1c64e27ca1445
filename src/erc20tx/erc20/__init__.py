from erc20tx.erc20.callbacks import deliver
from erc20tx.erc20.calls import Erc20, call_params
from erc20tx.erc20.history import TransactionHistory
from erc20tx.erc20.logs import (
    LogsErr,
    LogsOk,
    build_transfer_logs_request,
    decode_logs_response,
    index_by_hash,
    parse_transfer_entries,
)

__all__ = [
    "Erc20",
    "LogsErr",
    "LogsOk",
    "TransactionHistory",
    "build_transfer_logs_request",
    "call_params",
    "decode_logs_response",
    "deliver",
    "index_by_hash",
    "parse_transfer_entries",
]
