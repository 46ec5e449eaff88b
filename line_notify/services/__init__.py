from line_notify.services.errors import (
    BulkOperationError,
    InvalidInputError,
    LineNotifyError,
    RemoteError,
    RequestTimeoutError,
)

__all__ = [
    "LineNotifyError",
    "InvalidInputError",
    "RemoteError",
    "RequestTimeoutError",
    "BulkOperationError",
]
