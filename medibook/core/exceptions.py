from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Missing or malformed input; the caller can correct and retry."""

    def __init__(self, detail: str = "Invalid request data"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class StorageError(HTTPException):
    """The persistence layer failed; not recoverable by the caller."""

    def __init__(self, detail: str = "Storage operation failed"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
