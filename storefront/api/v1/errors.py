"""Translation of service errors into HTTP errors."""
from fastapi import HTTPException, status

from storefront.core.exceptions import InvalidArgumentError, NotFoundError, StorefrontError


def to_http_exception(error: StorefrontError) -> HTTPException:
    """NotFoundError -> 404, InvalidArgumentError -> 400, anything else -> 500."""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, InvalidArgumentError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
