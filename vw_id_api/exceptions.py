class VwIdException(Exception):
    """
    Generic vw_id_api exception.
    """
    pass


class RequestBuildError(VwIdException):
    """
    Raised when a request cannot be built, e.g. a malformed URL or endpoint template.
    """
    pass


class TransportError(VwIdException):
    """
    Raised when the request could not be sent or no response was received.
    """
    pass


class APIError(TransportError):
    """
    Raised when the server answers with a non-2xx status.
    """

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(APIError):
    """
    Raised upon receipt of an authentication error or when no token is available.
    """
    pass


class RateLimitingError(APIError):
    """
    Raised when we get rate limited by the server
    """
    pass


class InvalidAPIResponseError(VwIdException):
    """
    Raised upon receipt of an invalid API response: not JSON, or not the expected shape.
    """
    pass
