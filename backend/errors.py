"""
Exception types raised by the zoning backend
"""


class ZoningServiceError(Exception):
    """Base class for zoning backend errors"""
    pass


class StoreUnavailableError(ZoningServiceError):
    """The geometry store is closed, not loaded, or failed while querying"""
    pass


class StoreTimeoutError(ZoningServiceError):
    """A geometry store query did not finish within the caller's timeout

    Distinct from "not found": a timeout never means the location is outside the mapped area.
    """

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"{operation} timed out after {timeout}s")


class CollaboratorError(ZoningServiceError):
    """The text-completion collaborator failed or timed out"""
    pass
