"""
Custom Exception Classes
View resolution exceptions with HTTP status codes
"""
from typing import Optional, List


class FrameworkException(Exception):
    """Base exception for all bridge exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ViewException(FrameworkException):
    """Base exception for view finder errors"""
    message = "View could not be resolved"


class InvalidNameError(ViewException):
    """
    Malformed namespaced view name

    Raised when a hinted name is missing its delimiter or has the
    wrong number of segments

    Example:
        raise InvalidNameError("View [bad::a::b] has an invalid name.")
    """
    message = "View has an invalid name"

    def __init__(self, message: Optional[str] = None, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class UnknownNamespaceError(ViewException):
    """
    Namespace without any registered hint path

    This is a configuration problem, not a missing view

    Example:
        raise UnknownNamespaceError("No hint path defined for [admin].", namespace='admin')
    """
    message = "No hint path defined"

    def __init__(self, message: Optional[str] = None, namespace: Optional[str] = None):
        super().__init__(message)
        self.namespace = namespace


class NotFoundError(ViewException):
    """
    View not found in any search path

    Example:
        raise NotFoundError("View [welcome] not found.", name='welcome', paths=['/views'])
    """
    status_code = 404
    message = "View not found"

    def __init__(
        self,
        message: Optional[str] = None,
        name: Optional[str] = None,
        paths: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.name = name
        self.paths = paths or []
