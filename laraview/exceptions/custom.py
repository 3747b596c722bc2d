"""
Custom Exception Classes
View-layer exceptions with HTTP status codes
"""
from typing import Optional


class ViewException(Exception):
    """Base exception for all view exceptions"""
    status_code = 500
    message = "An error occurred while handling the view"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ViewNotFoundException(ViewException):
    """
    View not found exception

    Raised when a view name does not resolve to a file in any view path

    Example:
        raise ViewNotFoundException("View [pages.home] not found.", view='pages.home')
    """
    status_code = 404
    message = "View not found"

    def __init__(
        self,
        message: Optional[str] = None,
        view: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message, status_code)
        self.view = view


class CompileException(ViewException):
    """
    Template compile exception

    Raised when a template source cannot be compiled

    Example:
        raise CompileException("unexpected '}'", path='/views/index.blade.html', lineno=3)
    """
    message = "View could not be compiled"

    def __init__(
        self,
        message: Optional[str] = None,
        path: Optional[str] = None,
        lineno: Optional[int] = None,
        status_code: Optional[int] = None
    ):
        if message and path:
            location = f"{path}:{lineno}" if lineno else path
            message = f"{message} (View: {location})"
        super().__init__(message, status_code)
        self.path = path
        self.lineno = lineno


class ConfigurationException(ViewException):
    """
    Configuration exception

    Raised when a configured directory cannot be read or written,
    e.g. a compiled view path that is not writable
    """
    message = "Invalid view configuration"


class EngineNotFoundException(ViewException):
    """Raised when no engine is registered for the requested kind"""
    message = "Engine not found"


class FileNotFoundException(ViewException):
    """Raised when the filesystem is asked to read a file that does not exist"""
    status_code = 404
    message = "File does not exist"


class BindingResolutionException(ViewException):
    """
    Binding resolution exception

    Raised when the container is asked for a key that was never bound

    Example:
        raise BindingResolutionException("Binding 'mailer' not found in container")
    """
    message = "Binding not found in container"
