"""

    crudr.exc -- exceptions
    =======================

"""

from webob import exc

__all__ = (
    'ConfigurationError', 'RouteConfigurationError', 'InvalidRoutePattern',
    'CRUDConfigurationError', 'InvalidRule',
    'NoMatchFound', 'NoURLPatternMatched', 'MethodNotAllowed',
    'RouteReversalError', 'ValidationError', 'InstallError')

class ConfigurationError(Exception):
    """ Something was configured improperly

    Errors of such type can be only raised during initial configuration and not
    during request handling, there's no recovery from them.
    """

class RouteConfigurationError(ConfigurationError):
    """ Routes were configured improperly"""

class InvalidRoutePattern(RouteConfigurationError):
    """ Route configured with invalid route pattern"""

class CRUDConfigurationError(ConfigurationError):
    """ CRUD routes or shortcuts were configured with missing or empty
    arguments
    """

class InvalidRule(ConfigurationError):
    """ Validation rule expression cannot be understood"""

class NoMatchFound(Exception):
    """ Raised when request wasn't matched against any route

    :attr response:
        :class:`webob.Response` object to return to client
    """

    response = NotImplemented

class NoURLPatternMatched(NoMatchFound):
    """ Raised when request wasn't matched against any URL pattern"""

    response = exc.HTTPNotFound()

class MethodNotAllowed(NoMatchFound):
    """ Raised when request path was matched but request method isn't allowed

    :param allowed:
        list of methods the matched path accepts
    """

    def __init__(self, allowed=()):
        super(MethodNotAllowed, self).__init__(
            'allowed methods: %s' % ', '.join(allowed))
        self.allowed = list(allowed)

    @property
    def response(self):
        return exc.HTTPMethodNotAllowed(headers=[
            ('Allow', ', '.join(self.allowed))])

class RouteReversalError(Exception):
    """ Cannot reverse route"""

class ValidationError(ValueError):
    """ Request data didn't pass validation

    :attr errors:
        mapping from field name to a list of messages
    """

    def __init__(self, errors):
        self.errors = errors
        super(ValidationError, self).__init__(errors)

class InstallError(Exception):
    """ Controller source cannot be patched"""
