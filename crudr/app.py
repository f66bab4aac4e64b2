"""

    crudr.app -- WSGI application
    =============================

    Serves a :class:`crudr.routing.RouteTable` whose targets are either plain
    callables or ``(controller, method_name)`` pairs as registered by
    :func:`crudr.resource.crud`. Handlers are called with the request and URL
    params as keyword arguments::

        class CategoryController(object):
            def show(self, request, category):
                ...

"""

import logging

from webob.dec import wsgify

from crudr.utils import describe
from crudr.exc import NoMatchFound

__all__ = ('Application',)

log = logging.getLogger(__name__)

class Application(object):
    """ WSGI application dispatching requests through route table

    :param routes:
        :class:`crudr.routing.RouteTable`
    :param method_override:
        honour ``_method`` form field of POST requests, so HTML forms can
        reach PUT and DELETE routes
    """

    override_field = '_method'

    def __init__(self, routes, method_override=True):
        self.routes = routes
        self.method_override = method_override

    def request_method(self, request):
        method = request.method
        if self.method_override and method == 'POST':
            override = request.POST.get(self.override_field)
            if override:
                method = override.upper()
        return method

    def resolve(self, target):
        """ Resolve route target into a callable"""
        if isinstance(target, tuple):
            controller, name = target
            if isinstance(controller, type):
                controller = controller()
            return getattr(controller, name)
        return target

    @wsgify
    def __call__(self, request):
        method = self.request_method(request)
        try:
            match = self.routes.match(request.path_info, method)
        except NoMatchFound as e:
            log.debug('no route for %s %s', method, request.path_info)
            return e.response
        handler = self.resolve(match.target)
        log.debug('%s %s -> %s', method, request.path_info,
            describe(match.target))
        return handler(request, **match.kwargs)
