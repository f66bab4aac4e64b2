"""

    crudr.routing -- route table
    ============================

    Flat, ordered table of routes with named reversal. Routes are added
    imperatively and may be grouped under a common URL prefix::

        routes = RouteTable()
        with routes.prefix('api'):
            routes.get('/news', list_news, name='news-index')
            routes.post('/news', create_news, name='news-store')

        routes.reverse('news-index')                    # '/api/news'
        routes.match('/api/news', 'POST').target        # create_news

"""

import logging
from contextlib import contextmanager
from urllib.parse import urlencode

from crudr.urlpattern import URLPattern
from crudr.utils import join, describe
from crudr.exc import (
    NoURLPatternMatched, MethodNotAllowed, RouteConfigurationError,
    RouteReversalError)

__all__ = (
    'RouteTable', 'Route', 'Match', 'HTTPMethod',
    'GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS')

log = logging.getLogger(__name__)

class HTTPMethod(str):
    """ HTTP method

    Objects of this type represent HTTP method constants.
    """

GET     = HTTPMethod('GET')
POST    = HTTPMethod('POST')
PUT     = HTTPMethod('PUT')
PATCH   = HTTPMethod('PATCH')
DELETE  = HTTPMethod('DELETE')
HEAD    = HTTPMethod('HEAD')
OPTIONS = HTTPMethod('OPTIONS')

class Route(object):
    """ Single route binding

    :param method:
        HTTP method the route accepts
    :param pattern:
        :class:`.URLPattern` the path is matched against
    :param target:
        object associated with the route, returned on successful match
    :param name:
        optional name, should be provided if reversal of this route is needed
    """

    def __init__(self, method, pattern, target, name=None):
        self.method = HTTPMethod(method.upper())
        self.pattern = pattern
        self.target = target
        self.name = name

    @property
    def path(self):
        return self.pattern.pattern

    def accepts(self, method):
        if self.method == method:
            return True
        return self.method == GET and method == HEAD

    def __repr__(self):
        return '%s(%s %s -> %s, name=%r)' % (
            self.__class__.__name__, self.method, self.path,
            describe(self.target), self.name)

    __str__ = __repr__

class Match(object):
    """ Result of route matching

    :attr route:
        matched route
    :attr kwargs:
        values of URL placeholders
    """

    def __init__(self, route, kwargs):
        self.route = route
        self.kwargs = kwargs

    @property
    def target(self):
        return self.route.target

    def __repr__(self):
        return '%s(route=%r, kwargs=%r)' % (
            self.__class__.__name__, self.route, self.kwargs)

class RouteTable(object):
    """ Ordered collection of routes

    :param url_pattern_cls:
        class which should be used for URL pattern matching (default to
        :class:`.urlpattern.URLPattern`)
    """

    def __init__(self, url_pattern_cls=None):
        self.url_pattern_cls = url_pattern_cls or URLPattern
        self.routes = []
        self._names = {}
        self._prefixes = []

    @contextmanager
    def prefix(self, prefix):
        """ Group routes added within the block under URL ``prefix``"""
        self._prefixes.append(prefix)
        try:
            yield self
        finally:
            self._prefixes.pop()

    def add(self, method, path, target, name=None):
        """ Bind ``target`` to ``method`` and ``path`` under the current
        prefix

        :raises crudr.exc.RouteConfigurationError:
            if a route with the same ``name`` already exists
        """
        if name is not None and name in self._names:
            raise RouteConfigurationError(
                "route with name '%s' already defined" % name)
        pattern = self.url_pattern_cls(join(*(self._prefixes + [path])))
        r = Route(method, pattern, target, name)
        self.routes.append(r)
        if name is not None:
            self._names[name] = r
        log.debug('bound %r', r)
        return r

    def remove(self, route):
        """ Unbind previously added ``route``"""
        self.routes.remove(route)
        if route.name is not None and self._names.get(route.name) is route:
            del self._names[route.name]
        log.debug('unbound %r', route)

    def get(self, path, target, name=None):
        return self.add(GET, path, target, name=name)

    def post(self, path, target, name=None):
        return self.add(POST, path, target, name=name)

    def put(self, path, target, name=None):
        return self.add(PUT, path, target, name=name)

    def patch(self, path, target, name=None):
        return self.add(PATCH, path, target, name=name)

    def delete(self, path, target, name=None):
        return self.add(DELETE, path, target, name=name)

    def _candidates(self):
        # parameterless patterns win over placeholders, so '/create' is
        # never captured by '/{id}'
        exact = [r for r in self.routes if r.pattern.is_exact]
        inexact = [r for r in self.routes if not r.pattern.is_exact]
        return exact + inexact

    def match(self, path_info, method):
        """ Match ``path_info`` and ``method`` against the table

        :raises crudr.exc.NoURLPatternMatched:
            if no route matches the path
        :raises crudr.exc.MethodNotAllowed:
            if some routes match the path but none accepts the method
        """
        method = method.upper()
        allowed = []
        for r in self._candidates():
            try:
                kwargs = r.pattern.match(path_info)
            except NoURLPatternMatched:
                continue
            if r.accepts(method):
                return Match(r, kwargs)
            if not r.method in allowed:
                allowed.append(r.method)
        if allowed:
            raise MethodNotAllowed(allowed)
        raise NoURLPatternMatched(path_info)

    def __call__(self, request):
        """ Match :class:`webob.Request` against the table"""
        return self.match(request.path_info, request.method)

    def reverse(self, name, *args, **kwargs):
        """ Reverse route with ``name``

        Pattern placeholders are filled from ``*args`` in order or from
        ``**kwargs`` by label, remaining ``**kwargs`` become query string
        parameters.

        :raises crudr.exc.RouteReversalError:
            if there's no such route or params don't fit its pattern
        """
        if not name in self._names:
            raise RouteReversalError("no route with name '%s'" % name)
        pattern = self._names[name].pattern
        params = dict((k, kwargs.pop(k)) for k in pattern.labels if k in kwargs)
        url = pattern.reverse(*args, **params)
        if kwargs:
            url += '?' + urlencode(kwargs)
        return url

    def __getitem__(self, name):
        return self._names[name]

    def __contains__(self, name):
        return name in self._names

    def __iter__(self):
        return iter(self.routes)

    def __len__(self):
        return len(self.routes)

    def __repr__(self):
        return '%s(routes=%r)' % (self.__class__.__name__, self.routes)
