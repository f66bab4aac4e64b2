"""

    crudr.urlpattern -- matching URL against pattern
    ================================================

    Patterns are plain paths with optional ``{label}`` or ``{label:type}``
    placeholders, where type is one of ``str`` (default, single segment),
    ``int`` (digits, converted to :class:`int`) or ``path`` (the rest of the
    path, slashes included).

"""

import re

from crudr.utils import cached_property, join
from crudr.exc import (
    InvalidRoutePattern, RouteReversalError, NoURLPatternMatched)

__all__ = ('URLPattern',)

def handle_str():
    return ('[^/]+', None)

def handle_int():
    return ('[0-9]+', int)

def handle_path():
    return ('.+', None)

class URLPattern(object):

    _type_re = re.compile("""
        {
        (?P<label>[a-zA-Z_][a-zA-Z0-9_]*)     # label
        (:(?P<type>[a-zA-Z][a-zA-Z0-9]*))?    # optional type identifier
        }""", re.VERBOSE)

    typemap = {
        None:       handle_str,
        'str':      handle_str,
        'string':   handle_str,
        'int':      handle_int,
        'path':     handle_path,
    }

    def __init__(self, pattern):
        self.pattern = join(pattern)
        # fail early on unknown types
        if not self.is_exact:
            self.compiled

    @cached_property
    def is_exact(self):
        return self._type_re.search(self.pattern) is None

    @cached_property
    def labels(self):
        """ Placeholder labels in order of appearance"""
        return [m.group('label') for m in self._type_re.finditer(self.pattern)]

    @cached_property
    def compiled(self):
        converters = {}
        compiled = ''
        last = 0
        for m in self._type_re.finditer(self.pattern):
            compiled += re.escape(self.pattern[last:m.start()])
            typ, label = m.group('type'), m.group('label')
            if not typ in self.typemap:
                raise InvalidRoutePattern(
                    "unknown type '%s' in pattern '%s'" % (typ, self.pattern))
            if label in converters:
                raise InvalidRoutePattern(
                    "duplicate label '%s' in pattern '%s'" % (
                        label, self.pattern))
            r, converters[label] = self.typemap[typ]()
            compiled += '(?P<%s>%s)' % (label, r)
            last = m.end()
        compiled += re.escape(self.pattern[last:])
        self._converters = converters
        return re.compile(compiled)

    def match(self, path_info):
        """ Match ``path_info`` against pattern and return a mapping of
        converted placeholder values

        :raises crudr.exc.NoURLPatternMatched:
            if ``path_info`` doesn't match
        """
        path_info = join(path_info)
        if self.is_exact:
            if path_info != self.pattern:
                raise NoURLPatternMatched(path_info)
            return {}
        m = self.compiled.fullmatch(path_info)
        if not m:
            raise NoURLPatternMatched("no match for '%s' against '%s'" % (
                path_info, self.compiled.pattern))
        kwargs = {}
        for label, value in m.groupdict().items():
            c = self._converters[label]
            kwargs[label] = c(value) if c else value
        return kwargs

    def reverse(self, *args, **kwargs):
        """ Substitute placeholders with ``args`` (in order) or ``kwargs``
        (by label)
        """
        if self.is_exact:
            if args or kwargs:
                raise RouteReversalError(
                    "pattern '%s' doesn't accept params" % self.pattern)
            return self.pattern

        args = list(args)
        values = {}
        for label in self.labels:
            if label in kwargs:
                values[label] = kwargs.pop(label)
            elif args:
                values[label] = args.pop(0)
            else:
                raise RouteReversalError(
                    "not enough params for reversal of '%s',"
                    " missing '%s'" % (self.pattern, label))
        if args or kwargs:
            raise RouteReversalError(
                "too many params for reversal of '%s'" % self.pattern)
        return self._type_re.sub(
            lambda m: str(values[m.group('label')]), self.pattern)

    def __add__(self, o):
        if o is None:
            return self
        return self.__class__(join(self.pattern, o.pattern))

    def __eq__(self, o):
        return isinstance(o, URLPattern) and self.pattern == o.pattern

    def __hash__(self):
        return hash(self.pattern)

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.pattern)
