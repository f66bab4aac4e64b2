"""

    crudr.utils -- utility code
    ===========================

"""

__all__ = ('cached_property', 'join', 'asbool', 'describe')

class cached_property(object):
    """ Just like ``property`` but computed only once"""

    def __init__(self, func):
        self.func = func
        self.__name__ = func.__name__
        self.__doc__ = func.__doc__

    def __get__(self, obj, cls):
        if obj is None:
            return self
        val = obj.__dict__[self.__name__] = self.func(obj)
        return val

def join(*parts):
    """ Join URL parts, collapsing slashes between them

        >>> join('/a/', '/b/')
        '/a/b'
        >>> join('categories', '/')
        '/categories'
        >>> join('', '/')
        '/'

    Trailing slash is dropped unless the result is the root.
    """
    segments = [p.strip('/') for p in parts if p]
    return '/' + '/'.join(s for s in segments if s)

_truthy = frozenset(('true', 'yes', 'on', 'y', 't', '1'))
_falsy = frozenset(('false', 'no', 'off', 'n', 'f', '0', ''))

def asbool(value):
    """ Convert ini-style string ``value`` to boolean"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    normalized = str(value).strip().lower()
    if normalized in _truthy:
        return True
    if normalized in _falsy:
        return False
    raise ValueError('cannot interpret %r as boolean' % value)

def describe(target):
    """ Human readable name of a class, instance or callable, used in logs"""
    if isinstance(target, tuple):
        return '.'.join(describe(t) if not isinstance(t, str) else t
            for t in target)
    if isinstance(target, type):
        return target.__name__
    name = getattr(target, '__qualname__', None)
    if name is not None:
        return name
    return '<%s instance>' % type(target).__name__
