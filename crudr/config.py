"""

    crudr.config -- configuration
    =============================

    Defaults for CRUD registration and shortcuts. Override them with keyword
    arguments or load them from a flat ini-style settings mapping::

        [app:main]
        crudr.state_key = status
        crudr.functionalities.delete = false
        crudr.functions.list = listing

"""

from crudr.utils import asbool
from crudr.exc import CRUDConfigurationError

__all__ = (
    'Configuration', 'FUNCTIONALITIES', 'FUNCTIONS',
    'DEFAULT_FUNCTIONALITIES', 'DEFAULT_FUNCTIONS', 'DEFAULT_ACTIONS')

FUNCTIONALITIES = ('create', 'read', 'update', 'delete')
FUNCTIONS = ('list', 'read', 'create', 'store', 'edit', 'update', 'delete')

DEFAULT_FUNCTIONALITIES = {
    'create': True,
    'read': True,
    'update': True,
    'delete': True,
    }

DEFAULT_FUNCTIONS = {
    'list': 'index',
    'read': 'show',
    'create': 'create',
    'store': 'store',
    'edit': 'edit',
    'update': 'update',
    'delete': 'destroy',
    }

DEFAULT_ACTIONS = {
    'store': 'create',
    'update': 'update',
    'delete': 'destroy',
    }

class Configuration(object):
    """ CRUD configuration

    :param functionalities:
        which CRUD categories are registered by default
    :param functions:
        controller method names backing each route by default
    :param actions:
        model method names invoked by ``store``, ``update`` and ``delete``
        shortcuts
    :param state_key:
        query string parameter carrying the success marker
    :param state_value:
        value of the success marker
    :param errors_cookie:
        cookie name validation errors are flashed into
    :param back_fallback:
        location to go back to when request has no referrer
    """

    _mappings = {
        'functionalities': DEFAULT_FUNCTIONALITIES,
        'functions': DEFAULT_FUNCTIONS,
        'actions': DEFAULT_ACTIONS,
    }

    _scalars = {
        'state_key': 'state',
        'state_value': 'confirmed',
        'errors_cookie': 'crudr_errors',
        'back_fallback': '/',
    }

    def __init__(self, **overrides):
        unknown = set(overrides) - set(self._mappings) - set(self._scalars)
        if unknown:
            raise CRUDConfigurationError(
                'unknown configuration keys: %s' % ', '.join(sorted(unknown)))
        for key, default in self._mappings.items():
            value = dict(default)
            value.update(overrides.get(key) or {})
            setattr(self, key, value)
        for key, default in self._scalars.items():
            setattr(self, key, overrides.get(key, default))

    @classmethod
    def from_settings(cls, settings, prefix='crudr.'):
        """ Build configuration from flat ``settings`` mapping, only keys
        starting with ``prefix`` are considered
        """
        overrides = {}
        for key, value in settings.items():
            if not key.startswith(prefix):
                continue
            key = key[len(prefix):]
            if '.' in key:
                group, name = key.split('.', 1)
                if not group in cls._mappings:
                    raise CRUDConfigurationError(
                        "unknown configuration group '%s'" % group)
                if group == 'functionalities':
                    try:
                        value = asbool(value)
                    except ValueError as e:
                        raise CRUDConfigurationError(str(e))
                else:
                    value = value.strip()
                overrides.setdefault(group, {})[name] = value
            else:
                overrides[key] = value.strip() if isinstance(value, str) \
                    else value
        return cls(**overrides)

    def __repr__(self):
        return '%s(state=%s=%s, functions=%r)' % (
            self.__class__.__name__, self.state_key, self.state_value,
            self.functions)
