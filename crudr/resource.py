"""

    crudr.resource -- exposing a controller as RESTful CRUD routes
    ==============================================================

"""

import logging

from crudr.config import (
    FUNCTIONALITIES, FUNCTIONS, DEFAULT_FUNCTIONALITIES, DEFAULT_FUNCTIONS)
from crudr.routing import GET, POST, PUT, DELETE
from crudr.utils import describe
from crudr.exc import CRUDConfigurationError, RouteConfigurationError

__all__ = ('crud',)

log = logging.getLogger(__name__)

def crud(routes, prefix, controller, name_prefix, param_name,
        functionalities=None, functions=None):
    """ Register CRUD routes for ``controller``

    The same as running the following against ``routes``::

        with routes.prefix('categories'):
            routes.get('/', (CategoryController, 'index'),
                name='categories-index')
            routes.get('/{category}', (CategoryController, 'show'),
                name='categories-show')

            routes.get('/create', (CategoryController, 'create'),
                name='categories-create')
            routes.post('/create', (CategoryController, 'store'),
                name='categories-store')

            routes.get('/edit/{category}', (CategoryController, 'edit'),
                name='categories-edit')
            routes.put('/edit/{category}', (CategoryController, 'update'),
                name='categories-update')

            routes.delete('/delete/{category}',
                (CategoryController, 'destroy'), name='categories-delete')

    :param routes:
        :class:`crudr.routing.RouteTable` to register routes in
    :param prefix:
        route path prefix, all routes will start with it
    :param controller:
        controller class or instance handling the routes
    :param name_prefix:
        route names prefix, used for routes identification
    :param param_name:
        name of path parameter for routes which require one
    :param functionalities:
        mapping from CRUD category (``create``, ``read``, ``update``,
        ``delete``) to a flag telling whether to register its routes
    :param functions:
        mapping from route kind (``list``, ``read``, ``create``, ``store``,
        ``edit``, ``update``, ``delete``) to controller method name
    :returns:
        list of registered routes
    :raises crudr.exc.CRUDConfigurationError:
        if any of the arguments is missing or invalid, nothing is
        registered then
    :raises crudr.exc.RouteConfigurationError:
        if routes clash with already registered ones, nothing is registered
        then
    """
    if functionalities is None:
        functionalities = DEFAULT_FUNCTIONALITIES
    if functions is None:
        functions = DEFAULT_FUNCTIONS

    missing = [k for k in FUNCTIONALITIES if not k in functionalities]
    if missing:
        raise CRUDConfigurationError(
            'functionalities must include %s, missing %s' % (
                _quoted(FUNCTIONALITIES), _quoted(missing)))
    missing = [k for k in FUNCTIONS if not k in functions]
    if missing:
        raise CRUDConfigurationError(
            'functions must include %s, missing %s' % (
                _quoted(FUNCTIONS), _quoted(missing)))
    if prefix is None:
        raise CRUDConfigurationError('prefix cannot be None')
    for argname, value in (('controller', controller),
                           ('name_prefix', name_prefix),
                           ('param_name', param_name)):
        if value is None or value == '':
            raise CRUDConfigurationError(
                '%s cannot be None or empty' % argname)

    param = '{%s}' % param_name
    if routes.url_pattern_cls._type_re.fullmatch(param) is None:
        raise CRUDConfigurationError(
            "param_name '%s' is not a valid placeholder label" % param_name)

    def bind(method, path, kind, suffix):
        return routes.add(method, path, (controller, functions[kind]),
            name='%s-%s' % (name_prefix, suffix))

    bound = []
    try:
        with routes.prefix(prefix):
            if functionalities['read']:
                bound.append(bind(GET, '/', 'list', 'index'))
                bound.append(bind(GET, '/' + param, 'read', 'show'))

            if functionalities['create']:
                bound.append(bind(GET, '/create', 'create', 'create'))
                bound.append(bind(POST, '/create', 'store', 'store'))

            if functionalities['update']:
                bound.append(bind(GET, '/edit/' + param, 'edit', 'edit'))
                bound.append(
                    bind(PUT, '/edit/' + param, 'update', 'update'))

            if functionalities['delete']:
                bound.append(
                    bind(DELETE, '/delete/' + param, 'delete', 'delete'))
    except RouteConfigurationError:
        # nothing stays bound from a failed registration
        for r in bound:
            routes.remove(r)
        raise

    log.debug('registered %d CRUD routes for %s under /%s',
        len(bound), describe(controller), prefix.strip('/'))
    return bound

def _quoted(keys):
    return ', '.join('"%s"' % k for k in keys)
