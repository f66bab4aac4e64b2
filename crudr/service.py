"""

    crudr.service -- CRUD shortcuts
    ===============================

    :class:`CRUD` service ties route table, validator and configuration
    together. Create one per application and hand it to controllers::

        routes = RouteTable()
        service = CRUD(routes, Validator(unique=category_name_is_free))
        service.register('categories', CategoryController,
            'categories', 'category')

        class CategoryController(object):

            rules = {'name': 'required|max:255|unique:categories,name'}

            def store(self, request):
                return service.store(self, request, self.rules, Category,
                    'categories-index')

"""

import logging

from crudr.config import Configuration
from crudr.operation import operation
from crudr.resource import crud
from crudr.response import redirect_to, back
from crudr.schema import Validator, drop_uniqueness_rule
from crudr.utils import describe
from crudr.exc import ValidationError

__all__ = ('CRUD',)

log = logging.getLogger(__name__)

class CRUD(object):
    """ CRUD service

    :param routes:
        :class:`crudr.routing.RouteTable` routes are registered in and
        redirects are reversed against
    :param validator:
        callable validating requests, defaults to :class:`.Validator` with no
        uniqueness checker
    :param config:
        :class:`crudr.config.Configuration`
    """

    def __init__(self, routes, validator=None, config=None):
        self.routes = routes
        self.validator = validator or Validator()
        self.config = config or Configuration()

    def register(self, prefix, controller, name_prefix, param_name,
            functionalities=None, functions=None):
        """ Register CRUD routes for ``controller``, see
        :func:`crudr.resource.crud`

        Missing ``functionalities`` and ``functions`` default to the
        configured ones.
        """
        if functionalities is None:
            functionalities = self.config.functionalities
        if functions is None:
            functions = self.config.functions
        return crud(self.routes, prefix, controller, name_prefix, param_name,
            functionalities=functionalities, functions=functions)

    def dispatch(self, caller, request, rules, target, action,
            redirect_route):
        """ Perform a basic CRUD operation

        It proceeds in the following order:

        - validate ``request`` with ``rules``, go back to the previous page
          with the list of validation errors if any; validation is skipped if
          ``request`` is ``None``
        - run ``action`` on ``target`` with the validated fields
        - redirect to ``redirect_route`` with the success marker

        :param caller:
            object on whose behalf validation runs, usually a controller
        :param request:
            :class:`webob.Request` to validate or ``None``
        :param rules:
            mapping from field name to rule expression
        :param target:
            model class, model instance or :class:`crudr.operation.Operation`
        :param action:
            name of the method to run on ``target``
        :param redirect_route:
            name of the route to redirect to after success
        """
        data = None
        if request is not None:
            try:
                data = self.validator(request, rules, caller=caller)
            except ValidationError as e:
                log.info('validation failed for %s: %s',
                    describe(caller), ', '.join(sorted(e.errors)))
                return back(request, e.errors, self.config)

        op = operation(target, action)
        log.debug('running %r with %s', op,
            'fields %s' % ', '.join(sorted(data)) if data else 'no fields')
        op(data)

        return redirect_to(self.routes, redirect_route, self.config)

    def store(self, caller, request, rules, model, redirect_route):
        """ Create a new instance of ``model`` class with validated fields"""
        return self.dispatch(caller, request, rules, model,
            self.config.actions['store'], redirect_route)

    def update(self, caller, request, rules, model, redirect_route):
        """ Update existing ``model`` instance with validated fields

        Uniqueness rules are dropped, see
        :func:`crudr.schema.drop_uniqueness_rule`.
        """
        return self.dispatch(caller, request, drop_uniqueness_rule(rules),
            model, self.config.actions['update'], redirect_route)

    def delete(self, model, redirect_route):
        """ Delete existing ``model`` instance, no validation happens"""
        return self.dispatch(None, None, {}, model,
            self.config.actions['delete'], redirect_route)

    def __repr__(self):
        return '%s(routes=%d, validator=%r)' % (
            self.__class__.__name__, len(self.routes), self.validator)
