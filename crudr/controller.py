"""

    crudr.controller -- CRUD controller mixin
    =========================================

"""

from crudr.schema import drop_uniqueness_rule
from crudr.exc import CRUDConfigurationError

__all__ = ('CRUDMixin',)

class CRUDMixin(object):
    """ Mixin giving controllers CRUD shortcuts over their own ``rules``

    :attr rules:
        mapping from field name to rule expression
    :attr crud:
        :class:`crudr.service.CRUD` service, usually set once on the base
        controller class
    """

    rules = {}
    crud = None

    def _service(self):
        if self.crud is None:
            raise CRUDConfigurationError(
                '%s has no CRUD service configured' % type(self).__name__)
        return self.crud

    def crud_action(self, request, model, action, redirect_route, kind=None):
        """ Perform a basic CRUD operation with controller rules

        Uniqueness rules are dropped for updates and no rules are used for
        deletions. ``kind`` is one of ``store``, ``update`` or ``delete``, if
        it's omitted it's looked up by ``action`` in configured actions.
        """
        service = self._service()
        if kind is None:
            kind = dict((a, k) for k, a in service.config.actions.items()
                if k != 'store').get(action, 'store')
        if kind == 'update':
            rules = drop_uniqueness_rule(self.rules)
        elif kind == 'delete':
            rules = {}
        else:
            rules = self.rules
        return service.dispatch(self, request, rules, model, action,
            redirect_route)

    def crud_store(self, request, model, redirect_route):
        """ Create a new instance of ``model`` class"""
        return self.crud_action(request, model,
            self._service().config.actions['store'], redirect_route,
            kind='store')

    def crud_update(self, request, model, redirect_route):
        """ Update existing ``model`` instance"""
        return self.crud_action(request, model,
            self._service().config.actions['update'], redirect_route,
            kind='update')

    def crud_delete(self, model, redirect_route):
        """ Delete existing ``model`` instance"""
        return self.crud_action(None, model,
            self._service().config.actions['delete'], redirect_route,
            kind='delete')
