"""

    crudr.operation -- model operations
    ===================================

    An operation names a method on a model class (:class:`StaticOperation`,
    e.g. ``Category.create``) or on a model instance
    (:class:`InstanceOperation`, e.g. ``category.update``) and calls it with
    an optional mapping of fields.

"""

from crudr.utils import describe

__all__ = ('Operation', 'StaticOperation', 'InstanceOperation', 'operation')

class Operation(object):
    """ Base class for operations

    :param target:
        object the method is looked up on
    :param name:
        method name
    """

    def __init__(self, target, name):
        self.target = target
        self.name = name

    def resolve(self):
        """ Return bound callable, ``AttributeError`` propagates"""
        return getattr(self.target, self.name)

    def __call__(self, data=None):
        """ Invoke operation with ``data`` as the sole argument if it's not
        empty, without arguments otherwise
        """
        method = self.resolve()
        if data:
            return method(data)
        return method()

    def __eq__(self, o):
        return (type(self) is type(o)
            and self.target is o.target
            and self.name == o.name)

    def __hash__(self):
        return hash((type(self), id(self.target), self.name))

    def __repr__(self):
        return '%s(%s.%s)' % (
            self.__class__.__name__, describe(self.target), self.name)

class StaticOperation(Operation):
    """ Operation on a class, method should be a class or static method"""

    def __init__(self, target, name):
        if not isinstance(target, type):
            raise TypeError('%r is not a class' % (target,))
        super(StaticOperation, self).__init__(target, name)

class InstanceOperation(Operation):
    """ Operation on an instance"""

    def __init__(self, target, name):
        if isinstance(target, type):
            raise TypeError('%r is a class, not an instance' % (target,))
        super(InstanceOperation, self).__init__(target, name)

def operation(target, name):
    """ Make operation for ``target``, classes give :class:`StaticOperation`,
    other objects give :class:`InstanceOperation`, operations are returned as
    is
    """
    if isinstance(target, Operation):
        return target
    if isinstance(target, type):
        return StaticOperation(target, name)
    return InstanceOperation(target, name)
