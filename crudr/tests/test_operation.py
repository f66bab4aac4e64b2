from unittest import TestCase

from crudr.operation import (
    Operation, StaticOperation, InstanceOperation, operation)

class Model(object):

    @classmethod
    def create(cls, data=None):
        return ('create', data)

    def update(self, data=None):
        return ('update', data)

class TestOperation(TestCase):

    def test_dispatch_by_type(self):
        self.assertIsInstance(operation(Model, 'create'), StaticOperation)
        self.assertIsInstance(operation(Model(), 'update'), InstanceOperation)
        op = StaticOperation(Model, 'create')
        self.assertIs(operation(op, 'other'), op)

    def test_call(self):
        self.assertEqual(StaticOperation(Model, 'create')({'a': 1}),
            ('create', {'a': 1}))
        self.assertEqual(StaticOperation(Model, 'create')(), ('create', None))
        self.assertEqual(InstanceOperation(Model(), 'update')({}),
            ('update', None))

    def test_wrong_target(self):
        self.assertRaises(TypeError, StaticOperation, Model(), 'create')
        self.assertRaises(TypeError, InstanceOperation, Model, 'create')

    def test_missing_method(self):
        self.assertRaises(AttributeError, Operation(Model, 'nope'))

    def test_eq(self):
        m = Model()
        self.assertEqual(InstanceOperation(m, 'update'),
            InstanceOperation(m, 'update'))
        self.assertNotEqual(InstanceOperation(m, 'update'),
            InstanceOperation(Model(), 'update'))
        self.assertEqual(repr(StaticOperation(Model, 'create')),
            'StaticOperation(Model.create)')
