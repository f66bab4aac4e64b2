from unittest import TestCase

from crudr.routing import RouteTable
from crudr.resource import crud
from crudr.config import DEFAULT_FUNCTIONALITIES, DEFAULT_FUNCTIONS
from crudr.exc import (
    CRUDConfigurationError, RouteConfigurationError, InvalidRoutePattern)

class CategoryController(object):
    pass

class TestCRUDRoutes(TestCase):

    def register(self, **kw):
        routes = RouteTable()
        args = dict(
            prefix='categories',
            controller=CategoryController,
            name_prefix='categories',
            param_name='category')
        args.update(kw)
        return routes, crud(routes, **args)

    def test_all_routes(self):
        routes, bound = self.register()
        self.assertEqual(
            [(r.method, r.path, r.name, r.target) for r in routes],
            [
                ('GET', '/categories', 'categories-index',
                    (CategoryController, 'index')),
                ('GET', '/categories/{category}', 'categories-show',
                    (CategoryController, 'show')),
                ('GET', '/categories/create', 'categories-create',
                    (CategoryController, 'create')),
                ('POST', '/categories/create', 'categories-store',
                    (CategoryController, 'store')),
                ('GET', '/categories/edit/{category}', 'categories-edit',
                    (CategoryController, 'edit')),
                ('PUT', '/categories/edit/{category}', 'categories-update',
                    (CategoryController, 'update')),
                ('DELETE', '/categories/delete/{category}', 'categories-delete',
                    (CategoryController, 'destroy')),
            ])
        self.assertEqual(bound, list(routes))

    def test_show_route(self):
        routes, _ = self.register()
        self.assertEqual(routes['categories-show'].method, 'GET')
        self.assertEqual(routes['categories-show'].path,
            '/categories/{category}')
        self.assertEqual(routes.reverse('categories-show', 7), '/categories/7')

    def test_matching(self):
        routes, _ = self.register()
        m = routes.match('/categories/create', 'GET')
        self.assertEqual(m.route.name, 'categories-create')
        m = routes.match('/categories/create', 'POST')
        self.assertEqual(m.route.name, 'categories-store')
        m = routes.match('/categories/5', 'GET')
        self.assertEqual(m.route.name, 'categories-show')
        self.assertEqual(m.kwargs, {'category': '5'})
        m = routes.match('/categories/edit/5', 'PUT')
        self.assertEqual(m.route.name, 'categories-update')
        m = routes.match('/categories/delete/5', 'DELETE')
        self.assertEqual(m.route.name, 'categories-delete')

    def test_functionalities(self):
        functionalities = dict(DEFAULT_FUNCTIONALITIES, update=False,
            delete=False)
        routes, bound = self.register(functionalities=functionalities)
        self.assertEqual(
            [r.name for r in bound],
            ['categories-index', 'categories-show',
             'categories-create', 'categories-store'])

        functionalities = dict(create=False, read=False, update=False,
            delete=True)
        routes, bound = self.register(functionalities=functionalities)
        self.assertEqual([r.name for r in bound], ['categories-delete'])

    def test_functions(self):
        functions = dict(DEFAULT_FUNCTIONS, list='listing', delete='remove')
        routes, _ = self.register(functions=functions)
        self.assertEqual(routes['categories-index'].target,
            (CategoryController, 'listing'))
        self.assertEqual(routes['categories-delete'].target,
            (CategoryController, 'remove'))

    def test_prefix_and_names_are_independent(self):
        routes, _ = self.register(prefix='admin/cats', name_prefix='cats',
            param_name='id')
        self.assertEqual(routes.reverse('cats-edit', id=3),
            '/admin/cats/edit/3')

    def test_missing_functionality(self):
        for key in DEFAULT_FUNCTIONALITIES:
            functionalities = dict(DEFAULT_FUNCTIONALITIES)
            del functionalities[key]
            routes = RouteTable()
            self.assertRaises(CRUDConfigurationError, crud, routes,
                'categories', CategoryController, 'categories', 'category',
                functionalities=functionalities)
            self.assertEqual(len(routes), 0)

    def test_missing_function(self):
        for key in DEFAULT_FUNCTIONS:
            functions = dict(DEFAULT_FUNCTIONS)
            del functions[key]
            routes = RouteTable()
            with self.assertRaises(CRUDConfigurationError) as ctx:
                crud(routes, 'categories', CategoryController, 'categories',
                    'category', functions=functions)
            self.assertIn('"%s"' % key, str(ctx.exception))
            self.assertEqual(len(routes), 0)

    def test_null_arguments(self):
        for kw in (dict(prefix=None), dict(controller=None),
                   dict(name_prefix=''), dict(param_name=None)):
            routes = RouteTable()
            args = dict(prefix='categories', controller=CategoryController,
                name_prefix='categories', param_name='category')
            args.update(kw)
            self.assertRaises(CRUDConfigurationError, crud, routes, **args)
            self.assertEqual(len(routes), 0)

    def test_invalid_param_name(self):
        for param_name in ('category-id', 'cat id', '1st', '{category}'):
            routes = RouteTable()
            self.assertRaises(CRUDConfigurationError, crud, routes,
                'categories', CategoryController, 'categories', param_name)
            self.assertEqual(len(routes), 0)

    def test_typed_param_name(self):
        routes, _ = self.register(param_name='category:int')
        m = routes.match('/categories/edit/5', 'GET')
        self.assertEqual(m.kwargs, {'category': 5})

    def test_name_clash_binds_nothing(self):
        routes = RouteTable()
        taken = routes.get('/other', 'other', name='categories-create')
        self.assertRaises(RouteConfigurationError, crud, routes, 'categories',
            CategoryController, 'categories', 'category')
        self.assertEqual(list(routes), [taken])
        self.assertIs(routes['categories-create'], taken)
        self.assertFalse('categories-index' in routes)
        self.assertEqual(routes.reverse('categories-create'), '/other')

    def test_invalid_pattern_binds_nothing(self):
        routes = RouteTable()
        self.assertRaises(InvalidRoutePattern, crud, routes, 'categories',
            CategoryController, 'categories', 'category:uuid')
        self.assertEqual(len(routes), 0)
        self.assertFalse('categories-index' in routes)

    def test_registration_after_failure(self):
        routes = RouteTable()
        routes.get('/other', 'other', name='categories-delete')
        self.assertRaises(RouteConfigurationError, crud, routes, 'categories',
            CategoryController, 'categories', 'category')
        bound = crud(routes, 'cats', CategoryController, 'cats', 'cat')
        self.assertEqual(len(bound), 7)
        self.assertEqual(len(routes), 8)
