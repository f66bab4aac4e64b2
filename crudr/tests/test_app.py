from unittest import TestCase
from webob import Request, Response

from crudr.app import Application
from crudr.controller import CRUDMixin
from crudr.service import CRUD
from crudr.routing import RouteTable

class Tag(object):

    items = {}

    @classmethod
    def create(cls, data):
        tag = cls(len(cls.items) + 1, data['name'])
        cls.items[tag.id] = tag
        return tag

    @classmethod
    def get(cls, id):
        return cls.items[int(id)]

    def __init__(self, id, name):
        self.id = id
        self.name = name

    def update(self, data):
        self.name = data['name']

    def destroy(self):
        del self.items[self.id]

class TagController(CRUDMixin):

    rules = {'name': 'required|max:20'}

    def index(self, request):
        return ', '.join(sorted(t.name for t in Tag.items.values()))

    def show(self, request, tag):
        return Response(text=Tag.get(tag).name)

    def create(self, request):
        return 'form'

    def store(self, request):
        return self.crud_store(request, Tag, 'tags-index')

    def edit(self, request, tag):
        return 'edit %s' % tag

    def update(self, request, tag):
        return self.crud_update(request, Tag.get(tag), 'tags-index')

    def destroy(self, request, tag):
        return self.crud_delete(Tag.get(tag), 'tags-index')

class TestApplication(TestCase):

    def setUp(self):
        Tag.items = {}
        routes = RouteTable()
        TagController.crud = CRUD(routes)
        TagController.crud.register('tags', TagController, 'tags', 'tag')
        routes.get('/health', lambda request: 'ok')
        self.app = Application(routes)

    def tearDown(self):
        TagController.crud = None

    def get(self, path, **kw):
        return Request.blank(path, **kw).get_response(self.app)

    def test_store_and_show(self):
        resp = self.get('/tags/create', POST={'name': 'python'})
        self.assertEqual(resp.status_int, 302)
        self.assertTrue(resp.location.endswith('/tags?state=confirmed'))
        self.assertEqual(self.get('/tags/1').text, 'python')
        self.assertEqual(self.get('/tags').text, 'python')

    def test_create_form_not_captured_by_show(self):
        self.assertEqual(self.get('/tags/create').text, 'form')

    def test_store_invalid(self):
        resp = self.get('/tags/create', POST={'name': ''},
            headers={'Referer': 'http://localhost/tags/create'})
        self.assertEqual(resp.status_int, 302)
        self.assertEqual(resp.location, 'http://localhost/tags/create')
        self.assertIn('crudr_errors=', resp.headers['Set-Cookie'])
        self.assertEqual(Tag.items, {})

    def test_update_with_method_override(self):
        Tag.create({'name': 'old'})
        resp = self.get('/tags/edit/1', POST={'_method': 'PUT', 'name': 'new'})
        self.assertEqual(resp.status_int, 302)
        self.assertEqual(Tag.get(1).name, 'new')

    def test_delete_with_method_override(self):
        Tag.create({'name': 'old'})
        resp = self.get('/tags/delete/1', POST={'_method': 'delete'})
        self.assertEqual(resp.status_int, 302)
        self.assertEqual(Tag.items, {})

    def test_delete(self):
        Tag.create({'name': 'old'})
        resp = self.get('/tags/delete/1', method='DELETE')
        self.assertEqual(resp.status_int, 302)
        self.assertEqual(Tag.items, {})

    def test_method_override_disabled(self):
        self.app.method_override = False
        Tag.create({'name': 'old'})
        resp = self.get('/tags/delete/1', POST={'_method': 'DELETE'})
        self.assertEqual(resp.status_int, 405)

    def test_plain_callable_target(self):
        self.assertEqual(self.get('/health').text, 'ok')

    def test_not_found(self):
        self.assertEqual(self.get('/nothing').status_int, 404)

    def test_method_not_allowed(self):
        resp = self.get('/tags', method='POST')
        self.assertEqual(resp.status_int, 405)
        self.assertEqual(resp.headers['Allow'], 'GET')
