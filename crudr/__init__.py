"""

    crudr -- CRUD routes and shortcuts for WebOb based WSGI applications
    ====================================================================

    This package registers RESTful routes for resource controllers and
    provides ``store``, ``update`` and ``delete`` shortcuts which validate a
    request, run a model operation and redirect with a success marker.

"""

from crudr.routing import (
    RouteTable, Route, Match, HTTPMethod,
    GET, POST, PUT, PATCH, DELETE, HEAD, OPTIONS)
from crudr.resource import crud
from crudr.service import CRUD
from crudr.controller import CRUDMixin
from crudr.config import Configuration
from crudr.schema import Validator, drop_uniqueness_rule
from crudr.operation import StaticOperation, InstanceOperation, operation
from crudr.response import Confirmed, Back, read_errors
from crudr.app import Application
from crudr.exc import (
    ConfigurationError, RouteConfigurationError, CRUDConfigurationError,
    InvalidRule, NoMatchFound, ValidationError)

__all__ = (
    'RouteTable', 'Route', 'Match', 'HTTPMethod',
    'GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS',
    'crud', 'CRUD', 'CRUDMixin', 'Configuration',
    'Validator', 'drop_uniqueness_rule',
    'StaticOperation', 'InstanceOperation', 'operation',
    'Confirmed', 'Back', 'read_errors', 'Application',
    'ConfigurationError', 'RouteConfigurationError', 'CRUDConfigurationError',
    'InvalidRule', 'NoMatchFound', 'ValidationError')
