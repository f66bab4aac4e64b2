"""

    crudr.response -- CRUD outcomes
    ===============================

"""

import json
from base64 import urlsafe_b64encode, urlsafe_b64decode

from webob import exc

from crudr.config import Configuration

__all__ = ('Confirmed', 'Back', 'redirect_to', 'back', 'read_errors')

class Confirmed(exc.HTTPFound):
    """ Redirect after successful operation

    :attr state:
        value of the success marker carried in the location
    """

    def __init__(self, location, state=None, **kw):
        super(Confirmed, self).__init__(location=location, **kw)
        self.state = state

class Back(exc.HTTPFound):
    """ Redirect to the previous page after failed validation

    :attr errors:
        mapping from field name to a list of messages
    """

    def __init__(self, location, errors, **kw):
        super(Back, self).__init__(location=location, **kw)
        self.errors = errors

def redirect_to(routes, name, config):
    """ Redirect to route ``name`` with the success marker set"""
    location = routes.reverse(name, **{config.state_key: config.state_value})
    return Confirmed(location, state=config.state_value)

def back(request, errors, config):
    """ Redirect to the referring page flashing ``errors`` in a cookie"""
    location = request.referer or config.back_fallback
    response = Back(location, errors)
    response.set_cookie(config.errors_cookie, _encode(errors), path='/')
    return response

def read_errors(request, config=None):
    """ Read errors flashed by :func:`back`, empty mapping if there's none"""
    if config is None:
        config = Configuration()
    value = request.cookies.get(config.errors_cookie)
    if not value:
        return {}
    try:
        errors = json.loads(urlsafe_b64decode(value.encode('ascii')))
    except (ValueError, TypeError):
        return {}
    return errors if isinstance(errors, dict) else {}

def _encode(errors):
    return urlsafe_b64encode(json.dumps(errors).encode('utf-8')).decode('ascii')
