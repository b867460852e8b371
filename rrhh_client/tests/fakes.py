"""
Transports for the client tests.

FakeSession records every request and answers from a route table;
APIClientSession sends the requests to the Django app through DRF's
APIClient.
"""
import json
from collections import namedtuple
from urllib.parse import urlsplit

from django.core.files.uploadedfile import SimpleUploadedFile

from rrhh_client.api_client import RRHHClient

BASE_URL = 'http://rrhh.test'

Call = namedtuple('Call', ['method', 'path', 'params', 'json', 'files'])


def envelope(data, message=''):
    return {'status': 'success', 'message': message, 'data': data}


def error_envelope(message, details=None):
    return {'status': 'error', 'message': message, 'data': None, 'details': details or [message]}


class FakeResponse:

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.content = b'' if body is None else json.dumps(body).encode()
        self.text = self.content.decode()

    def json(self):
        return json.loads(self.content)


class FakeSession:
    """
    Routes map (METHOD, path) to a payload (wrapped in a success envelope),
    a FakeResponse, an exception to raise, or a callable taking the Call.
    Unknown routes answer 404.
    """

    def __init__(self, routes=None):
        self.headers = {}
        self.routes = dict(routes or {})
        self.calls = []

    def route(self, method, path, response):
        self.routes[(method, path)] = response

    def request(self, method, url, timeout=None, params=None, json=None, files=None, data=None):
        call = Call(method, urlsplit(url).path, params, json, files)
        self.calls.append(call)

        response = self.routes.get((method, call.path))
        if callable(response) and not isinstance(response, type):
            response = response(call)
        if response is None:
            return FakeResponse(404, error_envelope('No encontrado'))
        if isinstance(response, BaseException) or isinstance(response, type):
            raise response
        if isinstance(response, FakeResponse):
            return response
        status_code = 201 if method == 'POST' else 200
        return FakeResponse(status_code, envelope(response))

    def requests(self, method=None):
        return [(c.method, c.path) for c in self.calls if method is None or c.method == method]


def fake_client(routes=None):
    session = FakeSession(routes)
    return RRHHClient(BASE_URL, token='test-token', session=session), session


class APIClientSession:
    """requests.Session stand-in backed by rest_framework.test.APIClient."""

    def __init__(self, api_client):
        self.api = api_client
        self.headers = {}
        self.calls = []

    def request(self, method, url, timeout=None, params=None, json=None, files=None, data=None):
        path = urlsplit(url).path
        self.calls.append((method, path))
        handler = getattr(self.api, method.lower())

        if files is not None:
            payload = {}
            for name, upload in files.items():
                filename, content = upload[0], upload[1]
                content_type = upload[2] if len(upload) > 2 else 'application/octet-stream'
                payload[name] = SimpleUploadedFile(filename, content, content_type=content_type)
            return handler(path, payload, format='multipart')
        if method == 'GET':
            return handler(path, params or {})
        if json is not None:
            return handler(path, json, format='json')
        return handler(path)

    def requests(self, method=None):
        return [call for call in self.calls if method is None or call[0] == method]
