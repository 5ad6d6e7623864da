import pytest
from werkzeug.test import Client
from werkzeug.wrappers import Request, Response

from counter_echo.app import app
from counter_echo.worker import CounterWorker


@Request.application
def static_origin(request):
    return Response('origin %s %s' % (request.method, request.path), status=200)


@pytest.fixture
def client():
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def worker_client():
    return Client(CounterWorker(static_origin))
