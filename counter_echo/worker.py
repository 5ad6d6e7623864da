import logging
import os

from werkzeug.exceptions import NotFound
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request

from counter_echo.echo import (
    DEFAULT_MAX_FORM_MEMORY_SIZE,
    SYNC_PATH,
    handle_sync,
    preflight_response,
)

#Standalone worker: answers /counter/sync itself and passes everything else through


class CounterWorker:
    """WSGI entry point wrapping an origin app.

    POST and OPTIONS on the sync path are handled here, every other request
    goes to ``origin`` untouched. Without an origin, those requests get a 404.
    """

    def __init__(self, origin=None, max_form_memory_size=None):
        self.origin = origin if origin is not None else NotFound()
        self.max_form_memory_size = max_form_memory_size

    def __call__(self, environ, start_response):
        request = Request(environ)
        if request.path == SYNC_PATH:
            if request.method == 'POST':
                response = handle_sync(request, self.max_form_memory_size)
                return response(environ, start_response)
            if request.method == 'OPTIONS':
                return preflight_response()(environ, start_response)
        return self.origin(environ, start_response)


def create_worker(origin=None):
    limit = int(os.getenv('MAX_FORM_MEMORY_SIZE', DEFAULT_MAX_FORM_MEMORY_SIZE))
    return CounterWorker(origin, limit)


if __name__ == '__main__':
    debug = os.getenv('DEBUG', '').lower() in ('1', 'true')
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    run_simple(
        os.getenv('HOST', '0.0.0.0'),
        int(os.getenv('PORT', 8787)),
        create_worker(),
        use_debugger=debug,
        use_reloader=debug,
    )
