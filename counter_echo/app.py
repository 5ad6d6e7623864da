import logging
import os

from flask import Flask, request

from counter_echo.echo import (
    DEFAULT_MAX_FORM_MEMORY_SIZE,
    SYNC_PATH,
    handle_sync,
    preflight_response,
)

#Counter echo served as a Flask function, no state is kept between requests

app = Flask(__name__)
app.config['MAX_FORM_MEMORY_SIZE'] = int(
    os.getenv('MAX_FORM_MEMORY_SIZE', DEFAULT_MAX_FORM_MEMORY_SIZE)
)


@app.route(SYNC_PATH, methods=['POST', 'OPTIONS'])
def counter_sync():
    if request.method == 'OPTIONS':
        return preflight_response()
    return handle_sync(
        request,
        max_form_memory_size=app.config['MAX_FORM_MEMORY_SIZE'],
        extra_headers={'X-Powered-By': 'Flask'},
    )


if __name__ == '__main__':
    debug = os.getenv('DEBUG', '').lower() in ('1', 'true')
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    app.run(debug=debug, host=os.getenv('HOST', '0.0.0.0'), port=int(os.getenv('PORT', 5000)))
