import logging
import re

from werkzeug.exceptions import HTTPException
from werkzeug.formparser import parse_form_data
from werkzeug.wrappers import Response

#Shared counter echo logic used by both the Flask app and the worker

logger = logging.getLogger(__name__)

SYNC_PATH = '/counter/sync'
PLAIN_TEXT = 'text/plain; charset=utf-8'
FORM_MIMETYPES = ('application/x-www-form-urlencoded', 'multipart/form-data')
DEFAULT_MAX_FORM_MEMORY_SIZE = 500_000

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}

# whitespace and line terminators as JavaScript parseInt skips them
_SPACE = '\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'

# ascii digits only, parsing stops at the first non-digit
_leading_int = re.compile('[' + _SPACE + ']*([+-]?[0-9]+)')


class FormBodyError(Exception):
    """The request body could not be read as form data."""


def parse_count(value):
    """Parse the leading integer of ``value``, falling back to 0.

    Missing or empty input counts as ``'0'``. Anything without a numeric
    prefix yields 0 instead of an error.
    """
    match = _leading_int.match(value or '0')
    if match is None:
        return 0
    return int(match.group(1))


def read_form(request, max_form_memory_size=None):
    if request.mimetype not in FORM_MIMETYPES:
        raise FormBodyError('unsupported content type %r' % request.mimetype)
    try:
        _, form, _ = parse_form_data(
            request.environ,
            max_form_memory_size=max_form_memory_size,
            max_content_length=max_form_memory_size,
            silent=False,
        )
    except (ValueError, HTTPException) as e:
        raise FormBodyError(str(e)) from e
    return form


def counter_response(form, extra_headers=None):
    count = parse_count(form.get('count'))
    response = Response(str(count), status=200, content_type=PLAIN_TEXT)
    response.headers['Access-Control-Allow-Origin'] = '*'
    if extra_headers:
        response.headers.update(extra_headers)
    return response


def bad_request_response():
    return Response('bad request', status=400, content_type=PLAIN_TEXT)


def preflight_response():
    response = Response(status=204)
    # no body, so no content type either
    del response.headers['Content-Type']
    response.headers.update(CORS_HEADERS)
    return response


def handle_sync(request, max_form_memory_size=None, extra_headers=None):
    """Echo the submitted ``count`` back as plain text.

    Only a body that can't be parsed as form data at all is rejected with a
    400; bad field values degrade to 0.
    """
    try:
        form = read_form(request, max_form_memory_size)
    except FormBodyError as e:
        logger.debug('rejecting %s body: %s', SYNC_PATH, e)
        return bad_request_response()
    return counter_response(form, extra_headers)
