"""Stateless counter echo endpoint served as a Flask function or a WSGI worker."""
