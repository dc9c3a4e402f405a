"""
Plain text response helpers.
"""
from flask import Response


def plain_text(body, status=200):
    """Build a text/plain response."""
    return Response(body, status=status, mimetype='text/plain')
