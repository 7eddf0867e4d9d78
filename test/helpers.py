"""Shared helpers for building a client with a fake transport."""

import json
from unittest.mock import Mock

import requests

from freshdesk_sdk import Api


def make_response(status=200, body=None, headers=None, reason="OK"):
    """Build a real requests.Response so raise_for_status behaves normally."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.url = "https://acme.freshdesk.com/api/v2/test"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body if isinstance(body, bytes) else body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


def make_api(response=None, **kwargs):
    """Return an Api whose session is a Mock answering with ``response``."""
    session = Mock()
    session.request.return_value = response if response is not None else make_response(body={})
    api = Api("test-api-key", "acme", session=session, **kwargs)
    return api, session


def sent(session):
    """(method, url, kwargs) of the last request made on the mock session."""
    args, kwargs = session.request.call_args
    method, url = args
    return method, url, kwargs
