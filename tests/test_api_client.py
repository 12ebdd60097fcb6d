import logging
from unittest import mock
import pytest
import requests
from webclient.api import ApiClient, ApiError, as_query


def make_response(status=200, content=b''):
    response = requests.Response()
    response.status_code = status
    response._content = content
    response.encoding = 'utf-8'
    return response


@pytest.fixture
def session():
    session = requests.Session()
    session.cookies.set('csrftoken', 'csrf-abc')
    return session


@pytest.fixture
def client(session):
    return ApiClient('http://testserver', session=session, timeout=3)


def test_get_parses_json(client, session):
    with mock.patch.object(session, 'request', return_value=make_response(200, b'[{"id": 1}]')) as request:
        result = client.request('/api/goals')

    assert result.ok
    assert result.status == 200
    assert result.data == [{'id': 1}]
    method, url = request.call_args.args
    assert (method, url) == ('GET', 'http://testserver/api/goals')
    assert 'X-CSRFToken' not in request.call_args.kwargs['headers']
    assert request.call_args.kwargs['timeout'] == 3


def test_post_sends_json_and_csrf(client, session):
    with mock.patch.object(session, 'request', return_value=make_response(201, b'{"id": 5}')) as request:
        result = client.request('/api/goals', method='POST', body={'title': 'Read'})

    assert result.data == {'id': 5}
    kwargs = request.call_args.kwargs
    assert kwargs['json'] == {'title': 'Read'}
    assert kwargs['headers']['Content-Type'] == 'application/json'
    assert kwargs['headers']['X-CSRFToken'] == 'csrf-abc'


def test_delete_returns_empty_object(client, session):
    with mock.patch.object(session, 'request', return_value=make_response(200, b'{"success": true}')):
        result = client.request('/api/goals/3', method='DELETE')
    assert result.ok
    assert result.data == {}


def test_logout_returns_empty_object(client, session):
    with mock.patch.object(session, 'request', return_value=make_response(200, b'{"message": "bye"}')):
        assert client.request('/api/logout', method='POST').data == {}


@pytest.mark.parametrize('content', [b'', b'   '])
def test_empty_body_returns_empty_object(client, session, content):
    with mock.patch.object(session, 'request', return_value=make_response(204, content)):
        result = client.request('/api/user-activity', method='POST', body={})
    assert result.ok
    assert result.data == {}


def test_malformed_body_is_logged(client, session, caplog):
    with mock.patch.object(session, 'request', return_value=make_response(200, b'<html>oops')):
        with caplog.at_level(logging.WARNING, logger='webclient.api'):
            result = client.request('/api/goals')

    assert result.data == {}
    assert 'not valid JSON' in caplog.text


def test_network_failure_does_not_raise(client, session, caplog):
    with mock.patch.object(session, 'request', side_effect=requests.ConnectionError('refused')):
        with caplog.at_level(logging.WARNING, logger='webclient.api'):
            result = client.request('/api/goals')

    assert not result
    assert result.status is None
    assert result.data == {}
    assert 'refused' in result.error
    assert 'failed' in caplog.text


def test_error_status(client, session):
    with mock.patch.object(session, 'request', return_value=make_response(401, b'{"message": "Not authenticated"}')):
        result = client.request('/api/user')

    assert result.ok is False
    assert result.error == 'HTTP 401'
    assert result.data == {'message': 'Not authenticated'}


def test_as_query_raises_on_failure(client, session):
    fetch = as_query(client, '/api/user')
    with mock.patch.object(session, 'request', return_value=make_response(401, b'{}')):
        with pytest.raises(ApiError) as exc_info:
            fetch()
    assert exc_info.value.status == 401

    with mock.patch.object(session, 'request', return_value=make_response(200, b'{"id": 1}')):
        assert fetch() == {'id': 1}
