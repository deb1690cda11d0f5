"""Tests for the PushToLive API client."""

import pytest
import requests

from ptl_client.api.client import PushToLiveClient
from ptl_client.api.exceptions import (
    RemoteClientError,
    RemoteError,
    RemoteServerError,
    TransportError,
)
from tests.conftest import TEST_ENDPOINT


@pytest.fixture
def client(credentials, mock_session):
    return PushToLiveClient(credentials, endpoint=TEST_ENDPOINT, session=mock_session)


class TestClientSetup:

    def test_auth_headers(self, client, mock_session):
        assert mock_session.headers["Access-Key"] == "ak-test"
        assert mock_session.headers["Secret-Key"] == "sk-test"
        assert mock_session.headers["User-Agent"].startswith("ptl-client/")

    def test_endpoint_gets_trailing_slash(self, credentials, mock_session):
        client = PushToLiveClient(credentials, endpoint="http://api.pushto.test", session=mock_session)
        assert client.endpoint == TEST_ENDPOINT

    def test_project_path_keeps_values_as_is(self):
        path = PushToLiveClient.project_path("demo", "branch", "feature/x")
        assert path == "v0/projects/demo/branch/feature/x"


class TestRequests:

    def test_whoami(self, client, fake_api):
        fake_api.add("POST", "v0/whoami", json_body={"Status": "Okay", "Username": "jo"})

        assert client.whoami()["Username"] == "jo"
        method, path, kwargs = fake_api.calls[0]
        assert (method, path) == ("POST", "v0/whoami")
        assert kwargs["timeout"] == client.timeout

    def test_deploy_puts_yaml_body(self, client, fake_api):
        fake_api.add("PUT", "v0/deploy", json_body={"Status": "Okay", "Services": []})

        client.deploy("name: demo\n")

        _, _, kwargs = fake_api.calls[0]
        assert kwargs["data"] == b"name: demo\n"
        assert kwargs["headers"]["Content-Type"] == "application/x-yaml"

    def test_get_project(self, client, fake_api):
        fake_api.add("GET", "v0/projects/demo/branch/main", json_body={"Name": "demo"})

        assert client.get_project("demo", "branch", "main") == {"Name": "demo"}

    def test_slashed_branch_name(self, client, fake_api):
        path = "v0/projects/demo/branch/feature/x"
        fake_api.add("GET", path, json_body={"Name": "demo"})
        fake_api.add("DELETE", path, json_body={"Deleted": {"Service": []}})

        client.get_project("demo", "branch", "feature/x")
        client.delete_project("demo", "branch", "feature/x")

        assert [(method, p) for method, p, _ in fake_api.calls] == [("GET", path), ("DELETE", path)]

    def test_delete_with_empty_body(self, client, fake_api):
        fake_api.add("DELETE", "v0/projects/demo/tag/v1", text="")

        assert client.delete_project("demo", "tag", "v1") == {}


class TestErrorMapping:

    def test_not_found(self, client, fake_api):
        fake_api.add("GET", "v0/projects/demo/branch/main", status_code=404, text="not found")

        with pytest.raises(RemoteClientError) as exc_info:
            client.get_project("demo", "branch", "main")

        assert exc_info.value.is_not_found
        assert exc_info.value.status_code == 404

    def test_forbidden_is_not_not_found(self, client, fake_api):
        fake_api.add("GET", "v0/projects/demo/branch/main", status_code=403, text="forbidden")

        with pytest.raises(RemoteClientError) as exc_info:
            client.get_project("demo", "branch", "main")

        assert not exc_info.value.is_not_found

    def test_server_error(self, client, fake_api):
        fake_api.add("PUT", "v0/deploy", status_code=502, text="bad gateway")

        with pytest.raises(RemoteServerError) as exc_info:
            client.deploy("name: demo\n")

        assert exc_info.value.body == "bad gateway"
        assert "bad gateway" in str(exc_info.value)

    def test_transport_error(self, client, fake_api):
        fake_api.add("POST", "v0/whoami", exc=requests.ConnectionError("refused"))

        with pytest.raises(TransportError, match="refused"):
            client.whoami()

    def test_invalid_json(self, client, fake_api):
        fake_api.add("POST", "v0/whoami", text="<html>oops</html>")

        with pytest.raises(RemoteError, match="Invalid JSON"):
            client.whoami()
