import dataclasses

import pytest

from restbind import (
    Endpoint,
    HTTPHeader,
    HTTPMethod,
    InvalidURLComponents,
    QueryItem,
    ResponseMetadata,
    Scheme,
    Verb,
)
from tests.utils.models import User


class TestEndpointDefaults:
    def test_defaults(self, host: str):
        endpoint = Endpoint(host=host)

        assert endpoint.scheme is Scheme.HTTPS
        assert endpoint.method == HTTPMethod.get()
        assert endpoint.port is None
        assert endpoint.path == ""
        assert endpoint.query == ()
        assert endpoint.headers == ()
        assert endpoint.uses_default_json_decoder

    def test_metadata_response_type_disables_json_default(self, host: str):
        endpoint = Endpoint(host=host, response_type=ResponseMetadata)

        assert not endpoint.uses_default_json_decoder

    def test_custom_decoder_disables_json_default(self, host: str):
        endpoint = Endpoint(host=host, decoder=lambda content, metadata: content)

        assert not endpoint.uses_default_json_decoder


class TestEndpointValidation:
    def test_empty_host_is_rejected(self):
        with pytest.raises(InvalidURLComponents):
            Endpoint(host="")

    def test_invalid_url_components_is_a_value_error(self):
        with pytest.raises(ValueError):
            Endpoint(host="")

    def test_unknown_scheme_is_rejected(self, host: str):
        with pytest.raises(ValueError):
            Endpoint(host=host, scheme="ftp")

    def test_endpoint_is_immutable(self, host: str):
        endpoint = Endpoint(host=host)

        with pytest.raises(dataclasses.FrozenInstanceError):
            endpoint.host = "other.example.com"  # type: ignore[misc]


class TestEndpointNormalization:
    def test_scheme_from_string(self, host: str):
        assert Endpoint(host=host, scheme="http").scheme is Scheme.HTTP

    def test_method_from_verb_string(self, host: str):
        endpoint = Endpoint(host=host, method="delete")

        assert endpoint.method == HTTPMethod.delete()

    def test_method_from_verb(self, host: str):
        assert Endpoint(host=host, method=Verb.GET).method == HTTPMethod.get()

    def test_verb_string_requiring_body_is_rejected(self, host: str):
        with pytest.raises(TypeError):
            Endpoint(host=host, method="POST")

    def test_query_from_mapping_keeps_order(self, host: str):
        endpoint = Endpoint(host=host, query={"b": "2", "a": "1", "flag": None})

        assert endpoint.query == (
            QueryItem("b", "2"),
            QueryItem("a", "1"),
            QueryItem("flag"),
        )

    def test_query_values_are_stringified(self, host: str):
        endpoint = Endpoint(host=host, query=[("page", 2), ("draft", False)])

        assert endpoint.query == (QueryItem("page", "2"), QueryItem("draft", "false"))

    def test_headers_from_pairs_and_mapping(self, host: str):
        from_pairs = Endpoint(host=host, headers=[("X-Trace", "1")])
        from_mapping = Endpoint(host=host, headers={"X-Trace": "1"})

        assert from_pairs.headers == (HTTPHeader("X-Trace", "1"),)
        assert from_mapping.headers == from_pairs.headers

    def test_replace_returns_modified_copy(self, host: str):
        endpoint = Endpoint(host=host, path="/users/1", response_type=User)

        other = endpoint.replace(path="/users/2")

        assert other.path == "/users/2"
        assert other.response_type is User
        assert endpoint.path == "/users/1"


class TestHTTPMethod:
    @pytest.mark.parametrize("factory", [HTTPMethod.post, HTTPMethod.put, HTTPMethod.patch])
    def test_body_methods_keep_body(self, factory):
        method = factory(b"payload")

        assert method.body == b"payload"

    def test_value(self):
        assert HTTPMethod.patch(b"").value == "PATCH"
        assert HTTPMethod.delete().value == "DELETE"

    def test_body_must_be_bytes(self):
        with pytest.raises(TypeError):
            HTTPMethod.post("not bytes")  # type: ignore[arg-type]

    def test_get_does_not_take_body(self):
        with pytest.raises(TypeError):
            HTTPMethod(Verb.GET, b"payload")
