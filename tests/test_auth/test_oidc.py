"""Tests for the OIDC login variant and its redirect parameters."""

from __future__ import annotations

import pytest

from vaultauth.auth.base import ParameterStore
from vaultauth.auth.fields import (
    FIELD_AUTH_LOGIN_OIDC,
    FIELD_CALLBACK_ADDRESS,
    FIELD_CALLBACK_LISTENER_ADDRESS,
    FIELD_MOUNT,
    FIELD_NAMESPACE,
    FIELD_ROLE,
    MOUNT_TYPE_OIDC,
    WIRE_CALLBACK_HOST,
    WIRE_CALLBACK_METHOD,
    WIRE_CALLBACK_PORT,
    WIRE_LISTEN_ADDRESS,
    WIRE_PORT,
    WIRE_SKIP_BROWSER,
)
from vaultauth.config import MappingConfigReader
from vaultauth.exceptions import (
    AddressParseError,
    FieldNotSetError,
    MissingFieldError,
    NotInitializedError,
    RequiredFieldsError,
)
from vaultauth.methods import AuthLoginOIDC

ALLOWED_WIRE_KEYS = {
    FIELD_MOUNT,
    FIELD_ROLE,
    WIRE_SKIP_BROWSER,
    WIRE_LISTEN_ADDRESS,
    WIRE_PORT,
    WIRE_CALLBACK_HOST,
    WIRE_CALLBACK_PORT,
    WIRE_CALLBACK_METHOD,
}


def _initialized(params: dict[str, object]) -> AuthLoginOIDC:
    return AuthLoginOIDC(ParameterStore(params, initialized=True))


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


class TestInit:
    def test_basic(self) -> None:
        reader = MappingConfigReader(
            {FIELD_AUTH_LOGIN_OIDC: [{FIELD_NAMESPACE: "ns1", FIELD_ROLE: "alice"}]}
        )
        login = AuthLoginOIDC()
        login.init(reader, FIELD_AUTH_LOGIN_OIDC)

        assert login.initialized
        assert login.params.as_dict() == {
            FIELD_NAMESPACE: "ns1",
            FIELD_MOUNT: MOUNT_TYPE_OIDC,
            FIELD_ROLE: "alice",
            FIELD_CALLBACK_LISTENER_ADDRESS: "",
            FIELD_CALLBACK_ADDRESS: "",
        }
        assert login.namespace == "ns1"

    def test_missing_resource(self) -> None:
        login = AuthLoginOIDC()
        with pytest.raises(MissingFieldError) as exc_info:
            login.init(MappingConfigReader({}), FIELD_AUTH_LOGIN_OIDC)
        assert str(exc_info.value) == 'resource data missing field "auth_login_oidc"'
        assert not login.initialized

    def test_missing_required(self) -> None:
        reader = MappingConfigReader({FIELD_AUTH_LOGIN_OIDC: [{}]})
        with pytest.raises(RequiredFieldsError) as exc_info:
            AuthLoginOIDC().init(reader, FIELD_AUTH_LOGIN_OIDC)
        assert exc_info.value.fields == [FIELD_ROLE]
        assert str(exc_info.value) == "required fields are unset: ['role']"

    def test_empty_role_counts_as_unset(self) -> None:
        reader = MappingConfigReader({FIELD_AUTH_LOGIN_OIDC: [{FIELD_ROLE: ""}]})
        with pytest.raises(RequiredFieldsError):
            AuthLoginOIDC().init(reader)

    def test_custom_mount(self) -> None:
        reader = MappingConfigReader(
            {FIELD_AUTH_LOGIN_OIDC: [{FIELD_ROLE: "alice", FIELD_MOUNT: "corp-oidc"}]}
        )
        login = AuthLoginOIDC()
        login.init(reader)
        assert login.get_auth_params()[FIELD_MOUNT] == "corp-oidc"


# ---------------------------------------------------------------------------
# login_path
# ---------------------------------------------------------------------------


class TestLoginPath:
    def test_empty_after_init(self) -> None:
        assert _initialized({FIELD_ROLE: "alice"}).login_path() == ""

    def test_empty_before_init(self) -> None:
        login = AuthLoginOIDC(ParameterStore({FIELD_ROLE: "alice"}))
        assert login.login_path() == ""

    def test_empty_with_no_params(self) -> None:
        assert AuthLoginOIDC().login_path() == ""


# ---------------------------------------------------------------------------
# get_auth_params
# ---------------------------------------------------------------------------


class TestGetAuthParams:
    def test_listener_addr_only(self) -> None:
        login = _initialized(
            {
                FIELD_ROLE: "alice",
                FIELD_CALLBACK_LISTENER_ADDRESS: "tcp://localhost:55000",
                FIELD_CALLBACK_ADDRESS: "",
            }
        )
        assert login.get_auth_params() == {
            FIELD_MOUNT: MOUNT_TYPE_OIDC,
            FIELD_ROLE: "alice",
            WIRE_SKIP_BROWSER: "true",
            WIRE_LISTEN_ADDRESS: "localhost",
            WIRE_PORT: "55000",
        }

    def test_callback_addr_only(self) -> None:
        login = _initialized(
            {FIELD_ROLE: "alice", FIELD_CALLBACK_ADDRESS: "http://127.0.0.1:55001"}
        )
        assert login.get_auth_params() == {
            FIELD_MOUNT: MOUNT_TYPE_OIDC,
            FIELD_ROLE: "alice",
            WIRE_SKIP_BROWSER: "true",
            WIRE_CALLBACK_HOST: "127.0.0.1",
            WIRE_CALLBACK_PORT: "55001",
            WIRE_CALLBACK_METHOD: "http",
        }

    def test_both_addrs(self) -> None:
        login = _initialized(
            {
                FIELD_ROLE: "alice",
                FIELD_CALLBACK_LISTENER_ADDRESS: "tcp://localhost:55000",
                FIELD_CALLBACK_ADDRESS: "http://127.0.0.1:55001",
            }
        )
        assert login.get_auth_params() == {
            FIELD_MOUNT: MOUNT_TYPE_OIDC,
            FIELD_ROLE: "alice",
            WIRE_SKIP_BROWSER: "true",
            WIRE_LISTEN_ADDRESS: "localhost",
            WIRE_PORT: "55000",
            WIRE_CALLBACK_HOST: "127.0.0.1",
            WIRE_CALLBACK_PORT: "55001",
            WIRE_CALLBACK_METHOD: "http",
        }

    def test_no_addrs(self) -> None:
        login = _initialized(
            {
                FIELD_ROLE: "alice",
                FIELD_CALLBACK_LISTENER_ADDRESS: "",
                FIELD_CALLBACK_ADDRESS: "",
            }
        )
        assert login.get_auth_params() == {
            FIELD_MOUNT: MOUNT_TYPE_OIDC,
            FIELD_ROLE: "alice",
        }

    def test_https_callback(self) -> None:
        login = _initialized(
            {FIELD_ROLE: "alice", FIELD_CALLBACK_ADDRESS: "https://vault.example.com:8250"}
        )
        params = login.get_auth_params()
        assert params[WIRE_CALLBACK_METHOD] == "https"
        assert params[WIRE_CALLBACK_HOST] == "vault.example.com"
        assert params[WIRE_CALLBACK_PORT] == "8250"

    @pytest.mark.parametrize(
        "params",
        [
            {
                FIELD_CALLBACK_LISTENER_ADDRESS: "tcp://localhost:55000",
                FIELD_CALLBACK_ADDRESS: "http://127.0.0.1:55001",
            },
            {},
            {FIELD_ROLE: ""},
        ],
        ids=["addresses-set", "nothing-set", "empty-role"],
    )
    def test_error_no_role(self, params: dict[str, object]) -> None:
        with pytest.raises(FieldNotSetError) as exc_info:
            _initialized(params).get_auth_params()
        assert str(exc_info.value) == '"role" is not set'
        assert exc_info.value.field == FIELD_ROLE

    def test_not_initialized(self) -> None:
        login = AuthLoginOIDC(ParameterStore({FIELD_ROLE: "alice"}))
        with pytest.raises(NotInitializedError):
            login.get_auth_params()

    def test_malformed_listener_address_names_field(self) -> None:
        login = _initialized(
            {FIELD_ROLE: "alice", FIELD_CALLBACK_LISTENER_ADDRESS: "tcp://localhost:port"}
        )
        with pytest.raises(AddressParseError) as exc_info:
            login.get_auth_params()
        assert exc_info.value.field == FIELD_CALLBACK_LISTENER_ADDRESS
        assert exc_info.value.reason == "invalid port"

    def test_malformed_callback_address_names_field(self) -> None:
        login = _initialized(
            {FIELD_ROLE: "alice", FIELD_CALLBACK_ADDRESS: "127.0.0.1:55001"}
        )
        with pytest.raises(AddressParseError) as exc_info:
            login.get_auth_params()
        assert exc_info.value.field == FIELD_CALLBACK_ADDRESS
        assert exc_info.value.reason == "missing scheme"

    def test_idempotent(self) -> None:
        login = _initialized(
            {
                FIELD_ROLE: "alice",
                FIELD_CALLBACK_LISTENER_ADDRESS: "tcp://localhost:55000",
                FIELD_CALLBACK_ADDRESS: "http://127.0.0.1:55001",
            }
        )
        assert login.get_auth_params() == login.get_auth_params()

    @pytest.mark.parametrize(
        "listener, callback",
        [
            ("", ""),
            ("tcp://localhost:55000", ""),
            ("", "http://127.0.0.1:55001"),
            ("tcp://0.0.0.0:8250", "https://vault.example.com:443"),
        ],
    )
    def test_keys_stay_within_allow_list(self, listener: str, callback: str) -> None:
        login = _initialized(
            {
                FIELD_ROLE: "alice",
                FIELD_CALLBACK_LISTENER_ADDRESS: listener,
                FIELD_CALLBACK_ADDRESS: callback,
            }
        )
        params = login.get_auth_params()
        assert set(params) <= ALLOWED_WIRE_KEYS
        assert all(value for value in params.values())
        assert (WIRE_SKIP_BROWSER in params) == bool(listener or callback)


def test_end_to_end_from_config() -> None:
    reader = MappingConfigReader(
        {
            FIELD_AUTH_LOGIN_OIDC: [
                {
                    FIELD_ROLE: "dev",
                    FIELD_CALLBACK_LISTENER_ADDRESS: "tcp://0.0.0.0:8250",
                    FIELD_CALLBACK_ADDRESS: "https://vault.example.com:8250",
                }
            ]
        }
    )
    login = AuthLoginOIDC()
    login.init(reader)
    assert login.login_path() == ""
    assert login.get_auth_params() == {
        FIELD_MOUNT: MOUNT_TYPE_OIDC,
        FIELD_ROLE: "dev",
        WIRE_SKIP_BROWSER: "true",
        WIRE_LISTEN_ADDRESS: "0.0.0.0",
        WIRE_PORT: "8250",
        WIRE_CALLBACK_HOST: "vault.example.com",
        WIRE_CALLBACK_PORT: "8250",
        WIRE_CALLBACK_METHOD: "https",
    }
