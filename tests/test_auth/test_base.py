"""Tests for the parameter store and the AuthLogin base class."""

from __future__ import annotations

import pytest

from vaultauth.auth.base import AuthLogin, FieldSpec, ParameterStore, is_unset, to_wire
from vaultauth.auth.fields import MASK
from vaultauth.config import MappingConfigReader
from vaultauth.exceptions import (
    ConfigError,
    FieldNotSetError,
    MissingFieldError,
    MultipleBlocksError,
    NotInitializedError,
    RequiredFieldsError,
    ValueTypeError,
)


class _SampleLogin(AuthLogin):
    """Minimal variant exercising every field kind."""

    method_name = "sample"
    field_name = "auth_login_sample"
    mount_type = "sample"
    fields = (
        FieldSpec("role"),
        FieldSpec("secret", env=("SAMPLE_SECRET", "SAMPLE_SECRET_FALLBACK"), sensitive=True),
        FieldSpec("flag", kind="bool", default=False),
        FieldSpec("extra", kind="mapping"),
        FieldSpec("local_only", wire=False),
        FieldSpec("region", default="us-east-1"),
    )
    required = ("role", "secret")

    def login_path(self) -> str:
        return self._login_path("role")


@pytest.fixture(autouse=True)
def _clear_sample_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SAMPLE_SECRET", raising=False)
    monkeypatch.delenv("SAMPLE_SECRET_FALLBACK", raising=False)


def _reader(block: object) -> MappingConfigReader:
    return MappingConfigReader({"auth_login_sample": block})


def _init(block: object) -> _SampleLogin:
    login = _SampleLogin()
    login.init(_reader(block))
    return login


# ---------------------------------------------------------------------------
# ParameterStore
# ---------------------------------------------------------------------------


class TestParameterStore:
    def test_defaults(self) -> None:
        store = ParameterStore()
        assert not store.initialized
        assert store.as_dict() == {}
        assert store.get("missing") is None
        assert store.get("missing", "x") == "x"

    def test_set_and_get(self) -> None:
        store = ParameterStore()
        store.set("role", "alice")
        assert store.get("role") == "alice"
        assert "role" in store
        assert list(store) == ["role"]

    def test_read_only_once_initialized(self) -> None:
        store = ParameterStore({"role": "alice"})
        store.mark_initialized()
        assert store.initialized
        with pytest.raises(RuntimeError):
            store.set("role", "bob")
        assert store.get("role") == "alice"

    def test_created_initialized(self) -> None:
        store = ParameterStore({"role": "alice"}, initialized=True)
        assert store.initialized
        with pytest.raises(RuntimeError):
            store.set("mount", "x")

    def test_as_dict_is_a_copy(self) -> None:
        store = ParameterStore({"role": "alice"})
        store.as_dict()["role"] = "mallory"
        assert store.get("role") == "alice"

    def test_input_dict_is_copied(self) -> None:
        params = {"role": "alice"}
        store = ParameterStore(params)
        params["role"] = "mallory"
        assert store.get("role") == "alice"

    def test_repr_hides_values(self) -> None:
        store = ParameterStore({"password": "hunter2"})
        assert "hunter2" not in repr(store)
        assert "password" in repr(store)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    @pytest.mark.parametrize("value", [None, "", {}])
    def test_unset_values(self, value: object) -> None:
        assert is_unset(value)

    @pytest.mark.parametrize("value", ["x", False, True, {"a": "b"}, "0"])
    def test_set_values(self, value: object) -> None:
        assert not is_unset(value)

    def test_to_wire(self) -> None:
        assert to_wire(True) == "true"
        assert to_wire(False) == "false"
        assert to_wire("alice") == "alice"
        assert to_wire(42) == "42"


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


class TestInit:
    def test_extracts_fields_and_defaults(self) -> None:
        login = _init([{"role": "alice", "secret": "s3cr3t"}])
        assert login.initialized
        assert login.params.as_dict() == {
            "mount": "sample",
            "role": "alice",
            "secret": "s3cr3t",
            "flag": False,
            "region": "us-east-1",
        }

    def test_namespace_only_stored_when_set(self) -> None:
        login = _init([{"role": "alice", "secret": "x", "namespace": "ns1"}])
        assert login.params.get("namespace") == "ns1"
        assert login.namespace == "ns1"

        login = _init([{"role": "alice", "secret": "x"}])
        assert "namespace" not in login.params
        assert login.namespace is None

    def test_single_mapping_accepted_as_block(self) -> None:
        login = _init({"role": "alice", "secret": "x"})
        assert login.param("role") == "alice"

    def test_numbers_are_stringified(self) -> None:
        login = _init([{"role": 42, "secret": "x"}])
        assert login.param("role") == "42"

    def test_bool_and_mapping_fields(self) -> None:
        login = _init([{"role": "a", "secret": "x", "flag": True, "extra": {"k": "v"}}])
        assert login.param("flag") is True
        assert login.param("extra") == {"k": "v"}

    def test_missing_block(self) -> None:
        login = _SampleLogin()
        with pytest.raises(MissingFieldError) as exc_info:
            login.init(MappingConfigReader({}))
        assert str(exc_info.value) == 'resource data missing field "auth_login_sample"'
        assert not login.initialized

    def test_empty_block_list_is_missing(self) -> None:
        with pytest.raises(MissingFieldError):
            _init([])

    def test_multiple_blocks(self) -> None:
        with pytest.raises(MultipleBlocksError) as exc_info:
            _init([{"role": "a"}, {"role": "b"}])
        assert exc_info.value.count == 2

    def test_all_missing_required_fields_listed_in_order(self) -> None:
        with pytest.raises(RequiredFieldsError) as exc_info:
            _init([{}])
        assert exc_info.value.fields == ["role", "secret"]
        assert str(exc_info.value) == "required fields are unset: ['role', 'secret']"

    def test_required_error_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            _init([{"secret": "x"}])

    def test_failed_init_leaves_store_uninitialized(self) -> None:
        login = _SampleLogin()
        with pytest.raises(RequiredFieldsError):
            login.init(_reader([{"role": "alice"}]))
        assert not login.initialized
        with pytest.raises(NotInitializedError):
            login.get_auth_params()

    @pytest.mark.parametrize(
        "block",
        [
            [{"role": ["a", "b"], "secret": "x"}],
            [{"role": "a", "secret": "x", "flag": "maybe"}],
            [{"role": "a", "secret": "x", "extra": "not-a-map"}],
            [{"role": {"nested": "map"}, "secret": "x"}],
        ],
        ids=["list-for-string", "bad-bool", "string-for-mapping", "mapping-for-string"],
    )
    def test_wrong_value_kind(self, block: object) -> None:
        with pytest.raises(ValueTypeError):
            _init(block)

    def test_bool_accepts_strings(self) -> None:
        login = _init([{"role": "a", "secret": "x", "flag": "TRUE"}])
        assert login.param("flag") is True

    def test_block_under_other_field_name(self) -> None:
        reader = MappingConfigReader({"custom": [{"role": "a", "secret": "x"}]})
        login = _SampleLogin()
        login.init(reader, "custom")
        assert login.param("role") == "a"

    def test_init_is_deterministic(self) -> None:
        block = [{"role": "alice", "secret": "x", "extra": {"k": "v"}}]
        assert _init(block).params.as_dict() == _init(block).params.as_dict()


class TestEnvironmentFallback:
    def test_env_used_when_field_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMPLE_SECRET", "from-env")
        login = _init([{"role": "alice"}])
        assert login.param("secret") == "from-env"

    def test_env_names_consulted_in_order(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMPLE_SECRET_FALLBACK", "fallback")
        login = _init([{"role": "alice"}])
        assert login.param("secret") == "fallback"

    def test_configured_value_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMPLE_SECRET", "from-env")
        login = _init([{"role": "alice", "secret": "from-config"}])
        assert login.param("secret") == "from-config"

    def test_empty_configured_value_does_not_fall_back(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SAMPLE_SECRET", "from-env")
        with pytest.raises(RequiredFieldsError) as exc_info:
            _init([{"role": "alice", "secret": ""}])
        assert exc_info.value.fields == ["secret"]


# ---------------------------------------------------------------------------
# Accessors, login_path and get_auth_params
# ---------------------------------------------------------------------------


class TestDerivation:
    def test_param_requires_init(self) -> None:
        login = _SampleLogin(ParameterStore({"role": "alice"}))
        with pytest.raises(NotInitializedError) as exc_info:
            login.param("role")
        assert "sample" in str(exc_info.value)

    def test_login_path_requires_init(self) -> None:
        with pytest.raises(NotInitializedError):
            _SampleLogin().login_path()

    def test_login_path(self) -> None:
        login = _init([{"role": "alice", "secret": "x"}])
        assert login.login_path() == "auth/sample/login/alice"
        assert login.login_path() == login.login_path()

    def test_login_path_custom_mount(self) -> None:
        login = _init([{"role": "alice", "secret": "x", "mount": "team/sample"}])
        assert login.login_path() == "auth/team/sample/login/alice"

    def test_mount_falls_back_to_mount_type(self) -> None:
        login = _SampleLogin(ParameterStore({"role": "a"}, initialized=True))
        assert login.mount == "sample"

    def test_auth_params_copy_wire_fields(self) -> None:
        login = _init(
            [{"role": "alice", "secret": "x", "flag": True, "local_only": "keep-out"}]
        )
        assert login.get_auth_params() == {
            "mount": "sample",
            "role": "alice",
            "secret": "x",
            "flag": "true",
            "region": "us-east-1",
        }

    def test_auth_params_skip_namespace(self) -> None:
        login = _init([{"role": "alice", "secret": "x", "namespace": "ns1"}])
        assert "namespace" not in login.get_auth_params()

    def test_auth_params_idempotent(self) -> None:
        login = _init([{"role": "alice", "secret": "x"}])
        assert login.get_auth_params() == login.get_auth_params()

    def test_auth_params_do_not_mutate_store(self) -> None:
        login = _init([{"role": "alice", "secret": "x"}])
        before = login.params.as_dict()
        login.get_auth_params()["role"] = "mallory"
        assert login.params.as_dict() == before

    def test_require_param(self) -> None:
        login = _SampleLogin(ParameterStore({"role": ""}, initialized=True))
        with pytest.raises(FieldNotSetError) as exc_info:
            login.require_param("role")
        assert str(exc_info.value) == '"role" is not set'

    def test_masked_params(self) -> None:
        login = _init([{"role": "alice", "secret": "s3cr3t"}])
        masked = login.masked_params()
        assert masked["secret"] == MASK
        assert masked["role"] == "alice"
        assert login.get_auth_params()["secret"] == "s3cr3t"

    def test_defaults_for_hooks(self) -> None:
        login = _init([{"role": "alice", "secret": "x"}])
        assert login.client_cert() is None
        assert login.http_method == "POST"

    def test_abstract_login_path(self) -> None:
        class _Incomplete(AuthLogin):
            method_name = "incomplete"

        with pytest.raises(TypeError):
            _Incomplete()
