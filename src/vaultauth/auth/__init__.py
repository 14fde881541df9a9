"""Login variant abstraction for Vault authentication.

The main entry points are:

- :class:`AuthLogin` -- abstract base class for login variants.
- :class:`ParameterStore` -- per-attempt store of resolved values.
- :class:`AuthLoginRegistry` -- maps auth block fields to variants and
  selects the configured one.
- :func:`create_default_registry` -- registry pre-loaded with all built-in
  methods.

Typical usage::

    from vaultauth.auth import create_default_registry
    from vaultauth.config import MappingConfigReader, load_config_file

    reader = MappingConfigReader(load_config_file("login.yaml"))
    login = create_default_registry().from_config(reader)
    path, params = login.login_path(), login.get_auth_params()
"""

from vaultauth.auth.base import AuthLogin, FieldSpec, ParameterStore
from vaultauth.auth.registry import AuthLoginRegistry, create_default_registry

__all__ = [
    "AuthLogin",
    "AuthLoginRegistry",
    "FieldSpec",
    "ParameterStore",
    "create_default_registry",
]
