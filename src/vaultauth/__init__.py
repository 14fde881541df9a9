"""vaultauth -- Resolve declarative Vault auth configuration into login parameters.

This package turns a user-supplied authentication block (one of the
mutually exclusive Vault auth methods) into a validated parameter set and
the wire-level form parameters that Vault's login API expects. A thin
``httpx`` transport and a Typer CLI sit on top of the core.

Typical workflow::

    vaultauth params login.yaml          # show the derived wire parameters
    vaultauth login login.yaml           # perform the login

Modules:
    auth: Login variant base class, parameter store and method registry.
    methods: One login variant per supported Vault auth method.
    client: HTTP login transport.
    config: Configuration reader and client settings resolution.
    models: Pydantic models shared across the package.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.3.0"
