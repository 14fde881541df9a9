"""HTTP login transport.

:class:`HTTPLoginTransport` submits the parameters derived by a
:class:`~vaultauth.auth.base.AuthLogin` to Vault and returns the
:class:`~vaultauth.models.AuthSecret` from the response.

Example::

    from vaultauth.client import HTTPLoginTransport

    secret = HTTPLoginTransport(settings).login(login)
"""

from vaultauth.client.transport import HTTPLoginTransport

__all__ = ["HTTPLoginTransport"]
