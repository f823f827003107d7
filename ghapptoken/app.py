import logging
import requests
from typing import Optional, Union

from . import base, exceptions

_log = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com/"
USER_AGENT = "ghapp-token"
ACCEPT = "application/vnd.github.v3+json"


class InstallationToken:
    token: str = ""
    expires_at: str = ""

    def __init__(self, token: str, expires_at: str):
        self.token = token
        self.expires_at = expires_at

    def __repr__(self):
        return f"<InstallationToken expires_at={self.expires_at}>"

    @classmethod
    def from_response(cls, data) -> "InstallationToken":
        """
        Builds the token from the decoded body of the ``access_tokens`` response.
        Both ``token`` and ``expires_at`` have to be present strings; any other
        fields are ignored. ``expires_at`` is kept exactly as GitHub sent it.
        """
        if not isinstance(data, dict):
            raise exceptions.ResponseParseError(
                "Expected a JSON object, got {}".format(type(data).__name__)
            )
        for k in ("token", "expires_at"):
            if k not in data:
                raise exceptions.ResponseParseError(
                    "Response is missing the '{}' field".format(k)
                )
            if not isinstance(data[k], str):
                raise exceptions.ResponseParseError(
                    "Response field '{}' should be a string, got {}".format(
                        k, type(data[k]).__name__
                    )
                )
        return cls(token=data["token"], expires_at=data["expires_at"])


class AppClient(base.BaseClient):
    def __init__(
        self,
        jwt: str,
        base_url: Optional[str] = None,
        timeout: Optional[Union[int, float]] = None,
    ):
        """
        Client to the GitHub Apps API, authenticated as the App itself with the
        signed ``jwt``. The JWT is opaque here; GitHub validates it.

        ``base_url`` allows pointing at a GitHub Enterprise API. With ``timeout``
        left as ``None`` the call blocks until the transport settles.

        The underlying session is released by ``close()``; the client can also be
        used as a context manager.
        """
        self.base_url = base_url or GITHUB_API_URL
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self.timeout = timeout
        self._requester = requests.Session()
        self._requester.headers.update(
            {
                "User-Agent": USER_AGENT,
                "Accept": ACCEPT,
                "Authorization": "Bearer {}".format(jwt),
            }
        )

    def get_installation_token(
        self, installation_id: Union[str, int]
    ) -> InstallationToken:
        """
        Exchanges the JWT for an access token of the given installation.

        Performs exactly one POST; there are no retries.
        """
        if not str(installation_id):
            raise ValueError("Installation ID must not be empty")
        data = self._post(f"app/installations/{installation_id}/access_tokens")
        token = InstallationToken.from_response(data)
        _log.debug("Got installation token expiring at {}".format(token.expires_at))
        return token
