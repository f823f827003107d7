import logging
from urllib.parse import urljoin

import requests

from . import exceptions

_log = logging.getLogger(__name__)


class BaseClient:
    _requester = None  # requests.Session()
    timeout = None
    base_url: str = ""

    def _request(self, func, path):
        url = urljoin(self.base_url, path)
        _log.debug("{}".format(path))
        try:
            rsp = func(url, timeout=self.timeout)
        except requests.RequestException as e:
            _log.error("Request to {} failed: {}".format(url, e))
            raise exceptions.TransportError(
                "Request to {} failed: {}".format(url, e)
            ) from e
        if rsp.status_code < 200 or rsp.status_code >= 300:
            _log.error("HTTP {} for {}: {}".format(rsp.status_code, url, rsp.text))
            raise exceptions.RemoteRejectionError(rsp.status_code, rsp.text)
        if rsp.status_code == 204:
            return None
        try:
            return rsp.json()
        except ValueError as e:
            raise exceptions.ResponseParseError(
                "HTTP {} for {} returned a body that isn't JSON: {!r}".format(
                    rsp.status_code, url, rsp.text
                )
            ) from e

    def _post(self, path):
        return self._request(self._requester.post, path)

    def close(self):
        if self._requester is not None:
            self._requester.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
