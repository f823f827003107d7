class GitHubAppError(Exception):
    step = "running"


class InputIOError(GitHubAppError):
    """The private key file could not be read."""

    step = "reading private key"


class ConfigError(GitHubAppError):
    """The JSON config file could not be read, parsed or written."""

    step = "loading config"


class JWTError(GitHubAppError):
    """An exception raised while building the signed JWT."""

    step = "creating JWT"


class KeyFormatError(JWTError):
    """The key material is not a valid RSA private key in PEM form."""

    pass


class ClockError(JWTError):
    """The system clock reads before the epoch."""

    pass


class SigningError(JWTError):
    pass


class ExchangeError(GitHubAppError):
    """An exception raised while exchanging the JWT for an installation token."""

    step = "requesting installation token"


class TransportError(ExchangeError):
    """The request could not be sent or the connection failed."""

    pass


class ResponseParseError(ExchangeError):
    """A successful response didn't carry the expected token data."""

    pass


class RemoteRejectionError(ExchangeError):
    """GitHub answered with a non-2xx status. The body is kept verbatim."""

    def __init__(self, status_code, body):
        self.status_code = status_code
        self.body = body
        super(RemoteRejectionError, self).__init__(body)

    def __str__(self):
        return "HTTP {}: {}".format(self.status_code, self.body)
