from . import app, exceptions, utils

__version__ = "0.1.0"


def get_installation_token(private_key, app_id, installation_id, **kwargs):
    """Signs a JWT as the App and exchanges it for an installation token.

    Extra keyword arguments (``base_url``, ``timeout``) go to ``app.AppClient``.
    """
    jwt = utils.get_jwt(private_key, app_id)
    with app.AppClient(jwt, **kwargs) as cli:
        return cli.get_installation_token(installation_id)
