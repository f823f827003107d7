import argparse
import json
import logging
import os
import sys

from . import exceptions, utils
from .app import AppClient, GITHUB_API_URL

_log = logging.getLogger(__name__)


class Config(object):
    stored_keys = ("key_path", "app_id", "installation_id", "api_url")
    required_keys = ("key_path", "app_id", "installation_id")
    default_config_file = os.path.join(os.path.expanduser("~"), ".ghapp-token.json")
    config_info = (
        "Config requires key_path, app_id and installation_id, "
        "given either on the command line or in the JSON config file."
    )

    def __init__(self, config_file=None):
        self.data = {}
        self.write_config = False
        self.config_file = config_file or self.default_config_file

    def load_file_config(self):
        """Reads the JSON config. Only the default file is allowed to be missing."""
        try:
            with open(self.config_file, "r") as fh:
                file_data = json.load(fh)
        except FileNotFoundError as e:
            if self.config_file == self.default_config_file:
                return
            raise exceptions.ConfigError(
                "Config file {} doesn't exist".format(self.config_file)
            ) from e
        except OSError as e:
            raise exceptions.ConfigError(
                "Could not read config file {}: {}".format(self.config_file, e)
            ) from e
        except ValueError as e:
            raise exceptions.ConfigError(
                "Config file {} isn't valid JSON: {}".format(self.config_file, e)
            ) from e
        if not isinstance(file_data, dict):
            raise exceptions.ConfigError(
                "Config file {} should hold a JSON object".format(self.config_file)
            )
        self.data.update(
            {k: v for k, v in file_data.items() if k in self.stored_keys}
        )
        _log.debug(
            "Loaded config keys ({}) from {}".format(
                ", ".join(sorted(self.data)), self.config_file
            )
        )

    def store_file_config(self):
        stored_data = {k: self.data[k] for k in self.stored_keys if self.data.get(k)}
        try:
            with open(self.config_file, "w") as fh:
                json.dump(stored_data, fh, indent=2)
        except OSError as e:
            raise exceptions.ConfigError(
                "Could not write config file {}: {}".format(self.config_file, e)
            ) from e
        _log.info("Config written to {}".format(self.config_file))

    def get_cli_data(self, argv=None):
        self.parser = argparse.ArgumentParser(
            description="Get an installation access token for a GitHub App",
            epilog=self.config_info,
        )
        self.parser.add_argument(
            "-c",
            dest="config_file",
            nargs="?",
            default=self.config_file,
            help="Path to JSON config file; it can serve as defaults storage "
            "as command line arguments have precedence over those within the file",
        )
        self.parser.add_argument(
            "-v",
            dest="verbosity",
            action="count",
            default=0,
            help="Verbosity (repeat to increase; -v for INFO, -vv for DEBUG",
        )
        self.parser.add_argument(
            "-k",
            "--key-path",
            dest="key_path",
            help="Path to GitHub App's private key PEM file",
        )
        self.parser.add_argument(
            "-a", "--app-id", dest="app_id", help="GitHub App ID"
        )
        self.parser.add_argument(
            "-i",
            "--installation-id",
            dest="installation_id",
            help="GitHub App Installation ID",
        )
        self.parser.add_argument(
            "-u",
            "--api-url",
            dest="api_url",
            help="GitHub API base URL (default: {})".format(GITHUB_API_URL),
        )
        self.parser.add_argument(
            "-w",
            dest="write_config",
            action="store_true",
            default=False,
            help="Write config back to file",
        )
        self._cli_config = self.parser.parse_args(argv)
        level = logging.WARNING
        if self._cli_config.verbosity == 1:
            level = logging.INFO
        elif self._cli_config.verbosity > 1:
            level = logging.DEBUG
        logging.basicConfig(level=level, format="%(asctime)-15s %(message)s")
        return self._cli_config

    def load_config(self, argv=None):
        """Merges the config file with command line values, the latter winning."""
        cli_data = self.get_cli_data(argv)
        self.config_file = cli_data.config_file
        self.write_config = cli_data.write_config
        self.load_file_config()
        self.data.update(
            {k: getattr(cli_data, k) for k in self.stored_keys if getattr(cli_data, k)}
        )

    def check(self):
        missing = [k for k in self.required_keys if not self.data.get(k)]
        if missing:
            raise ValueError(
                "Not enough data to request a token.\n"
                "{:s}\n"
                "Missing keys are: ({:s})".format(self.config_info, ", ".join(missing))
            )


def read_private_key(path):
    try:
        with open(path, "r") as fh:
            return fh.read()
    except OSError as e:
        raise exceptions.InputIOError(
            "Could not read private key from {}: {}".format(path, e)
        ) from e


def _fail(e):
    _log.info("{} failed".format(type(e).__name__), exc_info=True)
    print("Error while {}: {}".format(e.step, e), file=sys.stderr)
    return 1


def main(argv=None):
    conf = Config()
    try:
        conf.load_config(argv)
    except exceptions.ConfigError as e:
        return _fail(e)
    try:
        conf.check()
    except ValueError as e:
        print(str(e), file=sys.stderr)
        conf.parser.print_usage(file=sys.stderr)
        return 2
    try:
        if conf.write_config:
            conf.store_file_config()
        private_key = read_private_key(conf.data["key_path"])
        jwt = utils.get_jwt(private_key, str(conf.data["app_id"]))
        with AppClient(jwt, base_url=conf.data.get("api_url")) as cli:
            token = cli.get_installation_token(str(conf.data["installation_id"]))
    except exceptions.GitHubAppError as e:
        return _fail(e)
    print("Installation Token: {}".format(token.token))
    print("Expires at: {}".format(token.expires_at))
    return 0


if __name__ == "__main__":  # pragma: nocover
    sys.exit(main())
