import inspect
import json
import os

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


class JSONResponsesMixin(object):
    def _read(self, name):
        caller_name = inspect.getouterframes(inspect.currentframe(), 2)[1][3]
        with open(os.path.join(DATA_DIR, caller_name, name), "r") as fh:
            return json.loads(fh.read())


class KeysMixin(object):
    @classmethod
    def setUpClass(cls):
        super(KeysMixin, cls).setUpClass()
        cls.rsa_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        cls.rsa_pem = cls.rsa_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode()
        cls.ec_pem = (
            ec.generate_private_key(ec.SECP256R1())
            .private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
            .decode()
        )
