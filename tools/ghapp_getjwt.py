#!/usr/bin/python
import sys
from ghapptoken.utils import get_jwt

if len(sys.argv) < 3:
    print(
        "Usage: {:s} <prvkey.pem> <app_id>".format(sys.argv[0]),
        file=sys.stderr,
    )
    sys.exit(1)

with open(sys.argv[1], "rb") as fh:
    prvkey = fh.read()
print(get_jwt(prvkey, sys.argv[2]))
