#!/usr/bin/env python3

import base64
import json
import sys
from pathlib import Path

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding

from paddle_billing.webhooks import phpserialize


def make_paddle_signature(private_key_pem: bytes, fields: dict[str, str]) -> str:
    """Sign webhook fields the way Paddle does, for testing a local receiver."""
    key = serialization.load_pem_private_key(private_key_pem, password=None)
    sig = key.sign(phpserialize.encode(fields), padding.PKCS1v15(), hashes.SHA1())
    return base64.b64encode(sig).decode("ascii")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("Usage: make_sig.py <private_key.pem> <fields_json>")
        sys.exit(1)

    private_key_pem = Path(sys.argv[1]).read_bytes()

    try:
        fields = json.loads(sys.argv[2])
    except json.JSONDecodeError:
        print("Error: fields must be valid JSON", file=sys.stderr)
        sys.exit(1)
    if not isinstance(fields, dict) or not all(
        isinstance(v, str) for v in fields.values()
    ):
        print("Error: fields must be a JSON object of strings", file=sys.stderr)
        sys.exit(1)

    print(make_paddle_signature(private_key_pem, fields))
