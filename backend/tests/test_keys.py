import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from paddle_billing.core.keys import load_public_key, parse_public_key
from paddle_billing.errors import ConfigurationError


def test_load_public_key(public_key_path, public_key):
    key = load_public_key(public_key_path)

    assert isinstance(key, RSAPublicKey)
    assert key.public_numbers() == public_key.public_numbers()


def test_load_missing_file(tmp_path):
    path = tmp_path / "nonexistent"

    with pytest.raises(ConfigurationError) as exc_info:
        load_public_key(path)
    assert str(exc_info.value).startswith(f"open {path}")


@pytest.mark.parametrize("path", [None, ""])
def test_load_without_path(path):
    with pytest.raises(ConfigurationError):
        load_public_key(path)


def test_invalid_pem(tmp_path):
    path = tmp_path / "invalid.pub"
    path.write_text("this is not a key\n")

    with pytest.raises(ConfigurationError) as exc_info:
        load_public_key(path)
    assert str(exc_info.value) == "failed to parse PEM block containing the public key"


def test_corrupt_der():
    pem = b"-----BEGIN PUBLIC KEY-----\nAAAA\n-----END PUBLIC KEY-----\n"

    with pytest.raises(ConfigurationError) as exc_info:
        parse_public_key(pem)
    assert str(exc_info.value).startswith("failed to parse DER encoded public key")


def test_non_rsa_key_rejected(tmp_path):
    pem = (
        ec.generate_private_key(ec.SECP256R1())
        .public_key()
        .public_bytes(
            serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo
        )
    )
    path = tmp_path / "ec.pub"
    path.write_bytes(pem)

    with pytest.raises(ConfigurationError) as exc_info:
        load_public_key(path)
    assert str(exc_info.value) == "unknown type of public key"
