import base64
import hashlib

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from zkemail_inputs.dkim import DkimResult

BODY = b"Hi Bob,\r\n\r\nLunch at noon works for me.\r\n\r\nAlice\r\n"
BODY_HASH = base64.b64encode(hashlib.sha256(BODY).digest()).decode("ascii")
SIGNED_HEADER = (
    "from:Alice <alice@example.com>\r\n"
    "to:bob@example.org\r\n"
    "subject:lunch\r\n"
    "date:Mon, 19 Oct 2026 09:12:44 +0000\r\n"
    "dkim-signature:v=1; a=rsa-sha256; c=relaxed/relaxed; d=example.com; s=mail;"
    f" h=from:to:subject:date; bh={BODY_HASH}; b="
).encode("utf-8")


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def signature(rsa_key) -> bytes:
    return rsa_key.sign(SIGNED_HEADER, padding.PKCS1v15(), hashes.SHA256())


@pytest.fixture(scope="session")
def public_key_pem(rsa_key) -> str:
    return rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture(scope="session")
def ec_public_key_pem() -> str:
    key = ec.generate_private_key(ec.SECP256R1())
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture()
def dkim_result(signature, public_key_pem) -> DkimResult:
    return DkimResult(
        signature=signature,
        signed_header=SIGNED_HEADER,
        body=BODY,
        body_hash=BODY_HASH,
        public_key_pem=public_key_pem,
    )
