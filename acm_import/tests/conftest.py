"""Test fixtures for acm_import tests."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.x509.oid import NameOID

TEST_SERIAL = 0x3AF2B1


@pytest.fixture(scope="session")
def private_key() -> RSAPrivateKey:
    """Generate RSA private key (2048 bits for speed)."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def certificate(private_key: RSAPrivateKey) -> x509.Certificate:
    """Generate a self-signed certificate for www.example.com."""
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "www.example.com")])
    now = datetime.now(UTC)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(TEST_SERIAL)
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(private_key, hashes.SHA256())
    )


@pytest.fixture(scope="session")
def cert_pem(certificate: x509.Certificate) -> bytes:
    """Return certificate as PEM bytes."""
    return certificate.public_bytes(serialization.Encoding.PEM)


@pytest.fixture(scope="session")
def key_pem(private_key: RSAPrivateKey) -> bytes:
    """Return private key as PEM bytes (PKCS8, no encryption)."""
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture
def pem_files(tmp_path: Path, cert_pem: bytes, key_pem: bytes) -> dict[str, Path]:
    """Write certificate, key and chain files and return their paths.

    The chain file reuses the certificate PEM; only its markers matter.
    """
    paths = {
        "cert": tmp_path / "cert.pem",
        "key": tmp_path / "key.pem",
        "chain": tmp_path / "chain.pem",
    }
    paths["cert"].write_bytes(cert_pem)
    paths["key"].write_bytes(key_pem)
    paths["chain"].write_bytes(cert_pem)
    return paths
