"""File reading and PEM shape checks for certificate material."""

from pathlib import Path

from cryptography import x509

from acm_import.lib.errors import FileReadError, FormatError
from acm_import.lib.logging_config import LOGGER
from acm_import.lib.models import CertificateSummary

CERTIFICATE = "certificate"
PRIVATE_KEY = "private key"
CERTIFICATE_CHAIN = "certificate chain"


def read_file(path: str) -> bytes:
    """Read the full contents of a file.

    Raises:
        FileReadError: If the file is missing or unreadable
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e


def validate_pem(data: bytes, role: str) -> None:
    """Check that data carries PEM BEGIN and END markers.

    Only the presence of both substrings is checked, in any order.

    Args:
        data: File contents
        role: Logical file name used in the error (e.g. 'private key')

    Raises:
        FormatError: If either marker is missing
    """
    if b"BEGIN" not in data or b"END" not in data:
        raise FormatError(role)


def read_pem_file(path: str, role: str) -> bytes:
    """Read a file and check its PEM markers."""
    data = read_file(path)
    validate_pem(data, role)
    return data


def format_serial(serial_number: int) -> str:
    """Render a serial number as colon separated hex bytes, e.g. 3A:F2:B1."""
    length = max(1, (serial_number.bit_length() + 7) // 8)
    return serial_number.to_bytes(length, "big").hex(":").upper()


def summarize_certificate(pem_data: bytes) -> CertificateSummary | None:
    """Describe the first certificate in a PEM buffer for progress output.

    ACM performs the real validation, so a buffer that cannot be loaded
    yields None instead of an error.
    """
    try:
        cert = x509.load_pem_x509_certificate(pem_data)
    except ValueError as e:
        LOGGER.warning("Could not parse certificate details: %s", e)
        return None

    cn_attrs = cert.subject.get_attributes_for_oid(x509.NameOID.COMMON_NAME)
    common_name = cn_attrs[0].value if cn_attrs else None
    if common_name is not None and not isinstance(common_name, str):
        common_name = common_name.decode("utf-8", errors="replace")

    return CertificateSummary(
        common_name=common_name,
        serial_number=format_serial(cert.serial_number),
        not_after=cert.not_valid_after_utc,
    )
