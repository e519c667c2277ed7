"""Request and result models for ACM certificate imports."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from acm_import.lib.tags import to_acm_tags


@dataclass(frozen=True)
class ImportRequest:
    """Material and tags for a single ImportCertificate call."""

    certificate: bytes
    private_key: bytes
    certificate_chain: bytes | None = None
    tags: dict[str, str] = field(default_factory=dict)

    def to_api_params(self) -> dict[str, Any]:
        """Build ImportCertificate keyword arguments.

        CertificateChain and Tags are left out entirely when not supplied.
        """
        params: dict[str, Any] = {
            "Certificate": self.certificate,
            "PrivateKey": self.private_key,
        }
        if self.certificate_chain is not None:
            params["CertificateChain"] = self.certificate_chain
        if self.tags:
            params["Tags"] = to_acm_tags(self.tags)
        return params


@dataclass
class ImportResult:
    """Result of a successful import."""

    certificate_arn: str


@dataclass
class CertificateSummary:
    """Identifying details of the certificate being imported."""

    common_name: str | None
    serial_number: str
    not_after: datetime
