"""ACM client for importing certificates."""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from mypy_boto3_acm import ACMClient as ACMClientType

from acm_import.lib.config import DEFAULT_REGION
from acm_import.lib.errors import ApiError, ConfigError
from acm_import.lib.models import ImportRequest, ImportResult

logger = logging.getLogger(__name__)


def resolve_session(region: str | None = None, profile: str | None = None) -> boto3.Session:
    """Build a boto3 session from optional region and profile overrides.

    Region and credentials follow the SDK's usual resolution order
    (arguments, environment, shared config files, instance metadata).
    Region falls back to DEFAULT_REGION when nothing else supplies one.

    Args:
        region: AWS region override
        profile: Named profile from the shared config files

    Returns:
        Session with a region and resolvable credentials

    Raises:
        ConfigError: If the profile is unknown or no credentials are found
    """
    try:
        session = boto3.Session(profile_name=profile or None, region_name=region or None)

        if not session.region_name:
            logger.debug("No region configured, using %s", DEFAULT_REGION)
            session = boto3.Session(profile_name=profile or None, region_name=DEFAULT_REGION)

        credentials = session.get_credentials()
    except BotoCoreError as e:
        raise ConfigError(f"failed to load AWS config: {e}") from e

    if credentials is None:
        raise ConfigError("failed to load AWS config: no credentials found")

    return session


class ACMClient:
    """ACM client for certificate imports."""

    def __init__(self, session: boto3.Session) -> None:
        """Initialize ACM client.

        Args:
            session: Resolved boto3 session

        Raises:
            ConfigError: If the client cannot be built (e.g. malformed region)
        """
        self.region: str = session.region_name
        try:
            self.client: ACMClientType = session.client("acm")
        except BotoCoreError as e:
            raise ConfigError(f"failed to create ACM client: {e}") from e

    def import_certificate(self, request: ImportRequest) -> ImportResult:
        """Import a certificate into ACM.

        Args:
            request: Certificate, key, optional chain and tags

        Returns:
            ImportResult with the certificate ARN

        Raises:
            ApiError: If the ImportCertificate call fails
        """
        try:
            response = self.client.import_certificate(**request.to_api_params())
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            raise ApiError(f"failed to import certificate: {e}", code=error_code) from e
        except BotoCoreError as e:
            raise ApiError(f"failed to import certificate: {e}") from e

        return ImportResult(certificate_arn=response.get("CertificateArn", ""))
