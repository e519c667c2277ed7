#!/usr/bin/env python3
"""Import a PEM certificate, private key and optional chain into AWS ACM."""

import argparse
import sys

from acm_import.lib.acm_client import ACMClient, resolve_session
from acm_import.lib.config import ImportConfig
from acm_import.lib.errors import CertImportError, UsageError
from acm_import.lib.logging_config import LOGGER, set_verbose
from acm_import.lib.models import ImportRequest, ImportResult
from acm_import.lib.pem_utils import (
    CERTIFICATE,
    CERTIFICATE_CHAIN,
    PRIVATE_KEY,
    read_pem_file,
    summarize_certificate,
)
from acm_import.lib.tags import parse_tags

EXAMPLES = """\
Examples:
  %(prog)s -cert cert.pem -key private-key.pem
  %(prog)s -cert cert.pem -key key.pem -chain chain.pem -region us-west-2
  %(prog)s -cert cert.pem -key key.pem -tags 'Environment=prod,Application=web'
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser.

    Options are accepted in single-dash (-cert) and double-dash (--cert) form.
    """
    parser = argparse.ArgumentParser(
        description="Import SSL/TLS certificates into AWS Certificate Manager",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    required = parser.add_argument_group("required options")
    required.add_argument(
        "-cert",
        "--cert",
        dest="cert",
        default="",
        help="Path to certificate file (PEM format)",
    )
    required.add_argument(
        "-key",
        "--key",
        dest="key",
        default="",
        help="Path to private key file (PEM format)",
    )
    parser.add_argument(
        "-chain",
        "--chain",
        dest="chain",
        default="",
        help="Path to certificate chain file (PEM format)",
    )
    parser.add_argument(
        "-region",
        "--region",
        dest="region",
        default="",
        help="AWS region (defaults to AWS_REGION, the profile's region or us-east-1)",
    )
    parser.add_argument(
        "-profile",
        "--profile",
        dest="profile",
        default="",
        help="AWS profile to use (defaults to default profile)",
    )
    parser.add_argument(
        "-tags",
        "--tags",
        dest="tags",
        default="",
        help="Tags in format 'key1=value1,key2=value2'",
    )
    parser.add_argument(
        "-verbose",
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ImportConfig:
    """Build ImportConfig from parsed arguments.

    Raises:
        UsageError: If the certificate or private key path is missing
    """
    if not args.cert or not args.key:
        raise UsageError("Both -cert and -key are required")

    return ImportConfig(
        cert_file=args.cert,
        private_key_file=args.key,
        chain_file=args.chain or None,
        region=args.region or None,
        profile=args.profile or None,
        tags=parse_tags(args.tags) if args.tags else {},
    )


def build_import_request(config: ImportConfig) -> ImportRequest:
    """Read and check the certificate, key and chain files.

    Raises:
        FileReadError: If any file cannot be read
        FormatError: If any file lacks PEM markers
    """
    LOGGER.info("Reading certificate files...")

    certificate = read_pem_file(config.cert_file, CERTIFICATE)
    LOGGER.info("Certificate file read successfully")

    summary = summarize_certificate(certificate)
    if summary is not None:
        LOGGER.info(
            "Certificate: CN=%s serial=%s expires=%s",
            summary.common_name,
            summary.serial_number,
            summary.not_after.isoformat(),
        )

    private_key = read_pem_file(config.private_key_file, PRIVATE_KEY)
    LOGGER.info("Private key file read successfully")

    chain = None
    if config.chain_file:
        chain = read_pem_file(config.chain_file, CERTIFICATE_CHAIN)
        LOGGER.info("Certificate chain file read successfully")

    if config.tags:
        LOGGER.info("Tags prepared: %d tags", len(config.tags))

    return ImportRequest(
        certificate=certificate,
        private_key=private_key,
        certificate_chain=chain,
        tags=dict(config.tags),
    )


def import_certificate(config: ImportConfig) -> ImportResult:
    """Run the import: read files, resolve AWS config, call ACM.

    Local file problems abort before any AWS call is made.

    Args:
        config: Import options

    Returns:
        ImportResult with the certificate ARN

    Raises:
        CertImportError: On any file, format, config or API failure
    """
    request = build_import_request(config)

    LOGGER.info("Initializing AWS client...")
    session = resolve_session(region=config.region, profile=config.profile)
    client = ACMClient(session)
    LOGGER.info("AWS ACM client initialized (region: %s)", client.region)

    LOGGER.info("Importing certificate to ACM...")
    result = client.import_certificate(request)
    LOGGER.info("Certificate imported successfully")
    return result


def main(argv: list[str] | None = None) -> int:
    """Import a certificate into ACM.

    Returns:
        Exit code (0 for success, the error's exit code otherwise)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    try:
        config = config_from_args(args)
    except UsageError as e:
        print(f"Error: {e}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return e.exit_code

    try:
        result = import_certificate(config)
    except CertImportError as e:
        LOGGER.error("Failed to import certificate: %s", e)
        return e.exit_code

    print(f"Certificate ARN: {result.certificate_arn}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
