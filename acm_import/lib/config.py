"""Import configuration dataclass."""

from dataclasses import dataclass, field

DEFAULT_REGION = "us-east-1"


@dataclass
class ImportConfig:
    """Options for one certificate import, built from the command line."""

    cert_file: str
    private_key_file: str
    chain_file: str | None = None
    region: str | None = None
    profile: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
