"""Error types raised by the ACM import workflow.

Every error is terminal for the run. Each class carries the process exit
code the CLI returns for it.
"""


class CertImportError(Exception):
    """Base error for certificate import failures."""

    exit_code = 1


class UsageError(CertImportError):
    """Required command-line options are missing."""

    exit_code = 2


class FileReadError(CertImportError):
    """An input file is missing or unreadable."""

    exit_code = 3

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to read file {path}: {reason}")
        self.path = path


class FormatError(CertImportError):
    """An input file does not look like PEM."""

    exit_code = 4

    def __init__(self, role: str) -> None:
        super().__init__(f"{role} file does not appear to be in PEM format")
        self.role = role


class ConfigError(CertImportError):
    """AWS credentials, profile or region could not be resolved."""

    exit_code = 5


class ApiError(CertImportError):
    """The ACM ImportCertificate call failed."""

    exit_code = 6

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
