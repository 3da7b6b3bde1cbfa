"""
xmlseccli exception types.
"""

from typing import Optional

import cryptography.exceptions


class XMLSecException(Exception):
    pass


class InvalidInput(ValueError, XMLSecException):
    pass


class XMLSecError(XMLSecException):
    """
    Raised when an xmlsec1 invocation fails. This is the generic error kind; more specific failures subclass it.

    The message is the trimmed diagnostic text reported by xmlsec1 when there is any, so that it can be correlated with
    the tool's own output.
    """

    def __init__(
        self,
        message: str = "",
        diagnostic: Optional[str] = None,
        output: Optional[bytes] = None,
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.diagnostic = diagnostic
        "Raw diagnostic text captured from xmlsec1, or ``None`` if it produced none."
        self.output = output
        "Whatever xmlsec1 wrote to its output stream before failing."
        self.returncode = returncode
        "Exit status of the xmlsec1 process, if it was started."


class ProcessLaunchFailure(XMLSecError):
    """
    Raised when the xmlsec1 executable cannot be started (missing binary, permission denied, resource exhaustion).
    """


class StreamIOFailure(XMLSecError):
    """
    Raised when writing to or reading from one of the xmlsec1 process pipes fails.
    """


class InvalidSignature(cryptography.exceptions.InvalidSignature, XMLSecError):
    """
    Raised when xmlsec1 rejects a signature during verification.
    """


class CertificateError(XMLSecError):
    pass


class SelfSignedCertificate(CertificateError):
    """
    Raised when xmlsec1 reports that a certificate is self-signed.
    """


class UnknownIssuer(CertificateError):
    """
    Raised when xmlsec1 cannot find the issuer of a certificate ("unable to get local issuer certificate").
    """
