"""
Turning the exit status and captured streams of an xmlsec1 run into either the output document or an exception.

xmlsec1 does not document its diagnostic wording as a stable interface. The substrings below come from OpenSSL's
certificate verification messages as relayed by xmlsec1 and are matched on a best-effort basis.
"""

import logging
from typing import List, Tuple, Type

from .exceptions import CertificateError, SelfSignedCertificate, StreamIOFailure, UnknownIssuer, XMLSecError
from .process import CompletedInvocation
from .util import ensure_str

logger = logging.getLogger(__name__)

success_marker = "OK"

# Checked in order; the first match wins.
diagnostic_patterns: List[Tuple[str, Type[XMLSecError]]] = [
    ("self signed certificate", SelfSignedCertificate),
    ("self-signed certificate", SelfSignedCertificate),  # OpenSSL 3
    ("unable to get local issuer certificate", UnknownIssuer),
]


def match_diagnostic(message: str, error_class: Type[XMLSecError] = XMLSecError, **kwargs) -> XMLSecError:
    """
    Build the exception matching a diagnostic message. Messages that match none of the known patterns produce an
    instance of ``error_class``.
    """
    text = message.strip()
    for pattern, pattern_error_class in diagnostic_patterns:
        if pattern in text:
            return pattern_error_class(text, **kwargs)
    return error_class(text, **kwargs)


def classify(
    invocation: CompletedInvocation,
    merge_output: bool = False,
    error_class: Type[XMLSecError] = XMLSecError,
    encoding: str = "utf-8",
) -> bytes:
    """
    Return the output of a successful xmlsec1 run, or raise the exception that describes its failure.

    :param invocation: The finished run
    :param merge_output:
        If ``True``, failure details are looked for in the output stream as well as the diagnostic stream, and
        diagnostic text on a successful run is still checked for certificate errors. Used for verification, where
        xmlsec1 reports problems on either stream depending on verbosity.
    :param error_class: Exception raised for failures that match no known diagnostic pattern
    :param encoding: Encoding used to decode the captured streams
    """
    diagnostic = ensure_str(invocation.diagnostic, encoding=encoding, errors="replace")
    details = dict(diagnostic=diagnostic or None, output=invocation.output, returncode=invocation.returncode)

    if invocation.stream_error is not None and (invocation.returncode == 0 or diagnostic.startswith(success_marker)):
        raise StreamIOFailure(str(invocation.stream_error), **details) from invocation.stream_error

    if diagnostic.startswith(success_marker):
        logger.debug("%s reported success with status %d", invocation.args[0], invocation.returncode)
        return invocation.output

    if invocation.returncode == 0:
        if merge_output and diagnostic.strip():
            error = match_diagnostic(diagnostic, error_class, **details)
            if isinstance(error, CertificateError):
                logger.debug("Certificate problem reported on a successful run: %s", error)
                raise error
        return invocation.output

    if diagnostic.strip():
        message = diagnostic
        if merge_output:
            message = ensure_str(invocation.output, encoding=encoding, errors="replace") + "\n" + diagnostic
        error = match_diagnostic(message, error_class, **details)
        logger.debug("Classified %s failure as %s", invocation.args[0], type(error).__name__)
        raise error

    if invocation.stream_error is not None:
        raise StreamIOFailure(str(invocation.stream_error), **details) from invocation.stream_error

    raise error_class(f"{invocation.args[0]} exited with status {invocation.returncode}", **details)
