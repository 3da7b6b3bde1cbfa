"""
Use :func:`xmlseccli.sign`, :func:`xmlseccli.verify`, :func:`xmlseccli.encrypt` and :func:`xmlseccli.decrypt` (or the
:class:`xmlseccli.XMLSigner`, :class:`xmlseccli.XMLVerifier` and :class:`xmlseccli.XMLEncrypter` classes they wrap) to
run XML Signature and XML Encryption operations through the xmlsec1 command line tool.
"""

from .signer import XMLSigner, sign
from .verifier import XMLVerifier, verify
from .encryption import XMLEncrypter, encrypt, decrypt
from .processor import XMLSecConfiguration, XMLSecProcessor
from .template import EncryptedData
from .algorithms import BlockEncryptionMethod, EncryptedType, KeyTransportMethod, SessionKeyAlgorithm
from .exceptions import (
    CertificateError,
    InvalidInput,
    InvalidSignature,
    ProcessLaunchFailure,
    SelfSignedCertificate,
    StreamIOFailure,
    UnknownIssuer,
    XMLSecError,
    XMLSecException,
)
from .util import namespaces
