from .exceptions import InvalidSignature
from .processor import XMLSecProcessor
from .util import ensure_path


class XMLVerifier(XMLSecProcessor):
    """
    Create a new XML Signature Verifier object, which can be used to verify multiple documents against xmlsec1.
    """

    def verify(self, data, cert, id_attribute: str) -> None:
        """
        Verify the XML signature of a document. Returns ``None`` if xmlsec1 accepts the signature and raises an
        exception otherwise.

        xmlsec1 loads the public key from ``cert`` directly. No certificate chain validation is performed here.

        :param data: Signed document
        :type data: Bytes, string, or lxml Element
        :param cert: Path to the PEM-encoded certificate of the signer
        :param id_attribute: Name of the element whose ID attribute is referenced by the signature

        :raises: :class:`xmlseccli.SelfSignedCertificate` or :class:`xmlseccli.UnknownIssuer` for the corresponding
            certificate problems, :class:`xmlseccli.InvalidSignature` for any other verification failure.
        """
        args = [
            "--verify",
            "--pubkey-cert-pem",
            ensure_path(cert),
            *self._id_attr_args(id_attribute),
            "/dev/stdin",
        ]
        self._execute(args, data, merge_output=True, error_class=InvalidSignature)


def verify(data, cert, id_attribute: str) -> None:
    XMLVerifier().verify(data, cert, id_attribute)
