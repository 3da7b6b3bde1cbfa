from .processor import XMLSecProcessor
from .util import ensure_path


class XMLSigner(XMLSecProcessor):
    """
    Create a new XML Signature Signer object, which can be used to hold configuration information and sign multiple
    documents. Signing is performed by xmlsec1; the document must already contain a ``ds:Signature`` template.

    :param config: Settings for the xmlsec1 invocations; see :class:`xmlseccli.XMLSecConfiguration`.
    """

    def sign(self, data, key, id_attribute: str) -> bytes:
        """
        Sign the document and return the signed document as produced by xmlsec1.

        :param data: Document holding a signature template
        :type data: Bytes, string, or lxml Element
        :param key: Path to the PEM-encoded private key
        :param id_attribute:
            Name of the element whose ID attribute is referenced by the signature, optionally qualified with its
            namespace URI (for example ``urn:oasis:names:tc:SAML:2.0:assertion:Assertion``).

        :raises: :class:`xmlseccli.XMLSecError` or one of its subclasses if xmlsec1 fails.
        """
        args = [
            "--sign",
            "--privkey-pem",
            ensure_path(key),
            *self._id_attr_args(id_attribute),
            "--output",
            "/dev/stdout",
            "/dev/stdin",
        ]
        return self._execute(args, data)


def sign(data, key, id_attribute: str) -> bytes:
    return XMLSigner().sign(data, key, id_attribute)
