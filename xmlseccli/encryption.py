from typing import Union

from .algorithms import SessionKeyAlgorithm
from .processor import XMLSecProcessor
from .template import EncryptedData, staged_template
from .util import ensure_path


class XMLEncrypter(XMLSecProcessor):
    """
    Create a new XML Encryption object, which can be used to encrypt and decrypt multiple documents with xmlsec1.
    """

    def encrypt(
        self,
        template,
        data,
        cert,
        session_key_algorithm: Union[SessionKeyAlgorithm, str] = SessionKeyAlgorithm.AES256,
    ) -> bytes:
        """
        Encrypt a document for the holder of a certificate and return the encrypted document.

        :param template:
            The ``EncryptedData`` template xmlsec1 fills in. If ``None``, a template using the block encryption method
            matching ``session_key_algorithm`` is generated.
        :type template: :class:`xmlseccli.EncryptedData`, lxml Element, bytes, string, or ``None``
        :param data: Document to encrypt
        :type data: Bytes, string, or lxml Element
        :param cert: Path to the PEM-encoded certificate whose public key encrypts the session key
        :param session_key_algorithm: Kind of session key xmlsec1 generates. See :class:`SessionKeyAlgorithm`.
        """
        session_key_algorithm = SessionKeyAlgorithm(session_key_algorithm)
        if template is None:
            template = EncryptedData.for_session_key(session_key_algorithm)
        cert = ensure_path(cert)
        with staged_template(template) as template_path:
            args = [
                "--encrypt",
                "--session-key",
                session_key_algorithm.value,
                "--pubkey-cert-pem",
                cert,
                "--output",
                "/dev/stdout",
                "--xml-data",
                "/dev/stdin",
                template_path,
            ]
            return self._execute(args, data)

    def decrypt(self, data, key) -> bytes:
        """
        Decrypt an encrypted document and return the decrypted document.

        :param data: Document holding an ``EncryptedData`` element
        :type data: Bytes, string, or lxml Element
        :param key: Path to the PEM-encoded private key matching the certificate used for encryption
        """
        args = [
            "--decrypt",
            "--privkey-pem",
            ensure_path(key),
            "--output",
            "/dev/stdout",
            "/dev/stdin",
        ]
        return self._execute(args, data)


def encrypt(template, data, cert, session_key_algorithm: Union[SessionKeyAlgorithm, str]) -> bytes:
    return XMLEncrypter().encrypt(template, data, cert, session_key_algorithm)


def decrypt(data, key) -> bytes:
    return XMLEncrypter().decrypt(data, key)
