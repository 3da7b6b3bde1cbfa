from enum import Enum
from typing import Dict

from .exceptions import InvalidInput


class FragmentLookupMixin:
    @classmethod
    def from_fragment(cls, fragment):
        for i in cls:  # type: ignore
            if i.value.endswith("#" + fragment):
                return i
        else:
            raise InvalidInput(f"Unrecognized {cls.__name__} identifier fragment: {fragment}")


class InvalidInputErrorMixin:
    @classmethod
    def _missing_(cls, value):
        raise InvalidInput(f"Unrecognized {cls.__name__}: {value}")

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"  # type: ignore


class SessionKeyAlgorithm(InvalidInputErrorMixin, Enum):
    """
    An enumeration of session key specifications accepted by the ``--session-key`` option of xmlsec1. The value is the
    ``<keyKlass>-<keySize>`` string passed to the tool verbatim.
    """

    AES128 = "aes-128"
    AES192 = "aes-192"
    AES256 = "aes-256"

    DES3 = "des-192"
    "Triple DES. Included for interoperability with legacy peers only."

    @property
    def block_encryption_method(self) -> "BlockEncryptionMethod":
        """
        The default block encryption algorithm for a session key of this kind.
        """
        return session_key_block_encryption_methods[self]


class BlockEncryptionMethod(FragmentLookupMixin, InvalidInputErrorMixin, Enum):
    """
    An enumeration of block encryption algorithms that can be set as the ``EncryptionMethod`` of an ``EncryptedData``
    template. See the `Algorithms <https://www.w3.org/TR/xmlenc-core1/#sec-Algorithms>`_ section of the XML
    Encryption 1.1 standard for details.
    """

    AES128_CBC = "http://www.w3.org/2001/04/xmlenc#aes128-cbc"
    AES192_CBC = "http://www.w3.org/2001/04/xmlenc#aes192-cbc"
    AES256_CBC = "http://www.w3.org/2001/04/xmlenc#aes256-cbc"
    AES128_GCM = "http://www.w3.org/2009/xmlenc11#aes128-gcm"
    AES192_GCM = "http://www.w3.org/2009/xmlenc11#aes192-gcm"
    AES256_GCM = "http://www.w3.org/2009/xmlenc11#aes256-gcm"
    TRIPLEDES_CBC = "http://www.w3.org/2001/04/xmlenc#tripledes-cbc"


class KeyTransportMethod(FragmentLookupMixin, InvalidInputErrorMixin, Enum):
    """
    An enumeration of key transport algorithms used to encrypt the session key for the certificate holder.
    """

    RSA_OAEP_MGF1P = "http://www.w3.org/2001/04/xmlenc#rsa-oaep-mgf1p"
    """
    RSAES-OAEP with SHA1 and MGF1. This is the default, most widely supported key transport method.
    """

    RSA_OAEP = "http://www.w3.org/2009/xmlenc11#rsa-oaep"
    RSA_1_5 = "http://www.w3.org/2001/04/xmlenc#rsa-1_5"


class EncryptedType(InvalidInputErrorMixin, Enum):
    """
    What an ``EncryptedData`` element replaces: a whole element, or only its content.
    """

    element = "http://www.w3.org/2001/04/xmlenc#Element"
    content = "http://www.w3.org/2001/04/xmlenc#Content"


session_key_block_encryption_methods: Dict[SessionKeyAlgorithm, BlockEncryptionMethod] = {
    SessionKeyAlgorithm.AES128: BlockEncryptionMethod.AES128_CBC,
    SessionKeyAlgorithm.AES192: BlockEncryptionMethod.AES192_CBC,
    SessionKeyAlgorithm.AES256: BlockEncryptionMethod.AES256_CBC,
    SessionKeyAlgorithm.DES3: BlockEncryptionMethod.TRIPLEDES_CBC,
}
