"""
``EncryptedData`` templates consumed by ``xmlsec1 --encrypt``, and staging them on disk for the duration of one call.
"""

import logging
import os
import tempfile
from contextlib import contextmanager, suppress
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from lxml import etree
from lxml.etree import Element, SubElement, _Element

from .algorithms import BlockEncryptionMethod, EncryptedType, KeyTransportMethod, SessionKeyAlgorithm
from .exceptions import InvalidInput
from .util import ds_tag, namespaces, xenc_tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncryptedData:
    """
    A template describing how xmlsec1 should encrypt a document. xmlsec1 fills in the empty ``CipherValue``
    placeholders (and the certificate placeholder, if requested) when it encrypts.
    """

    encryption_method: BlockEncryptionMethod = BlockEncryptionMethod.AES256_CBC
    """
    Block encryption algorithm applied to the document with the session key. It must match the session key algorithm
    given to :func:`xmlseccli.encrypt`.
    """

    type: EncryptedType = EncryptedType.element

    key_transport: Optional[KeyTransportMethod] = KeyTransportMethod.RSA_OAEP_MGF1P
    """
    Algorithm used to encrypt the session key for the certificate holder. Set to ``None`` to omit the
    ``EncryptedKey`` element.
    """

    id: Optional[str] = None
    key_name: Optional[str] = None

    include_certificate: bool = False
    """
    If ``True``, an ``X509Data`` placeholder is added to the ``KeyInfo`` of the encrypted key.
    """

    def __post_init__(self):
        if self.encryption_method is None:
            raise InvalidInput("EncryptedData requires an encryption method")
        for name, enum_class in ("encryption_method", BlockEncryptionMethod), ("key_transport", KeyTransportMethod):
            value = getattr(self, name)
            if isinstance(value, str) and "#" not in value:
                object.__setattr__(self, name, enum_class.from_fragment(value))
            elif value is not None:
                object.__setattr__(self, name, enum_class(value))
        object.__setattr__(self, "type", EncryptedType(self.type))

    @classmethod
    def for_session_key(cls, session_key_algorithm: Union[SessionKeyAlgorithm, str], **kwargs) -> "EncryptedData":
        return cls(encryption_method=SessionKeyAlgorithm(session_key_algorithm).block_encryption_method, **kwargs)

    def to_element(self) -> _Element:
        nsmap = dict(xenc=namespaces.xenc, ds=namespaces.ds)
        encrypted_data = Element(xenc_tag("EncryptedData"), nsmap=nsmap, Type=self.type.value)
        if self.id is not None:
            encrypted_data.set("Id", self.id)
        SubElement(encrypted_data, xenc_tag("EncryptionMethod"), Algorithm=self.encryption_method.value)

        if self.key_transport is not None or self.key_name is not None:
            key_info = SubElement(encrypted_data, ds_tag("KeyInfo"))
            if self.key_name is not None:
                SubElement(key_info, ds_tag("KeyName")).text = self.key_name
            if self.key_transport is not None:
                encrypted_key = SubElement(key_info, xenc_tag("EncryptedKey"))
                SubElement(encrypted_key, xenc_tag("EncryptionMethod"), Algorithm=self.key_transport.value)
                if self.include_certificate:
                    SubElement(SubElement(encrypted_key, ds_tag("KeyInfo")), ds_tag("X509Data"))
                SubElement(SubElement(encrypted_key, xenc_tag("CipherData")), xenc_tag("CipherValue"))

        SubElement(SubElement(encrypted_data, xenc_tag("CipherData")), xenc_tag("CipherValue"))
        return encrypted_data

    def to_xml(self) -> bytes:
        return etree.tostring(self.to_element(), pretty_print=True, xml_declaration=True, encoding="utf-8")


def serialize_template(template) -> bytes:
    """
    Serialize an encryption template to indented XML.

    :type template: :class:`EncryptedData`, lxml Element, bytes, or string
    """
    if isinstance(template, EncryptedData):
        return template.to_xml()
    elif isinstance(template, _Element):
        return etree.tostring(template, pretty_print=True, xml_declaration=True, encoding="utf-8")
    elif isinstance(template, bytes):
        return template
    elif isinstance(template, str):
        return template.encode("utf-8")
    raise InvalidInput(f"Unsupported encryption template type {type(template).__name__}")


@contextmanager
def staged_template(template) -> Iterator[str]:
    """
    Write the template to a new temporary file readable only by its owner and yield the file path. The file is removed
    when the block exits, however it exits.
    """
    content = serialize_template(template)
    fd, path = tempfile.mkstemp(prefix="xmlsec", suffix=".xml")
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
        logger.debug("Staged encryption template at %s", path)
        yield path
    finally:
        with suppress(FileNotFoundError):
            os.remove(path)
