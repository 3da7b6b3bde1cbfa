"""
xmlseccli utility functions
"""

import os

from lxml import etree
from lxml.etree import QName

from ..exceptions import InvalidInput


class Namespace(dict):
    def __getattr__(self, a):
        return dict.__getitem__(self, a)


namespaces = Namespace(
    ds="http://www.w3.org/2000/09/xmldsig#",
    xenc="http://www.w3.org/2001/04/xmlenc#",
)


def ds_tag(tag):
    return QName(namespaces.ds, tag)


def xenc_tag(tag):
    return QName(namespaces.xenc, tag)


def ensure_bytes(x, encoding="utf-8"):
    if not isinstance(x, bytes):
        x = x.encode(encoding)
    return x


def ensure_str(x, encoding="utf-8", errors="strict"):
    if not isinstance(x, str):
        x = x.decode(encoding, errors)
    return x


def ensure_path(x):
    """
    Coerce a credential file location to the string form placed on the xmlsec1 command line.
    """
    try:
        path = os.fspath(x)
    except TypeError:
        raise InvalidInput(f"Expected a file system path, got {type(x).__name__}")
    if isinstance(path, bytes):
        path = os.fsdecode(path)
    if path == "":
        raise InvalidInput("Empty file system path")
    if "\x00" in path:
        raise InvalidInput(f"File system path contains a NUL byte: {path!r}")
    return path


def document_bytes(data):
    """
    Serialize an input document to the bytes fed to xmlsec1.

    :param data: Document to serialize
    :type data: Bytes, string (encoded as UTF-8), or lxml Element/ElementTree
    """
    if isinstance(data, (str, bytes)):
        return ensure_bytes(data)
    elif isinstance(data, (etree._Element, etree._ElementTree)):
        return etree.tostring(data, xml_declaration=True, encoding="utf-8")
    raise InvalidInput(f"Unsupported document type {type(data).__name__}")
