from dataclasses import dataclass
from typing import List, Optional, Type

from .classifier import classify
from .exceptions import InvalidInput, XMLSecError
from .process import run
from .util import document_bytes


@dataclass(frozen=True)
class XMLSecConfiguration:
    """
    A container holding settings shared by all xmlsec1 invocations made by a processor.
    """

    binary: str = "xmlsec1"
    """
    Name or path of the xmlsec1 executable. A bare name is looked up on ``PATH``.
    """

    id_attribute_name: str = "ID"
    """
    Name of the attribute registered as an XML ID on the element named by ``id_attribute`` when signing or verifying
    (the ``ID`` in ``--id-attr:ID``).
    """

    encoding: str = "utf-8"
    """
    Encoding used to decode diagnostic text reported by xmlsec1.
    """


class XMLSecProcessor:
    """
    Base class for objects that run one xmlsec1 operation per call.

    :param config: Settings for the xmlsec1 invocations; see :class:`XMLSecConfiguration`.
    """

    default_config = XMLSecConfiguration()

    def __init__(self, config: Optional[XMLSecConfiguration] = None):
        self.config = config or self.default_config
        if not self.config.binary:
            raise InvalidInput("The xmlsec1 binary must be set")
        if "\x00" in self.config.binary:
            raise InvalidInput(f"The xmlsec1 binary path contains a NUL byte: {self.config.binary!r}")

    def _id_attr_args(self, id_attribute: str) -> List[str]:
        if not id_attribute:
            raise InvalidInput("An ID attribute node name is required")
        if "\x00" in id_attribute:
            raise InvalidInput(f"ID attribute node name contains a NUL byte: {id_attribute!r}")
        return [f"--id-attr:{self.config.id_attribute_name}", id_attribute]

    def _execute(
        self,
        args: List[str],
        data,
        merge_output: bool = False,
        error_class: Type[XMLSecError] = XMLSecError,
    ) -> bytes:
        invocation = run([self.config.binary, *args], document_bytes(data))
        return classify(invocation, merge_output=merge_output, error_class=error_class, encoding=self.config.encoding)
