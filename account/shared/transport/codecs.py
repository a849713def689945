"""
Body codecs for the supported media types.

Each codec turns a response value into bytes and a request body
into a value:

- application/json using the json module
- application/xml using xml.etree.ElementTree
- application/gob using the pickle protocol, restricted on decode

Codecs are stateless and shared between requests.
Pydantic models are dumped in JSON mode before encoding, with
unset (None) fields left out.
"""

import io
import json
import pickle
import re
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from account.domain.errors import DecodeError
from account.shared.transport.media_types import MEDIA_GOB, MEDIA_JSON, MEDIA_XML

XML_DEFAULT_ROOT = "response"
XML_ITEM_TAG = "item"

_XML_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")


def to_plain(value: Any) -> Any:
    """Convert a pydantic model to built-in containers; pass anything else through."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return value


class Decoder(ABC):
    """Turns a request body into a value."""

    media_type: str

    @abstractmethod
    def decode(self, data: bytes) -> Any:
        """Decode ``data``.

        Raises:
            DecodeError: The body is not valid for this media type.
        """


class Encoder(ABC):
    """Turns a response value into a body."""

    media_type: str

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode ``value``. Raises whatever the serializer raises."""


class JsonCodec(Decoder, Encoder):
    """Compact UTF-8 JSON."""

    media_type = MEDIA_JSON

    def encode(self, value: Any) -> bytes:
        return json.dumps(
            to_plain(value), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")

    def decode(self, data: bytes) -> Any:
        try:
            return json.loads(data)
        except (ValueError, RecursionError) as exc:
            raise DecodeError(self.media_type, str(exc)) from exc


class XmlCodec(Decoder, Encoder):
    """XML documents mapped onto nested dicts and lists.

    Encoding names the root element after the model class (or
    ``response`` for plain values), writes mapping keys as child
    elements and sequence entries as repeated ``item`` elements.
    Decoding returns the children of the root element as a dict;
    a root holding only text decodes to that text, an empty root to
    an empty dict.
    """

    media_type = MEDIA_XML

    def encode(self, value: Any) -> bytes:
        root_tag = type(value).__name__ if isinstance(value, BaseModel) else XML_DEFAULT_ROOT
        root = ET.Element(root_tag)
        self._fill(root, to_plain(value))
        return ET.tostring(root, encoding="unicode").encode("utf-8")

    def _fill(self, element: ET.Element, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, Mapping):
            for key, item in value.items():
                if item is None:
                    continue
                tag = str(key)
                if not _XML_NAME.match(tag):
                    raise ValueError(f"{tag!r} is not a valid XML element name")
                self._fill(ET.SubElement(element, tag), item)
        elif isinstance(value, (list, tuple, set, frozenset)):
            for item in value:
                self._fill(ET.SubElement(element, XML_ITEM_TAG), item)
        elif isinstance(value, bool):
            element.text = "true" if value else "false"
        else:
            element.text = str(value)

    def decode(self, data: bytes) -> Any:
        try:
            root = ET.fromstring(data)
            if len(root) == 0 and not (root.text or "").strip():
                return {}
            return self._read(root)
        except (ET.ParseError, RecursionError) as exc:
            raise DecodeError(self.media_type, str(exc)) from exc

    def _read(self, element: ET.Element) -> Any:
        if len(element) == 0:
            return element.text or ""
        result: dict[str, Any] = {}
        repeated: set[str] = set()
        for child in element:
            value = self._read(child)
            if child.tag not in result:
                result[child.tag] = value
            elif child.tag in repeated:
                result[child.tag].append(value)
            else:
                result[child.tag] = [result[child.tag], value]
                repeated.add(child.tag)
        return result


class _RestrictedUnpickler(pickle.Unpickler):
    """Unpickler that refuses to resolve any global.

    Only built-in containers and scalars can be rebuilt, so a
    request body can never instantiate arbitrary classes.
    """

    def find_class(self, module: str, name: str) -> Any:
        raise pickle.UnpicklingError(f"global '{module}.{name}' is forbidden")


class GobCodec(Decoder, Encoder):
    """Binary object graphs using the pickle protocol."""

    media_type = MEDIA_GOB

    def encode(self, value: Any) -> bytes:
        return pickle.dumps(to_plain(value), protocol=pickle.DEFAULT_PROTOCOL)

    def decode(self, data: bytes) -> Any:
        try:
            return _RestrictedUnpickler(io.BytesIO(data)).load()
        except Exception as exc:
            # Unpickling garbage can fail with almost any exception type.
            raise DecodeError(self.media_type, str(exc) or type(exc).__name__) from exc


JSON = JsonCodec()
XML = XmlCodec()
GOB = GobCodec()

CODECS: Mapping[str, JsonCodec | XmlCodec | GobCodec] = {
    MEDIA_JSON: JSON,
    MEDIA_GOB: GOB,
    MEDIA_XML: XML,
}
