"""
Fixed field layout of an E1.31 data packet.

Every field is described once, by absolute offset and width within the
datagram. Layer encoders look fields up here instead of hard-coding byte
ranges, and constant fields carry their value so a layer's header
template can be rendered straight from the table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from sacn_stream.dmx.universe import DMX_START_CODE
from sacn_stream.e131.constants import (
    ACN_PACKET_IDENTIFIER,
    DEFAULT_PRIORITY,
    DMP_ADDRESS_AND_DATA_TYPE,
    DMP_ADDRESS_INCREMENT,
    DMP_FIRST_PROPERTY_ADDRESS,
    POSTAMBLE_SIZE,
    PREAMBLE_SIZE,
    SOURCE_NAME_SIZE,
    VECTOR_DMP_SET_PROPERTY,
    VECTOR_E131_DATA_PACKET,
    VECTOR_ROOT_E131_DATA,
)
from sacn_stream.e131.primitives import big_endian_bytes, pack_flags_and_length

FieldValue = Union[int, bytes]


@dataclass(frozen=True)
class FieldSpec:
    """One fixed-width field of the datagram."""

    name: str
    offset: int  # absolute, from the start of the datagram
    width: int  # bytes
    constant: Optional[FieldValue] = None

    @property
    def end(self) -> int:
        return self.offset + self.width

    @property
    def span(self) -> slice:
        return slice(self.offset, self.end)

    def encode(self, value: FieldValue) -> bytes:
        """Encode ``value`` to exactly ``width`` bytes."""
        if isinstance(value, int):
            return big_endian_bytes(value, self.width * 8)
        data = bytes(value)
        if len(data) != self.width:
            raise ValueError(
                f"Field '{self.name}' expects {self.width} bytes, got {len(data)}"
            )
        return data

    def write(self, buffer: bytearray, value: FieldValue) -> None:
        buffer[self.span] = self.encode(value)


@dataclass(frozen=True)
class LayerLayout:
    """
    Header layout of one PDU layer.

    ``length_origin`` is the byte position the PDU length is counted from:
    the layer's length field holds ``full_length - (length_origin - 1)``.
    """

    name: str
    offset: int
    header_size: int
    length_origin: int
    fields: tuple[FieldSpec, ...]

    @property
    def end(self) -> int:
        return self.offset + self.header_size

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} layer has no field '{name}'")

    def pdu_length(self, full_length: int) -> int:
        return full_length - (self.length_origin - 1)

    def template(self) -> bytes:
        """Render the header with every constant field filled in."""
        header = bytearray(self.header_size)
        for spec in self.fields:
            if spec.constant is not None:
                start = spec.offset - self.offset
                header[start:start + spec.width] = spec.encode(spec.constant)
        return bytes(header)

    def write_template(self, buffer: bytearray) -> None:
        buffer[self.offset:self.end] = self.template()

    def write_flags_and_length(self, buffer: bytearray, full_length: int) -> None:
        value = pack_flags_and_length(self.pdu_length(full_length))
        self.field("flags_and_length").write(buffer, value)


ROOT_LAYOUT = LayerLayout(
    name="root",
    offset=0,
    header_size=38,
    length_origin=16,
    fields=(
        FieldSpec("preamble_size", 0, 2, PREAMBLE_SIZE),
        FieldSpec("postamble_size", 2, 2, POSTAMBLE_SIZE),
        FieldSpec("acn_packet_identifier", 4, 12, ACN_PACKET_IDENTIFIER),
        FieldSpec("flags_and_length", 16, 2),
        FieldSpec("vector", 18, 4, VECTOR_ROOT_E131_DATA),
        FieldSpec("cid", 22, 16),
    ),
)

FRAMING_LAYOUT = LayerLayout(
    name="framing",
    offset=38,
    header_size=77,
    length_origin=48,
    fields=(
        FieldSpec("flags_and_length", 38, 2),
        FieldSpec("vector", 40, 4, VECTOR_E131_DATA_PACKET),
        FieldSpec("source_name", 44, SOURCE_NAME_SIZE),
        FieldSpec("priority", 108, 1, DEFAULT_PRIORITY),
        FieldSpec("sync_universe", 109, 2),
        FieldSpec("sequence_number", 111, 1),
        FieldSpec("options", 112, 1),
        FieldSpec("universe", 113, 2),
    ),
)

DMP_LAYOUT = LayerLayout(
    name="dmp",
    offset=115,
    header_size=11,
    length_origin=115,
    fields=(
        FieldSpec("flags_and_length", 115, 2),
        FieldSpec("vector", 117, 1, VECTOR_DMP_SET_PROPERTY),
        FieldSpec("address_and_data_type", 118, 1, DMP_ADDRESS_AND_DATA_TYPE),
        FieldSpec("first_property_address", 119, 2, DMP_FIRST_PROPERTY_ADDRESS),
        FieldSpec("address_increment", 121, 2, DMP_ADDRESS_INCREMENT),
        FieldSpec("property_value_count", 123, 2, 1),
        FieldSpec("start_code", 125, 1, DMX_START_CODE),
    ),
)

# DMX slot data follows the START code
DMX_DATA_OFFSET = DMP_LAYOUT.end

LAYOUTS = (ROOT_LAYOUT, FRAMING_LAYOUT, DMP_LAYOUT)
