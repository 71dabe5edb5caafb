"""Wire codecs for talking to an external conversion command.

A codec turns call inputs into request bytes, splits the child's output
stream into records, and decodes each record into a call output. The bridge
is generic over any codec; the framing is the codec's business.

Default protocol (line framed, tab separated):
    request:  <RFC 3339 start or empty> TAB <RFC 3339 end or empty> LF
    response: <date or empty> TAB <date or empty> LF

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import BinaryIO, Protocol

from datestamps.constants import FIELD_DELIMITER, RECORD_TERMINATOR
from datestamps.errors import ProtocolError
from datestamps.instant import Instant
from datestamps.oracle import DateRange, InstantRange

__all__ = [
    "Codec",
    "DateToTimestampCodec",
    "FunctionCodec",
    "TimestampToDateCodec",
    "decode_request",
    "decode_response",
    "encode_request",
    "encode_response",
    "split_lines",
]


class Codec[InputT, OutputT](Protocol):
    """Translates between call values and a child process byte stream."""

    def encode(self, buffer: bytearray, value: InputT) -> bytearray:
        """Append the request for value to buffer and return the buffer."""
        ...

    def split(self, stream: BinaryIO) -> Iterator[bytes]:
        """Yield response records read from the child's output stream."""
        ...

    def decode(self, record: bytes) -> OutputT:
        """Decode one response record.

        Raises:
            ProtocolError: If the record is malformed
        """
        ...


def split_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Newline-delimited framing.

    Strips the terminator and one trailing carriage return. A final line
    without a terminator is still yielded if it is not empty.
    """
    for line in iter(stream.readline, b""):
        yield line.removesuffix(RECORD_TERMINATOR).removesuffix(b"\r")


@dataclass(frozen=True, slots=True)
class FunctionCodec[InputT, OutputT]:
    """Codec assembled from plain callables.

    Example:
        >>> echo = FunctionCodec(
        ...     encode_fn=lambda buf, s: buf + s.encode() + b"\\n",
        ...     decode_fn=bytes.decode,
        ... )
    """

    encode_fn: Callable[[bytearray, InputT], bytearray]
    decode_fn: Callable[[bytes], OutputT]
    split_fn: Callable[[BinaryIO], Iterator[bytes]] = split_lines

    def encode(self, buffer: bytearray, value: InputT) -> bytearray:
        return self.encode_fn(buffer, value)

    def split(self, stream: BinaryIO) -> Iterator[bytes]:
        return self.split_fn(stream)

    def decode(self, record: bytes) -> OutputT:
        return self.decode_fn(record)


# --- Timestamp-to-date protocol ---


def _split_fields(record: bytes, what: str) -> tuple[str, str]:
    index = record.find(FIELD_DELIMITER)
    if index == -1:
        msg = f"malformed {what}: missing field delimiter in {record[:80]!r}"
        raise ProtocolError(msg, record=record)
    try:
        return record[:index].decode("utf-8"), record[index + 1 :].decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"malformed {what}: not UTF-8: {record[:80]!r}"
        raise ProtocolError(msg, record=record) from e


def encode_request(buffer: bytearray, r: InstantRange) -> bytearray:
    """Append "<start>\\t<end>\\n" (RFC 3339 nanoseconds, empty when unset)."""
    if r.start is not None:
        buffer += r.start.format().encode("ascii")
    buffer += FIELD_DELIMITER
    if r.end is not None:
        buffer += r.end.format().encode("ascii")
    buffer += RECORD_TERMINATOR
    return buffer


def decode_response(record: bytes) -> DateRange:
    """Parse "<start date>\\t<end date>" into a DateRange.

    Only the delimiter is checked here; whether the dates are valid is a
    conformance question, answered by the runner.

    Raises:
        ProtocolError: If the record has no field delimiter or is not UTF-8
    """
    start, end = _split_fields(record, "output")
    return DateRange(start, end)


def encode_response(buffer: bytearray, r: DateRange) -> bytearray:
    """Append "<start date>\\t<end date>\\n" (child side of the protocol)."""
    buffer += r.start.encode("ascii")
    buffer += FIELD_DELIMITER
    buffer += r.end.encode("ascii")
    buffer += RECORD_TERMINATOR
    return buffer


def decode_request(record: bytes) -> InstantRange:
    """Parse "<start>\\t<end>" into an InstantRange (child side).

    Raises:
        ProtocolError: If the record is malformed or a timestamp is invalid
    """
    start, end = _split_fields(record, "request")
    try:
        return InstantRange(
            Instant.parse(start) if start else None,
            Instant.parse(end) if end else None,
        )
    except ValueError as e:
        msg = f"malformed request: {e}"
        raise ProtocolError(msg, record=record) from e


class TimestampToDateCodec:
    """Default Codec[InstantRange, DateRange] for the line protocol."""

    __slots__ = ()

    def encode(self, buffer: bytearray, value: InstantRange) -> bytearray:
        return encode_request(buffer, value)

    def split(self, stream: BinaryIO) -> Iterator[bytes]:
        return split_lines(stream)

    def decode(self, record: bytes) -> DateRange:
        return decode_response(record)


class DateToTimestampCodec:
    """Codec[DateRange, InstantRange]: the same line layouts, reversed.

    Drives an implementation of the inverse conversion, such as
    ``python -m datestamps.reference --inverse``.
    """

    __slots__ = ()

    def encode(self, buffer: bytearray, value: DateRange) -> bytearray:
        return encode_response(buffer, value)

    def split(self, stream: BinaryIO) -> Iterator[bytes]:
        return split_lines(stream)

    def decode(self, record: bytes) -> InstantRange:
        return decode_request(record)
