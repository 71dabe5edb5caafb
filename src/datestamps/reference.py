"""Reference conversion command, speaking the line protocol on stdin/stdout.

Reads one request per line and writes one response per line, flushing after
each so a bridge never waits on a buffered answer. Conversions come from the
oracle, so this command passes every conformance and fuzz check and serves
as a known-good target for the harness itself.

Usage:
    python -m datestamps.reference             # timestamp range -> date range
    python -m datestamps.reference --inverse   # date range -> timestamp range

    datestamps-verify python -m datestamps.reference

Exit Codes:
    0   stdin reached EOF
    1   malformed request (reported on stderr)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import BinaryIO

from datestamps.codec import (
    decode_request,
    decode_response,
    encode_request,
    encode_response,
    split_lines,
)
from datestamps.errors import ProtocolError
from datestamps.oracle import date_range_to_timestamp_range, timestamp_range_to_date_range

__all__ = ["main", "serve"]


def _narrow(record: bytes, buffer: bytearray) -> bytearray:
    return encode_response(buffer, timestamp_range_to_date_range(decode_request(record)))


def _expand(record: bytes, buffer: bytearray) -> bytearray:
    try:
        r = date_range_to_timestamp_range(decode_response(record))
    except ValueError as e:
        msg = f"malformed request: {e}"
        raise ProtocolError(msg, record=record) from e
    return encode_request(buffer, r)


def serve(stdin: BinaryIO, stdout: BinaryIO, *, inverse: bool = False) -> int:
    """Answer requests from stdin until EOF.

    Returns:
        Number of requests answered

    Raises:
        ProtocolError: If a request is malformed
    """
    handle = _expand if inverse else _narrow
    buffer = bytearray()
    count = 0
    for record in split_lines(stdin):
        del buffer[:]
        stdout.write(handle(record, buffer))
        stdout.flush()
        count += 1
    return count


def main(args: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code: 0 on EOF, 1 on a malformed request
    """
    parser = argparse.ArgumentParser(
        prog="python -m datestamps.reference",
        description="Reference timestamp-range/date-range converter (line protocol)",
    )
    parser.add_argument(
        "--inverse",
        action="store_true",
        help="Convert date ranges to timestamp ranges instead",
    )
    parsed = parser.parse_args(args)

    try:
        serve(sys.stdin.buffer, sys.stdout.buffer, inverse=parsed.inverse)
    except ProtocolError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # Reader went away; nothing left to answer.
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
