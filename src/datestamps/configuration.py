"""Options record handed from the fuzz launcher to a fuzz target.

Fuzz targets run in a separate process (pytest for Hypothesis, a
libFuzzer binary for Atheris), so the command under test travels through
the environment: JSON, then base64, in DATESTAMPS_FUZZ_OPTIONS. A missing
variable means the target was not configured and should skip itself.

Example:
    >>> blob = encode_options(Options("./convert", ("--utc",), "/tmp"))
    >>> decode_options(blob)
    Options(cmd='./convert', args=('--utc',), dir='/tmp')

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import base64
import binascii
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass

from datestamps.constants import OPTIONS_ENV_VAR

__all__ = [
    "Options",
    "decode_options",
    "encode_options",
    "load_options",
]


@dataclass(frozen=True, slots=True)
class Options:
    """How to run the command under test.

    Attributes:
        cmd: Program to run (required)
        args: Program arguments
        dir: Working directory ("" for the target's own)
    """

    cmd: str
    args: tuple[str, ...] = ()
    dir: str = ""

    def __post_init__(self) -> None:
        if not self.cmd:
            msg = "options.cmd is empty"
            raise ValueError(msg)


def encode_options(options: Options) -> str:
    """Serialize options to the base64 JSON form."""
    payload = json.dumps(
        {"cmd": options.cmd, "args": list(options.args), "dir": options.dir},
        separators=(",", ":"),
    )
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_options(blob: str) -> Options:
    """Parse the base64 JSON form.

    Raises:
        ValueError: If blob is empty, not base64 JSON of the right shape,
            or has an empty cmd
    """
    if not blob:
        msg = "options blob is empty"
        raise ValueError(msg)
    try:
        data = json.loads(base64.b64decode(blob, validate=True))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"options blob is not base64 JSON: {e}"
        raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"options must be a JSON object, got {type(data).__name__}"
        raise ValueError(msg)

    cmd = data.get("cmd") or ""
    args = data.get("args") or []
    directory = data.get("dir") or ""
    if not isinstance(cmd, str) or not isinstance(directory, str):
        msg = "options.cmd and options.dir must be strings"
        raise ValueError(msg)
    if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
        msg = "options.args must be a list of strings"
        raise ValueError(msg)
    return Options(cmd, tuple(args), directory)


def load_options(environ: Mapping[str, str] | None = None) -> Options | None:
    """Read options from the environment.

    Returns:
        The decoded options, or None if the variable is unset or empty

    Raises:
        ValueError: If the variable is set but malformed
    """
    if environ is None:
        environ = os.environ
    blob = environ.get(OPTIONS_ENV_VAR, "")
    if not blob:
        return None
    return decode_options(blob)
