"""
Compact share strings for projects.

A share string is the packed project payload (cell tuples when the
grid holds zero bytes) as minified JSON, run-length compressed and
base64 encoded. Runs of more than three identical characters (and
any literal ``~``) become ``~<count as two base-36 digits><char>``.
"""

import base64
import binascii
import json
import logging

from pixtasm.errors import ProjectFormatError
from pixtasm.io.project import PayloadFormat, Project, project_from_dict, project_to_dict

logger = logging.getLogger(__name__)

MAX_RUN = 255
MAX_NAME_LENGTH = 20
# Shares longer than this do not fit comfortably in a URL
URL_LIMIT = 1800

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    high, low = divmod(value, 36)
    return _BASE36[high] + _BASE36[low]


def compress_string(text: str) -> str:
    """Run-length encode runs longer than three characters."""
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        count = 1
        while i + count < len(text) and text[i + count] == char and count < MAX_RUN:
            count += 1
        if count > 3 or char == "~":
            out.append(f"~{_to_base36(count)}{char}")
        else:
            out.append(char * count)
        i += count
    return "".join(out)


def decompress_string(text: str) -> str:
    """Expand ``~<nn><char>`` runs."""
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] != "~":
            out.append(text[i])
            i += 1
            continue
        count = text[i + 1:i + 3]
        if len(text) < i + 4 or not all(c in _BASE36 for c in count):
            raise ProjectFormatError(f"Malformed run at offset {i}")
        out.append(text[i + 3] * int(count, 36))
        i += 4
    return "".join(out)


def encode_share_payload(project: Project) -> str:
    """
    Encode a project as a share string.

    Grids holding a zero character or attribute byte use cell tuples,
    since the packed layout reads zero back as unset.
    """
    fmt = PayloadFormat.PACKED
    if any(cell.char_code == 0 or cell.attribute == 0 for _, _, cell in project.grid.cells()):
        logger.info("Grid has zero-valued cells; sharing as cell tuples")
        fmt = PayloadFormat.CELL_TUPLES
    payload = project_to_dict(project, fmt)
    payload["n"] = payload["n"][:MAX_NAME_LENGTH]
    compressed = compress_string(json.dumps(payload, separators=(",", ":")))
    return base64.b64encode(compressed.encode("latin-1")).decode("ascii")


def decode_share_payload(encoded: str) -> Project:
    """Decode a share string produced by encode_share_payload."""
    try:
        compressed = base64.b64decode(encoded, validate=True).decode("latin-1")
    except (binascii.Error, ValueError) as e:
        raise ProjectFormatError(f"Invalid share string: {e}") from e

    try:
        payload = json.loads(decompress_string(compressed))
    except json.JSONDecodeError as e:
        raise ProjectFormatError(f"Invalid share payload: {e}") from e
    return project_from_dict(payload)
