"""Project files, share strings and plain-text import/export."""

from pixtasm.io.project import (
    PayloadFormat,
    Project,
    dumps_project,
    load_project,
    loads_project,
    save_project,
)
from pixtasm.io.share import decode_share_payload, encode_share_payload
from pixtasm.io.text import export_text, import_text, paste_text

__all__ = [
    "PayloadFormat",
    "Project",
    "dumps_project",
    "load_project",
    "loads_project",
    "save_project",
    "decode_share_payload",
    "encode_share_payload",
    "export_text",
    "import_text",
    "paste_text",
]
