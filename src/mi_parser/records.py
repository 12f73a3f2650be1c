"""
Classification of single GDB/MI output lines.

The reader that pulls lines off GDB's stdout hands each complete line to
`parse_record`, which identifies the record kind from its prefix and parses the
payload. Whether a malformed line ends the session or is skipped is the reader's
decision; `parse_records` offers both policies.

See https://sourceware.org/gdb/onlinedocs/gdb/GDB_002fMI-Output-Records.html
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from pygdbmi.gdbmiparser import response_is_finished

from mi_parser.errors import MIParseError
from mi_parser.parser import parse_fields, parse_string
from mi_parser.payloads import to_payload
from mi_parser.render import format_fields
from mi_parser.strings import escape_string
from mi_parser.values import FieldList

logger = logging.getLogger(__name__)

RESULT_OR_ASYNC_RECORD = re.compile(
    r"^(?P<token>\d+)?(?P<sigil>[\^*+=])(?P<record_class>[^,\s]+)(?:,(?P<payload>.*))?$",
    re.DOTALL,
)
STREAM_RECORD = re.compile(r'^(?P<sigil>[~@&])(?P<payload>".*)$', re.DOTALL)
PROMPT = "(gdb)"


class RecordKind(Enum):
    """Kind of an MI output line."""

    RESULT = "result"
    EXEC = "exec"
    STATUS = "status"
    NOTIFY = "notify"
    CONSOLE = "console"
    TARGET = "target"
    LOG = "log"
    PROMPT = "prompt"
    OUTPUT = "output"


SIGIL_KINDS = {
    "^": RecordKind.RESULT,
    "*": RecordKind.EXEC,
    "+": RecordKind.STATUS,
    "=": RecordKind.NOTIFY,
    "~": RecordKind.CONSOLE,
    "@": RecordKind.TARGET,
    "&": RecordKind.LOG,
}
KIND_SIGILS = {kind: sigil for sigil, kind in SIGIL_KINDS.items()}

# pygdbmi reports every async record as "notify" and the prompt as "done".
PYGDBMI_TYPES = {
    RecordKind.RESULT: "result",
    RecordKind.EXEC: "notify",
    RecordKind.STATUS: "notify",
    RecordKind.NOTIFY: "notify",
    RecordKind.CONSOLE: "console",
    RecordKind.TARGET: "target",
    RecordKind.LOG: "log",
    RecordKind.PROMPT: "done",
    RecordKind.OUTPUT: "output",
}


@dataclass(frozen=True)
class Record:
    """
    One MI output line.

    `payload` is a `FieldList` for result and async records (None when the record
    has no fields), the decoded text for stream records, the raw line for inferior
    output, and None for the prompt.
    """

    kind: RecordKind
    record_class: str | None = None
    token: int | None = None
    payload: FieldList | str | None = None

    def to_dict(self) -> dict:
        """
        Convert the record to the response dict pygdbmi would produce for the line.

        :return: A dict with `type`, `message`, `payload`, `token` and `stream` keys.
        """
        payload = self.payload
        if isinstance(payload, FieldList):
            payload = to_payload(payload)
        return {
            "type": PYGDBMI_TYPES[self.kind],
            "message": self.record_class,
            "payload": payload,
            "token": self.token,
            "stream": "stdout",
        }


def parse_record(line: str) -> Record:
    """
    Parse one complete MI output line.

    :param line: The line, with or without its trailing newline.
    :return: The classified record.
    :raises MIParseError: If the payload of a result, async or stream record is malformed.
    """
    line = line.rstrip("\r\n")
    if response_is_finished(line):
        return Record(RecordKind.PROMPT)

    match = RESULT_OR_ASYNC_RECORD.match(line)
    if match:
        token = match["token"]
        payload = match["payload"]
        record = Record(
            kind=SIGIL_KINDS[match["sigil"]],
            record_class=match["record_class"],
            token=int(token) if token is not None else None,
            payload=parse_fields(payload) if payload is not None else None,
        )
        logger.debug("Parsed %s record %s", record.kind.value, record.record_class)
        return record

    match = STREAM_RECORD.match(line)
    if match:
        return Record(kind=SIGIL_KINDS[match["sigil"]], payload=parse_string(match["payload"]))

    # Not MI at all: printed by the program being debugged
    return Record(RecordKind.OUTPUT, payload=line)


def parse_records(lines: Iterable[str], strict: bool = True) -> Iterator[Record]:
    """
    Parse a sequence of MI output lines, skipping blank ones.

    :param lines: Lines as read from GDB's stdout.
    :param strict: Raise on the first malformed record; otherwise log and drop it.
    :return: Iterator over the parsed records.
    """
    for line in lines:
        if not line.strip():
            continue
        try:
            record = parse_record(line)
        except MIParseError as err:
            if strict:
                raise
            logger.warning("Dropping malformed MI record %r: %s", line.rstrip("\r\n"), err)
            continue
        yield record


def format_record(record: Record) -> str:
    """Render a record back to the MI line it was parsed from."""
    if record.kind is RecordKind.PROMPT:
        return PROMPT
    if record.kind is RecordKind.OUTPUT:
        return str(record.payload)

    sigil = KIND_SIGILS[record.kind]
    if isinstance(record.payload, str):
        return sigil + escape_string(record.payload)

    token = str(record.token) if record.token is not None else ""
    line = f"{token}{sigil}{record.record_class}"
    if record.payload is not None:
        line += "," + format_fields(record.payload)
    return line
