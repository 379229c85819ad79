# =============================================================================
# YamlResponseParser - decoder for beanstalkd YAML-subset replies
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose and noninfringement. In no event shall the
# authors or copyright holders be liable for any claim, damages or other
# liability, whether in an action of contract, tort or otherwise, arising from,
# out of or in connection with the software or the use or other dealings in the
# software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Union

from .exceptions import (
    LengthMismatch,
    MalformedRecord,
    ServerReportedFailure,
    UnrecognizedStatus,
)
from .models import ArrayResponse, ParseMode, ResponseStatus
from .protocol import (
    DOCUMENT_SEPARATOR,
    RESPONSE_NOT_FOUND,
    RESPONSE_OK,
    mode_for_command,
)

logger = logging.getLogger(__name__)

_OK_STATUS_RE = re.compile(r"OK ([0-9]+)")
_LINE_BREAKS_RE = re.compile(r"[\r\n]+")
_KEY_VALUE_RE = re.compile(r"(\S+):\s*(.*)")
_LIST_FRAMING = "- "


def validate_status(status_line: str) -> ResponseStatus:
    """
    Check the status line of a YAML-bearing reply.

    Args:
        status_line: First line of the reply, without its line terminator.

    Returns:
        ResponseStatus with the announced byte count.

    Raises:
        ServerReportedFailure: If the line is exactly `NOT_FOUND`.
        UnrecognizedStatus: If the line is not `OK <digits>`.
    """
    if status_line == RESPONSE_NOT_FOUND:
        raise ServerReportedFailure(status_line)

    match = _OK_STATUS_RE.fullmatch(status_line)
    if match is None:
        raise UnrecognizedStatus(status_line)

    return ResponseStatus(name=RESPONSE_OK, byte_count=int(match.group(1)))


def tokenize_body(body: Optional[str]) -> List[str]:
    """
    Split a reply body into logical lines.

    Trailing whitespace is trimmed, each run of CR/LF characters counts as a
    single delimiter, and a leading `---` document separator is dropped.
    A missing or blank body gives an empty list.
    """
    text = (body or "").rstrip()
    if not text:
        return []

    lines = _LINE_BREAKS_RE.split(text)
    if lines[0] == DOCUMENT_SEPARATOR:
        del lines[0]
    return lines


def strip_list_framing(line: str) -> str:
    """Remove a leading run of `-` and space characters from a list item."""
    return line.lstrip(_LIST_FRAMING)


def build_list(lines: List[str]) -> List[str]:
    return [strip_list_framing(line) for line in lines]


def build_dict(lines: List[str]) -> Dict[str, str]:
    """
    Turn `key: value` lines into a mapping.

    The first `<non-space>:` boundary in each line splits key from value;
    the value may be empty. A repeated key keeps its last value.

    Raises:
        MalformedRecord: On the first line without a key/value separator.
            Nothing is returned for the lines already processed.
    """
    record: Dict[str, str] = {}
    for line in build_list(lines):
        match = _KEY_VALUE_RE.search(line)
        if match is None:
            raise MalformedRecord(line)
        key, value = match.groups()
        record[key] = value
    return record


class YamlResponseParser:
    """
    Parser for the replies of commands that return a subset of YAML.

    Expected status is `OK <bytes>`; the `NOT_FOUND` status is also handled.
    The body is read as a YAML list or as a flat dictionary depending on the
    mode chosen at construction.

    The parser keeps no state between calls other than its configuration, so a
    single instance can be reused for the lifetime of a connection and shared
    between threads.
    """

    def __init__(
        self,
        mode: Union[ParseMode, str],
        *,
        verify_length: bool = False,
    ) -> None:
        """
        Create a YamlResponseParser.

        Args:
            mode:
                ParseMode.LIST / ParseMode.DICT, or the strings "list" / "dict".
            verify_length:
                When True, the byte count in the status line must equal the
                UTF-8 length of the body. Off by default: servers are trusted
                and the transport already read exactly that many bytes.

        Raises:
            ValueError:
                If mode is not one of the recognized modes.
        """
        self._mode = ParseMode.coerce(mode)
        self._verify_length = bool(verify_length)

    @classmethod
    def for_command(cls, command: str, **kwargs) -> "YamlResponseParser":
        """
        Create a parser suited to the reply of a beanstalkd command.

        Args:
            command: Command name, e.g. "stats" or "list-tubes".
            **kwargs: Forwarded to the constructor.

        Raises:
            ValueError: If the command does not return a YAML body.
        """
        return cls(mode_for_command(command), **kwargs)

    @property
    def mode(self) -> ParseMode:
        return self._mode

    @property
    def verify_length(self) -> bool:
        return self._verify_length

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self._mode.value!r}, "
            f"verify_length={self._verify_length})"
        )

    def parse_response(self, status_line: str, body: Optional[str] = None) -> ArrayResponse:
        """
        Decode one reply.

        Args:
            status_line: Reply status line, framing already removed.
            body: Reply payload without its trailing terminator, or None.

        Returns:
            ArrayResponse tagged "OK" holding a list (LIST mode) or a dict
            (DICT mode).

        Raises:
            ServerReportedFailure:
                If the server answered NOT_FOUND.
            UnrecognizedStatus:
                If the status line has an unexpected shape.
            MalformedRecord:
                In DICT mode, if a body line is not a `key: value` pair.
            LengthMismatch:
                With verify_length, if the announced size is wrong.
        """
        logger.debug("Parsing %s reply: %r", self._mode.value, status_line)
        try:
            status = validate_status(status_line)
        except ServerReportedFailure:
            logger.debug("Server reported %s", status_line)
            raise
        except UnrecognizedStatus:
            logger.warning("Unhandled status line: %r", status_line)
            raise

        if self._verify_length:
            actual = len((body or "").encode("utf-8"))
            if actual != status.byte_count:
                logger.warning(
                    "Body length mismatch: announced=%d actual=%d",
                    status.byte_count,
                    actual,
                )
                raise LengthMismatch(status.byte_count, actual)

        lines = tokenize_body(body)
        logger.debug("Reply announced %d bytes, %d lines", status.byte_count, len(lines))

        if self._mode is ParseMode.DICT:
            try:
                data = build_dict(lines)
            except MalformedRecord as exc:
                logger.warning("Malformed YAML line in %s reply", self._mode.value)
                logger.debug("Offending line: %r", exc.line)
                raise
        else:
            data = build_list(lines)

        return ArrayResponse(name=status.name, data=data)
