# =============================================================================
# beanctl Library – Exceptions Module
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors or copyright holders be liable for any claim, damages, or other
# liability, whether in an action of contract, tort, or otherwise, arising from,
# out of, or in connection with the software or the use or other dealings in
# the software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations


class BeanError(Exception):
    """
    Base exception for the library.

    All custom exceptions of the beanctl library inherit from this class so
    that callers can catch `BeanError` to handle any library-specific failure
    in a generic way.
    """
    pass


class BeanProtocolError(BeanError):
    """
    The reply returned by the beanstalkd server cannot be decoded or does not
    follow the expected YAML-subset format.

    Subclasses identify the exact failure kind so callers can tell a server
    "not found" apart from a malformed payload.
    """
    pass


class ServerReportedFailure(BeanProtocolError):
    """
    The server answered with its explicit `NOT_FOUND` status.

    The exchange itself was well formed; whether to retry is up to the caller.

    Attributes:
        status: The sentinel text received from the server.
    """

    def __init__(self, status: str) -> None:
        super().__init__(f"Server reported {status}")
        self.status = status


class UnrecognizedStatus(BeanProtocolError):
    """
    The status line matched neither `OK <bytes>` nor a known failure sentinel.

    Attributes:
        status_line: The verbatim offending status line.
    """

    def __init__(self, status_line: str) -> None:
        super().__init__(f'Unhandled response: "{status_line}"')
        self.status_line = status_line


class MalformedRecord(BeanProtocolError):
    """
    A body line could not be split into a `key: value` pair in dict mode.

    Attributes:
        line: The verbatim offending body line.
    """

    def __init__(self, line: str) -> None:
        super().__init__(f"YAML parse error for line: {line}")
        self.line = line


class LengthMismatch(BeanProtocolError):
    """
    The byte count announced in the status line does not match the body.

    Only raised by parsers built with `verify_length=True`.

    Attributes:
        expected: Byte count announced by the server.
        actual: UTF-8 length of the body actually received.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Status announced {expected} bytes but body has {actual} bytes"
        )
        self.expected = expected
        self.actual = actual
