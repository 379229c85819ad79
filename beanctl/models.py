# =============================================================================
# beanctl Library – Response Models
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

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Union


class ParseMode(Enum):
    """
    Interpretation mode of a YAML-subset reply body.

    LIST produces an ordered sequence of scalar strings (e.g. `list-tubes`),
    DICT produces a mapping of string keys to string values (e.g. `stats`).

    Values are the lowercase names so a mode can be given as plain text on a
    command line or in configuration.
    """

    LIST = "list"
    DICT = "dict"

    @classmethod
    def coerce(cls, value: Union["ParseMode", str]) -> "ParseMode":
        """
        Return `value` as a ParseMode.

        Args:
            value: A ParseMode member or its string value ("list" / "dict").

        Raises:
            ValueError: If the value is not one of the two recognized modes.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid mode: {value!r}") from None


@dataclass(frozen=True)
class ResponseStatus:
    """
    Validated success status line.

    Attributes:
        name: Literal success tag, always "OK".
        byte_count: Payload length announced by the server. Carried through
            as-is; only checked when the parser is built with
            `verify_length=True`.
    """

    name: str
    byte_count: int


RecordData = Union[List[str], Dict[str, str]]


@dataclass(frozen=True)
class ArrayResponse:
    """
    Immutable representation of a decoded YAML-subset reply.

    The response behaves like its payload for the common read operations
    (`len`, iteration, `in`, `[]`), so `response["current-jobs-ready"]` and
    `list(response)` work directly.

    Attributes:
        name:
            Success tag derived from the status line ("OK").

        data:
            Ordered list of strings in list mode, or a mapping of string keys
            to string values in dict mode. Values are kept exactly as
            received, without type coercion.

    Instances are not hashable: `data` is a mutable list or dict.
    """

    name: str
    data: RecordData

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_list(self) -> bool:
        return isinstance(self.data, list)

    @property
    def is_dict(self) -> bool:
        return isinstance(self.data, dict)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __contains__(self, item: object) -> bool:
        return item in self.data

    def __getitem__(self, key: Any) -> str:
        return self.data[key]
