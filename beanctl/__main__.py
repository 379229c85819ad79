# =============================================================================
# beanctl – Reply decoding command line tool
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Fernández Rodríguez
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This program is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors be liable for any claim, damages, or other liability arising from,
# out of, or in connection with the use of this software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text must accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
# @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .exceptions import BeanError
from .models import ParseMode
from .parser import YamlResponseParser
from .protocol import COMMAND_MODES


def split_reply(raw: str) -> Tuple[str, str]:
    """
    Split a captured reply into its status line and body.

    The first line is the status line; everything after its line terminator
    is the body, minus the final CRLF that terminates the reply.
    """
    status_line, _, body = raw.partition("\n")
    if body.endswith("\r\n"):
        body = body[:-2]
    elif body.endswith("\n"):
        body = body[:-1]
    return status_line.rstrip("\r"), body


def read_reply(path: Optional[str]) -> str:
    """
    Read a captured reply as UTF-8 text, keeping its line breaks byte for byte.

    Args:
        path: File to read, or None / "-" for stdin.
    """
    if path is None or path == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beanctl-decode",
        description="Decode a captured beanstalkd YAML reply and print it as JSON",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--mode", choices=[m.value for m in ParseMode])
    source.add_argument("--command", choices=sorted(COMMAND_MODES))
    parser.add_argument(
        "file",
        nargs="?",
        help="file holding the reply (default: stdin)",
    )
    parser.add_argument("--verify-length", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.

    Returns:
        0 on success, 1 when the reply cannot be decoded.
    """
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command:
        decoder = YamlResponseParser.for_command(args.command, verify_length=args.verify_length)
    else:
        decoder = YamlResponseParser(args.mode, verify_length=args.verify_length)

    status_line, body = split_reply(read_reply(args.file))

    try:
        response = decoder.parse_response(status_line, body)
    except BeanError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(response.data, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
