# =============================================================================
# beanctl Library – Protocol Constants
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

from typing import Dict

from .models import ParseMode

# ---- Status lines ----
RESPONSE_OK = "OK"
RESPONSE_NOT_FOUND = "NOT_FOUND"

# ---- Body framing ----
DOCUMENT_SEPARATOR = "---"

# Commands whose replies carry a YAML-subset body, and how to read it.
COMMAND_MODES: Dict[str, ParseMode] = {
    "stats": ParseMode.DICT,
    "stats-job": ParseMode.DICT,
    "stats-tube": ParseMode.DICT,
    "list-tubes": ParseMode.LIST,
    "list-tubes-watched": ParseMode.LIST,
}


def mode_for_command(command: str) -> ParseMode:
    """
    Look up the body mode used by a beanstalkd command.

    Args:
        command: Command name as sent on the wire, e.g. "stats-tube".

    Returns:
        The ParseMode its reply must be decoded with.

    Raises:
        ValueError: If the command does not reply with a YAML body.
    """
    try:
        return COMMAND_MODES[command]
    except KeyError:
        raise ValueError(f"Command {command!r} does not return a YAML body") from None
