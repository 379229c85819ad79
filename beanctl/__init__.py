from .parser import (
    YamlResponseParser,
    build_dict,
    build_list,
    strip_list_framing,
    tokenize_body,
    validate_status,
)
from .models import ArrayResponse, ParseMode, ResponseStatus
from .protocol import COMMAND_MODES, mode_for_command
from .exceptions import (
    BeanError,
    BeanProtocolError,
    ServerReportedFailure,
    UnrecognizedStatus,
    MalformedRecord,
    LengthMismatch,
)

__all__ = [
    "YamlResponseParser",
    "validate_status",
    "tokenize_body",
    "strip_list_framing",
    "build_list",
    "build_dict",
    "ArrayResponse",
    "ParseMode",
    "ResponseStatus",
    "COMMAND_MODES",
    "mode_for_command",
    "BeanError",
    "BeanProtocolError",
    "ServerReportedFailure",
    "UnrecognizedStatus",
    "MalformedRecord",
    "LengthMismatch",
]
