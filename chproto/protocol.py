"""Packet codes of the native protocol and server error codes."""

from enum import IntEnum


class ServerCode(IntEnum):
    """Types of packets received from the server."""

    HELLO = 0
    DATA = 1
    EXCEPTION = 2
    PROGRESS = 3
    PONG = 4
    END_OF_STREAM = 5
    PROFILE_INFO = 6
    TOTALS = 7
    EXTREMES = 8
    TABLES_STATUS_RESPONSE = 9
    LOG = 10
    TABLE_COLUMNS = 11
    PART_UUIDS = 12
    READ_TASK_REQUEST = 13
    PROFILE_EVENTS = 14


class ClientCode(IntEnum):
    """Types of packets sent by the client."""

    HELLO = 0
    QUERY = 1
    DATA = 2
    CANCEL = 3
    PING = 4


class CompressionState(IntEnum):
    """Whether data blocks are compressed."""

    DISABLE = 0
    ENABLE = 1


class Stage(IntEnum):
    """Query processing stages."""

    COMPLETE = 2


class ErrorCode(IntEnum):
    """Error codes reported by the server."""

    CHECKSUM_DOESNT_MATCH = 40
    CANNOT_PARSE_DATETIME = 41
    UNKNOWN_FUNCTION = 46
    UNKNOWN_IDENTIFIER = 47
    TABLE_ALREADY_EXISTS = 57
    UNKNOWN_TABLE = 60
    SYNTAX_ERROR = 62
    UNKNOWN_DATABASE = 81
    DATABASE_ALREADY_EXISTS = 82
    UNKNOWN_PACKET_FROM_CLIENT = 99
    UNEXPECTED_PACKET_FROM_CLIENT = 101
    RECEIVED_DATA_FOR_WRONG_QUERY_ID = 103
    ENGINE_REQUIRED = 119
    READONLY = 164
    UNKNOWN_USER = 192
    WRONG_PASSWORD = 193
    REQUIRED_PASSWORD = 194
    IP_ADDRESS_NOT_ALLOWED = 195
    LIMIT_EXCEEDED = 290
    UNKNOWN_DATABASE_ENGINE = 336
    UNKNOWN_EXCEPTION = 1002