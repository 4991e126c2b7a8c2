"""Packet type codes of the native protocol."""

from __future__ import annotations

from enum import IntEnum

from .errors import ProtocolError


class ServerCode(IntEnum):
    """Types of packets received from the server."""

    HELLO = 0  # Name, version, revision.
    DATA = 1  # Block of data, may be compressed.
    EXCEPTION = 2  # Exception raised on the server while running a query.
    PROGRESS = 3  # Query execution progress: rows and bytes read.
    PONG = 4  # Response to a ping sent by the client.
    END_OF_STREAM = 5  # All packets were sent.
    PROFILE_INFO = 6  # Profiling data.
    TOTALS = 7  # Block of totals, may be compressed.
    EXTREMES = 8  # Block of minimums and maximums, may be compressed.
    TABLES_STATUS_RESPONSE = 9  # Response to a table status request.
    LOG = 10  # Query execution log.
    TABLE_COLUMNS = 11  # Column descriptions for default value calculation.
    PART_UUIDS = 12  # List of unique part ids.
    READ_TASK_REQUEST = 13  # The server asks the client for the next task.
    PROFILE_EVENTS = 14  # Packet with profile events from the server.


class ClientCode(IntEnum):
    """Types of packets sent by the client."""

    HELLO = 0  # Name, version, default database name.
    QUERY = 1  # Query id, settings, stage, compression and query text.
    DATA = 2  # Data block (e.g. INSERT data), may be compressed.
    CANCEL = 3  # Cancel the running query.
    PING = 4  # Check the server connection.


class CompressionState(IntEnum):
    """Whether blocks of data are compressed."""

    DISABLE = 0
    ENABLE = 1


class Stage(IntEnum):
    """Query processing stages."""

    COMPLETE = 2


def parse_server_code(value: int) -> ServerCode:
    """Map a packet type read from the wire to a ServerCode.

    Raises ProtocolError for an unknown packet type.
    """
    try:
        return ServerCode(value)
    except ValueError:
        raise ProtocolError(f"unknown packet from server: {value}") from None


def parse_client_code(value: int) -> ClientCode:
    """Map a packet type to a ClientCode.

    Raises ProtocolError for an unknown packet type.
    """
    try:
        return ClientCode(value)
    except ValueError:
        raise ProtocolError(f"unknown packet from client: {value}") from None