"""Error types, protocol codes and test-support utilities for a ClickHouse native-protocol client."""

__version__ = "2.5.1"

__all__ = [
    "errors",
    "protocol",
    "version",
    "comparison",
    "timing",
    "support",
    "generators",
    "tcp_server",
]