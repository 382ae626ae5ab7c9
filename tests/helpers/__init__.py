from .mocks import MockTransport, list_payload

__all__ = [
    "MockTransport",
    "list_payload",
]
