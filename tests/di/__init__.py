"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .realtime import MockRealtimeProvider, RecordingBroadcaster
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockRealtimeProvider",
    "RecordingBroadcaster",
    "build_test_container",
]
