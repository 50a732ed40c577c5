"""Testing – in-memory doubles for the action bus and its collaborators."""
from wooflux.testing.fakes import FakeNetwork, RecordingProcessor

__all__ = ["FakeNetwork", "RecordingProcessor"]
