"""Testing – fakes for exercising buses without real handlers."""
from taskbus.testing.fakes import RecordingHandler

__all__ = ["RecordingHandler"]
