"""Capability-gated conformance testing for map implementations."""

__version__ = "0.1.0"

# Size class labels in display order
SUPPORTED_SIZES = ["zero", "one", "several"]
