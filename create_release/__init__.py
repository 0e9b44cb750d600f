"""Create a GitHub release from a workflow step and expose its URLs as outputs."""

__version__ = "1.0.0"
