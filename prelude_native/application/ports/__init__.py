"""Port interfaces for external dependencies.

Adapters in the infrastructure layer implement these protocols so the use
cases can be driven with a real console or a silent logger in tests.
"""

from .services import LoggerPort, NativeExportPort, NativeReaderPort

__all__ = ["LoggerPort", "NativeExportPort", "NativeReaderPort"]
