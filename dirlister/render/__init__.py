"""Terminal output for listings: width helpers and table/TSV sinks."""

from __future__ import annotations

from .table import DelimitedSink, TerminalTableSink

__all__ = ["DelimitedSink", "TerminalTableSink"]
