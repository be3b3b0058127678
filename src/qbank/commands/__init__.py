# src/qbank/commands/__init__.py
"""UI-agnostic command layer for the question bank.

Commands return data structures, allowing UIs to render results appropriately.

Usage:
    from qbank.commands import load, search

    load.load_file("papers_2023.json", tenant_id="acme")
    result = search.search({"subject": ["History"]}, tenant_id="acme")
"""

from qbank.commands import clear, config_cmd, info, load, sample, search, stats
from qbank.commands.base import (
    ClearResult,
    CommandResult,
    ConfigResult,
    ConfirmCallback,
    ConfirmRequest,
    InfoResult,
    LoadResult,
    SampleResult,
    SearchResult,
    SettingInfo,
    StatsResult,
)

__all__ = [
    # Base types
    "ConfirmRequest",
    "ConfirmCallback",
    "CommandResult",
    # Result types
    "LoadResult",
    "SearchResult",
    "SampleResult",
    "StatsResult",
    "InfoResult",
    "ClearResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "load",
    "search",
    "sample",
    "stats",
    "info",
    "clear",
    "config_cmd",
]
