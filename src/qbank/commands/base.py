# src/qbank/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Confirmation callbacks for destructive commands (like clear)
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from qbank.models import Question, QuestionStats


@dataclass
class ConfirmRequest:
    """Request for a yes/no confirmation before a destructive action.

    Attributes:
        message: Short question to display
        details: Optional explanation of what will happen
    """

    message: str
    details: str | None = None


# Callback type for confirmations - returns True to proceed
ConfirmCallback = Callable[[ConfirmRequest], bool]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class LoadResult(CommandResult):
    """Result of the load command.

    Attributes:
        path: File that was loaded
        tenant_id: Tenant the records were saved for
        questions_saved: Number of questions now stored
        papers_saved: Number of question papers now stored (None if the
            file carried no papers and stored papers were left alone)
    """

    path: str = ""
    tenant_id: str = ""
    questions_saved: int = 0
    papers_saved: int | None = None


@dataclass
class SearchResult(CommandResult):
    """Result of the search command.

    Attributes:
        questions: Questions on the requested page
        total_count: Matches before pagination
        search_query: Free-text query that was applied
        sort_by: Sort key actually applied
        sort_order: Sort direction actually applied
        limit: Page size actually applied
        offset: Offset actually applied
    """

    questions: list[Question] = field(default_factory=list)
    total_count: int = 0
    search_query: str | None = None
    sort_by: str = "year"
    sort_order: str = "desc"
    limit: int = 0
    offset: int = 0


@dataclass
class SampleResult(CommandResult):
    """Result of the random sampling command."""

    questions: list[Question] = field(default_factory=list)
    requested: int = 0


@dataclass
class StatsResult(CommandResult):
    """Result of the stats command.

    Attributes:
        stats: Statistics, or None if no questions have been saved
    """

    stats: QuestionStats | None = None


@dataclass
class InfoResult(CommandResult):
    """Result of the info command."""

    tenant_id: str = ""
    data_dir: str = ""
    questions_count: int = 0
    papers_count: int = 0
    storage_size: int = 0


@dataclass
class ClearResult(CommandResult):
    """Result of the clear command."""

    tenant_id: str = ""
    questions_removed: int = 0
    papers_removed: int = 0


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        data_dir: Data directory path
        tenant_id: Tenant used when none is given
        settings: List of settings with sources
        config_path: Path to config file (if found)
    """

    data_dir: str = ""
    tenant_id: str = ""
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
