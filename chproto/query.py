"""Queries with per-query settings and handlers for the server's replies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable, Dict, Optional

DataCallback = Callable[[Any], None]
DataCancelableCallback = Callable[[Any], bool]
ExceptionCallback = Callable[[Any], None]
ProgressCallback = Callable[["Progress"], None]
ServerLogCallback = Callable[[Any], bool]
ProfileEventsCallback = Callable[[Any], bool]


class QuerySettingsFlag(IntFlag):
    """Flags attached to a single query setting."""

    IMPORTANT = 0x01
    CUSTOM = 0x02


@dataclass
class QuerySettingsField:
    """Value of one query setting and its flags."""

    value: str
    flags: int = 0


QuerySettings = Dict[str, QuerySettingsField]


@dataclass
class Profile:
    """Profiling information reported by the server."""

    rows: int = 0
    blocks: int = 0
    bytes: int = 0
    rows_before_limit: int = 0
    applied_limit: bool = False
    calculated_rows_before_limit: bool = False


@dataclass
class Progress:
    """Query execution progress: rows and bytes read and written."""

    rows: int = 0
    bytes: int = 0
    total_rows: int = 0
    written_rows: int = 0
    written_bytes: int = 0


class QueryEvents(ABC):
    """Receiver of everything the server sends while a query runs."""

    @abstractmethod
    def handle_data(self, block: Any) -> None:
        """Some data was received."""

    @abstractmethod
    def handle_data_cancelable(self, block: Any) -> bool:
        """Some data was received; return False to cancel the query."""

    @abstractmethod
    def handle_server_exception(self, error: Any) -> None:
        """The server reported an exception."""

    @abstractmethod
    def handle_profile(self, profile: Profile) -> None:
        """Profiling information was received."""

    @abstractmethod
    def handle_progress(self, progress: Progress) -> None:
        """Progress information was received."""

    @abstractmethod
    def handle_server_log(self, block: Any) -> None:
        """Query execution logs were received (amount set by ``send_logs_level``)."""

    @abstractmethod
    def handle_profile_events(self, block: Any) -> None:
        """Profile events were received."""

    @abstractmethod
    def handle_finish(self) -> None:
        """The query has finished."""


class Query(QueryEvents):
    """A query text with its id, settings, tracing context and reply handlers.

    The ``set_*`` and ``on_*`` methods return the query itself so calls can be chained.
    """

    default_query_id = ""

    def __init__(self, text: str = "", query_id: Optional[str] = None) -> None:
        self._text = text
        self._query_id = self.default_query_id if query_id is None else query_id
        self._tracing_context: Optional[Any] = None
        self._query_settings: QuerySettings = {}
        self._exception_cb: Optional[ExceptionCallback] = None
        self._progress_cb: Optional[ProgressCallback] = None
        self._select_cb: Optional[DataCallback] = None
        self._select_cancelable_cb: Optional[DataCancelableCallback] = None
        self._server_log_cb: Optional[ServerLogCallback] = None
        self._profile_events_cb: Optional[ProfileEventsCallback] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def query_id(self) -> str:
        return self._query_id

    @property
    def query_settings(self) -> QuerySettings:
        return self._query_settings

    def set_query_settings(self, settings: QuerySettings) -> Query:
        """Replace all per-query settings."""
        self._query_settings = dict(settings)
        return self

    def set_setting(self, key: str, value: QuerySettingsField) -> Query:
        """Set a single per-query setting."""
        self._query_settings[key] = value
        return self

    @property
    def tracing_context(self) -> Optional[Any]:
        return self._tracing_context

    def set_tracing_context(self, tracing_context: Any) -> Query:
        """Set the tracing context sent along with the query."""
        self._tracing_context = tracing_context
        return self

    def on_data(self, callback: DataCallback) -> Query:
        self._select_cb = callback
        return self

    def on_data_cancelable(self, callback: DataCancelableCallback) -> Query:
        self._select_cancelable_cb = callback
        return self

    def on_exception(self, callback: ExceptionCallback) -> Query:
        self._exception_cb = callback
        return self

    def on_progress(self, callback: ProgressCallback) -> Query:
        self._progress_cb = callback
        return self

    def on_server_log(self, callback: ServerLogCallback) -> Query:
        self._server_log_cb = callback
        return self

    def on_profile_events(self, callback: ProfileEventsCallback) -> Query:
        self._profile_events_cb = callback
        return self

    def handle_data(self, block: Any) -> None:
        if self._select_cb is not None:
            self._select_cb(block)

    def handle_data_cancelable(self, block: Any) -> bool:
        if self._select_cancelable_cb is not None:
            return bool(self._select_cancelable_cb(block))
        return True

    def handle_server_exception(self, error: Any) -> None:
        if self._exception_cb is not None:
            self._exception_cb(error)

    def handle_profile(self, profile: Profile) -> None:
        pass

    def handle_progress(self, progress: Progress) -> None:
        if self._progress_cb is not None:
            self._progress_cb(progress)

    def handle_server_log(self, block: Any) -> None:
        if self._server_log_cb is not None:
            self._server_log_cb(block)

    def handle_profile_events(self, block: Any) -> None:
        if self._profile_events_cb is not None:
            self._profile_events_cb(block)

    def handle_finish(self) -> None:
        pass