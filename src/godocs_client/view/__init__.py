"""Fetch lifecycle core shared by every view."""

from godocs_client.view.controller import RemoteDataController
from godocs_client.view.dispatcher import Dispatcher, ViewContext
from godocs_client.view.pagination import PaginationController
from godocs_client.view.polling import PeriodicTask, start_polling, stop_polling
from godocs_client.view.state import (
    ErrorKind,
    FetchError,
    FetchState,
    Idle,
    Loading,
    Success,
    render_state,
)

__all__ = [
    "Dispatcher",
    "ViewContext",
    "RemoteDataController",
    "PaginationController",
    "PeriodicTask",
    "start_polling",
    "stop_polling",
    "ErrorKind",
    "FetchError",
    "FetchState",
    "Idle",
    "Loading",
    "Success",
    "render_state",
]
