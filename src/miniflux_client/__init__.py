"""Async client for the Miniflux feed reader REST API."""

from .auth import BasicAuth, NoAuth, TokenAuth
from .client import (
    APIError,
    ConfigurationError,
    InvalidRequestError,
    MinifluxClient,
    MinifluxError,
)
from .config import Config, load_config
from .models import (
    Category,
    CreatedFeed,
    Entry,
    EntryDirection,
    EntryList,
    EntryOrder,
    EntryStatus,
    Feed,
    FeedLink,
    Filter,
    Icon,
    IconReference,
    User,
    UserSettings,
)

__all__ = [
    "MinifluxClient",
    "MinifluxError",
    "APIError",
    "ConfigurationError",
    "InvalidRequestError",
    "TokenAuth",
    "BasicAuth",
    "NoAuth",
    "Config",
    "load_config",
    "Category",
    "CreatedFeed",
    "Entry",
    "EntryDirection",
    "EntryList",
    "EntryOrder",
    "EntryStatus",
    "Feed",
    "FeedLink",
    "Filter",
    "Icon",
    "IconReference",
    "User",
    "UserSettings",
]

__version__ = "0.1.0"
