"""Data models for the Miniflux API."""

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlencode


class EntryStatus(str, Enum):
    READ = "read"
    UNREAD = "unread"
    REMOVED = "removed"


class EntryOrder(str, Enum):
    ID = "id"
    STATUS = "status"
    PUBLISHED_AT = "published_at"
    CATEGORY_TITLE = "category_title"
    CATEGORY_ID = "category_id"


class EntryDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def _value(item: object) -> object:
    return item.value if isinstance(item, Enum) else item


@dataclass
class Category:
    """A user-defined grouping of feeds."""

    id: int
    user_id: int
    title: str

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(
            id=data.get("id", 0),
            user_id=data.get("user_id", 0),
            title=data.get("title", ""),
        )


@dataclass
class IconReference:
    """Link from a feed to its icon."""

    feed_id: int
    icon_id: int

    @classmethod
    def from_dict(cls, data: dict) -> "IconReference":
        return cls(feed_id=data.get("feed_id", 0), icon_id=data.get("icon_id", 0))


@dataclass
class Icon:
    """A feed favicon; ``data`` holds the base64-encoded image."""

    id: int
    data: str
    mime_type: str

    @classmethod
    def from_dict(cls, data: dict) -> "Icon":
        return cls(
            id=data.get("id", 0),
            data=data.get("data", ""),
            mime_type=data.get("mime_type", ""),
        )


@dataclass
class Feed:
    """A subscribed RSS/Atom source."""

    id: int
    user_id: int
    title: str
    site_url: str
    feed_url: str
    rewrite_rules: str = ""
    scraper_rules: str = ""
    crawler: bool = False
    checked_at: str = ""
    etag_header: str = ""
    last_modified_header: str = ""
    parsing_error_count: int = 0
    parsing_error_message: str = ""
    category: Category | None = None
    icon: IconReference | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Feed":
        category = data.get("category")
        icon = data.get("icon")
        return cls(
            id=data.get("id", 0),
            user_id=data.get("user_id", 0),
            title=data.get("title", ""),
            site_url=data.get("site_url", ""),
            feed_url=data.get("feed_url", ""),
            rewrite_rules=data.get("rewrite_rules", ""),
            scraper_rules=data.get("scraper_rules", ""),
            crawler=data.get("crawler", False),
            checked_at=data.get("checked_at", ""),
            etag_header=data.get("etag_header", ""),
            last_modified_header=data.get("last_modified_header", ""),
            parsing_error_count=data.get("parsing_error_count", 0),
            parsing_error_message=data.get("parsing_error_message", ""),
            category=Category.from_dict(category) if category else None,
            icon=IconReference.from_dict(icon) if icon else None,
        )


@dataclass
class Entry:
    """A single item belonging to a feed."""

    id: int
    user_id: int
    feed_id: int
    title: str
    url: str
    comments_url: str = ""
    author: str = ""
    content: str = ""
    hash: str = ""
    published_at: str = ""
    status: str = EntryStatus.UNREAD.value
    starred: bool = False
    feed: Feed | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        feed = data.get("feed")
        return cls(
            id=data.get("id", 0),
            user_id=data.get("user_id", 0),
            feed_id=data.get("feed_id", 0),
            title=data.get("title", ""),
            url=data.get("url", ""),
            comments_url=data.get("comments_url", ""),
            author=data.get("author", ""),
            content=data.get("content", ""),
            hash=data.get("hash", ""),
            published_at=data.get("published_at", ""),
            status=data.get("status", EntryStatus.UNREAD.value),
            starred=data.get("starred", False),
            feed=Feed.from_dict(feed) if feed else None,
        )


@dataclass
class EntryList:
    """One page of entries plus the total number matching the query."""

    total: int
    entries: list[Entry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "EntryList":
        return cls(
            total=data.get("total", 0),
            entries=[Entry.from_dict(e) for e in data.get("entries") or []],
        )


@dataclass
class User:
    """A Miniflux account."""

    id: int
    username: str
    is_admin: bool = False
    language: str = ""
    timezone: str = ""
    theme: str = ""
    entry_sorting_direction: str = EntryDirection.ASCENDING.value

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=data.get("id", 0),
            username=data.get("username", ""),
            is_admin=data.get("is_admin", False),
            language=data.get("language", ""),
            timezone=data.get("timezone", ""),
            theme=data.get("theme", ""),
            entry_sorting_direction=data.get(
                "entry_sorting_direction", EntryDirection.ASCENDING.value
            ),
        )


@dataclass
class UserSettings:
    """Partial user update. Fields left as None are not sent."""

    username: str | None = None
    password: str | None = None
    is_admin: bool | None = None
    theme: str | None = None
    language: str | None = None
    timezone: str | None = None

    def to_dict(self) -> dict:
        fields = {
            "username": self.username,
            "password": self.password,
            "is_admin": self.is_admin,
            "theme": self.theme,
            "language": self.language,
            "timezone": self.timezone,
        }
        return {k: v for k, v in fields.items() if v is not None}


@dataclass
class FeedLink:
    """A feed found by subscription discovery."""

    url: str
    title: str
    type: str

    @classmethod
    def from_dict(cls, data: dict) -> "FeedLink":
        return cls(
            url=data.get("url", ""),
            title=data.get("title", ""),
            type=data.get("type", ""),
        )


@dataclass
class CreatedFeed:
    """ID of a newly subscribed feed."""

    feed_id: int

    @classmethod
    def from_dict(cls, data: dict) -> "CreatedFeed":
        return cls(feed_id=data.get("feed_id", 0))


@dataclass
class Filter:
    """Query parameters for entry listings. Unset fields are omitted."""

    status: EntryStatus | str | None = None
    order: EntryOrder | str | None = None
    direction: EntryDirection | str | None = None
    limit: int | None = None
    offset: int | None = None

    def to_query(self) -> str:
        """Encode as ``key=value`` pairs in status, offset, limit, direction, order order."""
        pairs = [
            ("status", self.status),
            ("offset", self.offset),
            ("limit", self.limit),
            ("direction", self.direction),
            ("order", self.order),
        ]
        return urlencode([(k, _value(v)) for k, v in pairs if v is not None])
