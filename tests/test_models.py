"""Tests for models.py — parsing server JSON and building query strings."""

from miniflux_client.models import (
    Category,
    Entry,
    EntryDirection,
    EntryList,
    EntryOrder,
    EntryStatus,
    Feed,
    Filter,
    User,
    UserSettings,
)


class TestFeed:
    def test_from_dict_nested(self):
        feed = Feed.from_dict(
            {
                "id": 1,
                "user_id": 2,
                "title": "F",
                "site_url": "https://a.com",
                "feed_url": "https://a.com/rss",
                "category": {"id": 3, "user_id": 2, "title": "C"},
                "icon": {"feed_id": 1, "icon_id": 9},
            }
        )
        assert feed.category == Category(id=3, user_id=2, title="C")
        assert feed.icon.icon_id == 9

    def test_from_dict_missing_fields(self):
        """Sparse payloads produce a Feed with safe defaults."""
        feed = Feed.from_dict({"id": 5})
        assert feed.id == 5
        assert feed.title == ""
        assert feed.crawler is False
        assert feed.category is None
        assert feed.icon is None


class TestEntry:
    def test_from_dict(self):
        entry = Entry.from_dict(
            {"id": 1, "feed_id": 2, "title": "T", "status": "read", "starred": True}
        )
        assert entry.status == EntryStatus.READ
        assert entry.starred is True
        assert entry.feed is None

    def test_default_status_is_unread(self):
        assert Entry.from_dict({}).status == "unread"


class TestEntryList:
    def test_from_dict(self):
        page = EntryList.from_dict({"total": 10, "entries": [{"id": 1}, {"id": 2}]})
        assert page.total == 10
        assert [e.id for e in page.entries] == [1, 2]

    def test_null_entries(self):
        assert EntryList.from_dict({"total": 0, "entries": None}).entries == []


class TestUser:
    def test_from_dict(self):
        user = User.from_dict({"id": 1, "username": "bob", "entry_sorting_direction": "desc"})
        assert user.username == "bob"
        assert user.entry_sorting_direction == EntryDirection.DESCENDING


class TestUserSettings:
    def test_to_dict_drops_unset(self):
        assert UserSettings(language="fr_FR").to_dict() == {"language": "fr_FR"}

    def test_to_dict_keeps_false(self):
        assert UserSettings(is_admin=False).to_dict() == {"is_admin": False}

    def test_empty(self):
        assert UserSettings().to_dict() == {}


class TestFilter:
    def test_status_and_limit(self):
        assert Filter(status="unread", limit=10).to_query() == "status=unread&limit=10"

    def test_field_order(self):
        f = Filter(
            order=EntryOrder.PUBLISHED_AT,
            direction=EntryDirection.DESCENDING,
            limit=5,
            offset=15,
            status=EntryStatus.READ,
        )
        assert f.to_query() == "status=read&offset=15&limit=5&direction=desc&order=published_at"

    def test_empty(self):
        assert Filter().to_query() == ""

    def test_zero_offset_kept(self):
        assert Filter(offset=0).to_query() == "offset=0"
