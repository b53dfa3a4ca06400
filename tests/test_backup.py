"""Tests for backup, restore and candidate promotion."""

import os

import pytest

from filecache.exceptions import (
    AlreadyExistsError,
    EmptyCandidateError,
    InvalidArgumentError,
    InvalidNameError,
    NotFoundError,
)
from filecache.storage.cache.file_caching import FileCache


class TestBackup:
    """Tests for backup and restore."""

    def test_backup_copies_items(self, file_cache: FileCache) -> None:
        file_cache.set("key1", "value1")
        file_cache.set("key2", "value2")

        assert file_cache.backup("first") == 2
        backup_dir = file_cache.backup_root / "first"
        assert sorted(p.name for p in backup_dir.iterdir()) == ["key1", "key2"]
        assert file_cache.get("key1") == "value1"

    def test_backup_preserves_end_of_life(self, file_cache: FileCache) -> None:
        file_cache.set("key1", "value1", ttl=60)
        file_cache.backup("first")

        original = (file_cache.store_dir / "key1").stat().st_mtime_ns
        assert (file_cache.backup_root / "first" / "key1").stat().st_mtime_ns == original

    def test_backup_empty_store(self, file_cache: FileCache) -> None:
        assert file_cache.backup("empty") == 0
        assert (file_cache.backup_root / "empty").is_dir()

    def test_default_backup_name(self, file_cache: FileCache) -> None:
        """Test that the default name is the clock's UTC time."""
        file_cache.backup()
        assert (file_cache.backup_root / "20231114_221320").is_dir()

    def test_duplicate_backup_name(self, file_cache: FileCache) -> None:
        """Test that a clashing backup leaves store and existing backup alone."""
        file_cache.set("key1", "value1")
        file_cache.backup("first")
        file_cache.set("key2", "value2")

        with pytest.raises(AlreadyExistsError):
            file_cache.backup("first")
        assert file_cache.export() == {"key1": "value1", "key2": "value2"}
        assert [p.name for p in (file_cache.backup_root / "first").iterdir()] == ["key1"]

    def test_invalid_backup_name(self, file_cache: FileCache) -> None:
        with pytest.raises(InvalidNameError):
            file_cache.backup("../escape")
        with pytest.raises(InvalidNameError):
            file_cache.restore("../escape")

    def test_restore(self, file_cache: FileCache) -> None:
        """Test that restore replaces all items, and consumes the backup."""
        file_cache.set("key1", "old")
        file_cache.backup("first")
        file_cache.set("key1", "new")
        file_cache.set("key2", "added")

        assert file_cache.restore("first") is True
        assert file_cache.export() == {"key1": "old"}
        assert not (file_cache.backup_root / "first").exists()

    def test_restore_keeps_expiry(self, file_cache: FileCache, clock) -> None:
        file_cache.set("key1", "value1", ttl=10)
        file_cache.backup("first")
        file_cache.restore("first")

        assert file_cache.get("key1") == "value1"
        clock.advance(11)
        assert not file_cache.has("key1")

    def test_restore_missing_backup(self, file_cache: FileCache) -> None:
        file_cache.set("key1", "value1")
        with pytest.raises(NotFoundError):
            file_cache.restore("missing")
        assert file_cache.get("key1") == "value1"

    def test_list_backups_newest_first(self, file_cache: FileCache) -> None:
        for name in ["older", "newest", "middle"]:
            file_cache.backup(name)
        os.utime(file_cache.backup_root / "older", (1000, 1000))
        os.utime(file_cache.backup_root / "middle", (2000, 2000))
        os.utime(file_cache.backup_root / "newest", (3000, 3000))

        assert file_cache.list_backups() == ["newest", "middle", "older"]

    def test_list_backups_none(self, file_cache: FileCache) -> None:
        assert file_cache.list_backups() == []


class TestCandidate:
    """Tests for building and promoting a candidate store."""

    def test_set_writes_to_candidate(self, file_cache: FileCache) -> None:
        """Test that readers keep seeing live items while a candidate is built."""
        file_cache.set("key1", "live")
        file_cache.set_candidate()
        file_cache.set("key1", "candidate")
        file_cache.set("key2", "candidate")

        assert file_cache.is_candidate
        assert file_cache.get("key1") == "live"
        assert not file_cache.has("key2")
        assert (file_cache.candidate_dir / "key2").is_file()

    def test_promote(self, file_cache: FileCache) -> None:
        file_cache.set("key1", "live")
        file_cache.set_candidate()
        file_cache.set("key2", "candidate")

        assert file_cache.promote_candidate("replaced") is True
        assert file_cache.export() == {"key2": "candidate"}
        assert not file_cache.is_candidate
        assert not file_cache.candidate_dir.exists()
        assert (file_cache.backup_root / "replaced" / "key1").is_file()

    def test_setters_write_live_after_promote(self, file_cache: FileCache) -> None:
        file_cache.set_candidate()
        file_cache.set("key1", "candidate")
        file_cache.promote_candidate("replaced")

        file_cache.set("key2", "live")
        assert file_cache.get("key2") == "live"

    def test_promote_default_backup_name(self, file_cache: FileCache) -> None:
        file_cache.set_candidate()
        file_cache.set("key1", "candidate")
        file_cache.promote_candidate()
        assert file_cache.list_backups() == ["20231114_221320"]

    def test_no_candidate(self, file_cache: FileCache) -> None:
        file_cache.set("key1", "live")
        assert file_cache.promote_candidate() is False
        assert file_cache.get("key1") == "live"
        assert file_cache.list_backups() == []

    def test_empty_candidate(self, file_cache: FileCache) -> None:
        """Test that an empty candidate is never promoted."""
        file_cache.set("key1", "live")
        file_cache.set_candidate()

        with pytest.raises(EmptyCandidateError):
            file_cache.promote_candidate()
        assert file_cache.get("key1") == "live"

    def test_empty_candidate_is_invalid_argument(self) -> None:
        assert issubclass(EmptyCandidateError, InvalidArgumentError)

    def test_existing_backup_name(self, file_cache: FileCache) -> None:
        """Test that a clashing backup name fails before anything is moved."""
        file_cache.set("key1", "live")
        file_cache.backup("taken")
        file_cache.set_candidate()
        file_cache.set("key1", "candidate")

        with pytest.raises(AlreadyExistsError):
            file_cache.promote_candidate("taken")
        assert file_cache.get("key1") == "live"
        assert (file_cache.candidate_dir / "key1").is_file()

    def test_candidate_again_after_promote(self, file_cache: FileCache) -> None:
        file_cache.set_candidate()
        file_cache.set("key1", "first")
        file_cache.promote_candidate("one")

        file_cache.set_candidate()
        file_cache.set("key1", "second")
        file_cache.promote_candidate("two")

        assert file_cache.get("key1") == "second"
        assert sorted(file_cache.list_backups()) == ["one", "two"]

    def test_delete_ignores_candidate(self, file_cache: FileCache) -> None:
        file_cache.set("key1", "live")
        file_cache.set_candidate()
        file_cache.set("key1", "candidate")

        file_cache.delete("key1")
        assert not file_cache.has("key1")
        assert (file_cache.candidate_dir / "key1").is_file()
