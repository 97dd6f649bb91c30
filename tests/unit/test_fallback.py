"""Unit tests for the fallback dataset loader."""

import json
import logging

import pytest

from repofolio.config import DEFAULT_FALLBACK_PATH
from repofolio.exceptions import FallbackLoadError
from repofolio.services.fallback import load_fallback, read_fallback


class TestReadFallback:
    """Tests for read_fallback."""

    def test_reads_valid_file(self, tmp_path, sample_repo_data):
        """Test reading a well-formed dataset."""
        path = tmp_path / "repos.json"
        path.write_text(json.dumps([sample_repo_data]), encoding="utf-8")

        repos = read_fallback(path)

        assert len(repos) == 1
        assert repos[0].name == "Hello-World"
        assert repos[0].homepage is None

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FallbackLoadError."""
        with pytest.raises(FallbackLoadError):
            read_fallback(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises FallbackLoadError."""
        path = tmp_path / "repos.json"
        path.write_text("[{not json", encoding="utf-8")

        with pytest.raises(FallbackLoadError):
            read_fallback(path)

    def test_not_a_list(self, tmp_path):
        """Test that a JSON object instead of a list is rejected."""
        path = tmp_path / "repos.json"
        path.write_text('{"repos": []}', encoding="utf-8")

        with pytest.raises(FallbackLoadError):
            read_fallback(path)

    def test_invalid_item(self, tmp_path):
        """Test that an item missing required fields is rejected."""
        path = tmp_path / "repos.json"
        path.write_text('[{"name": "no-id"}]', encoding="utf-8")

        with pytest.raises(FallbackLoadError):
            read_fallback(path)


class TestLoadFallback:
    """Tests for load_fallback."""

    def test_bundled_dataset_loads(self):
        """Test that the packaged fallback file is valid."""
        repos = load_fallback(DEFAULT_FALLBACK_PATH)

        assert len(repos) > 0
        assert all(repo.html_url.host == "github.com" for repo in repos)

    def test_failure_returns_empty_list(self, tmp_path, caplog):
        """Test that load errors are logged and replaced by an empty list."""
        with caplog.at_level(logging.WARNING, logger="repofolio.services.fallback"):
            repos = load_fallback(tmp_path / "missing.json")

        assert repos == []
        assert "Could not load fallback repositories" in caplog.text
