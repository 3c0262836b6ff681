"""Tests for Config"""
import pytest

from kalle.config import Config


class TestConfigValidation:
    """Test configuration validation."""

    def test_defaults(self):
        config = Config()

        assert config.force is False
        assert config.dry_run is False
        assert config.exclude_branches == []
        assert config.git_binary == "git"
        assert config.shell == "/bin/sh"

    def test_exclude_branches_normalized(self):
        config = Config(exclude_branches=[" main ", "develop", "", "main"])

        assert config.exclude_branches == ["main", "develop"]
        assert config.exclude_set == frozenset({"main", "develop"})

    def test_exclude_branches_must_be_list(self):
        with pytest.raises(ValueError, match="exclude_branches must be a list"):
            Config(exclude_branches="main")

    def test_exclude_branch_entries_must_be_strings(self):
        with pytest.raises(ValueError, match="must be strings"):
            Config(exclude_branches=["main", 3])

    @pytest.mark.parametrize("field", ["git_binary", "shell"])
    def test_empty_tool_paths_rejected(self, field):
        with pytest.raises(ValueError, match=f"{field} cannot be empty"):
            Config(**{field: "  "})


class TestConfigConversion:
    """Test dict conversion."""

    def test_round_trip(self):
        config = Config(force=True, exclude_branches=["main"], debug=True)

        assert Config.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"dry_run": True, "stale_days": 30})

        assert config.dry_run is True
        assert config.get("stale_days") is None
        assert config.get("stale_days", 7) == 7
