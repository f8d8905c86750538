"""Tests for remote configuration functionality."""


from courtdesk.config import ClientConfig, Config, RemoteConfig


class TestRemoteConfig:
    """Test remote configuration functionality."""

    def test_add_remote_config(self, tmp_path):
        """Test adding a remote configuration."""
        config = Config(tmp_path)
        client_config = ClientConfig()

        client_config.remotes["production"] = RemoteConfig(
            url="https://booking.example.com/api", token="prod-token"
        )

        config.save(client_config)
        loaded = config.load()

        assert "production" in loaded.remotes
        assert loaded.remotes["production"].url == "https://booking.example.com/api"
        assert loaded.remotes["production"].token == "prod-token"

    def test_set_active_remote(self, tmp_path):
        """Test setting active remote."""
        config = Config(tmp_path)
        client_config = ClientConfig()

        client_config.remotes["production"] = RemoteConfig(
            url="https://prod.example.com", token="prod-token"
        )
        client_config.remotes["staging"] = RemoteConfig(
            url="https://staging.example.com", token="staging-token"
        )
        client_config.active_remote = "production"

        config.save(client_config)
        loaded = config.load()

        assert loaded.active_remote == "production"
        assert loaded.active.url == "https://prod.example.com"

    def test_remove_remote_config(self, tmp_path):
        """Test removing a remote configuration."""
        config = Config(tmp_path)
        client_config = ClientConfig()

        client_config.remotes["production"] = RemoteConfig(
            url="https://prod.example.com", token="prod-token"
        )
        client_config.remotes["staging"] = RemoteConfig(
            url="https://staging.example.com", token="staging-token"
        )
        client_config.active_remote = "production"

        del client_config.remotes["production"]
        client_config.active_remote = None

        config.save(client_config)
        loaded = config.load()

        assert "production" not in loaded.remotes
        assert "staging" in loaded.remotes
        assert loaded.active_remote is None
        assert loaded.active is None

    def test_active_remote_missing_from_remotes(self):
        client_config = ClientConfig(active_remote="ghost")
        assert client_config.active is None
