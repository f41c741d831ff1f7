"""Configuration precedence, validation and masking."""

import pytest

from bhojpur_subscription import SubscriptionConfig, SubscriptionConfigError
from bhojpur_subscription.config import DEFAULT_BASE_URL


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so the undo step removes anything load_dotenv() adds
    for name in ("BHOJPUR_API_KEY", "BHOJPUR_BASE_URL", "BHOJPUR_TIMEOUT", "BHOJPUR_DEBUG"):
        monkeypatch.setenv(name, "x")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env):
    cfg = SubscriptionConfig()
    assert cfg.api_key == ""
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout == 30.0
    assert cfg.debug is False


def test_missing_key_fails_validation(clean_env):
    with pytest.raises(SubscriptionConfigError):
        SubscriptionConfig().validate()


def test_environment_is_read(clean_env):
    clean_env.setenv("BHOJPUR_API_KEY", "sk_env_key_123")
    clean_env.setenv("BHOJPUR_BASE_URL", "http://localhost:9000/")
    clean_env.setenv("BHOJPUR_TIMEOUT", "5")
    clean_env.setenv("BHOJPUR_DEBUG", "0")

    cfg = SubscriptionConfig()

    assert cfg.api_key == "sk_env_key_123"
    assert cfg.base_url == "http://localhost:9000"
    assert cfg.timeout == 5.0
    assert cfg.debug is False


def test_explicit_arguments_win(clean_env):
    clean_env.setenv("BHOJPUR_API_KEY", "sk_env_key_123")
    cfg = SubscriptionConfig(api_key="sk_arg_key_456", timeout=3)
    assert cfg.api_key == "sk_arg_key_456"
    assert cfg.timeout == 3.0


def test_bad_timeout_in_env_falls_back(clean_env):
    clean_env.setenv("BHOJPUR_TIMEOUT", "soon")
    assert SubscriptionConfig().timeout == 30.0


def test_masked_hides_key(clean_env):
    cfg = SubscriptionConfig(api_key="sk_live_abcdefghijkl")
    masked = cfg.masked()
    assert masked["api_key"] == "sk_...kl"
    assert "abcdefghijkl" not in repr(masked)


def test_copy_with(clean_env):
    cfg = SubscriptionConfig(api_key="sk_live_abcdefghijkl")
    other = cfg.copy_with(base_url="http://127.0.0.1:4010/", debug=False)
    assert other.base_url == "http://127.0.0.1:4010"
    assert other.api_key == cfg.api_key
    assert cfg.base_url == DEFAULT_BASE_URL


def test_from_env_reads_dotenv(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("BHOJPUR_API_KEY=sk_dotenv_key_789\n")

    cfg = SubscriptionConfig.from_env(str(env_file))

    assert cfg.api_key == "sk_dotenv_key_789"


def test_from_env_without_key_raises(clean_env, tmp_path):
    with pytest.raises(SubscriptionConfigError):
        SubscriptionConfig.from_env(str(tmp_path / "missing.env"))
