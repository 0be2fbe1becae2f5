"""
Test suite for configuration module
"""

from bank_account.config import BankAccountConfig, get_config, reload_config


class TestConfig:
    """Test environment-based configuration"""
    
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BANK_ACCOUNT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("BANK_ACCOUNT_LOG_FORMAT", raising=False)
        config = BankAccountConfig()
        assert config.log_level == "INFO"
        assert config.log_format == "json"
    
    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BANK_ACCOUNT_LOG_FORMAT", "text")
        monkeypatch.setenv("bank_account_log_level", "DEBUG")
        config = BankAccountConfig()
        assert config.log_format == "text"
        assert config.log_level == "DEBUG"
    
    def test_reload_config(self, monkeypatch):
        monkeypatch.setenv("BANK_ACCOUNT_LOG_FORMAT", "text")
        try:
            reloaded = reload_config()
            assert reloaded is get_config()
            assert reloaded.log_format == "text"
        finally:
            monkeypatch.undo()
            reload_config()
