"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings


class BankAccountConfig(BaseSettings):
    """Bank account package configuration"""
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    class Config:
        env_prefix = "BANK_ACCOUNT_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankAccountConfig()


def get_config() -> BankAccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankAccountConfig:
    """Reload configuration from environment"""
    global config
    config = BankAccountConfig()
    return config
