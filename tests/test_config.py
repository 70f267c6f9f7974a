"""Tests for configuration module"""
import os
import tempfile
from pathlib import Path
from unittest.mock import patch
import pytest
from pydantic import ValidationError

from config import Config, ResolverMode


class TestConfig:
    """Test configuration validation and parsing"""
    
    def test_default_config(self):
        """Test default configuration values"""
        config = Config()
        
        assert config.runtime_version_resolver == "auto"
        assert config.runtime_version_resolver is ResolverMode.AUTO
        assert config.release_key_subkey == r"SOFTWARE\Microsoft\NET Framework Setup\NDP\v4\Full"
        assert config.log_level == "INFO"
        assert config.log_file is None
    
    def test_environment_override(self):
        """Test configuration override from environment variables"""
        env_vars = {
            "RUNTIME_VERSION_RESOLVER": "legacy_registry",
            "RELEASE_KEY_SUBKEY": r"SOFTWARE\Custom\NDP",
            "LOG_LEVEL": "DEBUG",
        }
        
        with patch.dict(os.environ, env_vars):
            config = Config()
            
            assert config.runtime_version_resolver == "legacy_registry"
            assert config.runtime_version_resolver is ResolverMode.LEGACY_REGISTRY
            assert config.release_key_subkey == r"SOFTWARE\Custom\NDP"
            assert config.log_level == "DEBUG"
    
    def test_resolver_mode_is_case_insensitive(self):
        """Test resolver mode normalization"""
        with patch.dict(os.environ, {"RUNTIME_VERSION_RESOLVER": " Standard "}):
            assert Config().runtime_version_resolver == "standard"
    
    def test_validation_runtime_version_resolver(self):
        """Test validation of resolver mode"""
        with patch.dict(os.environ, {"RUNTIME_VERSION_RESOLVER": "registry"}):
            with pytest.raises(ValidationError):
                Config()
    
    def test_validation_log_level(self):
        """Test validation of log level"""
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}):
            with pytest.raises(ValidationError):
                Config()
        
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}):
            assert Config().log_level == "WARNING"
    
    def test_directory_creation(self):
        """Test that parent directories are created for the log file"""
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_file = Path(tmp_dir) / "subdir" / "test.log"
            
            with patch.dict(os.environ, {"LOG_FILE": str(log_file)}):
                config = Config()
                
                assert config.log_file == log_file
                assert config.log_file.parent.exists()
