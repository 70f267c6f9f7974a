"""Configuration for process runtime detection"""
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ResolverMode(str, Enum):
    """Version resolver selection modes"""
    AUTO = "auto"
    STANDARD = "standard"
    LEGACY_REGISTRY = "legacy_registry"


class Config(BaseSettings):
    """Process runtime detector settings, read from the environment"""
    
    # Version resolution
    runtime_version_resolver: ResolverMode = Field(
        default=ResolverMode.AUTO,
        description="Version resolver: auto, standard or legacy_registry"
    )
    release_key_subkey: str = Field(
        default=r"SOFTWARE\Microsoft\NET Framework Setup\NDP\v4\Full",
        description="HKLM registry subkey holding the .NET Framework release key"
    )
    
    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")
    
    class Config:
        env_prefix = ""
        case_sensitive = False
    
    @validator('runtime_version_resolver', pre=True)
    def normalize_runtime_version_resolver(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v
    
    @validator('log_level')
    def validate_log_level(cls, v):
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return v
    
    @validator('log_file')
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v
