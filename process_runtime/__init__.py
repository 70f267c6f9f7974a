"""Process runtime detection for OpenTelemetry resources"""
from config import ResolverMode
from .detector import ProcessRuntimeDetector, parse_description
from .resolvers import (
    LegacyRegistryResolver,
    StandardResolver,
    VersionResolver,
    check_for_45_plus_version,
    read_release_key,
    read_release_version,
    select_resolver,
)
from .runtime_platform import InterpreterPlatform, RuntimePlatform, StaticPlatform
from .semantic_conventions import UNKNOWN, ProcessRuntimeAttributes

__all__ = [
    'ProcessRuntimeDetector',
    'parse_description',
    'VersionResolver',
    'StandardResolver',
    'LegacyRegistryResolver',
    'ResolverMode',
    'check_for_45_plus_version',
    'read_release_key',
    'read_release_version',
    'select_resolver',
    'RuntimePlatform',
    'InterpreterPlatform',
    'StaticPlatform',
    'ProcessRuntimeAttributes',
    'UNKNOWN',
]
