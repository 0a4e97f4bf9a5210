"""Configuration model exports.

    from jenkins_info.config.models import JenkinsConfig, ObservabilityConfig
"""

from jenkins_info.config.models.jenkins import (
    JenkinsConfig,
    JenkinsConnectionConfig,
    JenkinsInstanceConfig,
)
from jenkins_info.config.models.observability import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    ObservabilityConfig,
)

__all__ = [
    "JenkinsConfig",
    "JenkinsConnectionConfig",
    "JenkinsInstanceConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ObservabilityConfig",
]
