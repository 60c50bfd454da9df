"""Base job class for snapshot copy operations."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import boto3
import uuid
from rds_snapshot_copy.utils.logger import setup_logger
from rds_snapshot_copy.utils.config import ConfigManager
from rds_snapshot_copy.utils.session import SessionManager


class BaseJob(ABC):
    """Base class for all snapshot copy jobs."""

    # Class-level configuration cache
    _config_manager: Optional[ConfigManager] = None

    def __init__(self, config_manager: Optional[ConfigManager] = None, job_name: str = None):
        """Initialize the job with configuration."""
        # Use provided config_manager or create/reuse cached one
        if config_manager is not None:
            self.config_manager = config_manager
        else:
            self.config_manager = self._get_or_create_config_manager()

        self.job_name = job_name or self.__class__.__name__.lower().replace('job', '')
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking

        self.logger = setup_logger(
            name=self.__class__.__module__,
            log_file=f"{self.job_name}.log",
            level=self.config_manager.get_logging_level(),
        )

    @classmethod
    def _get_or_create_config_manager(cls) -> ConfigManager:
        """Get or create a cached ConfigManager instance."""
        if cls._config_manager is None:
            cls._config_manager = ConfigManager()
        return cls._config_manager

    def log(self, message: str, level: str = "info") -> None:
        """Log with the job's correlation id prefixed."""
        getattr(self.logger, level)(f"[{self.correlation_id}] {message}")

    def create_aws_session(
        self, profile: Optional[str] = None, region: Optional[str] = None
    ) -> boto3.Session:
        """
        Create the AWS session every client of this job is built from.

        Explicit arguments win over configuration.
        """
        profile = profile or self.config_manager.get_aws_profile()
        region = region or self.config_manager.get_aws_region()

        self.log(f"Creating AWS session (profile={profile or 'default'}) in {region}")
        return SessionManager.get_session(profile=profile, region=region)

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """Execute the job with given parameters."""
        pass
