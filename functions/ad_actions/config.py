import os
from dataclasses import dataclass
from typing import Optional


class Config:
    """Configuration management for the AD action group handlers."""

    # Command execution (SSM Run Command)
    AD_MANAGEMENT_INSTANCE_ID: str = os.getenv("AD_MANAGEMENT_INSTANCE_ID", "")
    COMMAND_WAIT_SECONDS: int = int(os.getenv("COMMAND_WAIT_SECONDS", "10"))
    COMMAND_POLL_INTERVAL_SECONDS: int = int(
        os.getenv("COMMAND_POLL_INTERVAL_SECONDS", "1")
    )

    # Directory Service Data
    DIRECTORY_ID: str = os.getenv("DIRECTORY_ID", "")

    # AWS client configuration
    AWS_REGION: Optional[str] = os.getenv("AWS_REGION")

    @classmethod
    def get_management_instance_id(cls) -> str:
        """Get the id of the EC2 instance that runs the AD documents."""
        return cls.AD_MANAGEMENT_INSTANCE_ID

    @classmethod
    def get_directory_id(cls) -> str:
        """Get the managed directory id."""
        return cls.DIRECTORY_ID

    @classmethod
    def get_command_wait_seconds(cls) -> int:
        """Get the command completion wait budget in seconds."""
        return cls.COMMAND_WAIT_SECONDS

    @classmethod
    def get_command_poll_interval_seconds(cls) -> int:
        """Get the delay between command status polls in seconds."""
        return cls.COMMAND_POLL_INTERVAL_SECONDS

    @classmethod
    def get_aws_region(cls) -> Optional[str]:
        """Get the AWS region, or None to let boto3 resolve it."""
        return cls.AWS_REGION


@dataclass
class CommandAdapterConfig:
    """Settings for the Run Command adapter."""

    management_instance_id: str
    wait_seconds: int = 10
    poll_interval_seconds: int = 1

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.management_instance_id:
            raise ValueError("management_instance_id cannot be empty")
        if self.wait_seconds <= 0:
            raise ValueError("wait_seconds must be positive")
        if self.poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be positive")

    @property
    def max_attempts(self) -> int:
        """Number of status polls that fit in the wait budget."""
        return max(1, self.wait_seconds // self.poll_interval_seconds)

    @classmethod
    def from_env(cls) -> "CommandAdapterConfig":
        return cls(
            management_instance_id=Config.get_management_instance_id(),
            wait_seconds=Config.get_command_wait_seconds(),
            poll_interval_seconds=Config.get_command_poll_interval_seconds(),
        )


@dataclass
class DirectoryAdapterConfig:
    """Settings for the Directory Service Data adapter."""

    directory_id: str

    def __post_init__(self):
        if not self.directory_id:
            raise ValueError("directory_id cannot be empty")

    @classmethod
    def from_env(cls) -> "DirectoryAdapterConfig":
        return cls(directory_id=Config.get_directory_id())
