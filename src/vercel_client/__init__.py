"""vercel_client package exports."""

from .auth import VercelAuth
from .client import (
    VercelAPIError,
    VercelClient,
    VercelClientError,
    VercelModelValidationError,
    VercelParseError,
    create_client_from_env,
)
from .core.config import MissingTokenError, VercelConfig, load_env_config
from .core.logging import setup_logging
from .models import (
    CreateDomainRequest,
    CreateProjectEnvRequest,
    CreateProjectOptions,
    CreateProjectRequest,
    Domain,
    EnvType,
    ErrorContent,
    Project,
    ProjectEnv,
    RepositoryLink,
    UpdateProjectRequest,
)
from .projects import ProjectApi

__all__ = [
    # Client
    "VercelClient",
    "VercelAuth",
    "ProjectApi",
    "create_client_from_env",
    # Config
    "VercelConfig",
    "load_env_config",
    "setup_logging",
    # Exceptions
    "MissingTokenError",
    "VercelClientError",
    "VercelAPIError",
    "VercelParseError",
    "VercelModelValidationError",
    # Models
    "Project",
    "RepositoryLink",
    "ProjectEnv",
    "EnvType",
    "Domain",
    "ErrorContent",
    "CreateProjectOptions",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "CreateProjectEnvRequest",
    "CreateDomainRequest",
]
