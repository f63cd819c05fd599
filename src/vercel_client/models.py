from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VercelModel(BaseModel):
    """
    Base for response models.
    Vercel keys are camelCase; fields are snake_case with wire aliases and can
    be populated by either name. Unknown keys are dropped.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RequestModel(BaseModel):
    """
    Base for request bodies.
    Optional fields are None when absent and are left out of the payload;
    an omitted field is left unchanged remotely.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value == "":
        return None
    return value


class EnvType(str, Enum):
    PLAIN = "plain"
    SECRET = "secret"
    ENCRYPTED = "encrypted"
    SENSITIVE = "sensitive"
    SYSTEM = "system"


def _env_type_value(value: Any) -> Any:
    return value.value if isinstance(value, EnvType) else value


# --- Error envelope ---


class ErrorContent(VercelModel):
    code: str
    message: str = ""


class ErrorResponse(VercelModel):
    error: ErrorContent


# --- Response Models ---


class Domain(VercelModel):
    domain: str
    redirect: Optional[str] = None


class RepositoryLink(VercelModel):
    type: str = ""
    repo: str = ""
    org: str = ""


class Project(VercelModel):
    id: str = ""
    name: str = ""
    framework: Optional[str] = ""
    root_directory: Optional[str] = Field(default="", alias="rootDirectory")
    node_version: str = Field(default="", alias="nodeVersion")
    account_id: str = Field(default="", alias="accountId")
    updated_at: int = Field(default=0, alias="updatedAt")
    created_at: int = Field(default=0, alias="createdAt")
    aliases: List[Domain] = Field(default_factory=list, alias="alias")
    link: Optional[RepositoryLink] = None
    build_command: Optional[str] = Field(default="", alias="buildCommand")
    output_directory: Optional[str] = Field(default="", alias="outputDirectory")
    command_for_ignoring_build_step: Optional[str] = Field(
        default="", alias="commandForIgnoringBuildStep"
    )


class ProjectEnv(VercelModel):
    id: str = ""
    type: str
    key: str
    value: str = ""
    target: List[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def env_type_value(cls, value: Any) -> Any:
        return _env_type_value(value)


class GetProjectEnvsResponse(VercelModel):
    envs: List[ProjectEnv] = Field(default_factory=list)


# --- Input Models ---


class CreateProjectOptions(BaseModel):
    """Caller-facing input for ProjectApi.create_project."""

    name: str
    framework: str = ""
    repository_type: str = ""  # e.g. "github"
    repository_name: str = ""  # "org/repo"
    root_directory: str = ""
    build_command: str = ""
    output_directory: str = ""
    command_for_ignoring_build_step: str = ""

    model_config = ConfigDict(extra="forbid")


# --- Request Bodies ---


class GitRepositoryRequest(RequestModel):
    type: str
    repo: str


class CreateProjectRequest(RequestModel):
    name: str
    framework: Optional[str] = None
    git_repository: Optional[GitRepositoryRequest] = Field(
        default=None, alias="gitRepository"
    )
    root_directory: Optional[str] = Field(default=None, alias="rootDirectory")
    build_command: Optional[str] = Field(default=None, alias="buildCommand")
    output_directory: Optional[str] = Field(default=None, alias="outputDirectory")
    command_for_ignoring_build_step: Optional[str] = Field(
        default=None, alias="commandForIgnoringBuildStep"
    )

    @field_validator(
        "framework",
        "root_directory",
        "build_command",
        "output_directory",
        "command_for_ignoring_build_step",
        mode="before",
    )
    @classmethod
    def blank_is_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @classmethod
    def from_options(cls, options: CreateProjectOptions) -> "CreateProjectRequest":
        git_repository = None
        if options.repository_type and options.repository_name:
            git_repository = GitRepositoryRequest(
                type=options.repository_type, repo=options.repository_name
            )
        return cls(
            name=options.name,
            framework=options.framework,
            git_repository=git_repository,
            root_directory=options.root_directory,
            build_command=options.build_command,
            output_directory=options.output_directory,
            command_for_ignoring_build_step=options.command_for_ignoring_build_step,
        )


class UpdateProjectRequest(RequestModel):
    framework: Optional[str] = None
    root_directory: Optional[str] = Field(default=None, alias="rootDirectory")
    build_command: Optional[str] = Field(default=None, alias="buildCommand")
    output_directory: Optional[str] = Field(default=None, alias="outputDirectory")
    command_for_ignoring_build_step: Optional[str] = Field(
        default=None, alias="commandForIgnoringBuildStep"
    )

    @field_validator(
        "framework",
        "root_directory",
        "build_command",
        "output_directory",
        "command_for_ignoring_build_step",
        mode="before",
    )
    @classmethod
    def blank_is_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @classmethod
    def from_project(cls, project: Project) -> "UpdateProjectRequest":
        return cls(
            framework=project.framework,
            root_directory=project.root_directory,
            build_command=project.build_command,
            output_directory=project.output_directory,
            command_for_ignoring_build_step=project.command_for_ignoring_build_step,
        )


class CreateProjectEnvRequest(RequestModel):
    type: str
    key: str
    value: str
    target: List[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def env_type_value(cls, value: Any) -> Any:
        return _env_type_value(value)

    @classmethod
    def from_env(cls, env: ProjectEnv) -> "CreateProjectEnvRequest":
        return cls(type=env.type, key=env.key, value=env.value, target=env.target)


class CreateDomainRequest(RequestModel):
    domain: str
    redirect: str = ""


__all__ = [
    "VercelModel",
    "RequestModel",
    "EnvType",
    "ErrorContent",
    "ErrorResponse",
    "Domain",
    "RepositoryLink",
    "Project",
    "ProjectEnv",
    "GetProjectEnvsResponse",
    "CreateProjectOptions",
    "GitRepositoryRequest",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "CreateProjectEnvRequest",
    "CreateDomainRequest",
]
