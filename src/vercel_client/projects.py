from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence
from urllib.parse import quote

from .models import (
    CreateDomainRequest,
    CreateProjectEnvRequest,
    CreateProjectOptions,
    CreateProjectRequest,
    Domain,
    EnvType,
    GetProjectEnvsResponse,
    Project,
    ProjectEnv,
    UpdateProjectRequest,
)

if TYPE_CHECKING:
    from .client import VercelClient


def _seg(value: str) -> str:
    """Percent-encode a single path segment (project name/id, env id)."""
    return quote(str(value), safe="")


def _project_path(version: str, id_or_name: str) -> str:
    return f"/{version}/projects/{_seg(id_or_name)}"


class ProjectApi:
    """
    Project, environment variable and domain alias operations.

    Every method is a single round trip. Create/update bodies only carry the
    fields the caller supplied with a non-empty value.
    """

    def __init__(self, client: "VercelClient"):
        self._client = client

    # --- Projects ---

    async def create_project(self, options: CreateProjectOptions) -> Project:
        body = CreateProjectRequest.from_options(options)
        return await self._client.request_model(
            Project,
            "POST",
            "/v6/projects",
            json=body.to_payload(),
            expected_status=200,
            operation="create_project",
        )

    async def get_project(self, name: str) -> Project:
        return await self._client.request_model(
            Project,
            "GET",
            _project_path("v1", name),
            expected_status=200,
            operation="get_project",
        )

    async def update_project(self, name: str, project: Project) -> Project:
        """
        PATCH the project with the settings present on `project`.
        Empty framework/build_command/output_directory/root_directory are left
        out of the body so the remote values stay untouched.
        """
        body = UpdateProjectRequest.from_project(project)
        return await self._client.request_model(
            Project,
            "PATCH",
            _project_path("v1", name),
            json=body.to_payload(),
            expected_status=200,
            operation="update_project",
        )

    async def delete_project(self, name: str) -> None:
        await self._client.request(
            "DELETE",
            _project_path("v1", name),
            expected_status=204,
            operation="delete_project",
        )

    # --- Environment variables ---

    async def create_project_env(
        self,
        project_id: str,
        env_type: EnvType | str,
        key: str,
        value: str,
        target: Sequence[str],
    ) -> ProjectEnv:
        if isinstance(target, str):
            raise TypeError("target must be a list of environments, not a str")
        body = CreateProjectEnvRequest(
            type=env_type, key=key, value=value, target=list(target)
        )
        return await self._client.request_model(
            ProjectEnv,
            "POST",
            f"{_project_path('v7', project_id)}/env",
            json=body.to_payload(),
            expected_status=200,
            operation="create_project_env",
        )

    async def get_project_envs(
        self, project_id: str, decrypt: bool = False
    ) -> List[ProjectEnv]:
        response = await self._client.request_model(
            GetProjectEnvsResponse,
            "GET",
            f"{_project_path('v7', project_id)}/env",
            params={"decrypt": "true" if decrypt else "false"},
            expected_status=200,
            operation="get_project_envs",
        )
        return response.envs

    async def edit_project_env(self, project_id: str, env: ProjectEnv) -> ProjectEnv:
        body = CreateProjectEnvRequest.from_env(env)
        return await self._client.request_model(
            ProjectEnv,
            "PATCH",
            f"{_project_path('v7', project_id)}/env/{_seg(env.id)}",
            json=body.to_payload(),
            expected_status=200,
            operation="edit_project_env",
        )

    async def delete_project_env(self, project_id: str, env_id: str) -> None:
        # the env endpoint answers 200, unlike project deletion (204)
        await self._client.request(
            "DELETE",
            f"{_project_path('v7', project_id)}/env/{_seg(env_id)}",
            expected_status=200,
            operation="delete_project_env",
        )

    # --- Domain aliases ---

    async def add_domain(
        self, project_id: str, domain: str, redirect: str = ""
    ) -> List[Domain]:
        body = CreateDomainRequest(domain=domain, redirect=redirect)
        return await self._client.request_model_list(
            Domain,
            "POST",
            f"{_project_path('v1', project_id)}/alias",
            json=body.to_payload(),
            expected_status=200,
            operation="add_domain",
        )

    async def update_domain(
        self, project_id: str, domain: str, redirect: str = ""
    ) -> List[Domain]:
        body = CreateDomainRequest(domain=domain, redirect=redirect)
        return await self._client.request_model_list(
            Domain,
            "PATCH",
            f"{_project_path('v1', project_id)}/alias",
            json=body.to_payload(),
            expected_status=200,
            operation="update_domain",
        )

    async def delete_domain(self, project_id: str, domain: str) -> List[Domain]:
        return await self._client.request_model_list(
            Domain,
            "DELETE",
            f"{_project_path('v1', project_id)}/alias",
            params={"domain": domain},
            expected_status=200,
            operation="delete_domain",
        )


__all__ = ["ProjectApi"]
