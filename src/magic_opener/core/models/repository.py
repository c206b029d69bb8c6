"""Git remote and repository models."""

from pydantic import BaseModel, ConfigDict, field_validator

from magic_opener.parsing.validators import is_valid_hostname, is_valid_name, is_valid_org


class RemoteDescriptor(BaseModel):
    """Host, organization and repository name decoded from a remote URL."""

    model_config = ConfigDict(frozen=True)

    host: str
    org: str
    name: str

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        if not is_valid_hostname(value):
            raise ValueError(f"invalid hostname: {value!r}")
        return value

    @field_validator("org")
    @classmethod
    def _check_org(cls, value: str) -> str:
        if not is_valid_org(value):
            raise ValueError(f"invalid organization: {value!r}")
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError(f"invalid repository name: {value!r}")
        return value

    def as_tuple(self) -> tuple[str, str, str]:
        return self.host, self.org, self.name


class GitRepository(BaseModel):
    """A repository on a hosting service, optionally backed by a local checkout.

    `local_path` is set when the repository was opened from disk; branch
    and commit metadata can only be queried in that case.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    org: str
    name: str
    local_path: str | None = None

    @classmethod
    def from_descriptor(
        cls, descriptor: RemoteDescriptor, local_path: str | None = None
    ) -> "GitRepository":
        return cls(
            host=descriptor.host,
            org=descriptor.org,
            name=descriptor.name,
            local_path=local_path,
        )
