"""
Configuration for the Sanity binding.

Built once from the harness properties at init time and never modified.
"""

from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError
from .mutations import DOCUMENT_MUTATIONS, MutationType

# Harness property keys
PROJECT = "sanity.project"
DATASET = "sanity.dataset"
API_PROTOCOL = "sanity.api.protocol"
API_HOST = "sanity.api.host"
API_VERSION = "sanity.api.version"
API_AUTH_TOKEN = "sanity.api.auth_token"
READ_TYPE = "sanity.query.read"
MUTATION_VISIBILITY = "sanity.mutation.visibility"
INSERT_MUTATION = "sanity.mutation.insert"

DEFAULT_API_PROTOCOL = "https://"
DEFAULT_API_HOST = "api.sanity.io"
DEFAULT_API_VERSION = "vX"
DEFAULT_READ_TYPE = "guery"
DEFAULT_MUTATION_VISIBILITY = "sync"

_PROPERTY_FIELDS = {
    PROJECT: "project",
    DATASET: "dataset",
    API_PROTOCOL: "api_protocol",
    API_HOST: "api_host",
    API_VERSION: "api_version",
    API_AUTH_TOKEN: "api_auth_token",
    READ_TYPE: "read_type",
    MUTATION_VISIBILITY: "mutation_visibility",
    INSERT_MUTATION: "insert_mutation",
}


class SanityConfig(BaseModel):
    """
    Immutable connection and request settings.

    Example:
        >>> config = SanityConfig.from_properties({
        ...     "sanity.project": "abc123",
        ...     "sanity.dataset": "production",
        ... })
        >>> config.query_url
        'https://abc123.api.sanity.io/vX/query/production'
    """

    model_config = ConfigDict(frozen=True)

    project: str = ""
    dataset: str = ""
    api_protocol: str = DEFAULT_API_PROTOCOL
    api_host: str = Field(default=DEFAULT_API_HOST, min_length=1)
    api_version: str = Field(default=DEFAULT_API_VERSION, min_length=1)
    api_auth_token: str = Field(default="", repr=False)
    # Accepted for compatibility with existing workload files; not used
    # when building requests.
    read_type: str = DEFAULT_READ_TYPE
    mutation_visibility: Literal["sync", "async", "deferred"] = DEFAULT_MUTATION_VISIBILITY
    insert_mutation: MutationType = MutationType.CREATE

    @field_validator("insert_mutation")
    @classmethod
    def _insert_creates_document(cls, value: MutationType) -> MutationType:
        if value not in DOCUMENT_MUTATIONS:
            raise ValueError(
                f"insert mutation must be one of "
                f"{sorted(m.wire_name for m in DOCUMENT_MUTATIONS)}, got '{value.wire_name}'"
            )
        return value

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "SanityConfig":
        """
        Build a configuration from harness properties.

        Unknown keys are ignored; missing keys take their defaults.

        Args:
            properties: Harness property mapping

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a property value is invalid
        """
        values = {
            field_name: properties[key]
            for key, field_name in _PROPERTY_FIELDS.items()
            if key in properties
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Sanity configuration: {e}") from e

    @property
    def base_url(self) -> str:
        """Scheme and host, with the project as a subdomain when set."""
        url = self.api_protocol
        if self.project:
            url += f"{self.project}."
        return url + self.api_host

    @property
    def query_url(self) -> str:
        return f"{self.base_url}/{self.api_version}/query/{self.dataset}"

    @property
    def mutate_url(self) -> str:
        return f"{self.base_url}/{self.api_version}/mutate/{self.dataset}"

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_auth_token}",
        }
