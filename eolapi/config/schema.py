"""Configuration schema."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from eolapi import __version__


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiConfig(Base):
    """Remote EOL API endpoint settings."""

    base_url: str = "http://eol.org/api"
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = f"eolapi/{__version__}"


class SearchConfig(Base):
    """Paginated search settings."""

    sink_capacity: int = Field(default=5, ge=1)
    cache_ttl: int = Field(default=0, ge=0)


class Config(Base):
    """Root configuration."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
