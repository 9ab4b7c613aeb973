from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Optional, List, Tuple, Union
import yaml, pathlib

DEFAULT_GRAPHQL_ENDPOINT = "localhost:3000/graphql"
CONFIG_FILE_NAME = "gql_api_tester.yml"

class Environment(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Environment name, e.g. production")
    graphql_endpoint: Optional[str] = Field(None, description="Endpoint override for this environment")

class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    environments: List[Environment] = Field(...)
    # Takes precedence over default_graphql_endpoint when that environment has an endpoint.
    default_environment: Optional[str] = None
    default_graphql_endpoint: Optional[str] = None

    @classmethod
    def default(cls) -> "Config":
        return default_config()

    def environment(self, name: str) -> Optional[Environment]:
        return environment_by_name(self, name)

    def graphql_endpoint(self, env: Optional[str] = None) -> str:
        return resolve_endpoint(self, env)

    def to_yaml(self) -> str:
        return to_yaml(self)

def default_config() -> Config:
    return Config(
        environments=[
            Environment(name="test"),
            Environment(name="development"),
            Environment(name="production"),
        ],
        default_environment="development",
        default_graphql_endpoint=DEFAULT_GRAPHQL_ENDPOINT,
    )

def environment_by_name(config: Config, name: str) -> Optional[Environment]:
    """First environment whose name is exactly `name`, or None."""
    for env in config.environments:
        if env.name == name:
            return env
    return None

def _endpoint_of(config: Config, name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    env = environment_by_name(config, name)
    if env is None:
        return None
    return env.graphql_endpoint

def resolve_endpoint(config: Config, requested_env: Optional[str] = None) -> str:
    """
    Pick the endpoint for a run. First hit wins:
      1. the requested environment's endpoint
      2. the default environment's endpoint
      3. default_graphql_endpoint
      4. DEFAULT_GRAPHQL_ENDPOINT
    An environment that exists without an endpoint falls through to the next step.
    """
    for candidate in (
        _endpoint_of(config, requested_env),
        _endpoint_of(config, config.default_environment),
        config.default_graphql_endpoint,
    ):
        if candidate is not None:
            return candidate
    return DEFAULT_GRAPHQL_ENDPOINT

def to_yaml(config: Config) -> str:
    try:
        return yaml.safe_dump(config.model_dump(), sort_keys=False)
    except yaml.YAMLError as e:
        raise RuntimeError(f"Could not convert loaded configuration to yaml: {e}") from e

def from_yaml(text: str) -> Config:
    return Config.model_validate(yaml.safe_load(text))

def load_or_default(path: Union[str, pathlib.Path] = CONFIG_FILE_NAME) -> Tuple[Config, Optional[str]]:
    """
    Load the config file, or fall back to the default config.
    Returns (config, warning). The warning is never printed here; commands with
    strict output formats decide whether to show it.
    """
    p = pathlib.Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        warning = (
            "No config file exists in project; loading default.\n"
            f"To add a config either create {CONFIG_FILE_NAME} in the project root or run:\n"
            "  $ gql_api_tester config init"
        )
        return default_config(), warning
    except (OSError, UnicodeDecodeError) as e:
        return default_config(), f"Could not read config file for reason: {e}\nLoading default config"

    try:
        config = from_yaml(text)
    except (yaml.YAMLError, ValidationError) as e:
        return default_config(), f"Error in format of config file: {e}"

    return config, None

def write_default_config(path: Union[str, pathlib.Path] = CONFIG_FILE_NAME, force: bool = False) -> pathlib.Path:
    p = pathlib.Path(path)
    if p.exists() and not force:
        raise FileExistsError(f"Config file already exists: {p}")
    p.write_text(to_yaml(default_config()), encoding="utf-8")
    return p
