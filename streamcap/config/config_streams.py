import json

import yaml
from pydantic import BaseModel, ConfigDict, Field, constr

from ..utils import ConfigError

YAML_EXTS = (".yaml", ".yml")


class StreamDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: constr(min_length=1)
    output_file_prefix: constr(min_length=1) = Field(alias="outputFilePrefix")
    is_playlist: bool = Field(alias="isPlaylist", default=False)


def read_stream_descriptors(config_path: str) -> list[StreamDescriptor]:
    try:
        with open(config_path, "r") as file:
            text = file.read()
    except OSError as ex:
        raise ConfigError(f"Failed to read stream config: {ex}", config_path) from ex
    return parse_stream_descriptors(text, is_yaml=config_path.endswith(YAML_EXTS), config_path=config_path)


def parse_stream_descriptors(text: str, is_yaml: bool = False, config_path: str | None = None) -> list[StreamDescriptor]:
    try:
        if is_yaml:
            data = yaml.load(text, Loader=yaml.SafeLoader)
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as ex:
        raise ConfigError(f"Failed to parse stream config: {ex}", config_path) from ex

    if not isinstance(data, list):
        raise ConfigError("Stream config must be a list", config_path)
    return [StreamDescriptor.model_validate(d) for d in data]
