import json

from pydantic import BaseModel, ConfigDict


class LotConfig(BaseModel):
    model_config = ConfigDict(extra='forbid')

    fatal_exit_code: int = 3
    min_column_width: int = 10
    column_padding: int = 1
    echo_commands: bool = False

    @classmethod
    def from_json_file(cls, path):
        with open(path) as f:
            config = json.load(f)
        return cls(**config)
