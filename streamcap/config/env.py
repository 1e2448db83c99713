import os

from dotenv import load_dotenv
from pydantic import BaseModel, constr

from .config_capture import CaptureConfig, read_capture_config

DEFAULT_CONFIG_PATH = "streams.json"


class Env(BaseModel):
    env: constr(min_length=1)
    log_level: constr(min_length=1)
    config_path: constr(min_length=1)
    out_dir_path: constr(min_length=1) | None
    capture: CaptureConfig


def get_env() -> Env:
    env = os.getenv("PY_ENV") or None
    if env is None:
        env = "dev"
    if env == "dev":
        load_dotenv(os.path.join(os.getcwd(), ".env"))

    return Env(
        env=env,
        log_level=os.getenv("LOG_LEVEL") or "INFO",
        config_path=os.getenv("CONFIG_PATH") or DEFAULT_CONFIG_PATH,
        out_dir_path=os.getenv("OUT_DIR_PATH") or None,
        capture=read_capture_config(),
    )
