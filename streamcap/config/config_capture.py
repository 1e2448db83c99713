import os

from pydantic import BaseModel, conint, confloat

GIB = 1024 * 1024 * 1024

DEFAULT_RECONNECT_DELAY_SEC = 10
DEFAULT_IDLE_READ_DELAY_SEC = 1
DEFAULT_MAX_PART_SIZE = 4 * GIB
DEFAULT_READ_CHUNK_SIZE = 4096


class CaptureConfig(BaseModel):
    reconnect_delay_sec: confloat(ge=0) = DEFAULT_RECONNECT_DELAY_SEC
    idle_read_delay_sec: confloat(ge=0) = DEFAULT_IDLE_READ_DELAY_SEC
    max_part_size: conint(ge=1) = DEFAULT_MAX_PART_SIZE
    read_chunk_size: conint(ge=1) = DEFAULT_READ_CHUNK_SIZE
    connect_timeout_sec: confloat(gt=0) | None = None
    read_timeout_sec: confloat(gt=0) | None = None
    seg_timeout_sec: confloat(gt=0) | None = None


def read_capture_config() -> CaptureConfig:
    return CaptureConfig(
        reconnect_delay_sec=os.getenv("RECONNECT_DELAY_SEC") or DEFAULT_RECONNECT_DELAY_SEC,  # type: ignore
        idle_read_delay_sec=os.getenv("IDLE_READ_DELAY_SEC") or DEFAULT_IDLE_READ_DELAY_SEC,  # type: ignore
        max_part_size=os.getenv("MAX_PART_SIZE") or DEFAULT_MAX_PART_SIZE,  # type: ignore
        read_chunk_size=os.getenv("READ_CHUNK_SIZE") or DEFAULT_READ_CHUNK_SIZE,  # type: ignore
        connect_timeout_sec=os.getenv("CONNECT_TIMEOUT_SEC") or None,  # type: ignore
        read_timeout_sec=os.getenv("READ_TIMEOUT_SEC") or None,  # type: ignore
        seg_timeout_sec=os.getenv("SEG_TIMEOUT_SEC") or None,  # type: ignore
    )
