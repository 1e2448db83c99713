from .config_capture import CaptureConfig, read_capture_config
from .config_streams import StreamDescriptor, read_stream_descriptors, parse_stream_descriptors
from .env import Env, get_env
