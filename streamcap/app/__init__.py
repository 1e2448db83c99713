from .orchestrator import Orchestrator, is_playlist
from .runner import CaptureRunner
