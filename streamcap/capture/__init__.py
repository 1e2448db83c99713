from .capture_types import CaptureControl, CaptureState
from .playlist_fetcher import PlaylistFetcher, parse_playlist
from .stream_capture import StreamCapture
