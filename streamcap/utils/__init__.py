from .error import error_dict, stacktrace
from .errors import HttpError, HttpRequestError, PathResolveError, ConfigError
from .http_async import AsyncHttpClient, ReturnType
from .logger import log
from .path import resolve_path, resolve_output_prefix, part_file_path, dirpath
from .url import resolve_url, is_playlist_url
