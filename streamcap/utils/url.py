from urllib.parse import urljoin, urlparse

PLAYLIST_EXTS = (".m3u", ".m3u8")


def resolve_url(base_url: str, ref: str) -> str:
    return urljoin(base_url, ref)


def get_path(url: str) -> str:
    return urlparse(url).path


def is_playlist_url(url: str) -> bool:
    return url.endswith(PLAYLIST_EXTS) or get_path(url).endswith(PLAYLIST_EXTS)
