from ..config import CaptureConfig
from ..utils import AsyncHttpClient, log, error_dict, part_file_path, resolve_url


def parse_playlist(text: str, base_url: str) -> list[str]:
    """Returns the segment urls of a playlist in document order, resolved against ``base_url``."""
    result = []
    for line in text.splitlines():
        line = line.strip()
        if line == "" or line.startswith("#"):
            continue
        result.append(resolve_url(base_url, line))
    return result


class PlaylistFetcher:
    def __init__(self, conf: CaptureConfig, http: AsyncHttpClient | None = None):
        if http is None:
            http = AsyncHttpClient(
                timeout_sec=conf.seg_timeout_sec,
                connect_timeout_sec=conf.connect_timeout_sec,
                read_timeout_sec=conf.read_timeout_sec,
                chunk_size=conf.read_chunk_size,
                print_error=False,
            )
        self.__http = http

    async def fetch(self, playlist_url: str, output_prefix: str) -> int:
        attr = {"url": playlist_url, "prefix": output_prefix}
        log.info("Fetch Playlist", attr)
        try:
            text = await self.__http.get_text(playlist_url, attr=attr)
        except Exception as ex:
            log.error("Failed to fetch playlist", attr | error_dict(ex))
            return 0

        seg_urls = parse_playlist(text, playlist_url)
        success_cnt = 0
        for num, seg_url in enumerate(seg_urls, start=1):
            if await self.__download_segment(seg_url, part_file_path(output_prefix, num), num):
                success_cnt += 1

        log.info("Finish Playlist", attr | {"segments": len(seg_urls), "success": success_cnt})
        return success_cnt

    async def __download_segment(self, seg_url: str, file_path: str, num: int) -> bool:
        attr = {"url": seg_url, "path": file_path, "part": num}
        log.debug("Download Segment", attr)
        try:
            size = await self.__http.request_file(seg_url, file_path, attr=attr)
        except Exception as ex:
            log.error("Failed to download segment", attr | error_dict(ex))
            return False
        log.debug("Downloaded Segment", attr | {"size": size})
        return True
