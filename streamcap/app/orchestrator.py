import asyncio

from ..capture import PlaylistFetcher, StreamCapture
from ..config import CaptureConfig, StreamDescriptor
from ..utils import AsyncHttpClient, log, error_dict, stacktrace, is_playlist_url

TASK_PREFIX = "capture"


def is_playlist(desc: StreamDescriptor) -> bool:
    return desc.is_playlist or is_playlist_url(desc.url)


class Orchestrator:
    """Runs one capture task per descriptor and waits for all of them.

    Playlist tasks finish after one pass; raw stream tasks only finish when cancelled.
    """

    def __init__(
        self,
        descriptors: list[StreamDescriptor],
        conf: CaptureConfig,
        http: AsyncHttpClient | None = None,
    ):
        self.descriptors = descriptors
        self.__conf = conf
        self.__http = http
        self.__captures: list[StreamCapture] = []
        self.__cancelled = False

    async def run(self):
        log.info("Start Orchestrator", {"streams": len(self.descriptors)})
        tasks = [
            asyncio.create_task(self.__run_one(desc), name=f"{TASK_PREFIX}:{idx}:{desc.output_file_prefix}")
            for idx, desc in enumerate(self.descriptors)
        ]
        await asyncio.gather(*tasks)
        log.info("Finish Orchestrator", {"streams": len(self.descriptors)})

    async def __run_one(self, desc: StreamDescriptor):
        try:
            if is_playlist(desc):
                fetcher = PlaylistFetcher(self.__conf, self.__http)
                await fetcher.fetch(desc.url, desc.output_file_prefix)
                return

            capture = StreamCapture(desc, self.__conf, self.__http)
            self.__captures.append(capture)
            if self.__cancelled:
                capture.cancel()
            await capture.run()
        except Exception as ex:
            attr = error_dict(ex)
            attr["url"] = desc.url
            attr["prefix"] = desc.output_file_prefix
            attr["stacktrace"] = stacktrace()
            log.error("Capture task failed", attr)

    def cancel(self):
        self.__cancelled = True
        for capture in self.__captures:
            capture.cancel()
