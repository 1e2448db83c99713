from aiohttp import StreamReader

from .capture_types import CaptureControl, CaptureState
from ..config import CaptureConfig, StreamDescriptor
from ..utils import AsyncHttpClient, log, error_dict


class StreamCapture:
    """Captures one raw HTTP stream into rotating part files until cancelled.

    Each cycle connects, opens the next part file and reads the body in chunks.
    An empty read waits ``idle_read_delay_sec`` and reads again on the same
    connection; a read error or a failed connect leads to exactly one
    ``reconnect_delay_sec`` sleep before the next connect. Part numbers keep
    counting across reconnects.
    """

    def __init__(
        self,
        desc: StreamDescriptor,
        conf: CaptureConfig,
        http: AsyncHttpClient | None = None,
    ):
        self.desc = desc
        self.__conf = conf
        if http is None:
            http = AsyncHttpClient(
                connect_timeout_sec=conf.connect_timeout_sec,
                read_timeout_sec=conf.read_timeout_sec,
                chunk_size=conf.read_chunk_size,
                print_error=False,
            )
        self.__http = http
        self.__ctrl = CaptureControl()
        self.state = CaptureState(
            prefix=desc.output_file_prefix,
            max_part_size=conf.max_part_size,
            attr=self.to_dict(),
        )

    def cancel(self):
        self.__ctrl.cancel()

    @property
    def is_cancelled(self) -> bool:
        return self.__ctrl.abort_flag

    async def run(self):
        log.info("Start Capture", self.to_dict())
        while not self.__ctrl.abort_flag:
            try:
                async with self.__http.open_stream(self.desc.url) as reader:
                    try:
                        await self.state.open_next_part()
                        await self.__stream(reader)
                    finally:
                        await self.state.close()
            except Exception as ex:
                log.error("Failed to capture stream", self.state.to_dict(error_dict(ex)))

            await self.__ctrl.sleep(self.__conf.reconnect_delay_sec)
        log.info("Finish Capture", self.state.to_dict())

    async def __stream(self, reader: StreamReader):
        while not self.__ctrl.abort_flag:
            try:
                chunk = await reader.read(self.__conf.read_chunk_size)
            except Exception as ex:
                log.error("Failed to read from stream", self.state.to_dict(error_dict(ex)))
                return

            if not chunk:
                await self.__ctrl.sleep(self.__conf.idle_read_delay_sec)
                continue

            await self.state.write(chunk)

    def to_dict(self) -> dict[str, str]:
        return {
            "url": self.desc.url,
            "prefix": self.desc.output_file_prefix,
        }
