import asyncio
from typing import Any

import aiofiles
from aiofiles import os as aos
from aiofiles.threadpool.binary import AsyncBufferedIOBase

from ..utils import log, error_dict, part_file_path, dirpath


class CaptureControl:
    def __init__(self):
        self.abort_flag = False
        self.__abort_event = asyncio.Event()

    def cancel(self):
        log.info("Cancel Request")
        self.abort_flag = True
        self.__abort_event.set()

    async def sleep(self, sec: float):
        """Sleeps for ``sec`` seconds, returning early once cancelled."""
        if self.abort_flag:
            return
        try:
            await asyncio.wait_for(self.__abort_event.wait(), timeout=sec)
        except TimeoutError:
            pass


class CaptureState:
    """Part file bookkeeping of one raw stream.

    ``total_bytes`` counts the bytes written to the part file numbered ``part_num``.
    Both change together in ``open_next_part``, and a chunk is split at
    ``max_part_size`` so a part file never grows beyond it.
    """

    def __init__(self, prefix: str, max_part_size: int, attr: dict[str, Any] | None = None):
        self.prefix = prefix
        self.total_bytes = 0
        self.part_num = 0
        self.out_file: AsyncBufferedIOBase | None = None
        self.__max_part_size = max_part_size
        self.__attr = attr or {}

    def current_path(self) -> str | None:
        if self.part_num == 0:
            return None
        return part_file_path(self.prefix, self.part_num)

    async def open_next_part(self):
        await self.close()
        self.part_num += 1
        self.total_bytes = 0

        path = part_file_path(self.prefix, self.part_num)
        dir_path = dirpath(path)
        if dir_path != "":
            await aos.makedirs(dir_path, exist_ok=True)
        self.out_file = await aiofiles.open(path, "wb")
        log.debug("Open Part File", self.to_dict({"path": path}))

    async def rotate(self):
        log.info("Rotate Part File", self.to_dict())
        await self.open_next_part()

    async def write(self, data: bytes):
        if self.out_file is None:
            raise ValueError("No part file is open")

        offset = 0
        while offset < len(data):
            if self.total_bytes >= self.__max_part_size:
                await self.rotate()
            size = min(len(data) - offset, self.__max_part_size - self.total_bytes)
            await self.__write_file(data[offset:offset + size])
            self.total_bytes += size
            offset += size

    async def __write_file(self, data: bytes):
        if self.out_file is None:
            return
        try:
            await self.out_file.write(data)
        except Exception as ex:
            attr = self.to_dict(error_dict(ex))
            attr["size"] = len(data)
            log.error("Failed to write to part file", attr)

    async def close(self):
        if self.out_file is None:
            return
        out_file = self.out_file
        self.out_file = None
        try:
            await out_file.close()
        except Exception as ex:
            log.error("Failed to close part file", self.to_dict(error_dict(ex)))

    def to_dict(self, extra: dict | None = None) -> dict[str, Any]:
        result = dict(self.__attr)
        result["part"] = self.part_num
        result["bytes"] = self.total_bytes
        if extra is not None:
            for key, value in extra.items():
                result[key] = value
        return result
