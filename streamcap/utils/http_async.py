import asyncio
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, AsyncIterator

import aiofiles
import aiohttp
from aiofiles import os as aos
from aiohttp import ClientTimeout, StreamReader

from .error import error_dict
from .errors import HttpRequestError
from .logger import log
from .path import dirpath

DEFAULT_CHUNK_SIZE = 4096


class ReturnType(Enum):
    TEXT = "text"
    RAW = "raw"


class AsyncHttpClient:
    def __init__(
        self,
        timeout_sec: float | None = None,
        connect_timeout_sec: float | None = None,
        read_timeout_sec: float | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        print_error: bool = True,
    ):
        self.timeout = ClientTimeout(total=timeout_sec, connect=connect_timeout_sec, sock_read=read_timeout_sec)
        self.chunk_size = chunk_size
        self.print_error = print_error

    async def get_text(self, url: str, attr: dict | None = None, print_error: bool | None = None) -> str:
        return await self.fetch(url=url, return_type=ReturnType.TEXT, attr=attr, print_error=print_error)

    async def get_bytes(self, url: str, attr: dict | None = None, print_error: bool | None = None) -> bytes:
        return await self.fetch(url=url, return_type=ReturnType.RAW, attr=attr, print_error=print_error)

    async def fetch(
        self,
        url: str,
        return_type: ReturnType,
        attr: dict | None = None,
        print_error: bool | None = None,
    ) -> Any:
        req_print_error = print_error if print_error is not None else self.print_error
        start = asyncio.get_event_loop().time()
        try:
            return await request(url=url, return_type=return_type, timeout=self.timeout)
        except Exception as ex:
            if req_print_error:
                log.error("Failed to request", get_err_dict(url, start, ex, attr))
            raise

    async def request_file(self, url: str, file_path: str, attr: dict | None = None) -> int:
        """Streams the response body of ``url`` into ``file_path`` and returns the written size.

        The file is created only after the response status is known to be successful.
        """
        start = asyncio.get_event_loop().time()
        size = 0
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url) as res:
                    if res.status >= 400:
                        raise HttpRequestError.from_response("Failed to request file", res)
                    dir_path = dirpath(file_path)
                    if dir_path != "":
                        await aos.makedirs(dir_path, exist_ok=True)
                    async with aiofiles.open(file_path, "wb") as f:
                        while True:
                            chunk = await res.content.read(self.chunk_size)
                            if not chunk:
                                break
                            await f.write(chunk)
                            size += len(chunk)
            return size
        except Exception as ex:
            if self.print_error:
                log.error("Failed to request file", get_err_dict(url, start, ex, attr))
            raise

    @asynccontextmanager
    async def open_stream(self, url: str) -> AsyncIterator[StreamReader]:
        """Yields the body reader of a GET on ``url``; the connection is released on exit."""
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.get(url) as res:
                if res.status >= 400:
                    raise HttpRequestError.from_response("Failed to connect", res)
                yield res.content


async def request(url: str, return_type: ReturnType, timeout: ClientTimeout = ClientTimeout(total=60)) -> Any:
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url) as res:
            if res.status >= 400:
                raise HttpRequestError.from_response("Failed to request", res)
            if return_type == ReturnType.TEXT:
                return await res.text()
            elif return_type == ReturnType.RAW:
                return await res.read()
            else:
                raise ValueError(f"Invalid return type: {return_type}")


def get_err_dict(url: str, start: float, ex: BaseException, attr: dict | None = None) -> dict:
    err = error_dict(ex)
    err["url"] = url
    err["duration"] = round(asyncio.get_event_loop().time() - start, 2)
    if isinstance(ex, HttpRequestError):
        err["status"] = ex.status
        err["reason"] = ex.reason
    if attr is not None:
        for k, v in attr.items():
            err[k] = v
    return err
