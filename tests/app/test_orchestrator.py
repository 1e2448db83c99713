import asyncio

import pytest

from streamcap.app import Orchestrator, is_playlist
from streamcap.capture import StreamCapture
from tests.mock_helpers import AsyncHttpClientMock, conf, desc, read_file

playlist_url = "http://host/path/list.m3u8"


def playlist_http(**kwargs) -> AsyncHttpClientMock:
    return AsyncHttpClientMock(
        texts={playlist_url: "#EXTM3U\nseg1.ts\nseg2.ts\n"},
        files={
            "http://host/path/seg1.ts": b"seg1",
            "http://host/path/seg2.ts": b"seg2",
        },
        **kwargs,
    )


def test_is_playlist():
    assert is_playlist(desc(url="http://host/live.ts", is_playlist=True))
    assert is_playlist(desc(url="http://host/list.m3u8"))
    assert is_playlist(desc(url="http://host/list.m3u?t=1"))
    assert not is_playlist(desc(url="http://host/live.ts"))


async def wait_for_file(path, timeout: float = 2):
    start = asyncio.get_event_loop().time()
    while not path.exists():
        if asyncio.get_event_loop().time() - start > timeout:
            raise TimeoutError(f"{path} was not created")
        await asyncio.sleep(0.01)


@pytest.mark.asyncio
async def test_playlist_completes_and_stream_keeps_running(tmp_path):
    http = playlist_http()
    descriptors = [
        desc(url=playlist_url, prefix=str(tmp_path / "vod"), is_playlist=True),
        desc(url="http://host/live.ts", prefix=str(tmp_path / "live")),
    ]
    orchestrator = Orchestrator(descriptors, conf(reconnect_delay_sec=0.01), http)

    task = asyncio.create_task(orchestrator.run())
    await wait_for_file(tmp_path / "vod_part2.ts")
    await asyncio.sleep(0.1)

    assert read_file(tmp_path / "vod_part1.ts") == b"seg1"
    assert read_file(tmp_path / "vod_part2.ts") == b"seg2"
    assert not task.done()
    assert http.events.count(("connect", "http://host/live.ts")) > 1

    orchestrator.cancel()
    await asyncio.wait_for(task, timeout=1)


@pytest.mark.asyncio
async def test_playlist_only_finishes(tmp_path):
    http = playlist_http()
    descriptors = [
        desc(url=playlist_url, prefix=str(tmp_path / "a")),
        desc(url=playlist_url, prefix=str(tmp_path / "b")),
    ]
    orchestrator = Orchestrator(descriptors, conf(), http)

    await asyncio.wait_for(orchestrator.run(), timeout=1)

    assert read_file(tmp_path / "a_part1.ts") == b"seg1"
    assert read_file(tmp_path / "b_part2.ts") == b"seg2"


@pytest.mark.asyncio
async def test_task_failure_is_contained(tmp_path, monkeypatch):
    async def fail(self):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(StreamCapture, "run", fail)
    http = playlist_http()
    descriptors = [
        desc(url="http://host/live.ts", prefix=str(tmp_path / "live")),
        desc(url=playlist_url, prefix=str(tmp_path / "vod")),
    ]
    orchestrator = Orchestrator(descriptors, conf(), http)

    await asyncio.wait_for(orchestrator.run(), timeout=1)

    assert read_file(tmp_path / "vod_part1.ts") == b"seg1"


@pytest.mark.asyncio
async def test_cancel_before_start(tmp_path):
    http = AsyncHttpClientMock()
    orchestrator = Orchestrator([desc(prefix=str(tmp_path / "live"))], conf(reconnect_delay_sec=60), http)

    orchestrator.cancel()
    await asyncio.wait_for(orchestrator.run(), timeout=1)

    assert http.events == []
