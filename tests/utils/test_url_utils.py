from streamcap.utils import is_playlist_url, resolve_url


def test_resolve_url():
    base = "http://host/path/list.m3u8"
    assert resolve_url(base, "seg1.ts") == "http://host/path/seg1.ts"
    assert resolve_url(base, "http://other/seg2.ts") == "http://other/seg2.ts"
    assert resolve_url(base, "/seg3.ts") == "http://host/seg3.ts"
    assert resolve_url(base, "sub/seg4.ts?x=1") == "http://host/path/sub/seg4.ts?x=1"


def test_is_playlist_url():
    assert is_playlist_url("http://host/list.m3u8")
    assert is_playlist_url("http://host/list.m3u")
    assert is_playlist_url("http://host/list.m3u8?token=abc")
    assert not is_playlist_url("http://host/live.ts")
    assert not is_playlist_url("http://host/m3u8/live")
