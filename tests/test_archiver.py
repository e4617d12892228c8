# File: tests/test_archiver.py
from pathlib import Path

import pytest
from site_mirror.crawler.archiver import Archiver
from site_mirror.errors import FilesystemError, ParseError


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://h/", Path("out/h/index.html")),
        ("https://h", Path("out/h/index.html")),
        ("https://h/docs/", Path("out/h/index.html")),
        ("https://h/docs/page.html", Path("out/h/page.html")),
        ("https://h/docs/page.html?x=1#frag", Path("out/h/page.html")),
        ("https://sub.example.com/x", Path("out/sub.example.com/x")),
        ("http://localhost:8080/a", Path("out/localhost/a")),
    ],
)
def test_target_path(url, expected):
    assert Archiver.target_path(url, "out") == expected


def test_target_path_requires_hostname():
    with pytest.raises(ParseError):
        Archiver.target_path("/relative/only", "out")


@pytest.mark.asyncio()
async def test_store_creates_host_directory(tmp_path):
    archiver = Archiver()
    path = await archiver.store("https://sub.example.com/x", b"<html>x</html>", tmp_path / "out")

    assert path == tmp_path / "out" / "sub.example.com" / "x"
    assert (tmp_path / "out" / "sub.example.com").is_dir()
    assert path.read_bytes() == b"<html>x</html>"


@pytest.mark.asyncio()
async def test_store_overwrites_same_filename(tmp_path):
    archiver = Archiver()
    first = await archiver.store("https://h/a/page.html", b"first version, longer", tmp_path)
    second = await archiver.store("https://h/b/page.html", b"second", tmp_path)

    assert first == second
    assert second.read_bytes() == b"second"


@pytest.mark.asyncio()
async def test_store_reports_filesystem_error(tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(FilesystemError) as excinfo:
        await Archiver().store("https://h/", b"data", blocker)

    assert excinfo.value.url == "https://h/"
    assert excinfo.value.path == blocker / "h" / "index.html"
