"""Unit tests for static path sanitization and confined read/write."""

import pytest

from slycms.domain.exceptions import EntityNotFoundError, MalformedPathError
from slycms.infrastructure.storage.static_file_gateway import StaticFileGateway, canonicalize


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        ("/static/css/site.css", "css/site.css"),
        ("/static/../../etc/passwd", "etc/passwd"),
        ("/static/a/../../b.txt", "b.txt"),
        ("/static/./a/./b.txt", "a/b.txt"),
        ("/static//a//b.txt", "a/b.txt"),
        ("/static/..\\..\\win.ini", "win.ini"),
        ("css/site.css", "css/site.css"),
        ("../outside.txt", "outside.txt"),
    ],
)
def test_canonicalize_collapses_dot_segments(requested: str, expected: str):
    assert canonicalize(requested) == expected


@pytest.fixture
def gateway(tmp_path) -> StaticFileGateway:
    return StaticFileGateway(root=str(tmp_path / "static"))


@pytest.mark.parametrize(
    "requested",
    [
        "/static/../../etc/passwd",
        "/static/../../../../../../tmp/x",
        "/static/a/b/../../../../c",
        "/static/..",
        "/static/./../static/../x",
    ],
)
def test_resolve_never_leaves_the_root(gateway: StaticFileGateway, requested: str):
    try:
        resolved = gateway.resolve(requested)
    except MalformedPathError:
        return
    assert resolved.resolve().is_relative_to(gateway.root)


def test_traversal_write_lands_inside_root(gateway: StaticFileGateway):
    assert gateway.resolve("/static/../../etc/passwd") == gateway.root / "etc" / "passwd"


@pytest.mark.parametrize("requested", ["/static/", "/static/.", "/static/a/.."])
def test_resolve_rejects_the_root_itself(gateway: StaticFileGateway, requested: str):
    with pytest.raises(MalformedPathError):
        gateway.resolve(requested)


def test_resolve_rejects_symlink_escaping_root(gateway: StaticFileGateway, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    gateway.root.mkdir(parents=True)
    (gateway.root / "link").symlink_to(outside, target_is_directory=True)
    with pytest.raises(MalformedPathError):
        gateway.resolve("/static/link/secret.txt")


@pytest.mark.asyncio
async def test_write_creates_then_overwrites(gateway: StaticFileGateway):
    first = await gateway.write("/static/css/site.css", b"body {}")
    assert first.created is True
    assert first.url == "/static/css/site.css"
    assert first.size == 7
    assert (gateway.root / "css" / "site.css").read_bytes() == b"body {}"

    second = await gateway.write("/static/css/site.css", b"p {}")
    assert second.created is False
    assert (gateway.root / "css" / "site.css").read_bytes() == b"p {}"


@pytest.mark.asyncio
async def test_traversal_write_stays_under_root(gateway: StaticFileGateway):
    stored = await gateway.write("/static/../../etc/passwd", b"owned?")
    assert stored.path == gateway.root / "etc" / "passwd"
    assert stored.path.read_bytes() == b"owned?"


@pytest.mark.asyncio
async def test_read_finds_written_file(gateway: StaticFileGateway):
    await gateway.write("/static/js/app.js", b"console.log(1)")
    static_file = await gateway.read("/static/js/app.js")
    assert static_file.path == gateway.root / "js" / "app.js"
    assert "javascript" in static_file.mime_type


@pytest.mark.asyncio
async def test_read_missing_file_is_not_found(gateway: StaticFileGateway):
    with pytest.raises(EntityNotFoundError):
        await gateway.read("/static/missing.txt")


@pytest.mark.asyncio
async def test_read_is_confined_like_write(gateway: StaticFileGateway, tmp_path):
    (tmp_path / "secret.txt").write_text("outside the root")
    with pytest.raises(EntityNotFoundError):
        await gateway.read("/static/../secret.txt")


@pytest.mark.asyncio
async def test_write_onto_directory_is_rejected(gateway: StaticFileGateway):
    await gateway.write("/static/dir/file.txt", b"x")
    with pytest.raises(MalformedPathError):
        await gateway.write("/static/dir", b"y")


def test_resolve_rejects_embedded_nul(gateway: StaticFileGateway):
    with pytest.raises(MalformedPathError):
        gateway.resolve("/static/a\x00b")


def test_resolve_survives_symlink_loop(gateway: StaticFileGateway):
    gateway.root.mkdir(parents=True)
    (gateway.root / "loop").symlink_to(gateway.root / "loop")
    try:
        resolved = gateway.resolve("/static/loop/file.txt")
    except MalformedPathError:
        return
    assert resolved.is_relative_to(gateway.root)


@pytest.mark.asyncio
async def test_read_and_write_reject_embedded_nul(gateway: StaticFileGateway):
    with pytest.raises(MalformedPathError):
        await gateway.write("/static/a\x00b.txt", b"x")
    with pytest.raises(MalformedPathError):
        await gateway.read("/static/a\x00b.txt")
