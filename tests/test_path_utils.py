import pytest

from myshell.exceptions import NoSuchPath
from myshell.path_utils import PathResolver, resolve_path


def make_resolver(*existing: str, home: str = "/home/u") -> PathResolver:
    known = set(existing)
    return PathResolver(exists=known.__contains__, home=lambda: home)


def test_parent_reference_strips_one_segment():
    resolver = make_resolver("/app")
    assert resolver.resolve("..", "/app/sub") == "/app"


def test_each_parent_reference_strips_a_segment():
    resolver = make_resolver("/app")
    assert resolver.resolve("../..", "/app/sub/x") == "/app"


def test_parent_reference_drops_trailing_content():
    resolver = make_resolver("/app")
    assert resolver.resolve("../other", "/app/sub") == "/app"


def test_parent_reference_is_counted_as_raw_substring():
    resolver = make_resolver("/app")
    assert resolver.resolve("a..b", "/app/sub") == "/app"


def test_walking_past_root_yields_empty_path():
    resolver = make_resolver("")
    assert resolver.resolve("../../..", "/app") == ""


def test_leading_dot_is_prefix_substitution():
    resolver = make_resolver("/appfoo", "/app/foo")
    assert resolver.resolve("./foo", "/app") == "/app/foo"
    assert resolver.resolve(".foo", "/app") == "/appfoo"


def test_leading_tilde_expands_to_home():
    resolver = make_resolver("/home/u", "/home/u/projects")
    assert resolver.resolve("~", "/app") == "/home/u"
    assert resolver.resolve("~/projects", "/app") == "/home/u/projects"


def test_absolute_path_passes_through():
    resolver = make_resolver("/tmp")
    assert resolver.resolve("/tmp", "/app") == "/tmp"


def test_missing_path_raises_with_resolved_path():
    resolver = make_resolver()
    with pytest.raises(NoSuchPath) as exc:
        resolver.resolve("/does/not/exist", "/app")
    assert exc.value.path == "/does/not/exist"
    assert str(exc.value) == "cd: /does/not/exist: No such file or directory"


def test_resolve_path_uses_real_filesystem(tmp_path):
    (tmp_path / "sub").mkdir()
    assert resolve_path("./sub", str(tmp_path)) == f"{tmp_path}/sub"
    with pytest.raises(NoSuchPath):
        resolve_path("./missing", str(tmp_path))


def test_home_lookup_follows_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_path("~", "/app") == str(tmp_path)
