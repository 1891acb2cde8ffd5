import os

import pytest

from myshell import PathResolver, Shell, ShellState


@pytest.fixture
def bin_dir(tmp_path):
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_program(bin_dir):
    def factory(name: str, body: str, *, executable: bool = True):
        program = bin_dir / name
        program.write_text(f"#!/bin/sh\n{body}\n")
        if executable:
            os.chmod(program, 0o755)
        return program

    return factory


@pytest.fixture
def shell(tmp_path, bin_dir) -> Shell:
    state = ShellState(current_directory=str(tmp_path), search_paths=(str(bin_dir),))
    return Shell(state)


@pytest.fixture
def fake_fs_shell() -> Shell:
    known = {"/app", "/app/sub", "/app/sub/x", "/home/u"}
    resolver = PathResolver(exists=known.__contains__, home=lambda: "/home/u")
    return Shell(ShellState(current_directory="/app/sub"), resolver=resolver)
