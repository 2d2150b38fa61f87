import subprocess
from pathlib import Path

import pytest

from rustdrill import exercise as ex
from rustdrill.exercise import (
    CompileError,
    ContextLine,
    Exercise,
    Mode,
    RunError,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


class _FakeRun:
    def __init__(self, returncode=0, stdout=b"", stderr=b""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


def test_pending_state(tmp_path):
    path = _write(tmp_path / "pending_exercise.rs", PENDING)
    exercise = Exercise("pending_exercise", path, Mode.COMPILE, "")
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == State(expected)
    assert exercise.looks_done() is False


def test_finished_exercise(tmp_path):
    path = _write(tmp_path / "finished_exercise.rs", FINISHED)
    exercise = Exercise("finished_exercise", path, Mode.COMPILE, "")
    assert exercise.state() == ex.DONE
    assert exercise.looks_done() is True


def test_marker_on_first_line_context(tmp_path):
    path = _write(tmp_path / "p.rs", "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = Exercise("p", path, Mode.TEST).state()
    assert [c.number for c in state.context] == [1, 2, 3]
    assert state.context[0].important is True


def test_clean(workdir):
    Path(temp_file()).touch()
    clean()
    assert not Path(temp_file()).exists()


def test_compile_then_close_removes_binary(workdir, monkeypatch):
    fake = _FakeRun()
    monkeypatch.setattr(ex.subprocess, "run", fake)
    Path(temp_file()).touch()
    exercise = Exercise("example", workdir / "x.rs", Mode.COMPILE)
    compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()
    assert fake.calls[0] == [
        "rustc", str(workdir / "x.rs"), "-o", temp_file(),
        "--color", "always", "--edition", "2021",
    ]


def test_test_mode_compiles_with_test_flag_and_runs_show_output(workdir, monkeypatch):
    fake = _FakeRun(stdout=b"THIS TEST TOO SHALL PASS\n")
    monkeypatch.setattr(ex.subprocess, "run", fake)
    exercise = Exercise("exercise_with_output", workdir / "t.rs", Mode.TEST)
    with exercise.compile() as compiled:
        out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert fake.calls[0][:2] == ["rustc", "--test"]
    assert fake.calls[1] == [temp_file(), "--show-output"]


def test_compile_failure_raises_and_cleans(workdir, monkeypatch):
    monkeypatch.setattr(ex.subprocess, "run", _FakeRun(returncode=1, stderr=b"error[E0425]"))
    Path(temp_file()).touch()
    exercise = Exercise("bad", workdir / "bad.rs", Mode.COMPILE)
    with pytest.raises(CompileError) as info:
        exercise.compile()
    assert info.value.output.stderr == "error[E0425]"
    assert not Path(temp_file()).exists()


def test_run_failure_raises(workdir, monkeypatch):
    monkeypatch.setattr(ex.subprocess, "run", _FakeRun())
    compiled = Exercise("t", workdir / "t.rs", Mode.COMPILE).compile()
    monkeypatch.setattr(ex.subprocess, "run", _FakeRun(returncode=101, stdout=b"panicked"))
    with pytest.raises(RunError) as info:
        compiled.run()
    assert info.value.output.stdout == "panicked"


def test_clippy_writes_manifest_and_runs_cargo(workdir, monkeypatch):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    fake = _FakeRun()
    monkeypatch.setattr(ex.subprocess, "run", fake)
    Exercise("clippy1", workdir / "clippy1.rs", Mode.CLIPPY).compile()
    manifest = (workdir / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    assert [call[:2] for call in fake.calls[1:]] == [["cargo", "clean"], ["cargo", "clippy"]]
    assert fake.calls[2][-4:] == ["-D", "warnings", "-D", "clippy::float_cmp"]


def test_display_is_path(tmp_path):
    path = tmp_path / "intro1.rs"
    assert str(Exercise("intro1", path, Mode.COMPILE)) == str(path)


def test_load_exercises():
    text = (
        '[[exercises]]\nname = "testSuccess"\npath = "testSuccess.rs"\n'
        'mode = "test"\nhint = "Hello!"\n'
    )
    (exercise,) = load_exercises(text)
    assert exercise.name == "testSuccess"
    assert exercise.path == Path("testSuccess.rs")
    assert exercise.mode is Mode.TEST
    assert exercise.hint == "Hello!"


def test_load_exercises_rejects_unknown_mode():
    text = '[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "bogus"\nhint = ""\n'
    with pytest.raises(ValueError):
        load_exercises(text)