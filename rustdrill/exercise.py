"""Exercises: their description, compilation, running and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from rustdrill.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


DONE = State()


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class CompileError(Exception):
    """Compilation of an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class RunError(Exception):
    """A compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _capture(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True)


def _output_of(proc: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(proc.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(proc.stderr or b"").decode("utf-8", errors="replace"),
    )


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _rustc_args(self, *extra: str) -> list[str]:
        return ["rustc", *extra, str(self.path), "-o", temp_file(),
                *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS]

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest)
        except OSError as exc:
            what = "Clippy" if no_emoji() else "📎 Clippy 📎"
            raise OSError(f"Failed to write {what} Cargo.toml file.") from exc

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompileError with the output on failure."""
        if self.mode is Mode.COMPILE:
            proc = _capture(self._rustc_args())
        elif self.mode is Mode.TEST:
            proc = _capture(self._rustc_args("--test"))
        else:
            self._write_clippy_manifest()
            # Build a binary as well so clippy exercises can be run.
            _capture(self._rustc_args())
            # A clean is needed for clippy to report every lint.
            _capture(["cargo", "clean", "--manifest-path",
                      CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
            proc = _capture(["cargo", "clippy", "--manifest-path",
                             CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS,
                             "--", "-D", "warnings", "-D", "clippy::float_cmp"])
        if proc.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompileError(_output_of(proc))

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        proc = _capture(args)
        output = _output_of(proc)
        if proc.returncode != 0:
            raise RunError(output)
        return output

    def state(self) -> State:
        """Return DONE, or the context lines around the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return DONE
        lines = source.splitlines()
        index = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if index is None:
            raise RuntimeError("pending marker spans several lines")
        low = max(index - CONTEXT, 0)
        return State(tuple(
            ContextLine(line=line, number=i + 1, important=i == index)
            for i, line in enumerate(lines[low:index + CONTEXT + 1], start=low)
        ))

    def looks_done(self) -> bool:
        """True when the pending marker has been removed from the source."""
        return self.state().done


@dataclass
class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    exercise: Exercise
    _closed: bool = field(default=False, repr=False)

    def run(self) -> ExerciseOutput:
        """Run the binary; raise RunError with the output on failure."""
        return self.exercise._run()

    def close(self) -> None:
        """Remove the compiled binary."""
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml contents."""
    data = tomllib.loads(text)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]