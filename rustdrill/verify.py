"""Checking exercises one after another and reporting their progress."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from rustdrill.exercise import (
    CompiledExercise,
    CompileError,
    Exercise,
    Mode,
    RunError,
)
from rustdrill.ui import no_emoji, success, warn

_console = Console(highlight=False)
_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, did not pass, or is not marked done."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def _print(text: Text | str) -> None:
    _console.print(text, soft_wrap=True)


def _progress_line(position: int, total: int, percentage: float) -> str:
    filled = min(_BAR_WIDTH * position // total, _BAR_WIDTH) if total else _BAR_WIDTH
    bar = "#" * filled
    if filled < _BAR_WIDTH:
        bar += ">" + "-" * (_BAR_WIDTH - filled - 1)
    return f"Progress: [{bar}] {position}/{total} ({percentage:.1f} %)"


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first failure."""
    num_done, total = progress
    percentage = num_done / total * 100.0 if total else 100.0
    position = num_done
    _print(_progress_line(position, total, percentage))

    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, True, verbose, success_hints)
        elif exercise.mode is Mode.COMPILE:
            passed = _compile_and_run_interactively(exercise, success_hints)
        else:
            passed = _compile_only(exercise, success_hints)
        if not passed:
            raise VerificationFailed(exercise)
        if total:
            percentage += 100.0 / total
        position += 1
        _print(_progress_line(position, total, percentage))


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's tests without prompting."""
    if not _compile_and_test(exercise, False, verbose, False):
        raise VerificationFailed(exercise)


def _compile(exercise: Exercise, message: str) -> CompiledExercise | None:
    try:
        with _console.status(message):
            return exercise.compile()
    except CompileError as exc:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        return None


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    compiled = _compile(exercise, f"Compiling {exercise}...")
    if compiled is None:
        return False
    compiled.close()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    compiled = _compile(exercise, f"Compiling {exercise}...")
    if compiled is None:
        return False
    with compiled:
        try:
            with _console.status(f"Running {exercise}..."):
                output = compiled.run()
        except RunError as exc:
            warn(f"Ran {exercise} with errors")
            print(exc.output.stdout)
            print(exc.output.stderr)
            return False
        return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    compiled = _compile(exercise, f"Testing {exercise}...")
    if compiled is None:
        return False
    with compiled:
        try:
            with _console.status(f"Testing {exercise}..."):
                output = compiled.run()
        except RunError as exc:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(exc.output.stdout)
            return False
        if verbose:
            print(output.stdout)
        if interactive:
            return prompt_for_completion(exercise, None, success_hints)
        return True


def _separator() -> Text:
    return Text("=" * 20, style="bold")


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool = False
) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done:
        return True

    success({
        Mode.COMPILE: f"Successfully ran {exercise}!",
        Mode.TEST: f"Successfully tested {exercise}!",
        Mode.CLIPPY: f"Successfully compiled {exercise}!",
    }[exercise.mode])

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    print()
    if plain:
        print(f"~*~ {success_message} ~*~")
    else:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        _print(_separator())
        print(prompt_output)
        _print(_separator())
        print()
    if success_hints:
        print("Hints:")
        _print(_separator())
        print(exercise.hint)
        _print(_separator())
        print()

    print("You can keep working on this exercise,")
    _print(Text.assemble(
        "or jump into the next one by removing the ",
        ("`I AM NOT DONE`", "bold"),
        " comment:",
    ))
    print()
    for context_line in state.context:
        _print(Text.assemble(
            (f"{context_line.number:>2}", "bold blue"),
            " ",
            ("|", "blue"),
            "  ",
            (context_line.line, "bold" if context_line.important else ""),
        ))
    return False