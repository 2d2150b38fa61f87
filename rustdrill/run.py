"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from rich.console import Console

from rustdrill.exercise import CompileError, Exercise, Mode, RunError
from rustdrill.ui import success, warn
from rustdrill.verify import VerificationFailed, test

_console = Console(highlight=False)


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise, or its tests; raise VerificationFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash the changes made to the exercise file with git."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    try:
        with _console.status(f"Compiling {exercise}..."):
            compiled = exercise.compile()
    except CompileError as exc:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(exc.output.stderr)
        raise VerificationFailed(exercise) from exc

    with compiled:
        try:
            with _console.status(f"Running {exercise}..."):
                output = compiled.run()
        except RunError as exc:
            print(exc.output.stdout)
            print(exc.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise VerificationFailed(exercise) from exc

    print(output.stdout)
    success(f"Successfully ran {exercise}")