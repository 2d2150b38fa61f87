# rustdrill

A Python library for working through small Rust exercises. Each exercise is a
Rust source file with a compile error, a failing test or a lint to fix.
`rustdrill` compiles and runs exercises with `rustc` (and Clippy), reports what
went wrong, and tells whether an exercise is still marked as pending.

## Requirements

- Python 3.11 or later, with `rich`.
- A Rust toolchain with `rustc` on your `PATH`. Exercises in clippy mode also
  need `cargo` with Clippy.

## The exercise list

Exercises are described in TOML, in the order they should be solved:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Remove the marker comment to move on."

[[exercises]]
name = "tests1"
path = "exercises/tests/tests1.rs"
mode = "test"
hint = "An assertion needs an expression that evaluates to a boolean."
```

`mode` is one of:

- `compile`: the file is built as a binary and run;
- `test`: the file is built as a test harness and its tests are run with `--show-output`;
- `clippy`: the file is built, and checked with Clippy through
  `./exercises/clippy/Cargo.toml` with warnings treated as errors.

An exercise counts as pending while its source holds a line comment reading
`I AM NOT DONE`.

## Usage

```python
from pathlib import Path

from rustdrill.exercise import load_exercises
from rustdrill.verify import VerificationFailed, verify

exercises = load_exercises(Path("info.toml").read_text())

try:
    verify(exercises, (0, len(exercises)), verbose=False, success_hints=True)
except VerificationFailed as failure:
    print(failure.exercise.hint)
```

`rustdrill.exercise`:

- `Exercise(name, path, mode, hint)` with `Mode.COMPILE`, `Mode.TEST` and `Mode.CLIPPY`.
- `Exercise.compile()` returns a `CompiledExercise` or raises `CompileError`,
  whose `output` holds the compiler's `stdout` and `stderr`.
- `CompiledExercise.run()` returns an `ExerciseOutput` or raises `RunError`.
  `CompiledExercise` is a context manager; `close()` removes the built binary.
- `Exercise.state()` returns a `State`; `state.done` is true once the marker is
  gone, and otherwise `state.context` holds `ContextLine`s around the marker.
  `Exercise.looks_done()` is the short form.

`rustdrill.verify`:

- `verify(exercises, progress, verbose, success_hints)` checks exercises in turn,
  printing a progress bar, and raises `VerificationFailed` at the first one that
  fails to build, fails to run, or still carries the marker.
- `test(exercise, verbose)` builds and runs an exercise's tests without prompting.
- `prompt_for_completion(exercise, prompt_output, success_hints)` prints the
  success message and the lines around the marker, and returns whether the
  exercise is done.

`rustdrill.run`:

- `run(exercise, verbose)` builds and runs one exercise (or its tests) and
  raises `VerificationFailed` on failure.
- `reset(exercise)` starts `git stash -- <path>` and returns the process.

`rustdrill.project.RustAnalyzerProject` writes a `rust-project.json` for
rust-analyzer:

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or asks rustc for the sysroot
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`rustdrill.ui` has `warn(message)` and `success(message)` for coloured status
lines. Set the environment variable `NO_EMOJI` to print plain symbols instead
of emoji.

## Reference solutions

`rustdrill.solutions` holds worked answers to many of the exercises, written as
ordinary Python: `quizzes`, `errors`, `iteration`, `colors`, `baskets`,
`branching`, `text`, `shipping`, `messages`, `traits`, `vectors`, `options`,
`containers`, `records` and `basics`.

```python
from rustdrill.solutions.quizzes import calculate_price_of_apples
from rustdrill.solutions.iteration import factorial

calculate_price_of_apples(41)   # 41
factorial(4)                    # 24
```

## What it does not do

There is no command-line program. Watch mode, listing exercises with their
status, printing a hint by name and the introduction text are not provided;
drive the library from your own Python code as shown above.

## Running the tests

Install the `test` extra and run pytest from the project root.