# rustdrill

rustdrill is a small library for people working through a set of short Rust
exercises. It offers three things:

- coloured status lines for the terminal (`rustdrill.ui`),
- a writer for the `rust-project.json` file that lets rust-analyzer treat each
  exercise file as its own crate (`rustdrill.project`),
- worked Python versions of the ideas behind many exercises
  (`rustdrill.drills`).

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Status lines

```python
from rustdrill.ui import success, warn

success("Successfully ran exercises/intro1.rs")  # green, prefixed with ✅
warn("Compiling of exercises/intro2.rs failed!")  # red, prefixed with ⚠️
```

When the `NO_EMOJI` environment variable is set, the prefixes become `✓` and
`!`; `rustdrill.ui.no_emoji()` tells you whether it is set.

## rust-analyzer project files

`rustdrill.project.RustAnalyzerProject` collects one `Crate` (edition 2021,
no dependencies, `cfg` set to `["test"]`) per `.rs` file:

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # RUST_SRC_PATH, or found by running `rustc --print sysroot`
project.exercises_to_json()      # every .rs file below ./exercises
project.write_to_disk()          # ./rust-project.json
```

- `add_path(path)` adds a crate when the path ends in `.rs` and ignores it otherwise.
- `exercises_to_json(root)` walks `root` (default `./exercises`) recursively.
- `to_json()` returns the compact JSON text; `write_to_disk(path)` writes it
  (default `./rust-project.json`).

`get_sysroot_src()` needs `rustc` on your `PATH` unless `RUST_SRC_PATH` is set.

## Reference drills

- `rustdrill.drills.basics`: apple prices, `bigger`, `foo_if_fizz`,
  `animal_habitat`, `sale_price`, list doubling, string trimming and composing,
  `maybe_icecream`.
- `rustdrill.drills.containers`: the fruit basket, a football scores table,
  word capitalisation, `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `factorial`, progress counting, a string `transformer`
  driven by `Command`, and a `Cons` list.
- `rustdrill.drills.errors`: nametags, `total_cost` and `spend_tokens`,
  `PositiveNonzeroInteger` with `CreationError`, and `parse_pos_nonzero`
  raising `ParsePosNonzeroError`.
- `rustdrill.drills.records`: `Order`, `Package`, a message-driven `State`,
  `Rectangle`, `ReportCard` with numeric or letter grades, `append_bar`, and
  the `Licensed` software classes.
- `rustdrill.drills.pointers`: a clone-on-write `Cow` and `abs_all`.
- `rustdrill.drills.concurrency`: per-offset sums over threads, timed
  sleepers, a lock-guarded `JobStatus`, and a two-sender channel
  (`send_tx`, `receive_all`).

```python
from rustdrill.drills.containers import divide, factorial
from rustdrill.drills.errors import parse_pos_nonzero
from rustdrill.drills.pointers import Cow, abs_all

factorial(4)                              # 24
divide(81, 9)                             # 9
parse_pos_nonzero("42")                   # PositiveNonzeroInteger(value=42)
abs_all(Cow.borrowed([0, 1, 2])).owned    # False: nothing needed copying
abs_all(Cow.borrowed([-1, 0, 1])).owned   # True: copied before changing
```

## What it does not do

rustdrill installs no command. It does not read an exercise list, and it does
not compile, run, test, verify, list, reset or watch exercises; there is no
watch mode and no hint lookup. It also has no reference drills for type
conversions. What it gives you is the library pieces described above.