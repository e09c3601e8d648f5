# rustdrill

`rustdrill` is a small library for working with a set of compiler exercises.
It offers coloured status lines for reporting progress, a generator for the
`rust-project.json` file that lets an editor's language server understand
standalone exercise files, and a collection of worked drill solutions grouped
by topic.

It depends on `rich` for terminal output.

## Status lines: `rustdrill.ui`

```python
from rustdrill.ui import success, warn

warn("Compiling of exercises/intro/intro1.rs failed!")
success("Successfully ran exercises/intro/intro1.rs!")
```

`warn(message)` prints a red line prefixed with `⚠️ `, and `success(message)`
a green line prefixed with `✅`. When the environment variable `NO_EMOJI` is
set (to any value) the prefixes become `!` and `✓`. Both functions return the
plain text of the line they printed.

## Language-server project file: `rustdrill.project`

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

- `RustAnalyzerProject.get_sysroot_src()` takes the sysroot from
  `RUST_SRC_PATH` when it is set. Otherwise it runs `rustc --print sysroot`,
  prints `Determined toolchain: <path>` and stores
  `<path>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root="./exercises")` walks `root` recursively, in sorted
  order, and adds a `Crate` for every `.rs` file it finds.
- `path_to_json(path)` adds a single crate when `path` ends in `.rs` and
  ignores anything else.
- `write_to_disk(path="./rust-project.json")` writes the project as compact
  JSON; `to_dict()` returns the same data as a dictionary.

Each `Crate` has a `root_module`, edition `"2021"`, no `deps`, and the `cfg`
list `["test"]` so the language server also analyses test code.

## Worked drills: `rustdrill.drills`

- `rustdrill.drills.basics` – `bigger`, `foo_if_fizz`, `animal_habitat`,
  `is_even`, `sale_price`, `maybe_icecream`, `is_a_color_word`, `trim_me`,
  `compose_me`, `replace_me`, `vec_loop` (doubles in place), `vec_map`
  (returns a new list) and the generic `Wrapper`.
- `rustdrill.drills.errors` – `generate_nametag_text` (raises
  `EmptyNameError` for an empty name), `total_cost` (parses a quantity as a
  32-bit integer, five tokens per item plus a fee of one), `buy_items`
  (raises `InsufficientTokensError`), `PositiveNonzeroInteger.new` (raises
  `CreationError` with a `CreationErrorKind`) and `parse_pos_nonzero` (raises
  `ParsePosNonzeroError`, whose `cause` is the underlying error).
- `rustdrill.drills.hashmaps` – `fruit_basket`, the `Fruit` enum,
  `fill_fruit_basket` (adds one of each missing fruit) and
  `build_scores_table`, which turns lines of
  `<team_1>,<team_2>,<goals_1>,<goals_2>` into `Team` records.
- `rustdrill.drills.iterators` – `capitalize_first`,
  `capitalize_words_vector`, `capitalize_words_string`, `divide` (raises
  `NotDivisibleError` or `DivideByZeroError`, both `DivisionError`s),
  `result_with_list`, `list_of_results`, `factorial`, the `Progress` enum and
  the counting helpers `count_for`, `count_iterator`, `count_collection_for`
  and `count_collection_iterator`.
- `rustdrill.drills.quizzes` – `calculate_price_of_apples`, `transformer`
  with the commands `Uppercase`, `Trim` and `Append(count)`, and
  `ReportCard.render()` for numeric or letter grades.
- `rustdrill.drills.models` – `Order` and `create_order_template`, `Package`
  (`is_international`, `get_fees`), the message machine `MachineState.process`
  with `ChangeColor`, `Echo`, `Move(Point)` and `Quit`, `append_bar` for
  strings and lists, `Licensed` with `SomeSoftware` and `OtherSoftware`, the
  cons list `Cons`/`Nil`, the copy-on-write `Cow` with `abs_all`, and
  `Rectangle`, which refuses non-positive sides.

Invalid inputs raise exceptions (`ValueError`, `OverflowError`, `TypeError` or
the drill's own error classes) rather than returning status values.

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile, test or lint exercise files, track which exercises are still marked
`I AM NOT DONE`, show hints, reset exercise files or watch a directory for
changes. It also has no drills on type conversions.