# rustdrill

rustdrill holds worked solutions to a series of small programming exercises,
written as ordinary importable functions and classes, together with a few
helpers for printing status lines in a terminal.

Requires Python 3.11 or later. The only dependency is `click`.

## Lessons

The `rustdrill.lessons` package groups the solutions by topic:

- `quizzes` – `calculate_apple_price`, `times_two`, `my_macro`, `print_strings`
- `basics` – variables, functions, conditions and strings: `bigger`,
  `fizz_if_foo`, `sale_price`, `is_even`, `square`, `call_me`,
  `is_a_color_word`, `circle_area`, `add_optional`, `welcome_text`, …
- `primitives` – characters, slices, tuples, optional values and lists:
  `classify_char`, `nice_slice`, `second`, `describe_cat`, `print_number`,
  `number_table`, `drain_optionals`, `fill_vec`, …
- `structs` – `NamedColor`, `UnitStruct`, `Order`, `create_order_template`,
  `Package`
- `enums` – `Message` (with `ChangeColor`, `Echo`, `Move` and `Quit`),
  `Point` and a `State` that processes messages
- `collections` – `fruit_basket`, `Fruit`, `fill_fruit_basket`,
  `array_and_vec`, `vec_loop`
- `error_handling` – `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero`,
  `ParsePosNonzeroError`
- `advanced_errors` – `parse_positive_nonzero`, `Climate.from_str`,
  `ParseClimateError`
- `generics` – `shopping_list`, `Wrapper`, `ReportCard`
- `traits` – `append_bar` for strings and lists of strings
- `iterators` – `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide`, `DivisionError`, `NotDivisibleError`,
  `result_with_list`, `list_of_results`, `factorial`, `Progress` and its
  counting functions
- `std_types` – `offset_sums` over worker threads and the `Cons` list
- `toolbox` – `my_macro`, `make_sausage`, `favorite_snacks`,
  `seconds_since_epoch`, `JobStatus`, `run_jobs`

Failures are raised as exceptions rather than returned:

```python
from rustdrill.lessons.quizzes import calculate_apple_price
from rustdrill.lessons.advanced_errors import Climate, ParseClimateError
from rustdrill.lessons.iterators import divide, NotDivisibleError
from rustdrill.lessons.generics import ReportCard
from rustdrill.lessons.std_types import create_non_empty_list
from rustdrill.lessons.traits import append_bar

calculate_apple_price(35)                 # 70
calculate_apple_price(65)                 # 65
Climate.from_str("Munich,2015,23.1")      # Climate(city='Munich', year=2015, temp=23.1)
append_bar(["Foo"])                       # ['Foo', 'Bar']
list(create_non_empty_list())             # [1, 2, 3]
ReportCard("A+", "Gary Plotter", 11).render()
# 'Gary Plotter (11) - achieved a grade of A+'

try:
    Climate.from_str("Boston,1991")
except ParseClimateError as error:
    print(error)                          # incorrect number of fields

try:
    divide(81, 6)
except NotDivisibleError as error:
    print(error.dividend, error.divisor)  # 81 6
```

## Terminal helpers

`rustdrill.ui` provides:

- `warn(message)` – prints the message in red after a warning mark;
- `success(message)` – prints the message in green after a check mark;
- `Spinner` – a spinner that ticks on its own thread while the output stream
  is a terminal and draws nothing otherwise. `set_message` changes its text,
  `finish_and_clear` stops it and wipes the line, and it can be used as a
  context manager.

```python
from rustdrill.ui import Spinner, success

with Spinner("Working...") as spinner:
    spinner.set_message("Almost done...")
success("Finished!")
```

Set the `NO_EMOJI` environment variable to any value to print plain marks
(`!` and `✓`) instead of emoji.

## What this package does not do

The package installs no command. It does not load exercise lists, compile
or test exercise files, watch files for changes, or track your progress
through a set of exercises; it only provides the lesson solutions and the
terminal helpers described above.