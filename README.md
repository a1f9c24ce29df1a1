# katas

A collection of small programming exercises. Each exercise is its own module
of the `katas` package and exposes plain functions that you import and call.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions | What they do |
| --- | --- | --- |
| `katas.armstrong_numbers` | `is_armstrong_number(num)` | True if `num` equals the sum of its digits each raised to the number of digits |
| `katas.beer_song` | `verse(n)`, `sing(start, end)` | One verse of "99 bottles of beer" (0 to 99), or the verses from `start` down to `end` separated by blank lines |
| `katas.bob` | `reply(message)` | Bob's answer to a remark, question, shout or silence |
| `katas.collatz_conjecture` | `collatz(n)`, `collatz_positive(n)` | Number of Collatz steps to reach 1; `collatz` returns `None` for `n < 1` |
| `katas.difference_of_squares` | `square_of_sum(n)`, `sum_of_squares(n)`, `difference(n)` | Square of the sum and sum of the squares of 1..n, and their difference |
| `katas.gigasecond` | `after(start)` | The `datetime` one billion seconds after `start` |
| `katas.grains` | `square(s)`, `total()` | Grains of wheat on chessboard square `s` (1 to 64), and on the whole board |
| `katas.hello_world` | `hello()`, `main(argv)` | Returns `"Hello, World!"`; `main` is the command-line entry point |
| `katas.isogram` | `check(candidate)` | True if no letter occurs twice, ignoring case, spaces and hyphens |
| `katas.leap` | `is_leap_year(year)` | Gregorian leap-year rule |
| `katas.nth_prime` | `nth(n)` | The n-th prime, counting from zero (`nth(0) == 2`) |
| `katas.proverb` | `build_proverb(items)` | The "for want of a nail" proverb built from a chain of words |
| `katas.raindrops` | `raindrops(n)` | "Pling", "Plang", "Plong" for factors 3, 5 and 7, otherwise `n` as text |
| `katas.reverse_string` | `reverse(text)` | `text` with its characters in reverse order |
| `katas.run_length_encoding` | `encode(source)`, `decode(source)` | Run-length encoding as `<count><char>`; single characters carry no count |
| `katas.saddle_points` | `find_saddle_points(matrix)` | `(row, column)` of every value that is the largest in its row and smallest in its column |
| `katas.series` | `series(digits, length)` | Every contiguous substring of the given length, in order |
| `katas.sum_of_multiples` | `sum_of_multiples(limit, factors)` | Sum of the numbers below `limit` that are a multiple of any factor |

## Examples

```python
from katas.raindrops import raindrops
from katas.run_length_encoding import encode, decode
from katas.collatz_conjecture import collatz
from katas.saddle_points import find_saddle_points

raindrops(15)            # "PlingPlang"
encode("AABBBCCCC")      # "2A3B4C"
decode("2A3B4C")         # "AABBBCCCC"
collatz(16)              # 4
collatz(0)               # None
find_saddle_points([[9, 8, 7], [5, 3, 2], [6, 6, 7]])  # [(1, 0)]
```

## Errors

Functions that only accept a limited range of inputs raise `ValueError`
when given something outside it:

- `grains.square` takes only squares 1 to 64.
- `beer_song.verse` (and so `beer_song.sing`) takes only 0 to 99.
- `collatz_conjecture.collatz_positive` takes only `n >= 1`.
- `armstrong_numbers.is_armstrong_number` and `nth_prime.nth` take only
  non-negative numbers.

## Command line

Installing the package adds one command, which prints `Hello, world!` and
exits with status 0:

```
katas-hello
```

It takes no options other than `--help`.