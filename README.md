# cfsolve

Short, readable solutions to a set of classic competitive-programming
exercises. Each one is a plain Python function. A command-line front end reads
a problem's input from standard input and prints the answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

The solutions are grouped by the kind of input they take.

- `cfsolve.numbers`: exercises on a few integers, for example
  `domino_count(m, n)`, `can_split_watermelon(weight)`,
  `next_distinct_digit_year(year)`, `cola_queue_name(n)`,
  `is_almost_lucky(n)`, `banana_debt(k, n, w)`, `socks_days(n, m)` and
  `composite_split(n)`.
- `cfsolve.strings`: exercises on words and short texts, for example
  `remove_dubstep(song)`, `abbreviate(word)`, `rearrange_sum(expression)`,
  `is_dangerous(situation)`, `xor_digit_strings(first, second)` and
  `run_bitpp(statements)`.
- `cfsolve.sequences`: exercises on lists of values, for example
  `min_taxis(groups)`, `tram_capacity(stops)`, `min_coins_to_take(coins)`,
  `moves_to_beautiful(matrix)` and `min_swaps_to_arrange(heights)`.

```python
from cfsolve.numbers import domino_count
from cfsolve.strings import abbreviate

domino_count(2, 4)            # 4
abbreviate("localization")    # "l10n"
```

Inputs that the exercise rules out raise `ValueError`, for example a position
outside `1..n` in `nth_in_odd_even_order`, strings of different lengths in
`xor_digit_strings`, or a matrix that is not 5 by 5 in `moves_to_beautiful`.

## Command line

Name a problem and give its input on standard input:

```
cfsolve 144A < input.txt
```

The problem names are `144A`, `208A`, `268A`, `318A`, `337A`, `344A`, `379A`,
`41A`, `460A`, `467A`, `469A`, `472A`, `479A`, `486A`, `580A`, `617A`, `61A`,
`69A`, `82A`, `beautiful_matrix`, `bit++`, `boy_or_girl`, `domino_piling`,
`football`, `helpful_math`, `long_words`, `lucky_division`, `nearly_lucky`,
`soldiers`, `taxi`, `team`, `tram`, `twins`, `watermelon` and `word_capital`.
Input is read as whitespace-separated tokens. Malformed or short input is
reported on standard error and the command exits with status 1.

`cfsolve.cli.solve(problem, text)` does the same from Python: it takes the
problem name and the raw input text and returns the output text.

## Mail and shell helpers

```
cfsolve-mail TO FROM SUBJECT MESSAGE [--command COMMAND]
```

prints its arguments, then writes a `To:`/`From:`/`Subject:` header, the
message and a closing `.` line to the input of `/usr/lib/sendmail -t` (or of
`COMMAND`). `cfsolve.mail.compose_message` builds that text, and
`cfsolve.mail.send_mail` pipes it into the command and returns the command's
exit status; it raises `OSError` when the command cannot be started.

```
cfsolve-shell [COMMAND ...]
```

prints the output of `ls -sail`, or of the command given.
`cfsolve.shell.list_directory(command)` returns such output as text, and
`cfsolve.shell.CallCounter` counts how many times its `call()` method has been
used.

## What it does not do

The package does not deliver mail itself: it only hands the message to a
sendmail-compatible program that must already be installed.