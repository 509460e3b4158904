# aflscore

A small interactive score calculator for Australian rules football that runs
in the terminal.

In AFL a goal is worth 6 points and a behind is worth 1. You enter two teams,
each with a name and its goals and behinds. The calculator shows which team is
winning, or that the game is a draw. It also shows each team's goals, behinds
and total score.

## Installation

```
pip install .
```

## Usage

Start the calculator:

```
aflscore
```

The command accepts only `-h`/`--help`. When it starts, you enter each team's
name, goals and behinds. Input is split on whitespace, so a team name is a
single word. The calculator then shows the current standings and this menu:

```
Menu:
1: Update <team 1> goals
2: Update <team 1> behinds
3: Update <team 2> goals
4: Update <team 2> behinds
5: Print details
6: Quit
Option:
```

The standings are shown again each time you return to the menu.

- **Non-numbers.** If a number is expected and you type something that is not
  a whole number, you see `Please enter a whole number`. The rest of that
  line is dropped and you are asked again. A number outside the 32-bit signed
  integer range counts as not a whole number.
- **Options outside 1 to 6.** An option outside 1 to 6 gives
  `Please enter a number between 1 and 6`.
- **Quitting.** Choosing Quit asks you to confirm with `y`/`Y` or `n`/`N`.
  Answering no takes you back to the menu.

The command exits with status 0 when you quit, and with status 1 if input ends
before that.

Example session:

```
Welcome to the AFL score calculator!

Enter team 1 details:
name: Kangaroos
goals: 10
behinds: 5

Enter team 2 details:
name: Eagles
goals: 8
behinds: 12

Calculating details...
The Kangaroos are winning
Kangaroos: 10, 5, 65
Eagles: 8, 12, 60
```

## Using it from Python

The pieces can also be used directly:

```python
from aflscore.team import Team, result_message

home = Team("Kangaroos", goals=10, behinds=5)
away = Team("Eagles", goals=8, behinds=12)

home.score()                   # 65
home.details()                 # "Kangaroos: 10, 5, 65"
result_message(home, away)     # "The Kangaroos are winning"
```

`aflscore.console.Console` reads from any text stream and writes to any text
stream. It defaults to standard input and output. It provides:

- `read_word(prompt)`
- `read_whole_number(prompt)`
- `read_yes_no(prompt)`, which returns `True` for yes.
- `write(text)`

When input runs out, these reads raise `EOFError`.

`aflscore.tracker.ScoreTracker` drives a session on top of a `Console`:

- `initialize_teams()` reads both teams.
- `run()` shows the standings and handles menu choices until the user quits.
- `show_details()`, `menu_option()` and `handle_option(option)` are the
  individual steps.

You can drive a whole session from a script or a test:

```python
import io
from aflscore.console import Console
from aflscore.tracker import ScoreTracker

answers = io.StringIO("Kangaroos 10 5 Eagles 8 12 6 y\n")
output = io.StringIO()
tracker = ScoreTracker(Console(answers, output))
tracker.initialize_teams()
tracker.run()
print(output.getvalue())
```

## Limitations

- Scores are kept in memory only. Nothing is saved when the program exits.
- The calculator tracks exactly two teams, one match at a time.

## Running the tests

```
pip install ".[test]"
pytest
```