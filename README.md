# scaregames

This package runs a scream-power tournament between monsters. It writes the
brackets as Graphviz DOT files.

## Input

The input is a text file. Each line holds a monster's name, then a comma,
then its scream power as a whole number:

```
Mike, 115
Sulley, 150
Randall, 130
Celia, 90
```

Whitespace at the end of a name is trimmed off. Whitespace before the number
is allowed. Anything after the number is ignored. A line is skipped if it has
no comma, if no integer follows the comma, or if the number falls outside the
signed 32-bit range.

## Usage

```
scaregames <input_file> <single|double>
```

* `single` runs a single-elimination tournament. It writes
  `winners_bracket.dot` to the current directory.
* `double` runs a double-elimination tournament. It writes two files to the
  current directory:
  * `winners_bracket.dot` holds the whole tree, topped by the grand final.
  * `losers_bracket.dot` holds only the losers bracket.

Monsters are paired in input order: 1 against 2, 3 against 4, and so on. The
monster with the higher scream power wins. On a tie, the second monster of
the pair wins. A monster without an opponent goes on to the next round
without playing.

The losers bracket is built from every loser of the winners bracket, in the
order they lost. Any loser equal to the champion (same name and power) is
left out. The grand final sets the winners-bracket champion against the
losers-bracket champion. The winners-bracket champion takes it only with
strictly higher power.

When a run finishes, the command prints the champion and exits with status 0:

```
Tournament completed. DOT files generated.
Champion: Sulley (Power: 150)
```

The command exits with status 1 and a message on standard error in these
cases:

* the number of arguments is wrong;
* the input file cannot be opened;
* the mode is neither `single` nor `double`;
* the file holds no usable monsters;
* in `double` mode, no monster is left for the losers bracket.

In each DOT file, every match is a node labelled with its winner, such as
`Sulley, (Power: 150)`. Edges run from a match to the two matches that fed
into it. Nodes are numbered in pre-order.

## Library use

```python
from scaregames.monster import Monster
from scaregames.tournament import build_single_elimination, build_double_elimination
from scaregames.dot import tree_to_dot, save_tree_as_dot

monsters = [Monster("Mike", 115), Monster("Sulley", 150), Monster("Randall", 130)]
root = build_single_elimination(monsters)
print(root.winner)          # Sulley (Power: 150)
print(tree_to_dot(root))

final, losers_root = build_double_elimination(monsters)
save_tree_as_dot("losers_bracket.dot", losers_root)
```

* `Monster` is a frozen dataclass with `name` and `scream_power`. Two
  monsters are equal when both fields match. `<` and `>` compare scream power
  only.
* `TournamentNode` holds a match's `winner` and its `left` and `right`
  sub-matches.
* `build_single_elimination_with_losers(competitors)` returns the root of the
  bracket together with the list of losers.
* `build_single_elimination` returns `None` when there are no competitors.
* `build_double_elimination` raises `ValueError` in two cases: when there are
  no competitors, and when no losers-bracket monster remains.
* `scaregames.cli` provides `read_competitors(filename)` and
  `run_tournament(filename, mode)`. `run_tournament` writes the DOT files and
  returns the champion `Monster`. It raises `ValueError` on a bad mode or an
  empty field of competitors.

## What it does not do

The package only writes DOT text. It does not render brackets to images;
Graphviz or a similar tool is needed for that. It also does not keep any
record of past tournaments.