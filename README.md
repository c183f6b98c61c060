# mapkha

Dictionary-based Thai word segmentation. Given a word list, `mapkha` splits
Thai text into words by maximal matching over a prefix tree. Of the
possible segmentations it keeps the one with the fewest unknown pieces and,
among those, the fewest words. Runs of Latin letters (`A`-`Z`, `a`-`z`) and
runs of spaces, tabs, newlines, double quotes, parentheses and curly double
quotes are kept as tokens of their own. Text that matches nothing is joined
into unknown pieces.

## Installation

```
pip install .
```

Install `.[test]` as well to run the test suite with `pytest`.

## Library use

```python
from mapkha.dictionary import make_dict, load_dict
from mapkha.wordcut import Wordcut

dictionary = make_dict(["กา"])
wordcut = Wordcut(dictionary)

wordcut.segment("กากา")    # ['กา', 'กา']
wordcut.segment("ขา ขา")   # ['ขา', ' ', 'ขา']
wordcut.segment("ขาACขา")  # ['ขา', 'AC', 'ขา']
```

A dictionary can also be read from a UTF-8 file holding one word per line;
empty lines are skipped:

```python
dictionary = load_dict("words.txt")
```

`Wordcut.word_wrap(text, maxlen)` joins segmented words into lines whose
display width does not go over `maxlen`, as measured by
`mapkha.wordcut.word_space`: Thai combining vowels and tone marks do not
count towards the width. A space token that would overflow a line is dropped
at the break. Empty text gives an empty list.

### Lower-level pieces

- `mapkha.prefixtree`: `make_prefix_tree` builds a `PrefixTree` from
  `WordWithPayload` items; `PrefixTree.lookup(node_id, offset, ch)` returns a
  `PrefixTreePointer` or `None`.
- `mapkha.dictionary`: `Dict`, a word list backed by a prefix tree, with
  `Dict.lookup`.
- `mapkha.edge`: `Edge`, `EdgeType`, `Policy`, `TextRange`,
  `EdgeBuildingContext`, the abstract `EdgeBuilder`, and `graph_to_ranges`.
- `mapkha.builders`: the edge builders a `Wordcut` uses —
  `DictEdgeBuilder`, `PatEdgeBuilder` and `UnkEdgeBuilder`.
- `mapkha.acceptor`: `DictAcceptor`, which walks a `Dict` one character at a
  time, and `AccPool`, a reusable pool of them.
- `mapkha.index`: `make_index` builds an `Index` mapping a first character
  to the first or last word starting with it (`Index.get0`).

## Command line

The `mapkha` command reads text from standard input, segments it line by
line with the given dictionary, and prints the total number of words:

```
mapkha --dix words.txt < input.txt
```

`--cpupprof FILE` (default `cpu.pprof`) names a file to which the command
writes the processor time it used, as a line `cpu_seconds <seconds>`. The
command exits with status 1 if that file, the dictionary or the input cannot
be read or written.

## What it does not do

No word list ships with the package: every `Wordcut` needs a dictionary built
with `make_dict` or `load_dict`, and the command requires `--dix`. The
`--cpupprof` file records only total processor time; it is not a profile.