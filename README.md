# patternsearch

This package does case-insensitive substring search over text corpora. Each
corpus is built by concatenating many partitioned files. The package has three
search algorithms:

- **Knuth-Morris-Pratt** (`patternsearch.kmp`) searches for several patterns
  at once. It reports every position where each pattern occurs, overlapping
  matches included.
- **Rabin-Karp** (`patternsearch.rabin_karp`) is a rolling-hash search. It
  reports every occurrence of a single pattern.
- **Boyer-Moore** (`patternsearch.boyer_moore`) reports only the first
  occurrence of a single pattern.

## Normalisation

A corpus is normalised before it is searched. `patternsearch.loading.normalize_text`
does these steps:

- Newlines, carriage returns and tabs become spaces.
- Runs of spaces collapse into one space.
- ASCII letters become lower case.

Files are read as Latin-1, so positions in the text equal byte offsets in the
normalised text.

Patterns are lower-cased in the same way.

- `parse_patterns` splits a comma-separated line into patterns. It removes all
  whitespace inside each pattern and drops any pattern that is left empty.
- `convert_pattern` turns underscores into spaces. Command-line patterns use
  underscores in place of spaces.

## Installation

```
pip install .
```

To install and run the tests:

```
pip install .[test]
pytest
```

## Directory layout

The commands use fixed paths, relative to the working directory:

```
../datasets/<name>/...                 partitioned input files
../datasets/Concatenated/<corpus>      concatenated corpora
../datasets/<patterns file>            pattern lists for KMP
```

The library functions `load_file`, `load_patterns` and `concatenate` take a
base directory, so you can use other locations from code.

## Commands

### patternsearch-concat

This command joins the first `N` entries of `../datasets/<name>` into one file.
The entries are taken in sorted order, and `N` must be between 1 and 40. The
output goes to `../datasets/Concatenated/concatenated_<name>_<N>`. The
`Concatenated` directory must already exist. The command fails if the
directory holds fewer than `N` entries.

```
patternsearch-concat 10 DNA
```

### patternsearch-kmp

This command searches a corpus for every pattern listed in a patterns file.
Only the file's first line is read, and it holds comma-separated patterns,
such as `ab, cd, abb`. The command prints the positions of each pattern that
occurs, sorted by pattern. It also prints how long the search took.

```
patternsearch-kmp concatenated_DNA_10 patterns.txt
```

### patternsearch-rk

This command searches for one pattern. Write spaces in the pattern as
underscores. It prints the number of occurrences and the first position.

```
patternsearch-rk concatenated_english_5 hello_world
```

### patternsearch-bm

This command searches for one pattern. Write spaces in the pattern as
underscores. It prints the first position and the matched text.

```
patternsearch-bm concatenated_english_5 hello_world
```

Each command exits with status 1 in two cases: it got the wrong number of
arguments, or it could not read or write a file.

## Library use

```python
from patternsearch.loading import normalize_text, parse_patterns
from patternsearch.kmp import search
from patternsearch.rabin_karp import rabin_karp_search
from patternsearch.boyer_moore import BoyerMooreSearcher, boyer_moore_find

text = normalize_text("Abc\tabc\n\nABC")        # "abc abc abc"
search(parse_patterns("ab, bc"), text)            # {"ab": [0, 4, 8], "bc": [1, 5, 9]}
rabin_karp_search(text, "abc")                    # [0, 4, 8]
boyer_moore_find(text, "c a")                     # 2
BoyerMooreSearcher("zz").find(text)               # None
```

Empty patterns behave differently in each search:

- `kmp.search` raises `ValueError`.
- `rabin_karp_search` returns an empty list.
- `BoyerMooreSearcher.find` returns `0`.

## Limitations

- Searches compare characters exactly after normalisation. There is no
  regular-expression or fuzzy matching.
- Only ASCII letters are folded to lower case.
- The commands do not create directories, and their data locations cannot be
  changed from the command line.