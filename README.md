# toolbox

A collection of small, self-contained tools and libraries. Each module
does one job and can be imported on its own; many of them also come with
a command-line entry point.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

The only runtime dependency is Pillow, used by `toolbox.images`.

## Library modules

| Module | What it offers |
| --- | --- |
| `toolbox.textutil` | `basename`, `comma`, `ints_to_string`, `nonempty`, `reverse`, `rotate_left`, `parse_ints`, `sum_ints`, `squares` |
| `toolbox.lines` | duplicate-line counting (`count_lines`, `count_files`, `count_file_contents`, `duplicates`, `format_duplicates`), `dedup`, and Unicode character statistics with `charcount` / `CharCounts` |
| `toolbox.echo` | `echo(newline, sep, args, out)` |
| `toolbox.bits` | `pop_count` and the `Flags` bit field helpers `is_up`, `turn_down`, `set_broadcast`, `is_cast` |
| `toolbox.word` | `is_palindrome`, ignoring case and non-letters |
| `toolbox.intset` | `IntSet`, a bit-vector set of small non-negative integers |
| `toolbox.treesort` | `sort`, an in-place binary-tree insertion sort |
| `toolbox.geometry` | `Point`, `Path`, `ColoredPoint`, `distance` |
| `toolbox.graph` | `Graph`, `topo_sort`, `breadth_first`, and the `PREREQS` course table |
| `toolbox.growth` | `IntSlice`, `append_int`, `append_slice`, showing capacity doubling |
| `toolbox.equal` | `equal`, a cycle-safe deep equality check where values of different types are never equal |
| `toolbox.bzip` | `Writer`, a bzip2-compressing writer that leaves its output open on `close` |
| `toolbox.fetch` | `fetch`, `fetch_all`, `fetch_to_file`, `wait_for_server` |
| `toolbox.htmltree` | `parse`, `Node`, `NodeType`, `for_each_node`, `visit`, `outline`, `outline_text` |
| `toolbox.links` | `extract`, `find_links`, `crawl`, `titles`, `sole_title`, `title`, `TitleError` |
| `toolbox.images` | `lissajous` GIFs, `mandelbrot_image` and the colouring functions `mandelbrot`, `acos_color`, `sqrt_color`, `newton`; `corner` and `surface_svg`; `to_jpeg` |
| `toolbox.github` | issue search with `search_issues` and `parse_result`; `format_issues`, `format_report`, `format_html`, `days_ago` |

### A few examples

```python
from toolbox.word import is_palindrome
from toolbox.intset import IntSet
from toolbox.equal import equal
from toolbox.textutil import comma

is_palindrome("A man, a plan, a canal: Panama")   # True

s = IntSet()
for n in (1, 144, 9):
    s.add(n)
str(s)                                            # "{1 9 144}"
9 in s                                            # True

equal([1, 2, 3], [1, 2, 3])                       # True
comma("1234567890")                               # "1,234,567,890"
```

## Commands

Every command is installed alongside the package:

| Command | What it does |
| --- | --- |
| `toolbox-textutil basename` | prints the base name of each line on stdin |
| `toolbox-textutil comma N...` | prints each number with thousands separators |
| `toolbox-textutil rev` | reverses the integers on each line of stdin |
| `toolbox-lines dup [--whole] [FILE...]` | prints lines that appear more than once, with counts |
| `toolbox-lines dedup` | prints each distinct line of stdin once |
| `toolbox-lines charcount` | counts Unicode characters and UTF-8 lengths on stdin |
| `toolbox-echo [-n] [-s SEP] ARG...` | prints its arguments joined by a separator |
| `toolbox-graph` | prints the `PREREQS` courses in topological order |
| `toolbox-growth` | shows capacity growth while appending ten integers |
| `toolbox-bzip` | bzip2-compresses stdin to stdout |
| `toolbox-fetch fetch\|fetchall\|save\|wait ...` | prints, times, saves URLs, or waits for a server |
| `toolbox-htmltree findlinks\|outline` | reads HTML on stdin and prints its links or element stacks |
| `toolbox-htmltree outline2 URL...` | prints an indented outline of each page |
| `toolbox-links findlinks\|crawl\|title [--all] URL...` | extracts links, crawls breadth-first, or prints titles |
| `toolbox-images lissajous [web]\|mandelbrot\|surface\|jpeg` | writes a GIF, PNG, SVG or JPEG to stdout |
| `toolbox-github [--format table\|report\|html] TERM...` | searches issues and prints them |

For example, `toolbox-echo` joins its arguments with a separator; `-s`
sets the separator and `-n` leaves off the trailing newline:

```
toolbox-echo -s , a b c
```

prints `a,b,c`. Use `--help` on any command to see its options.

## What it does not do

- There is no temperature conversion, S-expression encoding, value
  inspection or query-parameter decoding in this package.
- The only built-in HTTP server is `toolbox-images lissajous web`, which
  serves a fresh Lissajous GIF on localhost port 8000; there are no
  other server commands.
- `toolbox-github` makes unauthenticated requests and has no way to
  pass credentials.