# tilewm

The parts of a tiling window manager that need no display server, written as
plain Python, and a small command for filtering files by their properties.

- `tilewm.layouts`: the `tile`, `grid`, `centered_master` and `monocle`
  layouts, which return the geometry requested for each tiled client of a
  work area, and `monocle_symbol` for the monocle layout's symbol.
- `tilewm.geometry`: the `Rect` and `SizeHints` types, `apply_size_hints`
  for constraining a client's geometry, `intersect`, `rect_to_monitor` for
  picking the monitor a rectangle overlaps most, and `client_geometry` for
  the final border and gap adjustment.
- `tilewm.monitors`: `bar_position`, `unique_geometries`,
  `monitor_in_direction`, `systray_width`, `systray_monitor` and `bar_click`,
  which maps a click on the bar to the tag, layout symbol, status or title
  region it hit.
- `tilewm.tags`: `tag_mask`, the `Layout` type and `TagState`, which keeps
  the tags in view and remembers layout, master factor, master count and bar
  visibility for each tag.
- `tilewm.rules`: `Rule`, `RuleMatch` and `apply_rules`, matching window
  rules on title, class and instance.
- `tilewm.status`: `parse_status`, which splits status text with inline
  `^...^` codes into drawing commands (`TextRun`, `SetForeground`,
  `SetBackground`, `ResetColors`, `FillRect`, `Advance`), and `status_width`.
- `tilewm.process`: `parent_pid`, reading a process's parent from
  `/proc/<pid>/stat`, and `is_descendant`.
- `tilewm.autostart`: `autostart_dir` and `run_autostart`, which find and
  run the user's `autostart_blocking.sh` (waited for) and `autostart.sh`
  (started in the background) when they are executable.
- `tilewm.stest`: the file filter behind the `tilewm-stest` command.

## Installing

```
pip install .
```

The package has no runtime dependencies. For the tests:

```
pip install ".[test]"
pytest
```

## The tilewm-stest command

Filters a list of files, printing those that pass every selected test.
Paths come from the arguments, or one per line on standard input if none are
given.

```
tilewm-stest -fx /usr/bin/env /etc/hostname
ls | tilewm-stest -d
tilewm-stest -l -x /usr/bin
```

| flag | passes when the file |
|------|----------------------|
| `-a` | may be hidden (names starting with `.` are otherwise skipped) |
| `-b` | is a block device |
| `-c` | is a character device |
| `-d` | is a directory |
| `-e` | exists |
| `-f` | is a regular file |
| `-g` | has the set-group-id bit |
| `-h` | is a symbolic link |
| `-l` | (tests the entries of each directory argument instead) |
| `-n file` | is newer than `file` |
| `-o file` | is older than `file` |
| `-p` | is a named pipe |
| `-q` | (print nothing; exit 0 at the first match) |
| `-r` | is readable |
| `-s` | is not empty |
| `-u` | has the set-user-id bit |
| `-v` | (invert the result) |
| `-w` | is writable |
| `-x` | is executable |

If the file given to `-n` or `-o` cannot be read, an error is printed and
that test is not applied. The exit status is 0 if anything matched, 1 if
nothing did and 2 on a usage error.

## Using the library

```python
from tilewm.geometry import Rect
from tilewm.layouts import tile
from tilewm.rules import Rule, apply_rules
from tilewm.status import parse_status
from tilewm.tags import Layout, TagState, tag_mask

area = Rect(0, 0, 1920, 1056)
placements = tile(area, borders=[1, 1, 1], nmaster=1, mfact=0.55)

tiled = Layout("[]=", tile)
floating = Layout("><>")
state = TagState(9, mfact=0.55, nmaster=1, showbar=True, layouts=[tiled, floating])
state.view(1 << 2)      # show the third tag
state.set_mfact(0.05)   # grow the master area for that tag only

rules = [Rule(class_name="Gimp", isfloating=True)]
result = apply_rules(rules, "GNU Image", "Gimp", "gimp", state.tags, 9)

commands = parse_status("^c#ff0000^cpu 12%^d^")
# [SetForeground('#ff0000'), TextRun('cpu 12%'), ResetColors()]
```

## What this package does not do

It does not connect to a display server: it manages no windows, draws no
bar, grabs no keys and handles no events. The functions here compute what
such a program would decide; applying the results is left to the caller.
There is no interactive menu and no command that runs status blocks and
writes a status line.