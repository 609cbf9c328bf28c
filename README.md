# nyx

This package holds the state and behaviour behind an editor's side panels. It has
no GUI toolkit attached. A panel reads one frame of keyboard input at a time and
returns what the host application should do next. The host does the drawing.

## Modules

- `nyx.events`: input and actions.
  - `Key`, `Modifiers` and `InputFrame` describe one frame of input: the keys
    pressed, the text typed and the text pasted.
  - `InputFrame.key_pressed(key)` reports whether one key was pressed.
    `InputFrame.any_pressed(*keys)` reports whether any of several keys was pressed.
  - `OpenFile` and `ViewDiff` are the actions a panel can hand back.
- `nyx.command_palette`: `CommandPalette`, which filters a fixed list of
  `PaletteEntry` commands.
  - The filter matches the label or the description, ignoring case.
  - `handle_input(frame)` returns `(should_close, action)`. The action is a
    `PaletteAction`, or `None`.
  - `prompt()` gives the text of the search field.
- `nyx.terminal_keys`: keys to terminal bytes.
  - `key_to_bytes(key, modifiers)` maps ctrl+letter combinations to control bytes,
    and maps special keys to escape sequences. Arrows, Home/End, Delete, Page
    Up/Down and Insert are covered.
  - `frame_to_bytes(frame)` joins the bytes for a whole frame in this order: keys,
    typed text, pasted text.
  - `DEFAULT_PALETTE` holds the terminal's default colour names as hex strings.
- `nyx.tree_listing`: `list_tree(root, expanded_dirs)` lists a directory depth
  first as `FileEntry` rows.
  - It descends only into the directories in `expanded_dirs`.
  - Directories come first, dotfiles come last in each group, and names are
    sorted without regard to case.
  - `.git`, `target` and `node_modules` are hidden.
- `nyx.filetree`: `FiletreeModule`, the file explorer.
  - It moves with `j`/`k` or the arrow keys. `l`/Enter opens a file or expands a
    directory; `h` collapses one.
  - `/`, or typing any other text, starts a search. The search matches names
    without regard to case. Entries under the last directory opened from a search
    are ranked first.
  - `click(index)` acts on a clicked entry.
  - `visible_rows()` returns the rows to draw as `VisibleRow` values. While a
    search narrows the list, the rows are flat and each label shows the path
    relative to the root.
- `nyx.git_status`: `parse_status(output)` reads the output of
  `git status --porcelain=v1` and returns `(staged, unstaged)` lists of
  `GitFileEntry`. Renames keep the new path. `FileStatus.prefix` is the
  one-letter marker for a file.

## Installing

```
pip install .
```

Running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from nyx.events import InputFrame, Key
from nyx.filetree import FiletreeModule
from nyx.git_status import parse_status

tree = FiletreeModule(".")
tree.set_search("main")
for row in tree.visible_rows():
    print(row.label)

action = tree.handle_input(InputFrame(keys=(Key.ENTER,)))
print(action)  # OpenFile(path=...) when a file was selected

staged, unstaged = parse_status("M  src/app.rs\n?? notes.txt\n")
for entry in staged + unstaged:
    print(entry.status.prefix, entry.path)
```

## What it does not do

- It draws nothing. There is no window, no colour theme and no rendering. The
  host turns `visible_rows()`, `prompt()` and the like into pixels.
- It runs no git commands. `parse_status` reads status text that you supply.
  Staging, unstaging and committing are not provided.
- It has no project-wide file or content search. The explorer's search only
  filters entries that are already listed in the tree.
- It starts no shell. `nyx.terminal_keys` only produces the bytes to write to one.