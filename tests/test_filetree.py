from pathlib import Path

import pytest

from nyx.events import InputFrame, Key, OpenFile
from nyx.filetree import FiletreeModule


@pytest.fixture
def tree_dir(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.rs").write_text("fn main() {}")
    (tmp_path / "Cargo.toml").write_text("[package]")
    (tmp_path / ".gitignore").write_text("target/")
    (tmp_path / "target").mkdir()
    (tmp_path / "target" / "debug").write_text("")
    return tmp_path


def names(ft: FiletreeModule) -> list[str]:
    return [e.name for e in ft.entries]


def test_refresh_reads_directory(tree_dir):
    ft = FiletreeModule(tree_dir)
    assert len(ft.entries) >= 2
    assert ft.entries[0].is_dir
    assert ft.entries[0].name == "src"
    assert names(ft) == ["src", "Cargo.toml", ".gitignore"]


def test_hidden_dirs_excluded(tree_dir):
    ft = FiletreeModule(tree_dir)
    assert "target" not in names(ft)


def test_navigation_clamps(tree_dir):
    ft = FiletreeModule(tree_dir)
    length = len(ft.entries)
    ft.move_up()
    assert ft.selected == 0
    for _ in range(length + 5):
        ft.move_down()
    assert ft.selected == length - 1
    ft.move_down()
    assert ft.selected == length - 1


def test_toggle_expand_adds_children(tree_dir):
    ft = FiletreeModule(tree_dir)
    assert ft.entries[0].is_dir
    assert not ft.entries[0].expanded
    initial = len(ft.entries)

    ft.toggle_expand()
    assert ft.entries[0].expanded
    assert len(ft.entries) > initial
    assert ft.entries[1].name == "main.rs"
    assert ft.entries[1].depth == 1

    ft.toggle_expand()
    assert not ft.entries[0].expanded
    assert len(ft.entries) == initial


def test_toggle_expand_on_file_does_nothing(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.selected = 1
    ft.toggle_expand()
    assert names(ft) == ["src", "Cargo.toml", ".gitignore"]


def test_dotfiles_sorted_last(tree_dir):
    ft = FiletreeModule(tree_dir)
    files = [e.name for e in ft.entries if not e.is_dir]
    assert files.index("Cargo.toml") < files.index(".gitignore")


def test_empty_root_produces_empty_entries():
    ft = FiletreeModule(None)
    assert ft.entries == []


def test_search_filters_entries(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("cargo")
    assert len(ft.filtered) == 1
    assert ft.entries[ft.filtered[0]].name == "Cargo.toml"


def test_search_is_case_insensitive(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("CARGO")
    assert len(ft.filtered) == 1
    assert ft.entries[ft.filtered[0]].name == "Cargo.toml"


def test_search_no_match_returns_empty(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("zzzzz")
    assert ft.filtered == []


def test_search_context_prioritizes_dir_children(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.toggle_expand()
    ft.set_search_context(tree_dir / "src")
    ft.set_search("main")
    assert ft.filtered
    assert ft.entries[ft.filtered[0]].name == "main.rs"


def test_search_navigate_up_down(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.toggle_expand()
    ft.set_search("s")
    assert [ft.entries[i].name for i in ft.filtered] == ["src", "main.rs"]
    first = ft.selected
    assert first == 0
    ft.move_down()
    assert ft.selected == 1
    ft.move_down()
    assert ft.selected == 1
    ft.move_up()
    assert ft.selected == first


def test_clear_search_resets_state(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("cargo")
    assert ft.search_query == "cargo"
    assert ft.filtered
    ft.clear_search()
    assert ft.search_query == ""
    assert ft.filtered == []
    assert ft.searching is False


def test_set_search_selects_first_match(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("git")
    assert ft.selected == 2


def test_handle_input_jk_navigation(tree_dir):
    ft = FiletreeModule(tree_dir)
    assert ft.handle_input(InputFrame(keys=(Key.J,), text=("j",))) is None
    assert ft.selected == 1
    assert ft.searching is False
    ft.handle_input(InputFrame(keys=(Key.K,), text=("k",)))
    assert ft.selected == 0


def test_handle_input_enter_opens_file(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.selected = 1
    action = ft.handle_input(InputFrame(keys=(Key.ENTER,)))
    assert action == OpenFile(str(tree_dir / "Cargo.toml"))


def test_handle_input_l_expands_and_h_collapses(tree_dir):
    ft = FiletreeModule(tree_dir)
    assert ft.handle_input(InputFrame(keys=(Key.L,))) is None
    assert ft.entries[0].expanded
    ft.handle_input(InputFrame(keys=(Key.H,)))
    assert not ft.entries[0].expanded


def test_handle_input_text_starts_search(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.handle_input(InputFrame(text=("c",)))
    assert ft.searching is True
    assert ft.search_query == "c"
    ft.handle_input(InputFrame(text=("a",)))
    assert ft.search_query == "ca"
    assert [ft.entries[i].name for i in ft.filtered] == ["Cargo.toml"]


def test_handle_input_nav_letter_text_does_not_search(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.handle_input(InputFrame(text=("h",)))
    assert ft.searching is False
    assert ft.search_query == ""


def test_handle_input_slash_enters_search(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.handle_input(InputFrame(keys=(Key.SLASH,), text=("/",)))
    assert ft.searching is True
    assert ft.search_query == ""
    assert ft.search_display == "/"


def test_handle_input_backspace_to_empty_clears_search(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("ca")
    ft.handle_input(InputFrame(keys=(Key.BACKSPACE,)))
    assert ft.search_query == "c"
    assert ft.searching is True
    ft.handle_input(InputFrame(keys=(Key.BACKSPACE,)))
    assert ft.searching is False
    assert ft.search_display is None


def test_handle_input_escape_clears_search(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("cargo")
    ft.handle_input(InputFrame(keys=(Key.ESCAPE,)))
    assert ft.searching is False
    assert ft.filtered == []


def test_handle_input_enter_in_search_opens_match(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("cargo")
    action = ft.handle_input(InputFrame(keys=(Key.ENTER,)))
    assert action == OpenFile(str(tree_dir / "Cargo.toml"))
    assert ft.searching is False


def test_handle_input_enter_in_search_on_dir_expands_and_sets_context(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("src")
    action = ft.handle_input(InputFrame(keys=(Key.ENTER,)))
    assert action is None
    assert ft.search_context == tree_dir / "src"
    assert ft.entries[0].expanded
    assert ft.searching is False


def test_click_file_opens(tree_dir):
    ft = FiletreeModule(tree_dir)
    action = ft.click(1)
    assert action == OpenFile(str(tree_dir / "Cargo.toml"))
    assert ft.selected == 1


def test_click_dir_in_search_clears_and_expands(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.set_search("src")
    assert ft.click(0) is None
    assert ft.searching is False
    assert ft.search_context == tree_dir / "src"
    assert ft.entries[0].expanded


def test_click_out_of_range_raises(tree_dir):
    ft = FiletreeModule(tree_dir)
    with pytest.raises(IndexError):
        ft.click(99)


def test_visible_rows_tree_labels(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.toggle_expand()
    rows = ft.visible_rows()
    assert [r.label for r in rows] == ["\u25be src", "  main.rs", "  Cargo.toml", "  .gitignore"]
    assert [r.indent for r in rows] == [0, 1, 0, 0]
    assert [r.selected for r in rows] == [True, False, False, False]


def test_visible_rows_search_shows_relative_paths(tree_dir):
    ft = FiletreeModule(tree_dir)
    ft.toggle_expand()
    ft.set_search("main")
    rows = ft.visible_rows()
    assert len(rows) == 1
    assert rows[0].label == "  " + str(Path("src") / "main.rs")
    assert rows[0].indent == 0
    assert rows[0].index == 1