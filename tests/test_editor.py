import threading
from typing import List

import pytest

from plaintext_editor.editor import (
    CHANGE,
    UNDO,
    Document,
    Editor,
    EditorView,
    History,
)


def make_editor(text: str = "A", *, name: str = "example.txt") -> Editor:
    return Editor(Document(name=name, content=text))


def test_construction_records_initial_content() -> None:
    editor = make_editor("A")

    assert len(editor.history) == 1
    assert editor.history.peek().content == "A"
    assert editor.render() == "A"


def test_construction_rejects_non_empty_history() -> None:
    history = History()
    history.record("stale")

    with pytest.raises(ValueError):
        Editor(Document(name="x", content=""), history=history)


@pytest.mark.parametrize("changes", [["B"], ["B", "C", ""], ["x" * 5, "y", "z", "w"]])
def test_change_sequence_tracks_last_content(changes: List[str]) -> None:
    editor = make_editor("A")

    for text in changes:
        editor.change(text)

    assert editor.render() == changes[-1]
    assert len(editor.history) == len(changes) + 1
    assert editor.history.peek().content == changes[-1]


def test_change_mutates_the_same_document_instance() -> None:
    document = Document(name="doc.txt", content="A")
    editor = Editor(document)

    editor.change("B")

    assert document.content == "B"
    assert editor.document is document


def test_change_rejects_non_string_without_mutation() -> None:
    editor = make_editor("A")

    with pytest.raises(TypeError):
        editor.change(42)  # type: ignore[arg-type]

    assert editor.render() == "A"
    assert len(editor.history) == 1


def test_undo_after_single_change_restores_initial() -> None:
    editor = make_editor("A")
    editor.change("B")
    assert editor.render() == "B"

    assert editor.undo() is True
    assert editor.render() == "A"


def test_second_undo_empties_history_and_keeps_content() -> None:
    editor = make_editor("A")
    editor.change("B")
    editor.undo()

    assert editor.undo() is False
    assert editor.render() == "A"
    assert len(editor.history) == 0


def test_undo_is_idempotent_once_exhausted() -> None:
    editor = make_editor("A")
    editor.change("B")
    for _ in range(5):
        editor.undo()

    assert editor.render() == "A"
    assert len(editor.history) == 0


def test_undo_after_n_changes_reverts_to_previous_change() -> None:
    editor = make_editor("c0")
    for text in ("c1", "c2", "c3"):
        editor.change(text)

    editor.undo()
    assert editor.render() == "c2"
    editor.undo()
    assert editor.render() == "c1"
    editor.undo()
    assert editor.render() == "c0"


def test_undo_without_changes_leaves_content() -> None:
    editor = make_editor("A")

    assert editor.undo() is False
    assert editor.render() == "A"


def test_change_after_exhausted_history_starts_fresh_stack() -> None:
    editor = make_editor("A")
    editor.undo()

    editor.change("B")

    assert editor.history.contents() == ("B",)
    assert editor.undo() is False
    assert editor.render() == "B"


def test_snapshot_reports_version_and_history() -> None:
    editor = make_editor("A", name="notes.txt")
    editor.change("B")
    editor.change("C")
    editor.undo()

    view = editor.snapshot()

    assert view == EditorView(
        name="notes.txt", content="B", version=1, history_size=2
    )


def test_can_undo_reflects_history() -> None:
    editor = make_editor("A")
    assert editor.can_undo() is False

    editor.change("B")
    assert editor.can_undo() is True


def test_str_renders_content() -> None:
    editor = Editor.from_text("hello", name="greeting.txt")

    assert str(editor) == "hello"
    assert editor.document.name == "greeting.txt"


def test_bus_emits_change_and_undo_views() -> None:
    editor = make_editor("A")
    seen: List[tuple[str, object]] = []
    editor.bus.subscribe(CHANGE, lambda payload: seen.append((CHANGE, payload)))
    editor.bus.subscribe(UNDO, lambda payload: seen.append((UNDO, payload)))

    editor.change("B")
    editor.undo()

    assert [name for name, _ in seen] == [CHANGE, UNDO]
    assert isinstance(seen[0][1], EditorView)
    assert seen[0][1].content == "B"
    assert seen[1][1].content == "A"


def test_history_limit_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLAINTEXT_EDITOR_HISTORY_LIMIT", "2")

    editor = make_editor("A")
    for text in ("B", "C", "D"):
        editor.change(text)

    assert editor.history.contents() == ("C", "D")


def test_thread_safe_editor_keeps_history_in_sync() -> None:
    editor = Editor.from_text("", thread_safe=True)

    def worker(prefix: str) -> None:
        for i in range(25):
            editor.change(f"{prefix}{i}")

    threads = [threading.Thread(target=worker, args=(p,)) for p in "abcd"]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(editor.history) == 101
    assert editor.history.peek().content == editor.render()


def test_document_compares_by_identity_and_same_as_by_value() -> None:
    first = Document(name="a.txt", content="x")
    second = Document.from_text("x", name="a.txt")

    assert first != second
    assert first.same_as(second)
    assert not hasattr(first, "length")
