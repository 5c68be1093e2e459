from pathlib import Path

import pytest

from plaintext_editor.search import (
    enumerate_text_files,
    index_directory,
    iter_entries,
    read_text,
    search_directory,
)


def make_tree(root: Path) -> Path:
    (root / "nested" / "deeper").mkdir(parents=True)
    (root / "a.txt").write_text("foo bar", encoding="utf-8")
    (root / "b.txt").write_text("foo", encoding="utf-8")
    (root / "nested" / "c.txt").write_text("bar baz", encoding="utf-8")
    (root / "nested" / "deeper" / "d.txt").write_text("foo baz", encoding="utf-8")
    (root / "notes.md").write_text("foo bar", encoding="utf-8")
    return root


def test_enumerate_is_recursive_and_filtered(tmp_path: Path) -> None:
    root = make_tree(tmp_path)

    files = enumerate_text_files(root)

    assert files == sorted(
        str(p)
        for p in (
            root / "a.txt",
            root / "b.txt",
            root / "nested" / "c.txt",
            root / "nested" / "deeper" / "d.txt",
        )
    )


def test_enumerate_non_recursive(tmp_path: Path) -> None:
    root = make_tree(tmp_path)

    files = enumerate_text_files(root, recursive=False)

    assert files == [str(root / "a.txt"), str(root / "b.txt")]


def test_enumerate_custom_pattern(tmp_path: Path) -> None:
    root = make_tree(tmp_path)

    assert enumerate_text_files(root, pattern="*.md") == [str(root / "notes.md")]


def test_enumerate_missing_directory_is_empty(tmp_path: Path) -> None:
    assert enumerate_text_files(tmp_path / "nope") == []
    assert enumerate_text_files("/does/not/exist") == []


def test_enumerate_file_path_is_empty(tmp_path: Path) -> None:
    root = make_tree(tmp_path)

    assert enumerate_text_files(root / "a.txt") == []


def test_enumerate_uses_pattern_from_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = make_tree(tmp_path)
    monkeypatch.setenv("PLAINTEXT_EDITOR_FILE_PATTERN", "*.md")

    assert enumerate_text_files(root) == [str(root / "notes.md")]


def test_read_text_and_iter_entries(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes("café".encode("latin-1"))

    assert read_text(path, encoding="latin-1") == "café"
    assert list(iter_entries([str(path)], encoding="latin-1")) == [
        (str(path), "café")
    ]


def test_search_directory_and_semantics(tmp_path: Path) -> None:
    root = make_tree(tmp_path)

    assert search_directory(root, "foo", "bar") == [str(root / "a.txt")]


def test_search_directory_without_keywords_lists_all(tmp_path: Path) -> None:
    root = make_tree(tmp_path)

    assert search_directory(root) == enumerate_text_files(root)


def test_search_missing_directory_returns_empty() -> None:
    assert search_directory("/does/not/exist", "x") == []


def test_index_missing_directory_returns_empty() -> None:
    assert index_directory("/does/not/exist", "x") == {}


def test_index_directory(tmp_path: Path) -> None:
    root = make_tree(tmp_path)

    result = index_directory(root, "baz", "bar", "absent")

    assert result == {
        "bar": [str(root / "a.txt"), str(root / "nested" / "c.txt")],
        "baz": [
            str(root / "nested" / "c.txt"),
            str(root / "nested" / "deeper" / "d.txt"),
        ],
    }


def test_parallel_scan_keeps_enumeration_order(tmp_path: Path) -> None:
    for i in range(20):
        (tmp_path / f"f{i:02d}.txt").write_text(
            "even" if i % 2 == 0 else "odd", encoding="utf-8"
        )

    serial = search_directory(tmp_path, "even", workers=1)
    parallel = search_directory(tmp_path, "even", workers=4)

    assert parallel == serial
    assert parallel == [str(tmp_path / f"f{i:02d}.txt") for i in range(0, 20, 2)]
    assert index_directory(tmp_path, "odd", workers=4)["odd"] == [
        str(tmp_path / f"f{i:02d}.txt") for i in range(1, 20, 2)
    ]


def test_scan_tolerates_non_utf8_files(tmp_path: Path) -> None:
    (tmp_path / "good.txt").write_text("foo", encoding="utf-8")
    (tmp_path / "legacy.txt").write_bytes(b"caf\xe9 foo")
    (tmp_path / "other.txt").write_text("bar", encoding="utf-8")

    assert search_directory(tmp_path, "foo") == [
        str(tmp_path / "good.txt"),
        str(tmp_path / "legacy.txt"),
    ]
    assert index_directory(tmp_path, "caf", "bar", workers=2) == {
        "caf": [str(tmp_path / "legacy.txt")],
        "bar": [str(tmp_path / "other.txt")],
    }
    assert read_text(tmp_path / "legacy.txt") == "caf\ufffd foo"


def test_strict_decoding_can_be_requested(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "legacy.txt"
    path.write_bytes(b"caf\xe9")

    with pytest.raises(UnicodeDecodeError):
        read_text(path, errors="strict")

    monkeypatch.setenv("PLAINTEXT_EDITOR_DECODE_ERRORS", "strict")
    with pytest.raises(UnicodeDecodeError):
        search_directory(tmp_path, "caf")
