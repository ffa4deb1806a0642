from algoshelf.word_frequency import (
    WordTree,
    build_tree,
    format_report,
    iter_words,
    main,
)

SOURCE_TEXT = "hey_this, is a. test input \n to a_file"


def test_tree_shape_from_source():
    tree = build_tree(SOURCE_TEXT)
    root = tree.root
    assert root.word == "hey"
    assert root.frequency == 1
    assert root.left.word == "a"
    assert root.left.frequency == 2
    assert root.right.word == "this"
    assert root.left.right.word == "file"
    assert root.right.left.word == "is"


def test_items_sorted_and_counts_total():
    tree = build_tree(SOURCE_TEXT)
    items = list(tree.items())
    words = [word for word, _ in items]
    assert words == sorted(words)
    assert len(set(words)) == len(words)
    assert sum(count for _, count in items) == len(list(iter_words(SOURCE_TEXT)))


def test_words_are_lowercased():
    assert list(iter_words("Hey HEY hey")) == ["hey", "hey", "hey"]


def test_apostrophe_and_hyphen_kept_inside_words():
    assert list(iter_words("persons' yours-not")) == ["persons'", "yours-not"]


def test_trailing_hyphen_dropped():
    assert list(iter_words("end-")) == ["end"]
    assert list(iter_words("end- more")) == ["end", "more"]


def test_leading_punctuation_ignored():
    assert list(iter_words("--'word")) == ["word"]


def test_add_counts_duplicates():
    tree = WordTree()
    for word in ["b", "a", "b", "c", "b"]:
        tree.add(word)
    assert dict(tree.items()) == {"a": 1, "b": 3, "c": 1}


def test_report_heading_and_first_row():
    report = format_report(build_tree(SOURCE_TEXT))
    lines = report.splitlines(keepends=True)
    assert lines[0] == "S/N   \t FREQUENCY \t WORD \n"
    assert lines[1] == "1     \t 2         \t a \n"
    assert lines[2] == "2     \t 1         \t file \n"
    assert len(lines) == 1 + len(list(build_tree(SOURCE_TEXT).items()))


def test_empty_report_has_only_heading():
    assert format_report(WordTree()) == "S/N   \t FREQUENCY \t WORD \n"


def test_main_appends_report(tmp_path):
    source = tmp_path / "file.txt"
    target = tmp_path / "wordcount.txt"
    source.write_text(SOURCE_TEXT, encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    expected = format_report(build_tree(SOURCE_TEXT))
    assert target.read_text(encoding="utf-8") == expected
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == expected * 2


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "out.txt")]) == 1