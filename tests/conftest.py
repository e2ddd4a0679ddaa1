import pytest

WORDS = ["cat", "dog", "catalog", "", "Cat", "dog", "scatter", "über"]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path
