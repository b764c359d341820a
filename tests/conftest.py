# tests/conftest.py
import pytest

from easyfts.stopwords import STOP_WORDS_ENV


@pytest.fixture(autouse=True)
def no_stop_words_env(monkeypatch):
    monkeypatch.delenv(STOP_WORDS_ENV, raising=False)


@pytest.fixture
def stop_words_file(tmp_path):
    path = tmp_path / "stopwords.txt"
    path.write_text("# common words\nthe\n\nA\nof\n", encoding="utf-8")
    return path
