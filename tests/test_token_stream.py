"""Тесты для потока токенов спецификаций схем."""

import pytest
from pathlib import Path
import sys

# Добавляем путь к src для импорта
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from utils.token_stream import TokenStream, tokenize
from utils.errors import ConfigurationError


class TestTokenize:
    """Тесты для разбиения на токены."""

    def test_words_and_numbers(self):
        tokens = tokenize("cellCoBlended 1 LUST grad(U) 1e1 upwind;")
        assert [t.text for t in tokens] == ["cellCoBlended", "1", "LUST", "grad(U)",
                                            "1e1", "upwind"]
        assert [t.is_number for t in tokens] == [False, True, False, False, True, False]

    def test_positions(self):
        tokens = tokenize("linear\n  upwind phi")
        assert (tokens[0].line, tokens[0].column) == (1, 1)
        assert (tokens[1].line, tokens[1].column) == (2, 3)
        assert (tokens[2].line, tokens[2].column) == (2, 10)

    def test_comments_dropped(self):
        assert [t.text for t in tokenize("upwind phi // комментарий")] == ["upwind", "phi"]

    def test_words_with_commas(self):
        assert tokenize("div(phi,U)")[0].text == "div(phi,U)"


class TestTokenStream:
    """Тесты для последовательного чтения."""

    def test_read_sequence(self):
        stream = TokenStream("cellCoBlended 0.5 linear 2 upwind phi")
        assert stream.read_word() == "cellCoBlended"
        assert stream.read_scalar() == pytest.approx(0.5)
        assert stream.peek() == "linear"
        assert stream.read_word() == "linear"
        assert stream.read_scalar() == pytest.approx(2.0)
        assert stream.remaining() == "upwind phi"
        stream.read_word()
        stream.read_word()
        assert stream.eof()
        assert stream.peek() is None
        stream.check_eof()

    def test_scalar_expected(self):
        stream = TokenStream("linear 1", source="divSchemes/div(phi,T)")
        with pytest.raises(ConfigurationError) as err:
            stream.read_scalar()
        assert "linear" in str(err.value)
        assert "divSchemes/div(phi,T)" in str(err.value)
        assert "столбец 1" in str(err.value)

    def test_word_expected(self):
        stream = TokenStream("1 linear")
        with pytest.raises(ConfigurationError):
            stream.read_word()

    def test_exhausted(self):
        stream = TokenStream("")
        assert stream.eof()
        with pytest.raises(ConfigurationError) as err:
            stream.read_word()
        assert "конец потока" in str(err.value)

    def test_trailing_tokens(self):
        stream = TokenStream("linear extra")
        stream.read_word()
        with pytest.raises(ConfigurationError) as err:
            stream.check_eof()
        assert "extra" in str(err.value)

    def test_location_token_index(self):
        stream = TokenStream("a b c")
        stream.read_word()
        stream.read_word()
        assert "токен 3" in stream.location()
