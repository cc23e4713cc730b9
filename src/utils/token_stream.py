"""
Поток токенов для спецификаций схем.

Спецификация схемы — строка вида
``cellCoBlended 1 LUST grad(U) 10 linearUpwind grad(U) phi``;
токены разделяются пробелами, слово может содержать скобки и запятые
(``grad(U)``, ``div(phi,U)``), завершающая ``;`` отбрасывается.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from utils.errors import ConfigurationError

_TOKEN_RE = re.compile(r"[^\s;]+")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class Token:
    """Токен с позицией в исходном тексте."""
    text: str
    line: int
    column: int

    @property
    def is_number(self) -> bool:
        return bool(_NUMBER_RE.match(self.text))


def tokenize(text: str) -> List[Token]:
    """Разбить текст на токены (строки и столбцы с единицы)."""
    tokens = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        # комментарий до конца строки
        line = line.split("//", 1)[0]
        for match in _TOKEN_RE.finditer(line):
            tokens.append(Token(match.group(0), lineno, match.start() + 1))
    return tokens


class TokenStream:
    """
    Последовательное чтение токенов спецификации.

    Параметры
    ---------
    text : str
        Текст спецификации
    source : str
        Имя источника для сообщений об ошибках (ключ словаря схем, файл)
    """

    def __init__(self, text: str, source: str = "<string>"):
        self.text = text
        self.source = source
        self._tokens = tokenize(text)
        self._pos = 0

    def __repr__(self) -> str:
        return f"TokenStream({self.source!r}, {self.remaining()!r})"

    def eof(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> Optional[str]:
        if self.eof():
            return None
        return self._tokens[self._pos].text

    def remaining(self) -> str:
        """Непрочитанная часть потока одной строкой."""
        return " ".join(t.text for t in self._tokens[self._pos:])

    def location(self) -> str:
        """Позиция текущего токена для диагностики."""
        if self.eof():
            return f"{self.source}: конец потока после {len(self._tokens)} токенов"
        tok = self._tokens[self._pos]
        return f"{self.source}: строка {tok.line}, столбец {tok.column}, токен {self._pos + 1}"

    def _next(self, expected: str) -> Token:
        if self.eof():
            raise ConfigurationError(
                f"Ожидался {expected}, но поток исчерпан", self.location()
            )
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def read_word(self) -> str:
        """Прочитать слово (имя схемы, поля и т.п.)."""
        location = self.location()
        tok = self._next("идентификатор")
        if tok.is_number:
            raise ConfigurationError(
                f"Ожидался идентификатор, получено число '{tok.text}'", location
            )
        return tok.text

    def read_scalar(self) -> float:
        """Прочитать скаляр."""
        location = self.location()
        tok = self._next("скаляр")
        if not tok.is_number:
            raise ConfigurationError(
                f"Ожидался скаляр, получено '{tok.text}'", location
            )
        return float(tok.text)

    def check_eof(self):
        """Убедиться, что все токены прочитаны."""
        if not self.eof():
            raise ConfigurationError(
                f"Лишние токены в спецификации: '{self.remaining()}'",
                self.location(),
            )
