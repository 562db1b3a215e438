"""
shuffler.py
===========
Перемешивание «дефисной» строки алгоритмом Фишера–Йетса.

Строка `"D-B-A-C"` режется по `-` на токены, токены переставляются
(каждая из n! перестановок равновероятна), результат склеивается обратно.

✔ Токены непрозрачны: `"10"`, `"99"`, повторы и пустые токены сохраняются
✔ Пустая строка → ноль токенов → пустая строка
✔ Исходный список токенов вызывающего не мутируется
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, MutableSequence, Protocol, Sequence, TypeVar

from fisher_yates.services.random_source import make_rng

__all__ = [
    "DELIMITER",
    "ShufflerService",
    "FisherYatesShufflerService",
    "fisher_yates",
    "split_tokens",
    "join_tokens",
]

DELIMITER = "-"

T = TypeVar("T")


class RandIntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def split_tokens(text: str) -> List[str]:
    """`""` → `[]`, иначе обычный split по дефису."""
    if not text:
        return []
    return text.split(DELIMITER)


def join_tokens(tokens: Sequence[str]) -> str:
    return DELIMITER.join(tokens)


def fisher_yates(items: MutableSequence[T], rng: RandIntSource) -> MutableSequence[T]:
    """
    In-place перестановка (современный вариант алгоритма).

    i идёт от n-1 до 1, j ∈ [0, i] включительно, затем swap(i, j).
    Возвращает тот же объект `items`.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


class ShufflerService(ABC):
    """Контракт: перемешать токены дефисной строки."""

    @abstractmethod
    def shuffle(self, input: str) -> str:
        ...


class FisherYatesShufflerService(ShufflerService):
    """
    Шафлер на Фишере–Йетсе.
    Если `rng` не передан — берётся свежий `random.Random()` (сид из ОС).
    """

    def __init__(self, rng: RandIntSource | None = None):
        self._rng = rng or make_rng("pseudo")

    def shuffle(self, input: str) -> str:
        tokens = split_tokens(input)   # новый список, вход не трогаем
        fisher_yates(tokens, self._rng)
        return join_tokens(tokens)
