"""
services/random_source.py
Фабрика генераторов случайных чисел для шафлера.
"""
import random

RandomSource = random.Random


def make_rng(kind: str = "pseudo") -> RandomSource:
    """
    Новый генератор на каждый вызов.
    • pseudo — Mersenne Twister, сид берётся из os.urandom (не константа!)
    • system — SystemRandom поверх os.urandom
    """
    if kind == "pseudo":
        return random.Random()
    if kind == "system":
        return random.SystemRandom()
    raise ValueError(f"Неизвестный источник случайности: {kind!r}")
