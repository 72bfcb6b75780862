"""Classical ciphers over lower-case Latin letters."""

from __future__ import annotations

import random
from itertools import cycle
from typing import Iterable, Iterator, Optional, Sequence

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def _offsets(text: Iterable[str], limit: int = 26) -> list[int]:
    """Letter offsets from ``'a'``; anything outside ``0 .. limit-1`` is rejected."""
    result = []
    for char in text:
        offset = ord(char) - ord("a")
        if not 0 <= offset < limit:
            raise ValueError(f"unsupported character {char!r}")
        result.append(offset)
    return result


def _letters(offsets: Iterable[int]) -> str:
    return "".join(chr(ord("a") + offset) for offset in offsets)


class ShiftCipher:
    """Caesar cipher: every letter moves ``key`` places along the alphabet."""

    def __init__(self, key: int) -> None:
        self.key = key

    def encrypt(self, plaintext: str) -> str:
        return _letters((offset + self.key) % 26 for offset in _offsets(plaintext))

    def decrypt(self, ciphertext: str) -> str:
        return _letters((offset - self.key) % 26 for offset in _offsets(ciphertext))


class PlayfairCipher:
    """Digram cipher on a 5x5 key square without the letter ``j``."""

    def __init__(self, key: str) -> None:
        _offsets(key)
        if "j" in key:
            raise ValueError("the key square has no place for 'j'")
        order = list(dict.fromkeys(key))
        letters = order + [c for c in ALPHABET if c != "j" and c not in order]
        self.grid = tuple("".join(letters[row * 5:row * 5 + 5]) for row in range(5))
        self._position = {letter: divmod(i, 5) for i, letter in enumerate(letters)}

    def _check(self, text: str) -> None:
        for char in text:
            if char not in self._position:
                raise ValueError(f"unsupported character {char!r}")

    @staticmethod
    def _prepare(plaintext: str) -> str:
        chars = list(plaintext)
        i = 0
        while i + 1 < len(chars):
            if chars[i] == chars[i + 1]:
                chars.insert(i + 1, "x")
            i += 2
        if len(chars) % 2:
            chars.append("x")
        return "".join(chars)

    def _transform(self, text: str, shift: int) -> str:
        out: list[str] = []
        for a, b in zip(text[0::2], text[1::2]):
            (row_a, col_a), (row_b, col_b) = self._position[a], self._position[b]
            if row_a == row_b:
                out += [self.grid[row_a][(col_a + shift) % 5], self.grid[row_b][(col_b + shift) % 5]]
            elif col_a == col_b:
                out += [self.grid[(row_a + shift) % 5][col_a], self.grid[(row_b + shift) % 5][col_b]]
            else:
                out += [self.grid[row_a][col_b], self.grid[row_b][col_a]]
        return "".join(out)

    def encrypt(self, plaintext: str) -> str:
        """Split into digrams, separating doubled letters and padding with ``x``."""
        self._check(plaintext)
        return self._transform(self._prepare(plaintext), 1)

    def decrypt(self, ciphertext: str) -> str:
        """Undo the digram substitution; padding letters are kept."""
        self._check(ciphertext)
        if len(ciphertext) % 2:
            raise ValueError("ciphertext length must be even")
        return self._transform(ciphertext, -1)


class HillCipher:
    """Matrix cipher over blocks of ``n`` letters, with a supplied inverse key."""

    def __init__(self, key: Sequence[Sequence[int]], key_inverse: Sequence[Sequence[int]]) -> None:
        self.key = [list(row) for row in key]
        self.key_inverse = [list(row) for row in key_inverse]
        size = len(self.key)
        for matrix in (self.key, self.key_inverse):
            if len(matrix) != size or any(len(row) != size for row in matrix):
                raise ValueError("keys must be square matrices of the same size")
        if size == 0:
            raise ValueError("key must not be empty")
        self.size = size

    def _apply(self, matrix: list[list[int]], text: str) -> str:
        values = _offsets(text)
        if len(values) % self.size:
            raise ValueError(f"text length must be a multiple of {self.size}")
        out: list[int] = []
        for start in range(0, len(values), self.size):
            block = values[start:start + self.size]
            out.extend(sum(k * v for k, v in zip(row, block)) % 26 for row in matrix)
        return _letters(out)

    def encrypt(self, plaintext: str) -> str:
        return self._apply(self.key, plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return self._apply(self.key_inverse, ciphertext)


def _key_offsets(key: str) -> list[int]:
    if not key:
        raise ValueError("key must not be empty")
    return _offsets(key)


class VigenereCipher:
    """Polyalphabetic shift cipher with a repeating key word."""

    def __init__(self, key: str) -> None:
        self._shifts = _key_offsets(key)
        self.key = key

    def encrypt(self, plaintext: str) -> str:
        return _letters((p + k) % 26 for p, k in zip(_offsets(plaintext), cycle(self._shifts)))

    def decrypt(self, ciphertext: str) -> str:
        return _letters((c - k) % 26 for c, k in zip(_offsets(ciphertext), cycle(self._shifts)))


class VernamCipher:
    """XOR of letter offsets with a repeating key.

    Results above ``z`` are written as the characters that follow it.
    """

    def __init__(self, key: str) -> None:
        self._pad = _key_offsets(key)
        self.key = key

    def _xor(self, offsets: list[int]) -> str:
        return _letters(value ^ k for value, k in zip(offsets, cycle(self._pad)))

    def encrypt(self, plaintext: str) -> str:
        return self._xor(_offsets(plaintext))

    def decrypt(self, ciphertext: str) -> str:
        return self._xor(_offsets(ciphertext, limit=32))


class RailFenceCipher:
    """Transposition that writes the text in a zig-zag over ``rails`` rows."""

    def __init__(self, rails: int) -> None:
        if rails < 1:
            raise ValueError("there must be at least one rail")
        self.rails = rails

    def _pattern(self, length: int) -> Iterator[int]:
        if self.rails == 1:
            yield from (0 for _ in range(length))
            return
        row, step = 0, 1
        for _ in range(length):
            yield row
            if row == 0:
                step = 1
            elif row == self.rails - 1:
                step = -1
            row += step

    def encrypt(self, plaintext: str) -> str:
        rows: list[list[str]] = [[] for _ in range(self.rails)]
        for char, row in zip(plaintext, self._pattern(len(plaintext))):
            rows[row].append(char)
        return "".join("".join(row) for row in rows)

    def decrypt(self, ciphertext: str) -> str:
        pattern = list(self._pattern(len(ciphertext)))
        order = sorted(range(len(ciphertext)), key=lambda i: (pattern[i], i))
        result = [""] * len(ciphertext)
        for char, index in zip(ciphertext, order):
            result[index] = char
        return "".join(result)


class RowColumnCipher:
    """Columnar transposition; ``key`` lists the 1-based columns in reading order.

    The last row is padded with random letters drawn from ``rng``.
    """

    def __init__(self, key: Sequence[int], rng: Optional[random.Random] = None) -> None:
        self.key = list(key)
        if not self.key or sorted(self.key) != list(range(1, len(self.key) + 1)):
            raise ValueError("key must be a permutation of 1 .. n")
        self._rng = rng or random.Random()

    def _positions(self, rows: int) -> list[int]:
        width = len(self.key)
        return [row * width + column - 1 for column in self.key for row in range(rows)]

    def encrypt(self, plaintext: str) -> str:
        width = len(self.key)
        rows = -(-len(plaintext) // width)
        padding = "".join(self._rng.choice(ALPHABET) for _ in range(rows * width - len(plaintext)))
        padded = plaintext + padding
        return "".join(padded[position] for position in self._positions(rows))

    def decrypt(self, ciphertext: str) -> str:
        width = len(self.key)
        if len(ciphertext) % width:
            raise ValueError(f"ciphertext length must be a multiple of {width}")
        cells = [""] * len(ciphertext)
        for char, position in zip(ciphertext, self._positions(len(ciphertext) // width)):
            cells[position] = char
        return "".join(cells)