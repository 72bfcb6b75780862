"""LL(1) predictive parser built from FIRST and FOLLOW sets.

Upper-case letters are non-terminals and every other character is a
terminal. The body ``e`` stands for the empty string and ``$`` marks the
end of the input.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Mapping, Optional, Sequence

EPSILON = "e"
END_MARKER = "$"

Production = tuple[str, str]


def _is_terminal(symbol: str) -> bool:
    return not "A" <= symbol <= "Z"


class ParseError(ValueError):
    """Raised when an input string cannot be derived from the grammar.

    ``steps`` holds the productions applied before the failure.
    """

    def __init__(
        self, text: str, position: int, message: str, steps: Sequence[Production] = ()
    ) -> None:
        super().__init__(f"{message} at position {position} of {text!r}")
        self.text = text
        self.position = position
        self.steps = list(steps)


def parse_production(line: str) -> tuple[str, list[str]]:
    """Split ``A->x|y`` into its head and its list of bodies."""
    if len(line) < 3 or line[1:3] != "->":
        raise ValueError(f"production must look like 'A->body|body': {line!r}")
    head = line[0]
    if _is_terminal(head):
        raise ValueError(f"head of a production must be a non-terminal: {head!r}")
    return head, line[3:].split("|")


class TopDownParser:
    """A table-driven predictive parser for an LL(1) grammar."""

    def __init__(self, start_symbol: str, grammar: Mapping[str, Sequence[str]]) -> None:
        if len(start_symbol) != 1 or _is_terminal(start_symbol):
            raise ValueError(f"start symbol must be a non-terminal: {start_symbol!r}")
        for head in grammar:
            if len(head) != 1 or _is_terminal(head):
                raise ValueError(f"head of a production must be a non-terminal: {head!r}")
        self.start_symbol = start_symbol
        self.grammar: dict[str, list[str]] = {
            head: list(bodies) for head, bodies in grammar.items()
        }

        non_terminals = set(self.grammar) | {start_symbol}
        terminals: set[str] = set()
        for bodies in self.grammar.values():
            for body in bodies:
                for symbol in body:
                    (terminals if _is_terminal(symbol) else non_terminals).add(symbol)
        terminals.discard(EPSILON)
        self.terminals = frozenset(terminals)
        self.non_terminals = frozenset(non_terminals)

        self._first: dict[str, set[str]] = {symbol: set() for symbol in non_terminals}
        self._follow: dict[str, set[str]] = {symbol: set() for symbol in non_terminals}
        self._table: dict[str, dict[str, str]] = {}
        self._compute_first()
        self._compute_follow()
        self._build_table()

    def _productions(self) -> Iterator[Production]:
        for head, bodies in self.grammar.items():
            for body in bodies:
                yield head, body

    def _first_of_string(self, body: str) -> set[str]:
        if body == EPSILON:
            return {EPSILON}
        result: set[str] = set()
        for symbol in body:
            if _is_terminal(symbol):
                result.add(symbol)
                return result
            first = self._first[symbol]
            result |= first - {EPSILON}
            if EPSILON not in first:
                return result
        result.add(EPSILON)
        return result

    def _compute_first(self) -> None:
        changed = True
        while changed:
            changed = False
            for head, body in self._productions():
                found = self._first_of_string(body)
                if not found <= self._first[head]:
                    self._first[head] |= found
                    changed = True

    def _compute_follow(self) -> None:
        self._follow[self.start_symbol].add(END_MARKER)
        changed = True
        while changed:
            changed = False
            for head, body in self._productions():
                if body == EPSILON:
                    continue
                for index, symbol in enumerate(body):
                    if _is_terminal(symbol):
                        continue
                    rest = self._first_of_string(body[index + 1:])
                    found = rest - {EPSILON}
                    if EPSILON in rest:
                        found |= self._follow[head]
                    if not found <= self._follow[symbol]:
                        self._follow[symbol] |= found
                        changed = True

    def _build_table(self) -> None:
        for head, body in self._productions():
            row = self._table.setdefault(head, {})
            first = self._first_of_string(body)
            if body != EPSILON:
                for symbol in first - {EPSILON}:
                    row[symbol] = body
            if EPSILON in first:
                for symbol in self._follow[head]:
                    row[symbol] = body

    @property
    def table(self) -> dict[str, dict[str, str]]:
        """The parse table: non-terminal, then lookahead, to the body to apply."""
        return {head: dict(row) for head, row in self._table.items()}

    def first(self, symbol: str) -> frozenset[str]:
        """FIRST set of a grammar symbol."""
        if _is_terminal(symbol):
            return frozenset({symbol})
        if symbol not in self._first:
            raise KeyError(symbol)
        return frozenset(self._first[symbol])

    def follow(self, symbol: str) -> frozenset[str]:
        """FOLLOW set of a non-terminal."""
        if symbol not in self._follow:
            raise KeyError(symbol)
        return frozenset(self._follow[symbol])

    def derive(self, text: str) -> list[Production]:
        """The productions of the leftmost derivation of ``text``.

        Raises :class:`ParseError` when ``text`` is not in the language.
        """
        stack = [self.start_symbol]
        position = 0
        steps: list[Production] = []
        while stack:
            top = stack[-1]
            current = text[position] if position < len(text) else END_MARKER
            if position < len(text) and top == current:
                stack.pop()
                position += 1
                continue
            if _is_terminal(top):
                raise ParseError(text, position, f"expected {top!r}", steps)
            body = self._table.get(top, {}).get(current)
            if body is None:
                raise ParseError(
                    text, position, f"no production for {top!r} on {current!r}", steps
                )
            stack.pop()
            if body != EPSILON:
                stack.extend(reversed(body))
            steps.append((top, body))
        if position != len(text):
            raise ParseError(text, position, "unexpected trailing input", steps)
        return steps

    def parse(self, text: str) -> bool:
        """Whether ``text`` can be derived from the grammar."""
        try:
            self.derive(text)
        except ParseError:
            return False
        return True

    def describe(self) -> str:
        """The grammar, its FIRST and FOLLOW sets and the parse table."""
        non_terminals = sorted(self.non_terminals)
        lines = [
            "Grammar of the Parser : ",
            f"Start Symbol : {self.start_symbol}",
            "Terminals : " + " ".join(sorted(self.terminals)),
            "Non-Terminals : " + " ".join(non_terminals),
            "",
            "Productions : ",
        ]
        lines += [f"{head} -> " + " | ".join(bodies) for head, bodies in self.grammar.items()]
        lines.append("")
        lines += [f"FIRST({a}): " + "  ".join(sorted(self._first[a])) for a in non_terminals]
        lines.append("")
        lines += [f"FOLLOW({a}): " + "  ".join(sorted(self._follow[a])) for a in non_terminals]
        lines.append("")
        lines.append("Parse Table : ")
        for head in sorted(self._table):
            for symbol, body in sorted(self._table[head].items()):
                lines.append(f"M[{head},{symbol}] = {head}->{body}")
        return "\n".join(lines)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a grammar and input strings from standard input and parse them."""
    argparse.ArgumentParser(
        description="Build an LL(1) parser from a grammar read on standard input."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)

    print("What is the Start Symbol?")
    start = next(tokens, None)
    if start is None:
        print("No start symbol given.", file=sys.stderr)
        return 1
    print("Enter Productions as : Non-Terminal->String of Terminals and Non-terminals or Epsilon Only.")
    print('Enter "done" to Stop Putting Productions.')
    grammar: dict[str, list[str]] = {}
    for token in tokens:
        if token == "done":
            break
        try:
            head, bodies = parse_production(token)
        except ValueError as error:
            print(error, file=sys.stderr)
            continue
        grammar.setdefault(head, []).extend(bodies)

    try:
        parser = TopDownParser(start[0], grammar)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print()
    print(parser.describe())
    print()
    print("Enter your Input Strings to check if they can be Derived from this Grammar.")
    print('Enter "done" to Stop.')
    for token in tokens:
        if token == "done":
            break
        print("Parsing input... ")
        try:
            steps = parser.derive(token)
        except ParseError as error:
            for head, body in error.steps:
                print(f"{head}->{body}")
            print("\nError Input.\n")
            continue
        for head, body in steps:
            print(f"{head}->{body}")
        print("\nInput Parsed Successfully. Input CAN be derived from GIVEN Grammar.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())