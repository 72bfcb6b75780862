import io

import pytest

from algoshelf.ll1_parser import (
    EPSILON,
    ParseError,
    TopDownParser,
    main,
    parse_production,
)

EXPRESSIONS = {
    "E": ["TX"],
    "X": ["+TX", "e"],
    "T": ["FY"],
    "Y": ["*FY", "e"],
    "F": ["(E)", "i"],
}

BRACKETS = {
    "E": ["TW"],
    "W": ["+TW", "e"],
    "T": ["iY"],
    "Y": ["[U", "e"],
    "U": ["]", "X]"],
    "X": ["EZ"],
    "Z": [",E", "e"],
}


@pytest.fixture
def expressions():
    return TopDownParser("E", EXPRESSIONS)


def replay(start, steps):
    form = start
    for head, body in steps:
        index = next(i for i, ch in enumerate(form) if "A" <= ch <= "Z")
        assert form[index] == head
        form = form[:index] + ("" if body == EPSILON else body) + form[index + 1:]
    return form


def test_first_sets(expressions):
    assert expressions.first("E") == {"(", "i"}
    assert expressions.first("X") == {"+", EPSILON}
    assert expressions.first("i") == {"i"}


def test_follow_sets(expressions):
    assert expressions.follow("E") == {")", "$"}
    assert expressions.follow("X") == expressions.follow("E")
    assert expressions.follow("F") >= expressions.follow("T")


def test_follow_of_unknown_symbol(expressions):
    with pytest.raises(KeyError):
        expressions.follow("Q")


@pytest.mark.parametrize("text", ["i", "i+i", "i+i*i", "(i+i)*i", "((i))"])
def test_accepts_expressions(expressions, text):
    assert expressions.parse(text) is True
    assert replay("E", expressions.derive(text)) == text


@pytest.mark.parametrize("text", ["", "i+", "+i", "(i", "ii", "i)"])
def test_rejects_bad_expressions(expressions, text):
    assert expressions.parse(text) is False
    with pytest.raises(ParseError):
        expressions.derive(text)


def test_first_step_uses_start_production(expressions):
    assert expressions.derive("i")[0] == ("E", "TX")


@pytest.mark.parametrize("text", ["i", "i[]", "i[i,i]", "i+i[i]"])
def test_bracket_grammar_accepts(text):
    parser = TopDownParser("E", BRACKETS)
    assert replay("E", parser.derive(text)) == text


def test_bracket_grammar_rejects():
    parser = TopDownParser("E", BRACKETS)
    assert parser.parse("i[") is False
    assert parser.parse("i[i,]") is False


def test_parse_production_splits_bodies():
    assert parse_production("X->+TX|e") == ("X", ["+TX", "e"])
    assert parse_production("E->TX") == ("E", ["TX"])


@pytest.mark.parametrize("line", ["bad", "E=TX", "a->b"])
def test_parse_production_rejects(line):
    with pytest.raises(ValueError):
        parse_production(line)


def test_invalid_start_symbol():
    with pytest.raises(ValueError):
        TopDownParser("a", EXPRESSIONS)


def test_describe_mentions_start_and_table(expressions):
    text = expressions.describe()
    assert "Start Symbol : E" in text
    assert "M[E,i] = E->TX" in text


def test_main_reads_grammar_and_inputs(monkeypatch, capsys):
    script = "E\nE->TX\nX->+TX|e\nT->FY\nY->*FY|e\nF->(E)|i\ndone\ni+i\ni+\ndone\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Input Parsed Successfully" in out
    assert "Error Input." in out