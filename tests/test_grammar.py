import pytest

from state2circuit.grammar import (
    LiteralCoefficient,
    NumericCoefficient,
    basis_bits,
    parse_wavefunction,
)


def coefficients(result):
    return [t.coefficient for t in result.terms]


def test_bell_terms():
    res = parse_wavefunction("(0.707)|00> + (0.707)|11>", 2)
    assert res.matched
    assert [t.index for t in res.terms] == [0, 3]
    assert coefficients(res) == [NumericCoefficient(0.707 + 0j)] * 2
    assert res.invalid_terms == []


def test_short_basis_is_left_padded():
    res = parse_wavefunction("(1)|1>", 3)
    assert res.terms[0].bits == "001"
    assert res.terms[0].index == 1


def test_long_basis_is_rejected_whatever_its_value():
    res = parse_wavefunction("(0)|0001> + (1)|01>", 3)
    assert res.invalid_terms == ["|0001>"]
    assert [t.bits for t in res.terms] == ["001"]
    assert res.matched


@pytest.mark.parametrize(
    "text,expected",
    [
        ("|0> + |1>", [1, 1]),
        ("-|1>", [-1]),
        ("+|1>", [1]),
        ("0.6|0> - 0.8|1>", [0.6, -0.8]),
        ("0.6|0>-0.8|1>", [0.6, -0.8]),
        ("1e-1|0>", [0.1]),
        ("( 0.5 ) | 1 >", [0.5]),
        ("- (0.25)|1>", [-0.25]),
    ],
)
def test_real_coefficients(text, expected):
    res = parse_wavefunction(text, 1)
    assert [c.value for c in coefficients(res)] == [complex(e, 0) for e in expected]
    assert all(c.is_real for c in coefficients(res))


def test_complex_coefficients():
    res = parse_wavefunction("(0.6+0.8i)|0> + 0.8j|1> - 0.5i|1>", 1)
    values = [c.value for c in coefficients(res)]
    assert values == [complex(0.6, 0.8), 0.8j, -0.5j]
    assert not coefficients(res)[0].is_real


def test_negated_parenthesized_complex():
    res = parse_wavefunction("-(0.6+0.8i)|1>", 1)
    assert res.terms[0].coefficient.value == complex(-0.6, -0.8)


@pytest.mark.parametrize(
    "text,literal",
    [
        ("(abc)|1>", "abc"),
        ("-(abc)|1>", "-abc"),
        ("+(abc)|1>", "abc"),
        ("(1/sqrt(2))|1>", "1/sqrt2"),
        ("(.)|1>", "."),
        ("(nani)|1>", "nani"),
        ("(infi)|1>", "infi"),
        ("(-inf)|1>", "-inf"),
    ],
)
def test_unparseable_coefficient_is_kept_as_literal(text, literal):
    res = parse_wavefunction(text, 1)
    assert res.terms[0].coefficient == LiteralCoefficient(literal)


def test_no_terms():
    res = parse_wavefunction("garbage text", 1)
    assert not res.matched
    assert res.terms == []


def test_empty_and_none_text():
    assert not parse_wavefunction("", 2).matched
    assert not parse_wavefunction(None, 2).matched


def test_unicode_ket():
    res = parse_wavefunction("0.707|00⟩ + 0.707|11⟩", 2)
    assert [t.index for t in res.terms] == [0, 3]


def test_raw_text_keeps_sign():
    res = parse_wavefunction("(0.2)|1> + (1)|1>", 1)
    assert [t.raw for t in res.terms] == ["(0.2)", "+(1)"]


def test_basis_bits():
    assert basis_bits(5, 3) == "101"
    assert basis_bits(1, 4) == "0001"
