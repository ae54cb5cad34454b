"""Dice formula parsing and evaluation."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from sentiment.core.rng import RNG

MAX_DICE_PER_TERM = 100

_TERM_RE = re.compile(r"\s*([+-])?\s*(?:(\d*)[dD](\d+)|(\d+))\s*")


class DiceFormulaError(ValueError):
    """Raised when a dice formula cannot be parsed."""


@dataclass(frozen=True, slots=True)
class FormulaTerm:
    """One signed term of a formula: either NdM dice or a flat constant."""

    sign: int
    count: int
    faces: int | None = None

    @property
    def is_dice(self) -> bool:
        return self.faces is not None


@dataclass(frozen=True, slots=True)
class RolledTerm:
    term: FormulaTerm
    results: Tuple[int, ...]
    value: int


@dataclass(frozen=True, slots=True)
class DiceRoll:
    """Evaluated formula with a per-term breakdown."""

    formula: str
    terms: Tuple[RolledTerm, ...]
    total: int

    @property
    def dice_results(self) -> List[int]:
        return [result for rolled in self.terms for result in rolled.results]


def parse_formula(formula: str) -> List[FormulaTerm]:
    """
    Parse a formula such as "1d20", "+0" or "+1d4-1" into signed terms.

    A blank formula parses to no terms. Every term after the first needs an
    explicit sign.
    """
    text = formula.strip()
    terms: List[FormulaTerm] = []
    pos = 0
    while pos < len(text):
        match = _TERM_RE.match(text, pos)
        if match is None:
            raise DiceFormulaError(f"Invalid dice formula: {formula!r}")
        sign_token, count_token, faces_token, constant_token = match.groups()
        if terms and sign_token is None:
            raise DiceFormulaError(f"Missing operator in dice formula: {formula!r}")
        sign = -1 if sign_token == "-" else 1
        if faces_token is not None:
            count = int(count_token) if count_token else 1
            faces = int(faces_token)
            if faces < 1 or count < 1:
                raise DiceFormulaError(f"Dice terms need at least one die and one face: {formula!r}")
            if count > MAX_DICE_PER_TERM:
                raise DiceFormulaError(f"Too many dice in one term (max {MAX_DICE_PER_TERM}): {formula!r}")
            terms.append(FormulaTerm(sign=sign, count=count, faces=faces))
        else:
            terms.append(FormulaTerm(sign=sign, count=int(constant_token)))
        pos = match.end()
    return terms


class DiceRoller:
    """Evaluates dice formulas against an RNG."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def roll(self, formula: str) -> DiceRoll:
        terms = parse_formula(formula)
        rolled: List[RolledTerm] = []
        for term in terms:
            if term.is_dice:
                assert term.faces is not None
                results = tuple(self._rng.roll_die(term.faces) for _ in range(term.count))
                value = term.sign * sum(results)
            else:
                results = ()
                value = term.sign * term.count
            rolled.append(RolledTerm(term=term, results=results, value=value))
        return DiceRoll(formula=formula, terms=tuple(rolled), total=sum(r.value for r in rolled))

    def roll_die(self, faces: int) -> int:
        """Shortcut for a single die, returned as a bare integer."""
        return self.roll(f"1d{faces}").total
