"""
Symbolic State Compression
==========================

Compresses a motif list into one linear combination over four fixed
category variables:

    s  (state)      default bucket
    τ  (temporal)
    μ  (memory)
    σ  (spatial)

Each motif contributes exactly one term, weight * variable. The variable
is chosen by fixed priority on the motif's context tags:

    temporal > memory > spatial > state

Tag order and tag count do not matter.

Only linear combinations are ever built, so the algebra here is a small
internal one: Variable, Expression (ordered terms), text rendering,
equality after collecting like terms, and numeric substitution.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from motifvec.core.motif import MotifToken


CATEGORY_SYMBOLS = {
    'state': 's',
    'temporal': 'τ',
    'memory': 'μ',
    'spatial': 'σ',
}

# Highest priority first; anything else falls through to 'state'
CATEGORY_PRIORITY = ('temporal', 'memory', 'spatial')
DEFAULT_CATEGORY = 'state'


@dataclass(frozen=True)
class Variable:
    """Named symbolic variable."""
    key: str
    symbol: str

    def __str__(self) -> str:
        return self.symbol

    def __mul__(self, coefficient):
        if isinstance(coefficient, numbers.Real):
            return Expression(((float(coefficient), self),))
        return NotImplemented

    __rmul__ = __mul__

    def __add__(self, other):
        return _as_expression(self) + other

    __radd__ = __add__


@dataclass(frozen=True)
class Expression:
    """
    Linear combination of variables.

    `terms` keeps one (coefficient, variable) pair per addition, in order.
    Equality and rendering use the collected form (like terms combined,
    zero coefficients dropped).
    """
    terms: Tuple[Tuple[float, Variable], ...] = ()

    def scale_and_add(self, coefficient: float, variable: Variable) -> 'Expression':
        return Expression(self.terms + ((float(coefficient), variable),))

    def collect(self) -> Dict[Variable, float]:
        """Variable -> summed coefficient, in first-appearance order."""
        combined: Dict[Variable, float] = {}
        for coefficient, variable in self.terms:
            combined[variable] = combined.get(variable, 0.0) + coefficient
        return {v: c for v, c in combined.items() if c != 0.0}

    def coefficient(self, variable: Variable) -> float:
        return self.collect().get(variable, 0.0)

    def variables(self) -> Tuple[Variable, ...]:
        return tuple(self.collect())

    def evaluate(self, values: Mapping[str, float]) -> float:
        """Substitute numbers for variables (keyed by variable key or symbol)."""
        total = 0.0
        for variable, coefficient in self.collect().items():
            if variable.key in values:
                x = values[variable.key]
            elif variable.symbol in values:
                x = values[variable.symbol]
            else:
                raise KeyError(f"No value for variable '{variable.key}'")
            total += coefficient * float(x)
        return total

    def isclose(self, other: 'Expression', rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        """Equality up to floating tolerance on collected coefficients."""
        a, b = self.collect(), _as_expression(other).collect()
        for variable in set(a) | set(b):
            if not math.isclose(a.get(variable, 0.0), b.get(variable, 0.0), rel_tol=rel_tol, abs_tol=abs_tol):
                return False
        return True

    def __add__(self, other):
        if isinstance(other, (Expression, Variable)):
            return Expression(self.terms + _as_expression(other).terms)
        if other == 0:
            return self
        return NotImplemented

    __radd__ = __add__

    def __eq__(self, other):
        if isinstance(other, (Expression, Variable)):
            return self.collect() == _as_expression(other).collect()
        if other == 0:
            return not self.collect()
        return NotImplemented

    def __hash__(self):
        collected = self.collect()
        if not collected:
            return hash(0)
        return hash(frozenset(collected.items()))

    def __len__(self) -> int:
        return len(self.terms)

    def __str__(self) -> str:
        return to_text(self)


def _as_expression(x) -> Expression:
    if isinstance(x, Variable):
        return Expression(((1.0, x),))
    return x


def _format_coefficient(c: float) -> str:
    if c == 1.0:
        return ''
    return repr(c)


def to_text(expr: Expression) -> str:
    """Render the collected form, e.g. '0.5τ + 0.3μ'. Empty renders '0'."""
    collected = _as_expression(expr).collect()
    if not collected:
        return '0'

    parts = []
    for i, (variable, c) in enumerate(collected.items()):
        if i == 0:
            sign = '-' if c < 0 else ''
        else:
            sign = ' - ' if c < 0 else ' + '
        parts.append(f"{sign}{_format_coefficient(abs(c))}{variable.symbol}")
    return ''.join(parts)


def create_variable(key: str) -> Variable:
    """Create a category variable. Unknown keys render as the key itself."""
    return Variable(key, CATEGORY_SYMBOLS.get(key, key))


def scale_and_add(expr: Expression, coefficient: float, variable: Variable) -> Expression:
    return _as_expression(expr).scale_and_add(coefficient, variable)


def category_variables() -> Dict[str, Variable]:
    """The four fixed category variables keyed by category name."""
    return {key: create_variable(key) for key in CATEGORY_SYMBOLS}


def select_category(context: Iterable[str]) -> str:
    """Pick the category key for a context by fixed priority."""
    tags = set(context)
    for category in CATEGORY_PRIORITY:
        if category in tags:
            return category
    return DEFAULT_CATEGORY


def symbolic_state_compression(motifs: Iterable[MotifToken], symbolic_variables: Mapping[str, Variable]) -> Expression:
    """
    Compress motifs into a linear symbolic expression.

    Args:
        motifs: Motif tokens (duplicates each contribute a term)
        symbolic_variables: Category key -> Variable (state/temporal/memory/spatial)

    Returns:
        Expression = sum(weight_i * variable(category_i))
    """
    expr = Expression()
    for motif in motifs:
        variable = symbolic_variables[select_category(motif.context)]
        expr = expr.scale_and_add(motif.weight, variable)
    return expr
