from __future__ import annotations

import math
import numbers
import re
from typing import Any

# Variante stretta: cifre obbligatorie su entrambi i lati del punto decimale.
# ".5", "5.", "+5" e "1e3" non sono numeri validi.
NUMERIC_STRING_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def is_numeric_type(value: Any) -> bool:
    """True per int/float e scalari numpy reali; bool escluso."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_valid_number(value: Any) -> bool:
    """
    Decide se una cella è un numero valido.

    - tipo numerico (int, float, np.float64, ...) -> True, NaN compreso;
    - stringa -> True solo se l'intero testo rispetta NUMERIC_STRING_RE;
    - qualsiasi altro tipo (bool, None, liste, dict) -> False.
    """
    if is_numeric_type(value):
        return True
    if isinstance(value, str):
        return NUMERIC_STRING_RE.fullmatch(value) is not None
    return False


def to_number(value: Any) -> float:
    """
    Interpretazione numerica di una cella già validata con is_valid_number().

    Gli interi oltre il range dei float diventano +/-inf.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
