"""Plain-text rendering of a fitted regression equation."""
from __future__ import annotations


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}g}"


def format_equation(fit, response: str, precision: int = 4) -> str:
    """Return ``response = b0 + b1(x1) - b2(x2) ...`` for an OLS fit."""

    names = list(fit.model.exog_names)
    params = [float(p) for p in fit.params]
    terms = []
    intercept = None
    for name, value in zip(names, params):
        if name == "const":
            intercept = value
            continue
        terms.append((name, value))
    parts = [_fmt(intercept, precision)] if intercept is not None else []
    for name, value in terms:
        body = f"{_fmt(abs(value), precision)}({name})"
        if not parts:
            parts.append(body if value >= 0 else f"-{body}")
        else:
            parts.append(f"{'-' if value < 0 else '+'} {body}")
    return f"{response} = " + " ".join(parts)
