"""Algo order definitions by id."""

from __future__ import annotations

_ALGOS: dict[str, type] = {}


class UnknownAlgoError(KeyError):
    """Raised when no algo order is registered under a given id."""


def register_algo(algo_id: str):
    """Class decorator adding an algo order definition under ``algo_id``."""

    def decorator(cls):
        existing = _ALGOS.setdefault(algo_id, cls)
        if existing is not cls:
            raise ValueError(f"Algo id '{algo_id}' is taken by {existing.__name__}")
        return cls

    return decorator


def create_algo(algo_id: str):
    """Instantiate the algo order definition registered as ``algo_id``."""
    try:
        cls = _ALGOS[algo_id]
    except KeyError:
        raise UnknownAlgoError(
            f"Unknown algo '{algo_id}'. Available: {', '.join(list_algos()) or '(none)'}"
        ) from None
    return cls()


def list_algos() -> list[str]:
    return sorted(_ALGOS)
