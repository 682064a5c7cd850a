"""
Currency reference data.

This module provides:
- ISO 4217 fiat currency codes, read from pycountry
- Cryptocurrency symbols, read from the bundled ``cryptocurrencies.json``
  or from the file named by ``settings.crypto_symbols_file``

Both lists are loaded once and returned as tuples in source order. The order
of the cryptocurrency list is significant: percentage filtering keeps a prefix
of it. The bundled list is ranked by market capitalisation (see
``LICENSE.investpy`` for its origin).
"""

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path

import pycountry

from pydantic_currency.core.config import settings
from pydantic_currency.core.logging import get_logger
from pydantic_currency.exceptions import ReferenceDataError

logger = get_logger(__name__)

BUNDLED_CRYPTO_FILE = "cryptocurrencies.json"


@lru_cache(maxsize=1)
def fiat_codes() -> tuple[str, ...]:
    """
    Get all ISO 4217 alpha-3 currency codes.

    Returns:
        Tuple of uppercase fiat currency codes
    """
    codes = tuple(currency.alpha_3.upper() for currency in pycountry.currencies)
    logger.debug(f"Loaded {len(codes)} fiat currency codes from pycountry")
    return codes


@lru_cache(maxsize=1)
def crypto_symbols() -> tuple[str, ...]:
    """
    Get all cryptocurrency symbols in source order.

    Returns:
        Tuple of uppercase cryptocurrency symbols

    Raises:
        ReferenceDataError: If the symbol file is missing or malformed
    """
    if settings.crypto_symbols_file is not None:
        symbols = load_symbols(settings.crypto_symbols_file)
    else:
        source = resources.files(__name__).joinpath(BUNDLED_CRYPTO_FILE)
        symbols = _parse_symbols(source.read_text(encoding="utf-8"), BUNDLED_CRYPTO_FILE)

    logger.debug(f"Loaded {len(symbols)} cryptocurrency symbols")
    return symbols


def load_symbols(path: Path | str) -> tuple[str, ...]:
    """
    Read a symbol list from a JSON file.

    The file holds either an object mapping symbols to names or a plain list
    of symbols.

    Args:
        path: Path of the JSON file

    Returns:
        Tuple of uppercase symbols in file order

    Raises:
        ReferenceDataError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ReferenceDataError(str(path), e.strerror or str(e)) from e
    return _parse_symbols(text, str(path))


def _parse_symbols(text: str, source: str) -> tuple[str, ...]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ReferenceDataError(source, f"invalid JSON ({e.msg})") from e

    if isinstance(payload, dict):
        entries = list(payload.keys())
    elif isinstance(payload, list):
        entries = payload
    else:
        raise ReferenceDataError(source, "expected a JSON object or list")

    if not all(isinstance(entry, str) and entry for entry in entries):
        raise ReferenceDataError(source, "symbols must be non-empty strings")

    return tuple(entry.upper() for entry in entries)


__all__ = [
    "crypto_symbols",
    "fiat_codes",
    "load_symbols",
]
