"""Service de lecture des codes : une ligne = un code terminé par 'A'."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from src.config import ACTIVATE_SYMBOL

CODE_ALPHABET = frozenset("0123456789" + ACTIVATE_SYMBOL)


def parse_code(line: str, line_number: int = 1) -> str:
    """Valide une ligne et retourne le code nettoyé."""
    code = line.strip()
    invalid = sorted(set(code) - CODE_ALPHABET)
    if invalid:
        raise ValueError(f"Ligne {line_number}: caractères invalides {''.join(invalid)!r} dans {code!r}")
    if not code.endswith(ACTIVATE_SYMBOL):
        raise ValueError(f"Ligne {line_number}: le code {code!r} doit se terminer par {ACTIVATE_SYMBOL!r}")
    if ACTIVATE_SYMBOL in code[:-1]:
        raise ValueError(f"Ligne {line_number}: {ACTIVATE_SYMBOL!r} uniquement en fin de code ({code!r})")
    if len(code) == 1:
        raise ValueError(f"Ligne {line_number}: le code {code!r} ne contient aucun chiffre")
    return code


def read_codes(lines: Iterable[str]) -> List[str]:
    """
    Lit les codes ligne par ligne (lignes vides ignorées).

    Une seule ligne invalide fait échouer toute la lecture : aucun
    résultat partiel n'est retourné.
    """
    codes = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        codes.append(parse_code(line, line_number))
    return codes


def read_codes_file(path: Path) -> List[str]:
    with Path(path).open("r", encoding="utf-8") as f:
        return read_codes(f)


def code_value(code: str) -> int:
    """Valeur numérique d'un code : ses chiffres lus comme un entier ('029A' → 29)."""
    digits = "".join(c for c in code if c.isdigit())
    if not digits:
        raise ValueError(f"Le code {code!r} ne contient aucun chiffre")
    return int(digits)
