"""
Configuration centrale pour le moteur de relais de claviers.

Ce fichier contient les dispositions des deux claviers, les profondeurs
de relais par défaut et les chemins de sortie des logs.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Symbole de validation (appui) présent sur les deux claviers
ACTIVATE_SYMBOL = "A"

# Vecteurs de déplacement (x vers la droite, y vers le haut)
DIRECTION_VECTORS = {
    '^': (0, 1),
    'v': (0, -1),
    '<': (-1, 0),
    '>': (1, 0),
}

# Ordre d'exploration des directions pendant la recherche de chemins
SEARCH_ORDER = ('v', '>', '^', '<')

# Dispositions des claviers (ligne du haut en premier, None = trou)
KEYPAD_LAYOUTS = {
    'numeric': (
        ('7', '8', '9'),
        ('4', '5', '6'),
        ('1', '2', '3'),
        (None, '0', 'A'),
    ),
    'directional': (
        (None, '^', 'A'),
        ('<', 'v', '>'),
    ),
}

# Profondeurs de relais (nombre de claviers directionnels + humain)
RELAY_CONFIG = {
    'shallow_depth': 3,   # Premier total
    'deep_depth': 26,     # Second total
}

# Logs sur disque (désactivés par défaut)
LOG_CONFIG = {
    'enabled': False,
}

PATHS = {
    'logs': 'logs',
}


def load_config(path: Path) -> Dict[str, Any]:
    """Charge un fichier YAML de surcharge de configuration."""
    with Path(path).open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"YAML invalide dans {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration invalide dans {path}: un mapping est attendu")
    return data


def relay_section(config: Dict[str, Any]) -> Dict[str, Any]:
    """Section 'relay' d'une configuration, ou la configuration elle-même si absente."""
    section = config.get('relay')
    if section is None:
        return config
    if not isinstance(section, dict):
        raise ValueError(f"Section 'relay' invalide: un mapping est attendu (reçu {section!r})")
    return section


def resolve_relay_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, int]:
    """
    Fusionne les surcharges avec RELAY_CONFIG et valide les profondeurs.

    Les surcharges peuvent être à plat ({'deep_depth': 10}) ou regroupées
    sous une clé 'relay' comme dans un fichier YAML.
    """
    merged = dict(RELAY_CONFIG)
    if overrides:
        section = relay_section(overrides)
        for key in RELAY_CONFIG:
            if section.get(key) is not None:
                merged[key] = section[key]

    for key, value in merged.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"Profondeur invalide pour {key}: {value!r}")
    return merged
