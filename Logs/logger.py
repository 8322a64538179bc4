"""
Module de logging centralisé pour le moteur de relais de claviers
"""

import json
import os
import sys
from datetime import datetime
from typing import Dict, Any, List, Optional


class RunLogger:
    """Classe centralisée pour sauvegarder les rapports d'exécution"""

    def __init__(self, logs_dir: str = "Logs"):
        self.logs_dir = logs_dir
        self._ensure_logs_dir()

    def _ensure_logs_dir(self):
        """Crée le dossier de logs s'il n'existe pas"""
        if not os.path.exists(self.logs_dir):
            os.makedirs(self.logs_dir)

    def save_run_log(self,
                     totals: Dict[str, int],
                     codes: List[Dict[str, Any]],
                     config: Optional[Dict[str, Any]] = None,
                     run_type: str = "relay_run") -> str:
        """
        Sauvegarde le rapport d'une exécution dans un fichier JSON

        Args:
            totals: Totaux pondérés ({"shallow": ..., "deep": ...})
            codes: Détail par code
            config: Configuration utilisée (profondeurs)
            run_type: Préfixe du fichier

        Returns:
            str: Chemin du fichier de log créé
        """
        try:
            # Nom de fichier avec timestamp
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            log_file = os.path.join(self.logs_dir, f"{run_type}_{timestamp}.json")

            log_data = {
                "timestamp": timestamp,
                "run_type": run_type,
                "config": config or {},
                "totals": totals,
                "codes": codes,
            }

            with open(log_file, 'w', encoding='utf-8') as f:
                json.dump(log_data, f, indent=2, ensure_ascii=False)

            print(f"[LOGS] Rapport sauvegardé dans: {log_file}", file=sys.stderr)
            return log_file

        except OSError as e:
            print(f"[LOGS] Erreur lors de la sauvegarde du rapport: {e}", file=sys.stderr)
            return ""

    def get_latest_log(self, run_type: str = "relay_run") -> Optional[str]:
        """
        Récupère le rapport le plus récent pour un type donné

        Returns:
            str: Chemin du fichier le plus récent ou None
        """
        files = [f for f in os.listdir(self.logs_dir)
                 if f.startswith(f"{run_type}_") and f.endswith(".json")]

        if not files:
            return None

        # Trier par timestamp (nom de fichier)
        files.sort(reverse=True)
        return os.path.join(self.logs_dir, files[0])

