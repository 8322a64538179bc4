import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.config import PATHS, LOG_CONFIG, load_config, relay_section
from src.keypad_relay import KeypadRelayApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Nombre minimal d'appuis pour saisir des codes à travers une chaîne de robots"
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Fichier de codes (un par ligne). Lit l'entrée standard si absent.",
    )
    parser.add_argument("--shallow", type=int, help="Profondeur du premier total (défaut: 3)")
    parser.add_argument("--deep", type=int, help="Profondeur du second total (défaut: 26)")
    parser.add_argument("--config", type=Path, help="Fichier YAML de configuration")
    parser.add_argument(
        "--log-dir",
        help="Dossier des logs JSON (désactivé par défaut)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else {}
        relay = dict(relay_section(config))
        if args.shallow is not None:
            relay['shallow_depth'] = args.shallow
        if args.deep is not None:
            relay['deep_depth'] = args.deep

        log_dir = args.log_dir
        if log_dir is None and LOG_CONFIG['enabled']:
            log_dir = PATHS['logs']

        app = KeypadRelayApp(config=relay, log_dir=log_dir)
        totals = app.run(args.input)
    except (OSError, ValueError) as e:
        print(f"[ERREUR] {e}", file=sys.stderr)
        return 1

    print(totals.shallow)
    print(totals.deep)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nArrêt demandé par l'utilisateur.")
        sys.exit(130)
