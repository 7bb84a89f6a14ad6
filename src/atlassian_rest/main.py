"""Script de ejecución.

Permite ejecutar la CLI con `python -m atlassian_rest.main` además del script
`atlassian-rest` instalado.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals/CI (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from atlassian_rest.cli.main import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
