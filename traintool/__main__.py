# ── traintool/__main__.py ───────────────────────────────────
from traintool.cli import main

if __name__ == "__main__":
    main()
# ───────────────────────────────────────────────────────────
