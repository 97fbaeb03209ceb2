"""Allow ``python -m x500dn``."""

from x500dn.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
