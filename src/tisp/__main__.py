"""Allow ``python -m tisp``."""

from tisp.cli import main

raise SystemExit(main())
