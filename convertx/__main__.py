"""Allow ``python -m convertx``."""

from convertx.cli import main

raise SystemExit(main())
