"""Allow ``python -m hyuga_toolkit``."""
from .cli import main

raise SystemExit(main())
