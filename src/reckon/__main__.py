"""Allow ``python -m reckon``."""

from reckon.cli import main

main()
