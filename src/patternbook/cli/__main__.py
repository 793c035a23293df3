"""Allow ``python -m patternbook.cli``."""
from .main import main

main()
