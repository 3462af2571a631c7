"""Allow running the check with ``python -m file_age_check``."""

from .main import main

main()
