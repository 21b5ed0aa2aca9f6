"""Allow ``python -m create_new_ui``."""

from create_new_ui.cli import main

main()
