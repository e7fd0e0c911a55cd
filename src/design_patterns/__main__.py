"""Allow ``python -m design_patterns``."""

from design_patterns.cli.main import main

if __name__ == "__main__":
    main()
