"""Allow ``python -m railgraph``."""

from railgraph.cli import main

if __name__ == "__main__":
    main()
