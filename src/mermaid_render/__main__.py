"""Allow ``python -m mermaid_render``."""

from mermaid_render.cli import main

if __name__ == "__main__":
    main()
