"""Allow ``python -m preview_docs``."""

import sys

from preview_docs.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
