"""Module entrypoint.

Allows:
    python -m cf_app_log_detector
"""

from __future__ import annotations

from cf_app_log_detector.cli import main

if __name__ == "__main__":
    main()
