from __future__ import annotations

import logging

from bankdemo.settings import get_settings
from bankdemo.services.demo_service import run_demo


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
