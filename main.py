import logging
import sys

from bugtracker.config import LOG_LEVEL

# ロギング設定
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

if __name__ == "__main__":
    import flet as ft
    from bugtracker.app_main import main

    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        sys.exit(1)
