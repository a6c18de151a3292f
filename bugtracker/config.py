"""
config.py - パス解決・アプリ定数
Bug Tracker v1.0
"""

import os
import sys

# ---------------------------------------------------------------------------
# パス解決（exe 化対応）
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    実行環境に応じてアプリのベースディレクトリを返す。
    - exe 化後  : exe ファイルの存在するディレクトリ
    - スクリプト: プロジェクトルート
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # config.py is in bugtracker/, so project root is one level up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


BASE_PATH = get_base_path()

MEMORY_DB = ":memory:"
DB_PATH = os.environ.get("BUGTRACKER_DB_PATH") or os.path.join(BASE_PATH, "data.db")

# 永続化スロットのキー（コレクション全体を 1 つの値として保存する）
STORAGE_KEY = os.environ.get("BUGTRACKER_STORAGE_KEY") or "bugs"

LOG_LEVEL = os.environ.get("BUGTRACKER_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "My Bug Tracker"
APP_SUBTITLE = "Gérez vos bugs efficacement"
SEARCH_DEBOUNCE_SECONDS = 0.3

# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_BG = "#F5F3FF"  # 薄い紫（背景）
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#9333EA"  # purple-600
COLOR_ACCENT = "#DB2777"  # pink-600
COLOR_DANGER = "#CF222E"

# 深刻度ごとの (背景, 文字) 色
SEVERITY_COLORS: dict[str, tuple[str, str]] = {
    "critical": ("#FEE2E2", "#991B1B"),
    "high": ("#FFEDD5", "#9A3412"),
    "medium": ("#FEF9C3", "#854D0E"),
    "low": ("#DCFCE7", "#166534"),
}
SEVERITY_COLOR_DEFAULT = ("#F3F4F6", "#1F2937")

STATUS_COLORS: dict[str, str] = {
    "open": "#2563EB",
    "in-progress": "#CA8A04",
    "resolved": "#16A34A",
}

# UI 定数
BORDER_RADIUS_CARD = 12
BORDER_RADIUS_BTN = 6
