"""
main.py — grading API entry point
"""

import os
import sys
import logging
import traceback

# ── Package path (must come first) ──────────────────────────────────────────
_BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if _BASE_DIR not in sys.path:
    sys.path.insert(0, _BASE_DIR)

from config import BASE_DIR, LOG_FILE, LOG_LEVEL, DEFAULT_HOST, DEFAULT_PORT

# ── Logging ─────────────────────────────────────────────────────────────────
class DummyStream:
    def write(self, data): pass
    def flush(self): pass
    def isatty(self): return False
    def close(self): pass

if sys.stdout is None: sys.stdout = DummyStream()
if sys.stderr is None: sys.stderr = DummyStream()

try:
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(LOG_FILE, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )
except PermissionError:
    # log file locked or read-only: console only
    logging.basicConfig(level=LOG_LEVEL)

logger = logging.getLogger(__name__)


def _run_server(host: str, port: int) -> None:
    try:
        import uvicorn
        from api.app import create_app
        logger.info(f"Starting uvicorn on {host}:{port}")
        app = create_app()
        uvicorn.run(app, host=host, port=port, log_level="warning")
    except Exception:
        logger.error(f"Server error:\n{traceback.format_exc()}")
        sys.exit(1)


# ── Main ────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    logger.info("=== CAT Grading Engine Started ===")
    os.chdir(BASE_DIR)
    _run_server(DEFAULT_HOST, DEFAULT_PORT)
