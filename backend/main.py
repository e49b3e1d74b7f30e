import sys
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler

# Add the backend directory to Python path
backend_dir = Path(__file__).resolve().parent
if str(backend_dir) not in sys.path:
    sys.path.append(str(backend_dir))

from metasearch.config import settings
from metasearch.main import app

# Create logs directory if it doesn't exist
logs_dir = Path(settings.LOG_DIR)
if not logs_dir.is_absolute():
    logs_dir = backend_dir / logs_dir
logs_dir.mkdir(parents=True, exist_ok=True)

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        # Console handler
        logging.StreamHandler(),
        # File handler
        RotatingFileHandler(
            logs_dir / "app.log",
            maxBytes=10485760,  # 10MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on http://localhost:5000")
    uvicorn.run("main:app", host="0.0.0.0", port=5000, reload=True, reload_dirs=["metasearch"])
