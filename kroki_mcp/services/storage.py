"""Local file storage for downloaded diagrams"""
from pathlib import Path
from typing import Union
from kroki_mcp.core.logging_config import get_logger
from kroki_mcp.core.exceptions import OutputWriteException

logger = get_logger(__name__)


class StorageService:
    """Writes rendered diagrams to caller-chosen paths"""

    def save_diagram(self, output_path: Union[str, Path], content: bytes) -> Path:
        """Save diagram bytes, creating parent directories, and return the path"""
        file_path = Path(output_path)
        directory = file_path.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create directory {directory}: {e}", exc_info=True)
            raise OutputWriteException(f"Failed to create directory {directory}: {e}")

        logger.debug(f"Saving diagram: {file_path} ({len(content)} bytes)")
        try:
            with open(file_path, "wb") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write file {file_path}: {e}", exc_info=True)
            raise OutputWriteException(f"Failed to write file {file_path}: {e}")

        logger.info(f"Diagram saved to {file_path}")
        return file_path
