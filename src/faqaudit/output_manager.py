"""Output manager for saving crawl reports."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Union

from faqaudit.models import CrawlReport

logger = logging.getLogger(__name__)


class DateTimeEncoder(json.JSONEncoder):
    """JSON encoder that handles datetime objects."""

    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


class OutputManager:
    """Writes crawl reports to JSON files."""

    def save_report(self, report: CrawlReport, path: Union[str, Path]) -> Path:
        """Save a report as indented JSON.

        Args:
            report: Report to save
            path: Destination file; parent directories are created

        Returns:
            Path of the written file
        """
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False, cls=DateTimeEncoder)

        logger.info(f"Report saved to {output_path}")
        return output_path

    def load_report(self, path: Union[str, Path]) -> dict:
        """Load a previously saved report as a plain dictionary.

        Raises:
            FileNotFoundError: If the report does not exist
        """
        with open(Path(path), 'r', encoding='utf-8') as f:
            return json.load(f)

    def load_urls(self, path: Union[str, Path]) -> list[str]:
        """Read URLs from a text file, one per line.

        Blank lines and lines starting with '#' are ignored.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        with open(Path(path), 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        return [line for line in lines if line and not line.startswith('#')]
