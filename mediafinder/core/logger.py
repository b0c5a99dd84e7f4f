"""
mediafinder Logger

Terminal messages for the user plus a detailed log file per run.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from rich.console import Console
from rich.markup import escape

from .schema import DetailResult, NormalizedItem, SearchHit


class SearchLogger:
    """Logger for one interactive search run, with terminal and file output."""

    def __init__(self, log_dir: Optional[str] = "./logs", log_level: str = "DEBUG", verbose: bool = False,
                 quiet: bool = False, console: Optional[Console] = None):
        """
        Initialize the logger.

        Args:
            log_dir: Directory to store log files, or None to disable file output
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            verbose: Whether to show verbose output in terminal
            quiet: Whether to suppress terminal output
            console: Console used for terminal output
        """
        self.verbose = verbose
        self.quiet = quiet
        self.console = console or Console(stderr=True)
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file = None

        self.logger = logging.getLogger("MediaFinder")
        self.logger.setLevel(getattr(logging, log_level.upper(), logging.DEBUG))
        self.logger.propagate = False

        # Remove any existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = self.log_dir / f"mediafinder_{timestamp}.log"

            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(file_handler)
        else:
            self.logger.addHandler(logging.NullHandler())

        self.processing_data = {
            "start_time": datetime.now().isoformat(),
            "input": {},
            "search": {},
            "normalize": {},
            "selection": {},
            "fetch": {},
            "errors": []
        }

    def _print(self, message: str) -> None:
        self.console.print(message, highlight=False)

    def log_input(self, data: Dict[str, Any]) -> None:
        """Log input parameters."""
        self.processing_data["input"] = data

        if not self.quiet and self.verbose:
            self._print(f"Searching for: {escape(str(data.get('query', '')))}")

        self.logger.info("Input parameters parsed")
        self.logger.debug(f"Input data: {json.dumps(data, ensure_ascii=False, indent=2)}")

    def log_search(self, hits: List[SearchHit]) -> None:
        """Log raw search hits."""
        raw = [hit.model_dump() for hit in hits]
        self.processing_data["search"] = {"count": len(hits), "results": raw}

        if not self.quiet and self.verbose:
            self._print(f"   Found {len(hits)} result(s)")

        self.logger.info(f"Search completed: {len(hits)} results")
        self.logger.debug(f"Search results: {json.dumps(raw, ensure_ascii=False, indent=2)}")

    def log_normalize(self, items: List[NormalizedItem]) -> None:
        """Log the normalized, selectable items."""
        labels = [item.label for item in items]
        self.processing_data["normalize"] = {"count": len(items), "labels": labels}

        self.logger.info(f"Normalization completed: {len(items)} selectable items")
        self.logger.debug(f"Labels: {json.dumps(labels, ensure_ascii=False, indent=2)}")

    def log_selection(self, index: int, item: NormalizedItem) -> None:
        self.processing_data["selection"] = {"index": index, "item": item.model_dump()}
        self.logger.info(f"Selected #{index}: {item.label} (id={item.id}, media_type={item.media_type})")

    def log_fetch(self, item: NormalizedItem, detail: Optional[DetailResult]) -> None:
        """Log fetched detail data."""
        data = detail.model_dump() if detail is not None else None
        self.processing_data["fetch"] = {"id": item.id, "media_type": item.media_type, "detail": data}

        if not self.quiet and self.verbose:
            state = "received" if detail is not None else "not available"
            self._print(f"   Details for {item.media_type} {item.id} {state}")

        self.logger.info(f"Detail fetch completed for {item.media_type}/{item.id}")
        self.logger.debug(f"Detail data: {json.dumps(data, ensure_ascii=False, indent=2)}")

    def log_error(self, error: Union[str, Exception]) -> None:
        """Log errors."""
        error_msg = str(error)
        self.processing_data["errors"].append({
            "timestamp": datetime.now().isoformat(),
            "error": error_msg
        })

        if not self.quiet:
            self._print(f"[red]Something went wrong:[/red] {escape(error_msg)}")

        self.logger.error(f"Error occurred: {error_msg}")

    def log_info(self, message: str, level: str = "info") -> None:
        """Log general information messages."""
        if level == "verbose" and not self.verbose:
            return
        if not self.quiet:
            self._print(escape(message))

        log_method = getattr(self.logger, level.lower(), self.logger.info)
        log_method(message)

    def finalize(self) -> Optional[str]:
        """Finalize logging and return the log file path, if any."""
        self.processing_data["end_time"] = datetime.now().isoformat()
        self.logger.info("=== RUN SUMMARY ===")

        if self.log_dir is None:
            return None

        self.logger.info(f"Log file: {self.log_file}")
        try:
            summary_file = self.log_dir / f"run_summary_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            with open(summary_file, 'w', encoding='utf-8') as f:
                json.dump(self.processing_data, f, ensure_ascii=False, indent=2)
            self.logger.info(f"Run summary saved to: {summary_file}")
        except OSError as e:
            self.logger.error(f"Failed to save run summary: {e}")

        return str(self.log_file)
