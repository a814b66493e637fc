import json
import os
from datetime import datetime, timezone


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="adder_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")
        return path

    def log(self, entry: dict):
        """Log a single entry to the main adder log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_trace(self, records: list, run_id=None):
        """Log machine trace records (tape, head, state per step)."""
        entries = []
        for record in records:
            entry = record.to_dict() if hasattr(record, "to_dict") else dict(record)
            if run_id is not None:
                entry["run_id"] = run_id
            entries.append(entry)
        return self._log_to_file(f"trace_{self.today}.jsonl", entries)

    def log_results(self, entries: list):
        """Log one line per finished addition."""
        return self._log_to_file(f"results_{self.today}.jsonl", entries)

    def log_failures(self, entries: list):
        """Log additions that produced a wrong sum or did not halt."""
        return self._log_to_file(f"failures_{self.today}.jsonl", entries)
