"""Statistics report formatting."""

from typing import List, TextIO

from .models import Statistics

SUMMARY_TITLE = "Statistics Summary"
SUMMARY_RULE = "================="


class SummaryReporter:
    """Formats Statistics as the summary report and the console echo."""

    def format_lines(self, stats: Statistics, include_mb: bool = True) -> List[str]:
        """The statistic lines shared by the report and the console echo."""
        size_line = f"Total file size: {stats.total_size_kb:.2f} KB"
        if include_mb:
            size_line += f" ({stats.total_size_mb:.2f} MB)"

        return [
            f"Total files processed: {stats.total_files}",
            size_line,
            f"Average file size: {stats.average_file_size_kb:.2f} KB",
            f"Total tokens: {stats.total_tokens}",
            f"Average tokens per file: {stats.average_tokens:.2f}",
        ]

    def format_report(self, stats: Statistics) -> str:
        lines = [SUMMARY_TITLE, SUMMARY_RULE] + self.format_lines(stats)
        return "\n".join(lines) + "\n"

    def format_console(self, stats: Statistics) -> str:
        lines = [f"{SUMMARY_TITLE}:"] + self.format_lines(stats, include_mb=False)
        return "\n".join(lines)

    def write(self, stats: Statistics, out: TextIO) -> None:
        out.write(self.format_report(stats))
