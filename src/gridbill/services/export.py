"""Service for rendering billing reports as text or HTML."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from gridbill.services.billing import BillSummary


class ExportService:
    """Renders the aging and revenue reports through Jinja2 templates."""

    def __init__(self):
        template_dir = Path(__file__).parent.parent / "templates"
        self._env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters["money"] = lambda value: f"{Decimal(value):,.2f}"

    def render_aging_report(self, rows: list[BillSummary]) -> str:
        template = self._env.get_template("aging_report.txt")
        return template.render(rows=rows)

    def render_revenue_report(self, revenue: dict[str, Decimal]) -> str:
        template = self._env.get_template("revenue_report.txt")
        return template.render(
            revenue=sorted(revenue.items()),
            grand_total=sum(revenue.values(), Decimal("0")),
        )

    def write_html(
        self,
        report_date: date,
        rows: list[BillSummary],
        revenue: dict[str, Decimal],
        output_path: Path | str,
    ) -> Path:
        """
        Writes both reports into one HTML page.

        Args:
            report_date: The date printed in the page title.
            rows: The aging report.
            revenue: Revenue per tariff plan name.
            output_path: The path where the HTML file will be saved.

        Returns:
            The path to the generated file.
        """
        template = self._env.get_template("reports.html")
        rendered_html = template.render(
            report_date=report_date,
            rows=rows,
            revenue=sorted(revenue.items()),
            grand_total=sum(revenue.values(), Decimal("0")),
        )

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered_html, encoding="utf-8")

        return output_path
