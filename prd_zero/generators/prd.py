# prd_zero/generators/prd.py
"""Markdown PRD rendering."""

from pathlib import Path
from typing import Optional

from jinja2 import BaseLoader, Environment

from prd_zero.generators.files import generate_file_name, write_json, write_text
from prd_zero.session.models import PRDData
from prd_zero.session.report import ValidationReport

TEMPLATES_DIR = Path(__file__).parent / "templates"


def load_template(name: str) -> str:
    """Load a document template by name."""
    path = TEMPLATES_DIR / f"{name}.md.j2"
    if not path.exists():
        raise ValueError(f"Template not found: {name}")
    return path.read_text(encoding="utf-8")


def make_environment() -> Environment:
    return Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)


class PRDGenerator:
    """Renders a session into a PRD document."""

    def __init__(self, template: Optional[str] = None):
        self._template = make_environment().from_string(template or load_template("prd"))

    def generate(self, data: PRDData, report: Optional[ValidationReport] = None) -> str:
        stack = data.tech_stack
        return self._template.render(
            project=data.project,
            mvp=data.mvp,
            timeline=data.timeline,
            stack_sections=[
                ("Frontend", stack.frontend),
                ("Backend", stack.backend),
                ("Database", stack.database),
                ("Hosting & Deployment", stack.hosting),
                ("Tools", stack.tools),
            ],
            risks=data.risks,
            assumptions=data.assumptions,
            open_questions=data.open_questions,
            next_steps=data.next_steps,
            generated_at=data.generated_at.strftime("%Y-%m-%d %H:%M"),
            session_duration=round(data.session_duration),
            report=report,
        )

    def save(
        self,
        data: PRDData,
        output_dir: Path,
        report: Optional[ValidationReport] = None,
        content: Optional[str] = None,
    ) -> Path:
        """Write the Markdown PRD and the session JSON beside it.

        ``content`` replaces the rendered document, e.g. after AI optimization.
        """
        file_name = generate_file_name(f"prd_{data.slug}", "md")
        path = write_text(Path(output_dir) / file_name, content or self.generate(data, report))
        write_json(path.with_suffix(".json"), data.model_dump(mode="json"))
        return path
