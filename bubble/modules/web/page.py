"""Render the Bubble button page."""

from typing import Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from bubble.modules.config import CommandDefinition

PAGE_TITLE = "Bubble - Poppit Frontend"
MESSAGE_TIMEOUT_MS = 5000


def build_template_environment() -> Environment:
    """Jinja2 environment over the packaged templates, HTML autoescaped."""
    return Environment(
        loader=PackageLoader("bubble.modules.web", "templates"),
        autoescape=select_autoescape(["html"]),
    )


class IndexPage:
    """Button page for a fixed list of commands."""

    template_name = "index.html"

    def __init__(self, commands: Sequence[CommandDefinition], environment: Environment = None):
        self.commands = tuple(commands)
        self.environment = environment or build_template_environment()

    def render(self) -> str:
        """
        Render the page.

        Raises:
            jinja2.TemplateError: If the template is missing or broken
        """
        template = self.environment.get_template(self.template_name)
        return template.render(
            title=PAGE_TITLE,
            commands=self.commands,
            message_timeout_ms=MESSAGE_TIMEOUT_MS,
        )
