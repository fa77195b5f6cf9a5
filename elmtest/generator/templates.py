"""Placeholder substitution for the packaged templates."""

import logging
import re
from pathlib import Path

from .errors import TemplateMismatchError

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_ROOT / "templates"
HELPER_SRC_DIR = PACKAGE_ROOT / "elm" / "src"


def template_path(name: str) -> Path:
    """Path of a packaged template asset."""
    return TEMPLATES_DIR / name


def placeholders(template: str) -> set[str]:
    """Names of all ``{{ name }}`` placeholders in ``template``."""
    return set(PLACEHOLDER.findall(template))


def render_template(
    template: str, replacements: dict[str, str], name: str | None = None
) -> str:
    """Replace every ``{{ key }}`` with its value.

    Every placeholder needs a replacement and every replacement must be used.
    Replacement values are inserted verbatim, never rescanned.

    Raises:
        TemplateMismatchError: If the keys and placeholders differ.
    """
    found = placeholders(template)
    keys = set(replacements)
    if found != keys:
        raise TemplateMismatchError(found - keys, keys - found, name)
    return PLACEHOLDER.sub(lambda m: replacements[m.group(1)], template)


def create_templated(
    template: str | Path, output: str | Path, replacements: dict[str, str]
) -> Path:
    """Render a template file and write the result to ``output``."""
    template = Path(template)
    output = Path(output)
    content = render_template(
        template.read_text(encoding="utf-8"), replacements, template.name
    )
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    logger.debug("Generated %s from %s", output, template.name)
    return output
