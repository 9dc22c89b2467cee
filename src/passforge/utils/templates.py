"""
Named password presets.

The catalog is fixed and read-only. Callers pick a template and turn it
into a CharsetPolicy with policy_from_template().
"""
from dataclasses import dataclass

from passforge.errors import InvalidPolicy
from .charsets import CharsetPolicy


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    length: int
    lowercase: bool
    uppercase: bool
    numbers: bool
    symbols: bool


TEMPLATES = (
    Template("ultra-secure", "Ultra Secure", "Maximum security with all character types",
             32, True, True, True, True),
    Template("memorable", "Memorable", "Easier to remember without symbols",
             16, True, True, True, False),
    Template("wifi", "WiFi Password", "Perfect for routers (no symbols)",
             20, True, True, True, False),
    Template("email", "Email Account", "Balanced security for email",
             18, True, True, True, True),
    Template("pin", "PIN Code", "Numbers only for PIN codes",
             6, False, False, True, False),
    Template("database", "Database/API", "Strong for development use",
             24, True, True, True, True),
)


def get_template(template_id: str) -> Template:
    """Look up a template by id. Raises InvalidPolicy if unknown."""
    for template in TEMPLATES:
        if template.id == template_id:
            return template
    raise InvalidPolicy(f"Unknown template '{template_id}'")


def policy_from_template(template: Template) -> CharsetPolicy:
    """Pre-fill a CharsetPolicy from a template."""
    return CharsetPolicy(
        include_lower=template.lowercase,
        include_upper=template.uppercase,
        include_digits=template.numbers,
        include_symbols=template.symbols,
        length=template.length,
    )
