# service/catalog_service.py
from typing import Final
from model.site import Section, Theme

SECTIONS: Final[tuple[Section, ...]] = (
    Section(id="header", name="Header", description="Navigation bar", mandatory=True),
    Section(id="footer", name="Footer", description="Impressum and privacy", mandatory=True),
    Section(id="hero", name="Hero Section", description="Full-width banner", mandatory=False),
    Section(id="features", name="Features", description="Services showcase", mandatory=False),
    Section(id="testimonials", name="Testimonials", description="Customer reviews", mandatory=False),
    Section(id="contact", name="Contact Form", description="Visitor contact", mandatory=False),
)

THEMES: Final[tuple[Theme, ...]] = (
    Theme(id="light", name="Light Theme"),
    Theme(id="dark", name="Dark Theme"),
    Theme(id="material", name="Material Design"),
    Theme(id="minimal", name="Minimalist"),
)


class CatalogService:
    """Static building blocks offered to site owners in the editor."""

    def sections(self) -> list[Section]:
        return list(SECTIONS)

    def themes(self) -> list[Theme]:
        return list(THEMES)
