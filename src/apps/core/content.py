"""Static page content for the portfolio homepage."""

NAV_ITEMS: list[dict[str, str]] = [
    {"href": "#about", "label": "About"},
    {"href": "#skills", "label": "Skills"},
    {"href": "#portfolio", "label": "Portfolio"},
    {"href": "#packages", "label": "Packages & Articles"},
    {"href": "#contact", "label": "Contact"},
]

SKILLS: list[str] = [
    "Flutter",
    "Dart",
    "Firebase",
    "REST APIs",
    "Web & Mobile",
    "Animations",
    "SEO",
    "UI/UX",
]

ABOUT_HIGHLIGHTS: list[str] = [
    "End‑to‑end product delivery: design, development, deployment",
    "Clean architecture, strong state management, and testing",
    "Performance‑focused with fluid animations and 60fps targets",
    "Pragmatic problem‑solver and clear communicator",
]

CONTACT_LINKS: list[dict[str, str]] = [
    {"href": "mailto:hello@example.com", "label": "hello@example.com"},
    {"href": "tel:+1234567890", "label": "+1 234 567 890"},
    {"href": "https://github.com", "label": "GitHub"},
    {"href": "https://linkedin.com", "label": "LinkedIn"},
]
