"""Static showcase content rendered when the backend has nothing better."""

from .types import Article, Package, Project

FALLBACK_PROJECTS: tuple[Project, ...] = (
    Project(
        title="FinTrack – Personal Finance Manager",
        description="Cross‑platform budget and expense tracker with real‑time sync.",
        store="playstore",
        url="https://play.google.com",
        image="https://images.unsplash.com/photo-1553729784-e91953dec042?q=80&w=1200&auto=format&fit=crop",
        tags=("Flutter", "Firebase"),
    ),
    Project(
        title="FitPulse – Fitness Companion",
        description="Workouts, analytics and Apple/Google Health integration.",
        store="appstore",
        url="https://apple.com/app-store/",
        image="https://images.unsplash.com/photo-1544367567-0f2fcb009e0b?q=80&w=1200&auto=format&fit=crop",
        tags=("Flutter", "HealthKit"),
    ),
    Project(
        title="ShopSwift – E‑commerce",
        description="High‑performance storefront with payments and push notifications.",
        store="playstore",
        url="https://play.google.com",
        image="https://images.unsplash.com/photo-1542831371-29b0f74f9713?q=80&w=1200&auto=format&fit=crop",
        tags=("Flutter", "Stripe"),
    ),
)

FALLBACK_PACKAGES: tuple[Package, ...] = (
    Package(
        name="awesome_flutter_widgets",
        description="A set of polished, customizable Flutter UI widgets.",
        url="https://pub.dev",
    ),
)

FALLBACK_ARTICLES: tuple[Article, ...] = (
    Article(
        title="Optimizing Flutter Apps for 60fps Animations",
        url="https://medium.com/",
        published_at="2024-01-10",
    ),
    Article(
        title="Effective State Management in Flutter: A Practical Guide",
        url="https://medium.com/",
        published_at="2023-11-02",
    ),
)

# Placeholder cover for projects that come back without an image
DEFAULT_PROJECT_IMAGE = (
    "https://images.unsplash.com/photo-1518779578993-ec3579fee39f?q=80&w=1200&auto=format&fit=crop"
)
