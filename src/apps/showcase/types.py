"""Showcase item types."""

from dataclasses import dataclass, field

STORE_LABELS = {
    "playstore": "Google Play",
    "appstore": "App Store",
}


def _text(value) -> str:
    """Coerce an optional scalar from the backend into display text."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Project:
    """A published app shown in the portfolio grid."""

    title: str = ""
    description: str = ""
    store: str = ""
    url: str = ""
    image: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        tags = data.get("tags")
        if not isinstance(tags, list):
            tags = []
        return cls(
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            store=_text(data.get("store")),
            url=_text(data.get("url")),
            image=_text(data.get("image")),
            tags=tuple(tag for tag in tags if isinstance(tag, str)),
        )

    @property
    def store_label(self) -> str:
        return STORE_LABELS.get(self.store.lower(), self.store)

    def as_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "store": self.store,
            "url": self.url,
            "image": self.image,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class Package:
    """A published library."""

    name: str = ""
    description: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Package":
        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            url=_text(data.get("url")),
        )

    def as_dict(self) -> dict:
        return {"name": self.name, "description": self.description, "url": self.url}


@dataclass(frozen=True)
class Article:
    """A technical article. ``published_at`` is shown as-is, never parsed."""

    title: str = ""
    url: str = ""
    published_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Article":
        return cls(
            title=_text(data.get("title")),
            url=_text(data.get("url")),
            published_at=_text(data.get("published_at")),
        )

    def as_dict(self) -> dict:
        return {"title": self.title, "url": self.url, "published_at": self.published_at}


@dataclass(frozen=True)
class Showcase:
    """The three showcase categories as displayed on the page."""

    projects: tuple[Project, ...] = field(default_factory=tuple)
    packages: tuple[Package, ...] = field(default_factory=tuple)
    articles: tuple[Article, ...] = field(default_factory=tuple)

    @classmethod
    def fallback(cls) -> "Showcase":
        from .fallback import FALLBACK_ARTICLES, FALLBACK_PACKAGES, FALLBACK_PROJECTS

        return cls(
            projects=FALLBACK_PROJECTS,
            packages=FALLBACK_PACKAGES,
            articles=FALLBACK_ARTICLES,
        )

    def as_dict(self) -> dict:
        return {
            "projects": [item.as_dict() for item in self.projects],
            "packages": [item.as_dict() for item in self.packages],
            "articles": [item.as_dict() for item in self.articles],
        }
