"""Editable page schemas for the marketing site.

``CMS_SCHEMA`` is the single source of truth for which sections and
fields each page exposes to the editor.  Sections are listed in display
order; the ``_root`` section holds fields stored at the top level of the
page document.
"""

from __future__ import annotations

from pageforge.errors import UnknownPageError
from pageforge.schema.models import ROOT_SECTION, FieldSpec, FieldType, PageSchema, SectionSpec


def _field(name: str, label: str, type_: FieldType = FieldType.TEXT) -> FieldSpec:
    return FieldSpec(name=name, label=label, type=type_)


def _text(name: str, label: str) -> FieldSpec:
    return _field(name, label, FieldType.TEXT)


def _textarea(name: str, label: str) -> FieldSpec:
    return _field(name, label, FieldType.TEXTAREA)


def _group(name: str, label: str, *fields: FieldSpec) -> FieldSpec:
    return FieldSpec(name=name, label=label, type=FieldType.GROUP, fields=list(fields))


def _array(name: str, label: str, item_label: str, *fields: FieldSpec) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        type=FieldType.ARRAY,
        item_label=item_label,
        fields=list(fields),
    )


def _section(section_id: str, label: str, *fields: FieldSpec) -> SectionSpec:
    return SectionSpec(id=section_id, label=label, fields=list(fields))


def _socials(*networks: str) -> FieldSpec:
    return _group(
        "socials",
        "Social Links",
        *(_text(network, network.capitalize()) for network in networks),
    )


SEO_SECTION = _section(
    "seo",
    "SEO Metadata",
    _text("title", "Meta Title"),
    _textarea("description", "Meta Description"),
    _field("keywords", "Keywords", FieldType.TAGS),
    _field("ogImage", "OG Image URL", FieldType.IMAGE),
)


# ── About ────────────────────────────────────────────────────────────

ABOUT_SCHEMA = PageSchema(
    key="about",
    label="About Page",
    icon="Users",
    sections=[
        SEO_SECTION,
        _section(
            "hero",
            "Hero Section",
            _text("badge", "Badge"),
            _text("title", "Title Prefix"),
            _text("highlightedWord", "Highlighted Word"),
            _textarea("description", "Description"),
            _text("ctaText", "CTA Text"),
            _text("ctaLink", "CTA Link"),
            _text("cardTitle", "Card Title"),
            _text("cardDescription", "Card Description"),
        ),
        _section(
            "founder",
            "Founder Section",
            _text("name", "Name"),
            _text("role", "Role"),
            _text("tagline", "Tagline"),
            _textarea("bioPar1", "Bio Paragraph 1"),
            _textarea("bioPar2", "Bio Paragraph 2"),
            _text("badgeTitle", "Badge Title"),
            _text("titleLine1", "Title Line 1"),
            _text("titleLine2", "Title Line 2"),
            _field("image", "Founder Image", FieldType.IMAGE),
            _socials("github", "linkedin", "twitter"),
            _array(
                "stats",
                "Founder Stats",
                "Stat",
                _text("num", "Number"),
                _text("label", "Label"),
                _text("suffix", "Suffix"),
            ),
        ),
        _section(
            "mission",
            "Mission Section",
            _text("badge", "Badge"),
            _text("titleLine1", "Title Line 1"),
            _text("titleLine2", "Title Line 2"),
            _textarea("quote", "Quote"),
            _text("quoteHighlight", "Quote Highlight"),
        ),
        _section(
            ROOT_SECTION,
            "Lists & Collections",
            _array(
                "stats",
                "Key Stats",
                "Stat",
                _text("label", "Label"),
                _text("value", "Value"),
                _text("icon", "Icon"),
            ),
            _text("valuesBadge", "Values Badge"),
            _text("valuesTitle", "Values Title"),
            _text("valuesHighlight", "Values Highlight"),
            _array(
                "values",
                "Core Values",
                "Value",
                _text("title", "Title"),
                _textarea("description", "Description"),
                _text("icon", "Icon"),
            ),
            _text("timelineBadge", "Timeline Badge"),
            _text("timelineTitle", "Timeline Title"),
            _text("timelineTitleHighlight", "Timeline Highlight"),
            _array(
                "timeline",
                "Timeline",
                "Event",
                _text("year", "Year"),
                _text("title", "Title"),
                _textarea("desc", "Description"),
                _text("icon", "Icon"),
                _text("gradient", "Gradient"),
            ),
            _text("awardsBadge", "Awards Badge"),
            _text("awardsTitle", "Awards Title"),
            _text("awardsTitleHighlight", "Awards Highlight"),
            _textarea("awardsDescription", "Awards Description"),
            _array(
                "awards",
                "Awards List",
                "Award",
                _text("year", "Year"),
                _text("title", "Title"),
                _text("org", "Organization"),
                _textarea("description", "Description"),
                _text("gradient", "Gradient"),
            ),
        ),
        _section(
            "culture",
            "Culture Section",
            _text("badge", "Badge"),
            _text("titleLine1", "Title 1"),
            _text("titleLine2", "Title 2"),
            _array(
                "items",
                "Gallery Items",
                "Item",
                _text("type", "Media Type"),
                _text("title", "Title"),
                _text("location", "Location"),
                _field("thumb", "Image URL", FieldType.IMAGE),
                _text("size", "Grid Size"),
            ),
        ),
        _section(
            "team",
            "Team Section",
            _text("badge", "Badge"),
            _text("titleLine1", "Title 1"),
            _text("titleLine2", "Title 2"),
            _array(
                "members",
                "Members",
                "Member",
                _text("name", "Name"),
                _text("role", "Role"),
                _text("category", "Category"),
                _field("image", "Image", FieldType.IMAGE),
                _text("gradient", "Gradient"),
                _socials("github", "linkedin", "twitter"),
            ),
        ),
        _section(
            "cta",
            "Call to Action",
            _text("badge", "Badge"),
            _text("title", "Title"),
            _text("highlight", "Highlight"),
            _textarea("description", "Description"),
            _text("buttonText", "Button Text"),
            _text("buttonLink", "Button Link"),
        ),
    ],
)


# ── Blog ─────────────────────────────────────────────────────────────

BLOG_SCHEMA = PageSchema(
    key="blog",
    label="Blog Page",
    icon="Newspaper",
    sections=[
        SEO_SECTION,
        _section(
            "hero",
            "Hero",
            _text("title", "Title"),
            _text("subtitle", "Subtitle"),
        ),
        _section(
            ROOT_SECTION,
            "Content",
            _array(
                "categories",
                "Categories",
                "Category",
                _text("label", "Label"),
                _text("slug", "Slug"),
                _text("icon", "Icon"),
            ),
            _array(
                "authors",
                "Authors",
                "Author",
                _text("name", "Name"),
                _text("role", "Role"),
                _field("avatar", "Avatar", FieldType.IMAGE),
                _text("initials", "Initials"),
                _textarea("bio", "Bio"),
                _field("tags", "Tags", FieldType.TAGS),
                _socials("twitter", "linkedin", "github", "website"),
                _array(
                    "stats",
                    "Author Stats",
                    "Stat",
                    _text("label", "Label"),
                    _text("value", "Value"),
                ),
            ),
            _array(
                "posts",
                "Posts",
                "Post",
                _text("title", "Title"),
                _text("slug", "Slug"),
                _textarea("excerpt", "Excerpt"),
                _field("content", "Body", FieldType.RICH_TEXT),
                _field("coverImage", "Cover Image", FieldType.IMAGE),
                _text("category", "Category"),
                _text("authorId", "Author"),
                _text("date", "Date"),
                _text("readTime", "Read Time"),
                _text("views", "Views"),
                _field("featured", "Featured", FieldType.BOOLEAN),
                _text("gradient", "Gradient"),
            ),
        ),
    ],
)


# ── Home ─────────────────────────────────────────────────────────────


def _home_section(section_id: str, label: str, *fields: FieldSpec) -> SectionSpec:
    return _section(
        section_id,
        label,
        _field("enabled", "Enabled", FieldType.BOOLEAN),
        _text("badge", "Badge"),
        _text("title", "Title"),
        _text("subtitle", "Subtitle"),
        *fields,
    )


def _cta_group(name: str, label: str) -> FieldSpec:
    return _group(name, label, _text("text", "Text"), _text("link", "Link"))


HOME_SCHEMA = PageSchema(
    key="home",
    label="Home Page",
    icon="Home",
    sections=[
        SEO_SECTION,
        _home_section(
            "hero",
            "Hero Section",
            _textarea("description", "Description"),
            _field("subtitles", "Rotating Subtitles", FieldType.TAGS),
            _cta_group("primaryCTA", "Primary Button"),
            _cta_group("secondaryCTA", "Secondary Button"),
            _array(
                "stats",
                "Hero Statistics",
                "Stat",
                _field("value", "Value", FieldType.NUMBER),
                _text("suffix", "Suffix"),
                _text("label", "Label"),
            ),
        ),
        _home_section(
            "services",
            "Services Section",
            _array(
                "services",
                "Services List",
                "Service",
                _text("title", "Title"),
                _textarea("description", "Description"),
                _text("icon", "Icon Name"),
                _field("tags", "Tags", FieldType.TAGS),
                _text("gradient", "Gradient Class"),
            ),
        ),
        _home_section(
            "whyUs",
            "Why Us Section",
            _textarea("description", "Description"),
            _array(
                "features",
                "Features List",
                "Feature",
                _text("title", "Title"),
                _textarea("description", "Description"),
                _text("icon", "Icon Name"),
                _text("stat", "Key Stat"),
                _text("statLabel", "Stat Label"),
            ),
        ),
        _home_section(
            "process",
            "Process Section",
            _array(
                "steps",
                "Process Steps",
                "Step",
                _field("number", "Step Number", FieldType.NUMBER),
                _text("title", "Title"),
                _textarea("description", "Description"),
                _text("icon", "Icon Name"),
            ),
        ),
        _home_section(
            "testimonials",
            "Testimonials Section",
            _array(
                "testimonials",
                "Testimonials List",
                "Testimonial",
                _text("name", "Name"),
                _text("role", "Role"),
                _textarea("quote", "Quote"),
                _field("avatar", "Avatar URL", FieldType.IMAGE),
                _field("rating", "Rating", FieldType.NUMBER),
            ),
        ),
        _home_section(
            "techStack",
            "Tech Stack Section",
            _array(
                "technologies",
                "Technologies",
                "Tech",
                _text("name", "Name"),
                _text("icon", "Icon Name"),
                _text("color", "Color Class"),
            ),
        ),
    ],
)


# ── Services ─────────────────────────────────────────────────────────

SERVICES_SCHEMA = PageSchema(
    key="services",
    label="Services Page",
    icon="Briefcase",
    sections=[
        SEO_SECTION,
        _section(
            ROOT_SECTION,
            "Service Collections",
            _text("heroVideoUrl", "Hero Video URL"),
            _array(
                "overview",
                "Service Categories",
                "Category",
                _text("label", "Label"),
                _text("iconName", "Icon"),
                _text("gradient", "Gradient"),
                _text("title", "Main Title"),
                _text("subtitle", "Subtitle"),
                _textarea("description", "Description"),
                _field("image", "Cover Image", FieldType.IMAGE),
                _array(
                    "features",
                    "Features",
                    "Feature",
                    _text("iconName", "Icon"),
                    _text("title", "Title"),
                    _textarea("desc", "Description"),
                ),
                _field("techs", "Technologies", FieldType.TAGS),
            ),
            _array(
                "packages",
                "Pricing Packages",
                "Package",
                _text("name", "Name"),
                _field("price", "Price", FieldType.NUMBER),
                _field("monthlyPrice", "Monthly Price", FieldType.NUMBER),
                _textarea("description", "Description"),
                _field("features", "Features", FieldType.TAGS),
                _field("highlight", "Highlight", FieldType.BOOLEAN),
                _text("iconName", "Icon"),
                _text("gradient", "Gradient"),
            ),
            _array(
                "process",
                "Process Steps",
                "Step",
                _text("title", "Title"),
                _textarea("desc", "Description"),
                _text("iconName", "Icon"),
                _text("color", "Color"),
            ),
            _array(
                "faqs",
                "FAQs",
                "Question",
                _text("category", "Category"),
                _text("question", "Question"),
                _textarea("answer", "Answer"),
            ),
            _array(
                "techStack",
                "Tech Stack",
                "Stack",
                _text("label", "Label"),
                _text("iconName", "Icon"),
                _text("description", "Description"),
                _field("techs", "Techs", FieldType.TAGS),
            ),
        ),
        _section(
            "comparison",
            "Feature Comparison",
            _array(
                "features",
                "Features List",
                "Feature",
                _text("name", "Name"),
                _text("tooltip", "Tooltip"),
            ),
            _array(
                "tiers",
                "Tiers",
                "Tier",
                _text("name", "Name"),
                _text("price", "Price"),
                _text("description", "Description"),
                _text("iconName", "Icon"),
                _text("color", "Color"),
                _field("highlight", "Highlight", FieldType.BOOLEAN),
            ),
        ),
    ],
)


# ── Support ──────────────────────────────────────────────────────────

SUPPORT_SCHEMA = PageSchema(
    key="support",
    label="Support Page",
    icon="LifeBuoy",
    sections=[
        SEO_SECTION,
        _section(
            "header",
            "Header",
            _text("badge", "Badge"),
            _text("title", "Title"),
            _text("searchPlaceholder", "Search Placeholder"),
            _text("videoUrl", "Video URL"),
        ),
        _section(
            ROOT_SECTION,
            "Channels",
            _array(
                "channels",
                "Support Channels",
                "Channel",
                _text("title", "Title"),
                _textarea("desc", "Description"),
                _text("iconName", "Icon"),
                _text("color", "Color"),
            ),
        ),
        _section(
            "faq",
            "FAQ",
            _text("badge", "Badge"),
            _text("title", "Title"),
            _array(
                "items",
                "Questions",
                "Question",
                _text("q", "Question"),
                _textarea("a", "Answer"),
            ),
        ),
        _section(
            "priorityRelay",
            "Priority Relay",
            _text("title", "Title"),
            _textarea("description", "Description"),
            _array(
                "buttons",
                "Buttons",
                "Button",
                _text("label", "Label"),
                _text("iconName", "Icon"),
                _text("variant", "Variant"),
            ),
            _array(
                "metrics",
                "Metrics",
                "Metric",
                _text("label", "Label"),
                _text("value", "Value"),
                _text("iconName", "Icon"),
            ),
        ),
    ],
)


CMS_SCHEMA: dict[str, PageSchema] = {
    schema.key: schema
    for schema in (HOME_SCHEMA, ABOUT_SCHEMA, SERVICES_SCHEMA, BLOG_SCHEMA, SUPPORT_SCHEMA)
}


def page_keys() -> list[str]:
    """Return registered page keys in display order."""
    return list(CMS_SCHEMA)


def get_schema(page: str) -> PageSchema:
    """Return the schema for a page.

    Raises UnknownPageError if the page is not registered.
    """
    try:
        return CMS_SCHEMA[page]
    except KeyError:
        raise UnknownPageError(page) from None
