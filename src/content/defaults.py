"""Factory defaults for every editable page.

These documents seed a fresh editing session before the server copy is
loaded, and they are what an operator gets back after an explicit
reset.  Every collection item carries an ``id``.
"""

from __future__ import annotations

import copy
from typing import Any

from pageforge.content.models import ContentDocument, ContentStatus
from pageforge.errors import UnknownPageError

_SOCIAL_PLACEHOLDERS = {"github": "#", "linkedin": "#", "twitter": "#"}

ABOUT_DEFAULTS: dict[str, Any] = {
    "seo": {
        "title": "About Oftisoft - Building the Meta-Layer",
        "description": "Design and development studio engineering high-fidelity products.",
        "keywords": ["about oftisoft", "company", "team", "values", "mission"],
        "ogImage": "",
    },
    "hero": {
        "badge": "Evolution & Architecture",
        "title": "We build the",
        "highlightedWord": "meta-layer",
        "description": "A design and development studio building products for the next generation of digital builders.",
        "ctaText": "Explore Our Ecosystem",
        "ctaLink": "/services",
        "cardTitle": "Global Presence",
        "cardDescription": "Hubs operating across 48+ zones.",
    },
    "founder": {
        "name": "Rasel Hossain",
        "role": "Founder & CEO",
        "tagline": "Visionary . Engineer . Consultant",
        "bioPar1": "A software engineer and technology consultant building modern, scalable digital products.",
        "bioPar2": "Founded the studio to bridge the gap between complex engineering and intuitive design.",
        "badgeTitle": "The Architect",
        "titleLine1": "Coding the Future,",
        "titleLine2": "One Line at a Time.",
        "image": "",
        "socials": dict(_SOCIAL_PLACEHOLDERS),
        "stats": [
            {"id": "founder-projects", "num": "150", "label": "Projects Delivered", "suffix": "+"},
            {"id": "founder-clients", "num": "50", "label": "Happy Clients", "suffix": "+"},
            {"id": "founder-years", "num": "6", "label": "Years Experience", "suffix": "Y"},
        ],
    },
    "mission": {
        "badge": "Our DNA",
        "titleLine1": "Driven by Purpose,",
        "titleLine2": "Defined by Quality.",
        "quote": "To empower bold visionaries with intelligent, scalable, and premium digital ecosystems.",
        "quoteHighlight": "intelligent, scalable, and premium",
    },
    "stats": [
        {"id": "hubs", "label": "Development Hubs", "value": "48+", "icon": "Globe"},
        {"id": "architects", "label": "Active Architects", "value": "14k+", "icon": "Users"},
        {"id": "success", "label": "Success Rate", "value": "98.4%", "icon": "Zap"},
    ],
    "valuesBadge": "Foundational Protocols",
    "valuesTitle": "What we believe",
    "valuesHighlight": "matters",
    "values": [
        {
            "id": "integrity",
            "title": "Architectural Integrity",
            "description": "Everything we ship is built on clean, scalable and verifiable logic.",
            "icon": "Shield",
        },
        {
            "id": "velocity",
            "title": "Visual Velocity",
            "description": "Design is a performance metric. Interfaces should feel instant.",
            "icon": "Zap",
        },
        {
            "id": "interop",
            "title": "Open Interoperability",
            "description": "Everything we build is designed to connect with the wider stack.",
            "icon": "Globe",
        },
    ],
    "timelineBadge": "Our Origins",
    "timelineTitle": "Evolution of",
    "timelineTitleHighlight": "Innovation.",
    "timeline": [
        {
            "id": "2018",
            "year": "2018",
            "title": "The Genesis",
            "desc": "Founded in a garage with a single laptop and a vision to simplify complex software.",
            "icon": "Building2",
            "gradient": "from-blue-500 to-indigo-500",
        },
        {
            "id": "2022",
            "year": "2022",
            "title": "Scale & Expansion",
            "desc": "Doubled the team size and opened the first international office.",
            "icon": "Globe",
            "gradient": "from-cyan-500 to-teal-500",
        },
        {
            "id": "2026",
            "year": "2026",
            "title": "Industry Leader",
            "desc": "Recognized as a top global technology partner with 500+ deployments.",
            "icon": "Rocket",
            "gradient": "from-green-500 to-emerald-500",
        },
    ],
    "awardsBadge": "Hall of Fame",
    "awardsTitle": "Recognized for",
    "awardsTitleHighlight": "Digital Excellence.",
    "awardsDescription": "Accolades from the industry's most respected bodies.",
    "awards": [
        {
            "id": "innovator",
            "year": "2025",
            "title": "Global Tech Innovator",
            "org": "Web3 Summit",
            "description": "Awarded for breakthrough architecture in finance platforms.",
            "gradient": "from-blue-500 to-cyan-500",
        },
        {
            "id": "ux",
            "year": "2025",
            "title": "Best UX/UI Design",
            "org": "Awwwards",
            "description": "Recognized for user-centric digital experiences.",
            "gradient": "from-purple-500 to-pink-500",
        },
    ],
    "culture": {
        "badge": "Life at Oftisoft",
        "titleLine1": "Where Culture Meets",
        "titleLine2": "Creativity.",
        "items": [
            {
                "id": "hackathon",
                "type": "video",
                "title": "Annual Hackathon",
                "location": "San Francisco HQ",
                "thumb": "",
                "size": "col-span-2",
            },
            {
                "id": "brainstorm",
                "type": "image",
                "title": "Brainstorming Session",
                "location": "Design Studio",
                "thumb": "",
                "size": "col-span-1",
            },
        ],
    },
    "team": {
        "badge": "The Collective",
        "titleLine1": "Architects of the",
        "titleLine2": "Impossible.",
        "members": [
            {
                "id": "rasel",
                "name": "Rasel Hossain",
                "role": "Founder & CEO",
                "category": "Leadership",
                "image": "",
                "gradient": "from-blue-600 to-indigo-600",
                "socials": dict(_SOCIAL_PLACEHOLDERS),
            },
            {
                "id": "sarah",
                "name": "Sarah Chen",
                "role": "Lead Designer",
                "category": "Design",
                "image": "",
                "gradient": "from-orange-600 to-amber-600",
                "socials": dict(_SOCIAL_PLACEHOLDERS),
            },
        ],
    },
    "cta": {
        "badge": "Careers",
        "title": "Join the team.",
        "highlight": "team",
        "description": "We are always looking for builders and engineers to grow our hubs.",
        "buttonText": "Get in Touch",
        "buttonLink": "/contact",
    },
}

BLOG_DEFAULTS: dict[str, Any] = {
    "seo": {
        "title": "Blog - Engineering Insights",
        "description": "Tutorials, trends and deep dives from our engineering team.",
        "keywords": ["blog", "engineering", "design"],
        "ogImage": "",
    },
    "hero": {
        "title": "Latest Insights",
        "subtitle": "Discover the latest trends, tutorials, and deep dives from our engineering team.",
    },
    "categories": [
        {"id": "all", "label": "All View", "slug": "all", "icon": "Grid"},
        {"id": "web", "label": "Engineering", "slug": "engineering", "icon": "Code"},
        {"id": "ai", "label": "AI & Data", "slug": "ai-data", "icon": "Brain"},
        {"id": "devops", "label": "DevOps", "slug": "devops", "icon": "Cloud"},
    ],
    "authors": [
        {
            "id": "auth-1",
            "name": "Rasel Hossain",
            "role": "Software Engineer",
            "avatar": "",
            "initials": "RH",
            "bio": "Helping startups and enterprises scale their digital products.",
            "tags": ["Architecture", "AI", "Frontend"],
            "socials": {"twitter": "#", "linkedin": "#", "github": "#", "website": ""},
            "stats": [
                {"id": "articles", "label": "Articles", "value": "150+"},
                {"id": "readers", "label": "Readers", "value": "50k+"},
            ],
        },
    ],
    "posts": [
        {
            "id": "post-1",
            "title": "The Future of Web Development: How AI is Changing the Landscape",
            "slug": "future-web-dev-ai",
            "excerpt": "Why static UI components are giving way to interfaces that adapt to intent.",
            "content": "",
            "coverImage": "",
            "category": "ai",
            "authorId": "auth-1",
            "date": "Oct 24, 2026",
            "readTime": "5 min read",
            "views": "125k",
            "featured": True,
            "gradient": "from-blue-600 to-violet-600",
        },
        {
            "id": "post-2",
            "title": "Creating Fluid User Interfaces with Modern CSS",
            "slug": "fluid-ui-design",
            "excerpt": "Techniques for responsive, animation-driven interfaces that feel alive.",
            "content": "",
            "coverImage": "",
            "category": "web",
            "authorId": "auth-1",
            "date": "Oct 20, 2026",
            "readTime": "7 min read",
            "views": "98k",
            "featured": False,
            "gradient": "from-emerald-500 to-teal-500",
        },
    ],
}

HOME_DEFAULTS: dict[str, Any] = {
    "seo": {
        "title": "Oftisoft - Software Studio",
        "description": "We design and engineer scalable digital products.",
        "keywords": ["software", "studio", "web development"],
        "ogImage": "",
    },
    "hero": {
        "enabled": True,
        "badge": "Available for new projects",
        "title": "We build digital products",
        "subtitle": "that scale",
        "description": "Strategy, design and engineering for ambitious teams.",
        "subtitles": ["Web Apps", "Mobile Apps", "AI Platforms"],
        "primaryCTA": {"text": "Start a Project", "link": "/contact"},
        "secondaryCTA": {"text": "View Work", "link": "/portfolio"},
        "stats": [
            {"id": "projects", "value": 150, "suffix": "+", "label": "Projects"},
            {"id": "clients", "value": 50, "suffix": "+", "label": "Clients"},
        ],
    },
    "services": {
        "enabled": True,
        "badge": "What We Do",
        "title": "Services",
        "subtitle": "End-to-end product engineering.",
        "services": [
            {
                "id": "web",
                "title": "Web Development",
                "description": "Fast, accessible web applications.",
                "icon": "Code",
                "tags": ["Next.js", "React"],
                "gradient": "from-blue-500 to-cyan-500",
            },
            {
                "id": "mobile",
                "title": "Mobile Apps",
                "description": "Native-quality apps for iOS and Android.",
                "icon": "Smartphone",
                "tags": ["React Native", "Flutter"],
                "gradient": "from-purple-500 to-pink-500",
            },
        ],
    },
    "whyUs": {
        "enabled": True,
        "badge": "Why Us",
        "title": "Built different",
        "subtitle": "Engineering first.",
        "description": "We ship measurable results, not slide decks.",
        "features": [
            {
                "id": "speed",
                "title": "Speed",
                "description": "Weekly releases from day one.",
                "icon": "Zap",
                "stat": "2x",
                "statLabel": "Faster delivery",
            },
        ],
    },
    "process": {
        "enabled": True,
        "badge": "Process",
        "title": "How we work",
        "subtitle": "From idea to launch.",
        "steps": [
            {"id": "discover", "number": 1, "title": "Discover", "description": "Understand the problem.", "icon": "Search"},
            {"id": "design", "number": 2, "title": "Design", "description": "Prototype the solution.", "icon": "PenTool"},
            {"id": "build", "number": 3, "title": "Build", "description": "Ship it iteratively.", "icon": "Code"},
        ],
    },
    "testimonials": {
        "enabled": True,
        "badge": "Testimonials",
        "title": "What clients say",
        "subtitle": "",
        "testimonials": [
            {
                "id": "t1",
                "name": "Jane Doe",
                "role": "CTO, Acme",
                "quote": "They delivered ahead of schedule.",
                "avatar": "",
                "rating": 5,
            },
        ],
    },
    "techStack": {
        "enabled": True,
        "badge": "Stack",
        "title": "Technologies",
        "subtitle": "",
        "technologies": [
            {"id": "react", "name": "React", "icon": "Atom", "color": "text-cyan-500"},
            {"id": "python", "name": "Python", "icon": "Terminal", "color": "text-yellow-500"},
        ],
    },
}

SERVICES_DEFAULTS: dict[str, Any] = {
    "seo": {
        "title": "Services - Oftisoft",
        "description": "Product engineering services and pricing.",
        "keywords": ["services", "pricing"],
        "ogImage": "",
    },
    "heroVideoUrl": "",
    "overview": [
        {
            "id": "web",
            "label": "Web",
            "iconName": "Globe",
            "gradient": "from-blue-500 to-cyan-500",
            "title": "Web Platforms",
            "subtitle": "Scalable and fast",
            "description": "Full-stack web platforms built for growth.",
            "image": "",
            "features": [
                {"id": "ssr", "iconName": "Server", "title": "Server Rendering", "desc": "Fast first paint."},
                {"id": "seo", "iconName": "Search", "title": "SEO Ready", "desc": "Structured metadata."},
            ],
            "techs": ["Next.js", "PostgreSQL"],
        },
    ],
    "packages": [
        {
            "id": "starter",
            "name": "Starter",
            "price": 999,
            "monthlyPrice": 99,
            "description": "For early-stage products.",
            "features": ["Landing page", "CMS"],
            "highlight": False,
            "iconName": "Rocket",
            "gradient": "from-blue-500 to-cyan-500",
        },
        {
            "id": "growth",
            "name": "Growth",
            "price": 2999,
            "monthlyPrice": 299,
            "description": "For scaling teams.",
            "features": ["Web app", "Analytics", "Priority support"],
            "highlight": True,
            "iconName": "TrendingUp",
            "gradient": "from-purple-500 to-pink-500",
        },
    ],
    "process": [
        {"id": "1", "title": "Discovery", "desc": "Workshops and scoping.", "iconName": "Search", "color": "text-blue-500"},
        {"id": "2", "title": "Delivery", "desc": "Iterative sprints.", "iconName": "Code", "color": "text-purple-500"},
    ],
    "faqs": [
        {
            "id": "timeline",
            "category": "General",
            "question": "How long does a project take?",
            "answer": "Most projects ship within 6 to 12 weeks.",
        },
    ],
    "techStack": [
        {
            "id": "frontend",
            "label": "Frontend",
            "iconName": "Layout",
            "description": "Modern UI frameworks.",
            "techs": ["React", "Tailwind"],
        },
    ],
    "comparison": {
        "features": [
            {"id": "cms", "name": "Content Management", "tooltip": "Edit content without code."},
            {"id": "support", "name": "Support", "tooltip": "Response time guarantees."},
        ],
        "tiers": [
            {
                "id": "starter",
                "name": "Starter",
                "price": "$999",
                "description": "Essentials",
                "iconName": "Rocket",
                "color": "text-blue-500",
                "highlight": False,
            },
            {
                "id": "growth",
                "name": "Growth",
                "price": "$2999",
                "description": "Everything in Starter, plus more",
                "iconName": "TrendingUp",
                "color": "text-purple-500",
                "highlight": True,
            },
        ],
    },
}

SUPPORT_DEFAULTS: dict[str, Any] = {
    "seo": {
        "title": "Support - Oftisoft",
        "description": "Get help from our team.",
        "keywords": ["support", "help", "faq"],
        "ogImage": "",
    },
    "header": {
        "badge": "Assistance Hub",
        "title": "Support Universe.",
        "searchPlaceholder": "Search support articles...",
        "videoUrl": "",
    },
    "channels": [
        {"id": "bot", "title": "Chat Bot", "desc": "Immediate AI assistance.", "iconName": "Bot", "color": "text-primary"},
        {"id": "chat", "title": "Live Chat", "desc": "Talk to an engineer in real time.", "iconName": "MessageSquare", "color": "text-blue-500"},
        {"id": "docs", "title": "SDK Docs", "desc": "Technical documentation.", "iconName": "Terminal", "color": "text-purple-500"},
    ],
    "faq": {
        "badge": "Help Center",
        "title": "Frequent Questions",
        "items": [
            {"id": "start", "q": "How do I get started?", "a": "Open the dashboard and create your first project."},
            {"id": "hours", "q": "Is support available 24/7?", "a": "Enterprise plans include around-the-clock support."},
        ],
    },
    "priorityRelay": {
        "title": "Priority Relay",
        "description": "Enterprise customers can open a direct line to our core engineering team.",
        "buttons": [
            {"id": "sync", "label": "Start Priority Sync", "iconName": "Zap", "variant": "default"},
            {"id": "email", "label": "Email Case Relay", "iconName": "Mail", "variant": "outline"},
        ],
        "metrics": [
            {"id": "response", "label": "Current Response Window", "value": "~ 8 Minutes", "iconName": "Clock"},
            {"id": "engineers", "label": "Engineers Online", "value": "12 Members", "iconName": "CheckCircle2"},
        ],
    },
}

DEFAULT_CONTENT: dict[str, dict[str, Any]] = {
    "home": HOME_DEFAULTS,
    "about": ABOUT_DEFAULTS,
    "services": SERVICES_DEFAULTS,
    "blog": BLOG_DEFAULTS,
    "support": SUPPORT_DEFAULTS,
}


def default_document(page: str) -> ContentDocument:
    """Return a fresh draft document holding the page's factory content.

    Raises UnknownPageError if the page has no defaults.
    """
    try:
        content = DEFAULT_CONTENT[page]
    except KeyError:
        raise UnknownPageError(page) from None
    return ContentDocument(
        page=page,
        content=copy.deepcopy(content),
        status=ContentStatus.DRAFT,
    )
