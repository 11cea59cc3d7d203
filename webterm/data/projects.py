"""
Project Catalog

Built-in project records listed by `projects` and synthesized under
/projects in the virtual tree.
"""

from webterm.types.projects import (
    ApiEndpoint,
    Architecture,
    BackendArchitecture,
    FrontendArchitecture,
    Project,
    TechStackItem,
)

ABOUT_TEXT = (
    "Welcome to my terminal interface\n"
    "A modern terminal interface for browsing projects, source files and notes."
)

PROJECTS: list[Project] = [
    Project(
        name="D4UT",
        featured=True,
        description=(
            "A frontend utility built with React, Zustand and TailwindCSS for real-time "
            "build calculations, with Leaflet-powered data visualization."
        ),
        url="https://github.com/username/d4ut",
        image="d4ut.png",
        architecture_image="d4ut-mermaid.png",
        overview=(
            "A web-based utility for Diablo 4 players offering build optimization, "
            "damage calculations and item comparison."
        ),
        key_features=[
            "Character Optimization: build calculations, stat analysis, gear optimization",
            "Data Analysis: stat tracking, performance metrics",
            "Localization: multi-language support",
        ],
        architecture=Architecture(
            frontend=FrontendArchitecture(
                framework="React",
                language="TypeScript",
                styling="TailwindCSS, SASS, PostCSS",
                state_management="Zustand",
            ),
        ),
        tech_stack=[
            TechStackItem(name="React", version="18.2.0", description="Frontend framework"),
            TechStackItem(name="Zustand", version="4.3.0", description="State management"),
            TechStackItem(name="TailwindCSS", version="3.2.7", description="Styling"),
            TechStackItem(name="Vite", description="Development tools"),
        ],
        workflow=[
            "Local development with hot module replacement",
            "TypeScript compilation and type checking",
        ],
        summary="Started as a way to tell which gear was actually better, and grew from there.",
    ),
    Project(
        name="LootManager",
        featured=True,
        description=(
            "A guild management frontend on React, Redux Toolkit and Material-UI backed by "
            "Firebase Functions and Firestore for real-time sync and authentication."
        ),
        url="https://github.com/username/lootmanager",
        image="lootmanager.png",
        architecture_image="loot-manager-mermaid.png",
        overview=(
            "A guild management system focused on DKP tracking, raid scheduling and "
            "loot distribution."
        ),
        key_features=[
            "User Management: authentication, role-based access control",
            "DKP Management: tracking, distribution, transaction history",
            "Event Management: scheduling, registration, attendance",
        ],
        architecture=Architecture(
            frontend=FrontendArchitecture(
                framework="React",
                language="TypeScript",
                styling="Material-UI, TailwindCSS",
                state_management="Redux Toolkit, Zustand",
            ),
            backend=BackendArchitecture(
                framework="Firebase Functions",
                language="TypeScript",
                database="Firestore",
            ),
        ),
        tech_stack=[
            TechStackItem(name="React", version="18.2.0", description="Frontend framework"),
            TechStackItem(name="Redux Toolkit", version="1.9.1", description="State management"),
            TechStackItem(name="Firebase", version="9.17.1", description="Backend and database"),
        ],
        api_endpoints=[
            ApiEndpoint(method="POST", path="/auth", description="Authentication flow"),
            ApiEndpoint(method="GET", path="/events", description="Event listing"),
        ],
        workflow=["Firebase emulators for local development", "Jest for testing"],
        summary="Built to keep track of who got what loot, now used by several guilds.",
    ),
    Project(
        name="RaidAlert",
        featured=True,
        description=(
            "A Node.js and Express backend with a discord.js bot and Firestore storage "
            "for real-time raid notifications."
        ),
        url="https://github.com/username/raidalert",
        image="raidalert.png",
        architecture_image="raid-alert-mermaid.png",
        overview=(
            "Real-time raid notifications and tribe management delivered through Discord."
        ),
        key_features=[
            "Discord Bot: channel monitoring, multi-tribe configuration, alerts",
            "Backend API: tribe configuration and license management",
        ],
        architecture=Architecture(
            frontend=FrontendArchitecture(
                framework="Static HTML/JS",
                language="JavaScript",
                styling="Custom CSS",
            ),
            backend=BackendArchitecture(
                framework="Express.js",
                language="JavaScript",
                database="Firestore",
            ),
        ),
        tech_stack=[
            TechStackItem(name="Node.js", version="18.x", description="Backend runtime"),
            TechStackItem(name="discord.js", version="14.7.1", description="Discord bot"),
        ],
        api_endpoints=[
            ApiEndpoint(method="GET", path="/check-license/:guildId", description="License status"),
        ],
        workflow=["nodemon for local development", "Jest for testing"],
        summary="Gives a tribe a heads-up when someone is raiding the base at night.",
    ),
    Project(
        name="Terminal",
        description=(
            "An interactive terminal interface for browsing projects and their source "
            "trees with familiar shell commands."
        ),
        url="https://github.com/username/terminal",
        overview=(
            "A portfolio presented as a shell: command history, suggestions, a live file "
            "explorer and project detail views."
        ),
        key_features=[
            "Interactive Terminal: history, autocomplete and command suggestions",
            "Live File Explorer: browse the mirrored project tree",
            "Project Showcase: architecture, tech stack and workflow details",
        ],
        workflow=["Hot reloading during development", "CI on every push"],
        summary="A portfolio that doubles as a demonstration of how it was built.",
    ),
]
