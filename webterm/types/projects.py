"""
Project Types

Static catalog records shown by the `projects` and `cat` commands.
The command core reads these, it never owns or mutates them.
"""

from pydantic import BaseModel, ConfigDict, Field


class TechStackItem(BaseModel):
    """A library or tool used by a project."""

    name: str
    version: str = "-"
    description: str = ""


class ApiEndpoint(BaseModel):
    """An HTTP endpoint exposed by a project."""

    method: str
    path: str
    description: str = ""
    response: str = ""


class FrontendArchitecture(BaseModel):
    framework: str = "None"
    language: str = "N/A"
    styling: str = "N/A"
    state_management: str = "None"


class BackendArchitecture(BaseModel):
    framework: str = "None"
    language: str = "N/A"
    database: str = "N/A"


class Architecture(BaseModel):
    frontend: FrontendArchitecture = Field(default_factory=FrontendArchitecture)
    backend: BackendArchitecture = Field(default_factory=BackendArchitecture)


class Project(BaseModel):
    """
    A read-only project catalog entry.

    Attributes:
        name: Display name, also the basis of the synthesized file name
        description: One-paragraph stack description
        overview: What the project is for
        featured: Whether the project is highlighted on the welcome screen
        key_features: Feature bullet points
        architecture: Frontend/backend breakdown
        tech_stack: Libraries and tools
        api_endpoints: Public endpoints, if any
        workflow: Development workflow notes
        summary: Personal summary
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    overview: str = ""
    url: str = ""
    image: str = ""
    architecture_image: str = ""
    featured: bool = False
    key_features: list[str] = []
    architecture: Architecture = Field(default_factory=Architecture)
    tech_stack: list[TechStackItem] = []
    api_endpoints: list[ApiEndpoint] = []
    workflow: list[str] = []
    summary: str = ""

    @property
    def file_name(self) -> str:
        """Name of the synthesized file under the projects directory."""
        return self.name.lower()
