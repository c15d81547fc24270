from pydantic import BaseModel, Field
from typing import Literal


class DiagramConfig(BaseModel):
    code_class: str = "language-mermaid"
    match: Literal["token", "exact"] = "token"
    container_tag: str = "div"
    container_class: str = "mermaid"


class HooksConfig(BaseModel):
    owners: list[str] = ["posts", "pages"]
    event: str = "post_render"
    output_exts: list[str] = [".html"]


class SiteConfig(BaseModel):
    include: list[str] = ["**/*.html", "**/*.htm"]
    exclude: list[str] = []
    encoding: str = "utf-8"


class MermaidifyConfig(BaseModel):
    diagram: DiagramConfig = Field(default_factory=DiagramConfig)
    hooks: HooksConfig = Field(default_factory=HooksConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
