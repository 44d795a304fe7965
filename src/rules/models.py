from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class ADFRules(BaseModel):
    max_json_bytes: int = Field(default=400_000, gt=0)
    max_depth: int = Field(default=64, gt=0)

class IssuesRules(BaseModel):
    default_issue_type: str = "Task"
    allowed_issue_types: list[str] = Field(default_factory=list) # empty = any

class ApiRules(BaseModel):
    cors_origins: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    adf: ADFRules = Field(default_factory=ADFRules)
    issues: IssuesRules = Field(default_factory=IssuesRules)
    api: ApiRules = Field(default_factory=ApiRules)
