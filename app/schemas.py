from pydantic import BaseModel, ConfigDict, StrictInt

from app.logic.models import IssueStatus


class CreateProjectRequest(BaseModel):
    key: str
    name: str


class CreateIssueRequest(BaseModel):
    project_key: str
    title: str


class TransitionIssueRequest(BaseModel):
    issue_id: StrictInt
    to_status: str


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    key: str
    name: str


class IssueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_key: str
    title: str
    status: IssueStatus


class HealthResponse(BaseModel):
    status: str
