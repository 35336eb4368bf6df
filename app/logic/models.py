from dataclasses import dataclass
from enum import Enum


class IssueStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


@dataclass
class Project:
    key: str
    name: str
    id: int = 0


@dataclass
class Issue:
    project_key: str
    title: str
    status: IssueStatus = IssueStatus.OPEN
    id: int = 0
