from abc import ABC, abstractmethod

from resume_insight.models import JobPosting


class JobSearchBase(ABC):
    @abstractmethod
    def search(self, query: str | None) -> list[JobPosting]:
        pass
