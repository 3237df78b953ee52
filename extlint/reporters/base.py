from abc import ABC, abstractmethod
from extlint.snapshot.models import ProjectSnapshot

class BaseReporter(ABC):
    @abstractmethod
    def report(self, snapshot: ProjectSnapshot) -> None:
        """
        Report the findings of the snapshot.

        Args:
            snapshot: The project snapshot containing the checked files and their issues.
        """
        pass
