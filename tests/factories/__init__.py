from tests.factories.project import FileFactory, ProjectFactory

__all__ = ["FileFactory", "ProjectFactory"]
