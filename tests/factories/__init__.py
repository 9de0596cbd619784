"""Test factories for generating test data.

    from tests.factories import ClientFactory, ProjectFactory
"""

from tests.factories.base import BaseFactory
from tests.factories.client import ClientFactory
from tests.factories.project import ProjectFactory

__all__ = ["BaseFactory", "ClientFactory", "ProjectFactory"]
