from dataclasses import dataclass

from bookshelf.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
