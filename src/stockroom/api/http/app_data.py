from dataclasses import dataclass

from stockroom.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
